import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Set, Tuple

from ..constants import SampleConstants, XmlTags
from ..errors import DescriptorError, Stage

logger = logging.getLogger(__name__)


@dataclass
class AbletonProject:
    """Project directory plus the sorted, deduplicated sample paths it references."""
    project_dir: Path
    samples: List[str] = field(default_factory=list)


def is_audio_file(path: str) -> bool:
    """Check the extension of the final path segment against the audio allowlist."""
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return False
    return name.rsplit(".", 1)[1] in SampleConstants.AUDIO_EXTENSIONS


class SampleRefCollector:
    """
    Tracks SampleRef/FileRef context over a stream of start/end events.

    The context flags are plain booleans: a SampleRef nested inside
    another SampleRef clears the flag when the inner one closes.
    """

    def __init__(self):
        self.in_sample_ref = False
        self.in_file_ref = False
        self.samples: Set[str] = set()

    def feed_events(self, events: Iterable[Tuple[str, ET.Element]]) -> None:
        for event, elem in events:
            if event == "start":
                self._start(elem)
            else:
                self._end(elem)

    def _start(self, elem: ET.Element) -> None:
        tag = elem.tag
        if tag == XmlTags.SAMPLE_REF:
            self.in_sample_ref = True
        elif tag == XmlTags.FILE_REF:
            self.in_file_ref = True
        elif tag == XmlTags.RELATIVE_PATH and self.in_sample_ref and self.in_file_ref:
            value = elem.get(XmlTags.VALUE_ATTR)
            if value is not None and is_audio_file(value):
                self.samples.add(value)

    def _end(self, elem: ET.Element) -> None:
        if elem.tag == XmlTags.SAMPLE_REF:
            self.in_sample_ref = False
        elif elem.tag == XmlTags.FILE_REF:
            self.in_file_ref = False
        # Finished elements are not needed again
        elem.clear()


def parse_project(project_dir: Path, xml_text: str) -> AbletonProject:
    """
    Extract sample references from project XML.

    A RelativePath ``Value`` counts as a sample only while both a SampleRef
    and a FileRef element are open, and only if it has an audio extension.

    Args:
        project_dir: Directory the project file lives in (returned unchanged)
        xml_text: Decompressed project XML

    Returns:
        AbletonProject with samples sorted lexicographically

    Raises:
        DescriptorError: If the XML is malformed
    """
    if not xml_text.strip():
        logger.debug(f"Empty project XML for {project_dir}")
        return AbletonProject(project_dir=project_dir)

    parser = ET.XMLPullParser(events=("start", "end"))
    collector = SampleRefCollector()
    chunk_size = SampleConstants.READ_CHUNK_SIZE

    try:
        for offset in range(0, len(xml_text), chunk_size):
            parser.feed(xml_text[offset:offset + chunk_size])
            collector.feed_events(parser.read_events())
        parser.close()
        collector.feed_events(parser.read_events())
    except ET.ParseError as e:
        line, column = e.position
        raise DescriptorError(
            f"Malformed project XML at line {line}, column {column}: {e}",
            stage=Stage.PARSE,
        ) from e

    logger.debug(f"Parsed {len(collector.samples)} sample references from {project_dir}")
    return AbletonProject(project_dir=project_dir, samples=sorted(collector.samples))
