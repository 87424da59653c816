import gzip
import logging
import zlib
from pathlib import Path

from ..constants import SampleConstants
from ..errors import DescriptorError, Stage
from .sample_refs import AbletonProject, parse_project

logger = logging.getLogger(__name__)


def load_descriptor_text(path: Path) -> str:
    """Load an Ableton .als (gzip) or .xml file and decode it as UTF-8."""
    if not path.exists():
        raise DescriptorError(f"File not found: {path}", stage=Stage.LOAD)

    try:
        if path.suffix == SampleConstants.COMPRESSED_SUFFIX:
            with gzip.open(path, "rb") as f:
                xml_data = f.read()
        elif path.suffix == SampleConstants.PLAIN_SUFFIX:
            xml_data = path.read_bytes()
        else:
            raise DescriptorError(f"Unsupported file type: {path.suffix}", stage=Stage.LOAD)
    except (OSError, EOFError, zlib.error) as e:
        raise DescriptorError(f"Unable to read {path}: {e}", stage=Stage.LOAD) from e

    try:
        return xml_data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DescriptorError(f"{path} is not valid UTF-8: {e}", stage=Stage.LOAD) from e


def read_ableton_project(path: Path) -> AbletonProject:
    """Load a project file and extract its sample references."""
    path = Path(path)
    project = parse_project(path.parent, load_descriptor_text(path))
    logger.info(f"Successfully parsed project, found {len(project.samples)} samples")
    return project
