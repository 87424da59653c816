import gzip
from pathlib import Path

import pygit2
import pytest


def sample_ref_xml(*paths: str) -> str:
    """Build a minimal project XML with one SampleRef/FileRef block per path."""
    refs = "".join(
        f"""
        <AudioClip>
            <SampleRef>
                <FileRef>
                    <RelativePathType Value="3" />
                    <RelativePath Value="{path}" />
                    <Path Value="/Users/someone/Music/{path}" />
                </FileRef>
                <LastModDate Value="1700000000" />
            </SampleRef>
        </AudioClip>"""
        for path in paths
    )
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<Ableton MajorVersion="5"><LiveSet>{refs}</LiveSet></Ableton>'


def write_als(path: Path, xml: str) -> Path:
    with gzip.open(path, "wb") as f:
        f.write(xml.encode("utf-8"))
    return path


@pytest.fixture
def signature():
    return pygit2.Signature("Test User", "test@example.com")


@pytest.fixture
def project_dir(tmp_path):
    """Project folder with two samples on disk."""
    project = tmp_path / "MySet Project"
    (project / "Samples" / "Imported").mkdir(parents=True)
    (project / "Samples" / "Recorded").mkdir(parents=True)
    (project / "Samples" / "Imported" / "kick.wav").write_bytes(b"RIFF kick data")
    (project / "Samples" / "Recorded" / "vox.aif").write_bytes(b"FORM vox data")
    return project
