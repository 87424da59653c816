from pathlib import Path

import pytest

from samplegit.errors import DescriptorError, Stage
from samplegit.parser import is_audio_file, parse_project
from tests.conftest import sample_ref_xml

PROJECT_DIR = Path("/projects/MySet Project")


def test_extracts_nested_relative_path():
    xml = sample_ref_xml("drums/kick.wav")

    project = parse_project(PROJECT_DIR, xml)

    assert project.samples == ["drums/kick.wav"]
    assert project.project_dir == PROJECT_DIR


@pytest.mark.parametrize("path,included", [
    ("x/noise.flac", True),
    ("x/noise.FLAC", False),
    ("x/noise.xyz", False),
    ("x/noise", False),
    ("x.wav/noise", False),
    ("x/noise.aiff", True),
    ("x/noise.mp3", True),
])
def test_extension_filter(path, included):
    project = parse_project(PROJECT_DIR, sample_ref_xml(path))
    assert (project.samples == [path]) is included


def test_is_audio_file():
    assert is_audio_file("Samples/a.b/c.aif")
    assert not is_audio_file("Samples/Presets/bass.adv")


def test_file_ref_outside_sample_ref_is_ignored():
    xml = """<Ableton>
        <Device>
            <FileRef>
                <RelativePath Value="Presets/lead.wav" />
            </FileRef>
        </Device>
    </Ableton>"""

    project = parse_project(PROJECT_DIR, xml)

    assert project.samples == []


def test_relative_path_outside_file_ref_is_ignored():
    xml = """<Ableton>
        <SampleRef>
            <RelativePath Value="Samples/loose.wav" />
            <FileRef />
        </SampleRef>
    </Ableton>"""

    assert parse_project(PROJECT_DIR, xml).samples == []


def test_relative_path_without_value_is_ignored():
    xml = """<Ableton>
        <SampleRef><FileRef><RelativePath /></FileRef></SampleRef>
    </Ableton>"""

    assert parse_project(PROJECT_DIR, xml).samples == []


def test_context_is_cleared_after_closing_tags():
    xml = """<Ableton>
        <SampleRef><FileRef><RelativePath Value="a.wav" /></FileRef></SampleRef>
        <FileRef><RelativePath Value="b.wav" /></FileRef>
    </Ableton>"""

    assert parse_project(PROJECT_DIR, xml).samples == ["a.wav"]


def test_duplicates_are_removed():
    xml = sample_ref_xml("a/snare.wav", "a/snare.wav")

    assert parse_project(PROJECT_DIR, xml).samples == ["a/snare.wav"]


def test_samples_are_sorted():
    xml = sample_ref_xml("b.wav", "a.wav")

    assert parse_project(PROJECT_DIR, xml).samples == ["a.wav", "b.wav"]


def test_self_nested_sample_ref_clears_flag_on_inner_close():
    xml = """<Ableton>
        <SampleRef>
            <SampleRef></SampleRef>
            <FileRef><RelativePath Value="after_inner.wav" /></FileRef>
        </SampleRef>
    </Ableton>"""

    assert parse_project(PROJECT_DIR, xml).samples == []


def test_large_document_spanning_many_chunks():
    paths = [f"Samples/Imported/hit_{i:04d}.wav" for i in range(2000)]

    project = parse_project(PROJECT_DIR, sample_ref_xml(*paths))

    assert project.samples == sorted(paths)


def test_malformed_xml_raises():
    xml = "<Ableton><SampleRef><FileRef></SampleRef></Ableton>"

    with pytest.raises(DescriptorError) as exc_info:
        parse_project(PROJECT_DIR, xml)

    assert exc_info.value.stage == Stage.PARSE
    assert "line 1" in str(exc_info.value)


@pytest.mark.parametrize("xml", ["", "  \n\t"])
def test_blank_document_has_no_samples(xml):
    project = parse_project(PROJECT_DIR, xml)

    assert project.samples == []
    assert project.project_dir == PROJECT_DIR


def test_unclosed_root_raises():
    with pytest.raises(DescriptorError):
        parse_project(PROJECT_DIR, "<Ableton><LiveSet>")
