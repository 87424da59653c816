"""
Constants for the Ableton sample snapshot tool.

This module centralizes the fixed directory names, file names and
commit messages used throughout parsing, copying and committing.
"""

from typing import FrozenSet


class SampleConstants:
    """Constants for sample discovery and snapshot versioning."""

    # Project layout
    SAMPLE_DIR = "Samples"
    SNAPSHOT_DIR = "GitSamples"

    # Case-sensitive, compared against the text after the final "."
    AUDIO_EXTENSIONS: FrozenSet[str] = frozenset({"wav", "aif", "aiff", "mp3", "flac"})

    # Descriptor files
    COMPRESSED_SUFFIX = ".als"
    PLAIN_SUFFIX = ".xml"
    READ_CHUNK_SIZE = 64 * 1024


class XmlTags:
    """Element and attribute names inside the project XML."""

    SAMPLE_REF = "SampleRef"
    FILE_REF = "FileRef"
    RELATIVE_PATH = "RelativePath"
    VALUE_ATTR = "Value"


class GitConstants:
    """Constants for the snapshot repository."""

    GIT_DIR = ".git"
    CONTENT_COMMIT_MESSAGE = "Add samples from Ableton project"
    ATTRIBUTES_COMMIT_MESSAGE = "Add .gitattributes for Git LFS"
    ATTRIBUTES_FILE = ".gitattributes"
    ATTRIBUTES_CONTENT = "* filter=lfs diff=lfs merge=lfs -text"
    HEAD_REF = "HEAD"


class WatchConstants:
    """Constants for watch mode."""

    DEBOUNCE_SECONDS = 1.0  # Ignore duplicate events within 1 second
    POLL_INTERVAL_SECONDS = 1.0
