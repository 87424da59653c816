"""
Version control for the samples used by an Ableton Live set.

Reads a .als project, copies every referenced sample found below the
project's Samples folder into GitSamples, and commits that folder to a
Git repository configured for Git LFS.
"""

from .errors import (
    DescriptorError,
    PipelineResult,
    SampleCopyError,
    SampleGitError,
    SamplePathError,
    VersionControlError,
)
from .pipeline import run_pipeline, sync_project

__version__ = "0.1.0"

__all__ = [
    "DescriptorError",
    "PipelineResult",
    "SampleCopyError",
    "SampleGitError",
    "SamplePathError",
    "VersionControlError",
    "run_pipeline",
    "sync_project",
]
