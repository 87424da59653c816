"""
Error types and run results for the sample snapshot pipeline.

Every failure that aborts a run is a SampleGitError tagged with the
stage it happened in, so callers can tell input problems from copy or
version-control problems without parsing messages.
"""

from typing import List, Optional


class Stage:
    """Pipeline stage names."""
    LOAD = "load"
    PARSE = "parse"
    COPY = "copy"
    COMMIT = "commit"


class SampleGitError(Exception):
    """Base class for fatal pipeline errors."""

    stage = "unknown"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage

    def __str__(self):
        return f"[{self.stage}] {self.message}"


class DescriptorError(SampleGitError):
    """Raised when the project file cannot be read, decompressed, decoded or parsed."""
    stage = Stage.LOAD


class SamplePathError(SampleGitError):
    """Raised when a sample path does not lie under the sample root."""
    stage = Stage.COPY


class SampleCopyError(SampleGitError):
    """Raised when creating a snapshot directory or copying a sample fails."""
    stage = Stage.COPY


class VersionControlError(SampleGitError):
    """Raised when opening, staging or committing the snapshot repository fails."""
    stage = Stage.COMMIT


class PipelineResult:
    """Outcome of a single pipeline run."""

    def __init__(
        self,
        success: bool,
        stage: Optional[str] = None,
        errors: List[str] = None,
        num_samples: int = 0,
        num_copied: int = 0,
        num_missing: int = 0,
        content_commit: Optional[str] = None,
        attributes_commit: Optional[str] = None,
    ):
        self.success = success
        self.stage = stage
        self.errors = errors or []
        self.num_samples = num_samples
        self.num_copied = num_copied
        self.num_missing = num_missing
        self.content_commit = content_commit
        self.attributes_commit = attributes_commit

    @classmethod
    def failed(cls, error: SampleGitError, **counts) -> "PipelineResult":
        return cls(success=False, stage=error.stage, errors=[str(error)], **counts)

    def __bool__(self):
        return self.success

    def __str__(self):
        if self.success:
            return (
                f"Snapshot committed: {self.num_copied} copied, "
                f"{self.num_missing} missing, {self.num_samples} referenced"
            )
        return f"Failed during {self.stage}: {'; '.join(self.errors)}"
