"""
Sample snapshot pipeline.

Runs the three stages in order (parse the project, copy its samples,
commit the snapshot) and stops at the first fatal error.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import pygit2

from .constants import SampleConstants
from .errors import PipelineResult, SampleGitError
from .parser import AbletonProject, read_ableton_project
from .samples import CopyReport, find_and_copy_samples
from .vcs import SnapshotCommits, commit_snapshot

logger = logging.getLogger(__name__)


def sync_project(
    als_path: Path,
    sample_dir: str = SampleConstants.SAMPLE_DIR,
    snapshot_dir: str = SampleConstants.SNAPSHOT_DIR,
    signature: Optional[pygit2.Signature] = None,
) -> Tuple[AbletonProject, CopyReport, SnapshotCommits]:
    """
    Parse, copy and commit in one go, raising on the first failure.

    Raises:
        SampleGitError: Subclass identifying the failing stage
    """
    project = read_ableton_project(Path(als_path))
    report = find_and_copy_samples(project, sample_dir=sample_dir, snapshot_dir=snapshot_dir)
    commits = commit_snapshot(report.snapshot_root, signature=signature)
    return project, report, commits


def run_pipeline(
    als_path: Path,
    sample_dir: str = SampleConstants.SAMPLE_DIR,
    snapshot_dir: str = SampleConstants.SNAPSHOT_DIR,
    signature: Optional[pygit2.Signature] = None,
) -> PipelineResult:
    """
    Run the pipeline and report the outcome as a PipelineResult.

    Pipeline errors are captured in the result instead of raised.
    """
    try:
        project, report, commits = sync_project(
            als_path,
            sample_dir=sample_dir,
            snapshot_dir=snapshot_dir,
            signature=signature,
        )
    except SampleGitError as e:
        logger.error(f"Snapshot of {als_path} failed during {e.stage}: {e.message}")
        return PipelineResult.failed(e)

    result = PipelineResult(
        success=True,
        num_samples=len(project.samples),
        num_copied=len(report.copied),
        num_missing=len(report.missing),
        content_commit=commits.content_commit,
        attributes_commit=commits.attributes_commit,
    )
    logger.info(str(result))
    return result
