"""
Sample copier for mirroring project samples into the snapshot directory.

Samples are resolved against the project directory, checked to live
under the project's sample root, and copied so that the snapshot mirrors
the layout below the sample root.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..constants import SampleConstants
from ..errors import SampleCopyError, SamplePathError
from ..parser import AbletonProject

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    """Destinations written and sources skipped during a copy pass."""
    snapshot_root: Path
    copied: List[Path] = field(default_factory=list)
    missing: List[Path] = field(default_factory=list)


def snapshot_path_for(source_path: Path, sample_root: Path, snapshot_root: Path) -> Path:
    """
    Map a sample file to its location in the snapshot directory.

    Raises:
        SamplePathError: If the source does not lie under the sample root
    """
    # Lexical normalisation so "Samples/../x.wav" cannot escape the root
    normalized = Path(os.path.normpath(source_path))
    try:
        relative = normalized.relative_to(Path(os.path.normpath(sample_root)))
    except ValueError as e:
        raise SamplePathError(
            f"Sample {source_path} is not under sample root {sample_root}"
        ) from e
    if not relative.parts:
        raise SamplePathError(f"Sample path {source_path} is the sample root itself")
    return snapshot_root / relative


def find_and_copy_samples(
    project: AbletonProject,
    sample_dir: str = SampleConstants.SAMPLE_DIR,
    snapshot_dir: str = SampleConstants.SNAPSHOT_DIR,
) -> CopyReport:
    """
    Copy every referenced sample that exists on disk into the snapshot directory.

    Missing samples are skipped. Existing destination files are always
    overwritten.

    Args:
        project: Parsed project
        sample_dir: Name of the sample root below the project directory
        snapshot_dir: Name of the snapshot directory below the project directory

    Returns:
        CopyReport listing copied destinations and missing sources

    Raises:
        SamplePathError: If an existing sample lies outside the sample root
        SampleCopyError: If a directory cannot be created or a file cannot be copied
    """
    sample_root = project.project_dir / sample_dir
    snapshot_root = project.project_dir / snapshot_dir
    report = CopyReport(snapshot_root=snapshot_root)

    try:
        snapshot_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SampleCopyError(f"Unable to create snapshot directory {snapshot_root}: {e}") from e

    for sample in project.samples:
        source_path = project.project_dir / sample
        logger.debug(f"Looking for sample at {source_path}")
        if not source_path.exists():
            report.missing.append(source_path)
            continue

        dest_path = snapshot_path_for(source_path, sample_root, snapshot_root)
        logger.info(f"Copying {source_path} to {dest_path}")
        try:
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(source_path, dest_path)
        except OSError as e:
            raise SampleCopyError(f"Unable to copy {source_path} to {dest_path}: {e}") from e
        report.copied.append(dest_path)

    logger.info(
        f"Copied {len(report.copied)} samples to {snapshot_root} "
        f"({len(report.missing)} not found)"
    )
    return report
