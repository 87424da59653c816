"""Version control for the sample snapshot directory."""

from .snapshot_repo import (
    SnapshotCommits,
    commit_snapshot,
    open_or_init_repository,
    resolve_signature,
    stage_snapshot,
)

__all__ = [
    "SnapshotCommits",
    "commit_snapshot",
    "open_or_init_repository",
    "resolve_signature",
    "stage_snapshot",
]
