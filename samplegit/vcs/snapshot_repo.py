"""
Snapshot repository for versioning copied samples.

This module handles:
- Opening or initialising the repository inside the snapshot directory
- Staging every file in the snapshot tree
- Committing the samples, then committing the Git LFS attributes file
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pygit2

from ..constants import GitConstants
from ..errors import VersionControlError

logger = logging.getLogger(__name__)


@dataclass
class SnapshotCommits:
    """Ids of the two commits created by a snapshot run."""
    content_commit: str
    attributes_commit: str


def open_or_init_repository(path: Path) -> pygit2.Repository:
    """
    Open the repository at ``path``, or initialise one there.

    Only ``path/.git`` is considered, so a repository in a parent
    directory (e.g. a versioned project folder) is never picked up.
    """
    try:
        if (path / GitConstants.GIT_DIR).exists():
            logger.debug(f"Opening snapshot repository at {path}")
            return pygit2.Repository(str(path))
        logger.info(f"Initialising snapshot repository at {path}")
        return pygit2.init_repository(str(path))
    except pygit2.GitError as e:
        raise VersionControlError(f"Unable to open repository at {path}: {e}") from e


def resolve_signature(repo: pygit2.Repository) -> pygit2.Signature:
    """Return the identity configured for the repository (user.name / user.email)."""
    try:
        return repo.default_signature
    except (KeyError, pygit2.GitError) as e:
        raise VersionControlError(
            "No committer identity configured: set user.name and user.email "
            "or pass an explicit author"
        ) from e


def stage_snapshot(repo: pygit2.Repository, root: Path) -> List[str]:
    """Stage every file below ``root`` except the repository metadata."""
    index = repo.index
    staged = []
    for dirpath, dirnames, filenames in os.walk(root):
        if GitConstants.GIT_DIR in dirnames:
            dirnames.remove(GitConstants.GIT_DIR)
        dirnames.sort()
        for filename in sorted(filenames):
            relative = (Path(dirpath) / filename).relative_to(root).as_posix()
            index.add(relative)
            staged.append(relative)
    index.write()
    logger.debug(f"Staged {len(staged)} files in {root}")
    return sorted(staged)


def _head_parents(repo: pygit2.Repository) -> List[pygit2.Oid]:
    if repo.head_is_unborn:
        return []
    return [repo.head.target]


def _commit_index(
    repo: pygit2.Repository,
    signature: pygit2.Signature,
    message: str,
    parents: List[pygit2.Oid],
) -> pygit2.Oid:
    tree_id = repo.index.write_tree()
    commit_id = repo.create_commit(
        GitConstants.HEAD_REF, signature, signature, message, tree_id, parents
    )
    logger.info(f"Committed {str(commit_id)[:8]}: {message}")
    return commit_id


def commit_snapshot(
    snapshot_root: Path,
    signature: Optional[pygit2.Signature] = None,
) -> SnapshotCommits:
    """
    Commit the snapshot directory in two steps.

    The first commit stages the whole snapshot tree on top of the current
    HEAD. The second writes ``.gitattributes`` routing everything through
    Git LFS and commits it on top of the first.

    Args:
        snapshot_root: Snapshot directory (also the repository work tree)
        signature: Author/committer identity; the repository default if None

    Returns:
        SnapshotCommits with both commit ids

    Raises:
        VersionControlError: If any repository operation fails
    """
    snapshot_root = Path(snapshot_root)
    repo = open_or_init_repository(snapshot_root)
    if signature is None:
        signature = resolve_signature(repo)

    try:
        stage_snapshot(repo, snapshot_root)
        content_id = _commit_index(
            repo, signature, GitConstants.CONTENT_COMMIT_MESSAGE, _head_parents(repo)
        )

        attributes_path = snapshot_root / GitConstants.ATTRIBUTES_FILE
        attributes_path.write_text(GitConstants.ATTRIBUTES_CONTENT, encoding="utf-8")
        index = repo.index
        index.add(GitConstants.ATTRIBUTES_FILE)
        index.write()
        attributes_id = _commit_index(
            repo, signature, GitConstants.ATTRIBUTES_COMMIT_MESSAGE, [content_id]
        )
    except (pygit2.GitError, OSError) as e:
        raise VersionControlError(f"Unable to commit snapshot at {snapshot_root}: {e}") from e

    return SnapshotCommits(
        content_commit=str(content_id),
        attributes_commit=str(attributes_id),
    )
