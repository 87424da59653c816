"""Locating project samples and mirroring them into the snapshot directory."""

from .copier import CopyReport, find_and_copy_samples, snapshot_path_for

__all__ = ["CopyReport", "find_and_copy_samples", "snapshot_path_for"]
