"""
File watcher for re-running the snapshot when a project is saved.

This module provides:
- Filesystem monitoring for a single .als file
- Debouncing of the burst of events a save produces
"""

import logging
import time
from pathlib import Path
from typing import Callable, Dict, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .constants import WatchConstants

logger = logging.getLogger(__name__)


class ProjectFileHandler(FileSystemEventHandler):
    """
    File system event handler for one Ableton project file.

    Triggers the callback when the file is modified or replaced.
    """

    def __init__(
        self,
        project_file: Path,
        callback: Callable[[Path], None],
        debounce_seconds: float = WatchConstants.DEBOUNCE_SECONDS,
    ):
        """
        Initialize the file handler.

        Args:
            project_file: The .als file to react to
            callback: Function to call when the file changes
            debounce_seconds: Ignore repeat events within this window
        """
        self.project_file = Path(project_file)
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self.last_modified: Dict[Path, float] = {}

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        if not event.is_directory:
            self._handle(Path(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle a file being renamed over the project file."""
        if not event.is_directory:
            self._handle(Path(event.dest_path))

    def _handle(self, file_path: Path) -> None:
        if file_path.name != self.project_file.name:
            return

        now = time.time()
        last_time = self.last_modified.get(file_path, 0)
        if now - last_time < self.debounce_seconds:
            return

        logger.info(f"Detected change in {file_path.name}")
        try:
            self.callback(self.project_file)
        except Exception as e:
            logger.error(f"Error processing file change: {e}")
        finally:
            # Debounce window starts when the run finishes
            self.last_modified[file_path] = time.time()


class ProjectWatcher:
    """
    Watches a project file and runs a callback whenever it is saved.

    Usage:
        watcher = ProjectWatcher(lambda path: run_pipeline(path))
        watcher.watch(Path("MySet Project/MySet.als"))
        with watcher:
            ...
    """

    def __init__(self, callback: Callable[[Path], None]):
        self.callback = callback
        self.observer: Optional[Observer] = None
        self.handler: Optional[ProjectFileHandler] = None
        self.watch_path: Optional[Path] = None

    def watch(self, project_file: Path) -> None:
        """Set the project file to watch."""
        project_file = Path(project_file)
        if not project_file.is_file():
            raise FileNotFoundError(f"Project file does not exist: {project_file}")
        self.handler = ProjectFileHandler(project_file, self.callback)
        self.watch_path = project_file.parent

    def start(self) -> None:
        """Start watching for file changes."""
        if not self.watch_path:
            raise RuntimeError("No project file set. Call watch() first.")

        if self.observer and self.observer.is_alive():
            raise RuntimeError("Watcher is already running")

        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.watch_path), recursive=False)
        self.observer.start()
        logger.info(f"Watching for changes in: {self.watch_path}")

    def stop(self) -> None:
        """Stop watching for file changes."""
        if self.observer and self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
            logger.info("File watcher stopped")

    def is_running(self) -> bool:
        """Check if the watcher is currently running."""
        return self.observer is not None and self.observer.is_alive()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
