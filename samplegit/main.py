import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import pygit2

from .constants import SampleConstants, WatchConstants
from .errors import PipelineResult
from .pipeline import run_pipeline
from .watcher import ProjectWatcher


# Configure logging
logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

USAGE = """Usage: python -m samplegit <path-to-als> [OPTIONS]

Copies the samples referenced by an Ableton Live set into <project>/GitSamples
and commits them to a Git repository there (tracked with Git LFS).

Options:
  --samples-dir=NAME    - Sample folder inside the project (default: Samples)
  --snapshot-dir=NAME   - Snapshot folder inside the project (default: GitSamples)
  --author-name=NAME    - Commit author name (default: git config user.name)
  --author-email=EMAIL  - Commit author email (default: git config user.email)
  --watch               - Re-run whenever the project file is saved

Logging Options:
  --log-file=PATH       - Log to file (default: stdout only)
  --log-level=LEVEL     - Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)"""


def setup_logging(log_file: Path = None, level: str = "INFO"):
    """
    Configure logging to both file and console.

    Args:
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers = []

    # Console handler (simple format)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    # File handler (detailed format)
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    return root_logger


def watch_project(path: Path, **pipeline_args) -> PipelineResult:
    """
    Run the pipeline once, then again on every save until interrupted.

    Returns the result of the first run. The watcher only starts if that
    run succeeded.
    """
    result = run_pipeline(path, **pipeline_args)
    if not result:
        return result

    watcher = ProjectWatcher(lambda changed: run_pipeline(changed, **pipeline_args))
    watcher.watch(path)
    with watcher:
        print("Watching for changes... Press Ctrl+C to stop")
        try:
            while True:
                time.sleep(WatchConstants.POLL_INTERVAL_SECONDS)
        except KeyboardInterrupt:
            print("\nStopping watcher...")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0].startswith("--"):
        print(USAGE)
        return 1

    path = Path(argv[0])
    sample_dir = SampleConstants.SAMPLE_DIR
    snapshot_dir = SampleConstants.SNAPSHOT_DIR
    author_name = None
    author_email = None
    watch = False
    log_file = None
    log_level = "INFO"

    # Parse optional arguments
    for arg in argv[1:]:
        if arg.startswith("--samples-dir="):
            sample_dir = arg.split("=", 1)[1]
        elif arg.startswith("--snapshot-dir="):
            snapshot_dir = arg.split("=", 1)[1]
        elif arg.startswith("--author-name="):
            author_name = arg.split("=", 1)[1]
        elif arg.startswith("--author-email="):
            author_email = arg.split("=", 1)[1]
        elif arg == "--watch":
            watch = True
        elif arg.startswith("--log-file="):
            log_file = Path(arg.split("=", 1)[1])
        elif arg.startswith("--log-level="):
            log_level = arg.split("=", 1)[1]
        else:
            print(f"Unknown option: {arg}\n")
            print(USAGE)
            return 1

    if log_level.upper() not in LOG_LEVELS:
        print(f"Invalid log level: {log_level}\n")
        print(USAGE)
        return 1

    if bool(author_name) != bool(author_email):
        print("--author-name and --author-email must be given together")
        return 1

    setup_logging(log_file=log_file, level=log_level)

    signature = pygit2.Signature(author_name, author_email) if author_name else None
    pipeline_args = {
        "sample_dir": sample_dir,
        "snapshot_dir": snapshot_dir,
        "signature": signature,
    }

    if watch:
        result = watch_project(path, **pipeline_args)
    else:
        result = run_pipeline(path, **pipeline_args)
    if not result:
        print(f"Error: {result}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
