"""pollwatch package: poll a directory tree for modified files and run a command.

Exports:
- app, main: Typer CLI entrypoints (from pollwatch.cli)
- SnapshotStore: tracked files and their last-seen mtimes (from pollwatch.store)
- ChangeDispatcher, watch: the dispatch loop (from pollwatch.dispatch)
- run_cmd: subprocess helper (from pollwatch.runner)
- WatchError, CommandError: error types (from pollwatch.errors)
- walk_files, get_mtime: filesystem utilities (from pollwatch.utils)
"""

from .cli import app, main  # noqa: F401
from .dispatch import ChangeDispatcher, watch  # noqa: F401
from .errors import CommandError, WatchError  # noqa: F401
from .runner import run_cmd  # noqa: F401
from .store import SnapshotStore  # noqa: F401
from .utils import get_mtime, walk_files  # noqa: F401

__all__ = [
    "app",
    "main",
    "SnapshotStore",
    "ChangeDispatcher",
    "watch",
    "run_cmd",
    "WatchError",
    "CommandError",
    "walk_files",
    "get_mtime",
]
