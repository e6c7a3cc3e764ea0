import os
import logging
from typing import List

from watchdog.utils.dirsnapshot import DirectorySnapshot

from .errors import WatchError


def get_mtime(path: str) -> int:
    """Return the modification time of ``path`` in nanoseconds (follows symlinks)."""
    return os.stat(path).st_mtime_ns


def walk_files(root: str) -> List[str]:
    """List every non-directory entry under ``root``, recursively.

    Paths are joined onto ``root`` as given. A root that is itself a file
    yields just that file. Symlinked subdirectories are not descended into.
    """

    def _stat(path):
        if path == root:
            return os.stat(path)
        try:
            return os.lstat(path)
        except OSError as e:
            # the snapshot drops entries it cannot stat
            logging.warning(f"Could not monitor file: {path} ({e})")
            raise

    def _listdir(path):
        try:
            return list(os.scandir(path))
        except PermissionError as e:
            if path == root:
                raise
            logging.warning(f"Could not list directory: {path} ({e})")
            return []

    try:
        snapshot = DirectorySnapshot(root, recursive=True, stat=_stat, listdir=_listdir)
    except OSError as e:
        raise WatchError(f"Cannot walk {root}: {e}") from e

    return sorted(p for p in snapshot.paths if not snapshot.isdir(p))
