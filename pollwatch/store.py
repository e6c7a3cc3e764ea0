import logging
from typing import Dict, Iterator, List

from .utils import get_mtime, walk_files


class SnapshotStore:
    """Last-seen modification times for every file found under a root.

    The set of tracked paths is fixed at construction: files created later are
    never picked up and deleted files are simply skipped by ``check``.
    """

    def __init__(self, root: str, mtimes: Dict[str, int]) -> None:
        self.root = root
        self._mtimes = mtimes

    @classmethod
    def from_root(cls, root: str) -> "SnapshotStore":
        """Walk ``root`` and record a timestamp for each file.

        Raises WatchError if the walk cannot start.
        """
        mtimes: Dict[str, int] = {}
        for path in walk_files(root):
            try:
                mtimes[path] = get_mtime(path)
            except OSError as e:
                logging.warning(f"Could not monitor file: {path} ({e})")
        return cls(root, mtimes)

    @property
    def paths(self) -> List[str]:
        return list(self._mtimes)

    def mtime(self, path: str) -> int:
        return self._mtimes[path]

    def __len__(self) -> int:
        return len(self._mtimes)

    def __contains__(self, path: object) -> bool:
        return path in self._mtimes

    def check(self) -> Iterator[str]:
        """Yield each tracked path whose modification time moved forward.

        The stored timestamp is updated before the path is yielded. Paths that
        cannot be stat'ed this pass are skipped; equal or older timestamps are
        not changes.
        """
        for path, last in self._mtimes.items():
            try:
                current = get_mtime(path)
            except OSError as e:
                logging.debug(f"Skipping {path}: {e}")
                continue

            if current > last:
                self._mtimes[path] = current
                yield path
