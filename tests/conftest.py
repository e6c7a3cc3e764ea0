import os
from pathlib import Path

import pytest


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A small watched tree: two top-level files, one nested, one empty dir."""
    root = tmp_path / "watch"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / "sub" / "deeper" / "c.txt").write_text("c", encoding="utf-8")
    return root


def set_mtime(path: Path, delta_s: float) -> int:
    """Shift ``path``'s mtime by ``delta_s`` seconds and return the new value in ns."""
    st = path.stat()
    new = st.st_mtime_ns + int(delta_s * 1_000_000_000)
    os.utime(path, ns=(st.st_atime_ns, new))
    return new
