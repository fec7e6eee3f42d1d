"""File helpers: JSON reading and atomic text output."""

import json
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any


def atomic_write(path: Path, write_func: Callable[[Path], None]) -> None:
    """
    Produce a file through a temporary sibling, then rename it into place.

    Readers see either the old content or the complete new one.

    Args:
        path: Destination file; missing parent directories are created
        write_func: Callable that fills the temporary path it is given
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".part")
    os.close(fd)
    tmp_path = Path(name)

    try:
        write_func(tmp_path)
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_text(path: Path, text: str) -> None:
    """Write UTF-8 text atomically."""

    def _fill(tmp_path: Path) -> None:
        tmp_path.write_text(text, encoding="utf-8")

    atomic_write(path, _fill)


def read_json(path: Path) -> Any:
    """Parse a UTF-8 JSON file."""
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)
