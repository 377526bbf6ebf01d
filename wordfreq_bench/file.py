"""Reading and writing whole text files."""

from __future__ import annotations

import os
from pathlib import Path

_WRITE_MODE = 0o777


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of ``path`` as text.

    Raises ``OSError`` (for example ``FileNotFoundError``) when the file
    cannot be read.
    """
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def write_file(path: str | os.PathLike[str], content: str) -> None:
    """Write ``content`` to ``path``, creating or truncating the file."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _WRITE_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(content.encode("utf-8"))