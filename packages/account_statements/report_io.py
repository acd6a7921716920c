"""File I/O for the statement run.

Inputs are read whole as UTF-8. The report is written atomically: the text goes
to ``<output>.tmp`` first and is then ``os.replace``d into place, so readers
see either the previous file or the complete new one. The temp file is removed
when writing fails.
"""

from __future__ import annotations

import contextlib
import os
from os import PathLike
from pathlib import Path


def read_text(path: str | PathLike[str]) -> str:
    """Read a whole input file; ``FileNotFoundError``/``OSError`` propagate."""

    return Path(path).read_text(encoding="utf-8")


def write_text_atomic(path: str | PathLike[str], text: str) -> Path:
    """Replace ``path`` with ``text`` in one step and return the resolved path."""

    target = Path(path)
    tmp = target.with_suffix(target.suffix + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, target)
    except Exception:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()
        raise
    return target


__all__ = ["read_text", "write_text_atomic"]
