"""Reading and writing the hosts file as a flat list of lines.

Lines are kept exactly as they appear on disk minus their terminator. The
file is read as bytes and decoded with ``surrogateescape`` so that whatever
is not valid UTF-8 survives a load/save cycle unchanged.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .config import DEFAULT_BUFFER_SIZE
from .exceptions import HostsFileError, LineTooLongError

logger = logging.getLogger("hostblock.store")

__all__ = ["load_lines", "save_lines"]

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def _decode(raw: bytes) -> str:
    return raw.decode(ENCODING, ERRORS)


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def _too_long(raw: bytes, buffer_size: int) -> bool:
    # A terminated line needs room for its newline; an unterminated one must
    # leave the buffer not completely full.
    if raw.endswith(b"\n"):
        return len(raw) > buffer_size
    return len(raw) >= buffer_size


def load_lines(path: Path | str, buffer_size: int = DEFAULT_BUFFER_SIZE) -> List[str]:
    """Return every line of *path* in file order, without terminators.

    Raises :class:`HostsFileError` if the file cannot be opened or read and
    :class:`LineTooLongError` for the first line longer than *buffer_size*.
    """
    path = Path(path)
    lines: List[str] = []
    try:
        with open(path, "rb") as fh:
            number = 0
            while True:
                # One byte past the buffer is enough to tell a full line from
                # an oversized one.
                raw = fh.readline(buffer_size + 1)
                if not raw:
                    break
                number += 1
                if _too_long(raw, buffer_size):
                    raise LineTooLongError(number, _decode(raw[:buffer_size]))
                lines.append(_decode(_strip_terminator(raw)))
    except OSError as exc:
        raise HostsFileError(
            f"could not read {path}",
            {"path": str(path), "original_error": str(exc)},
        ) from exc

    logger.debug(f"Loaded {len(lines)} lines from {path}")
    return lines


def save_lines(path: Path | str, lines: List[str]) -> None:
    """Overwrite the existing file at *path* with *lines*.

    The file is truncated and rewritten in place, never created, so its
    ownership and mode stay as they were. Nothing is rolled back if a write
    fails half way.
    """
    path = Path(path)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_TRUNC)
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="") as fh:
            for line in lines:
                fh.write(f"{line}\n")
    except OSError as exc:
        raise HostsFileError(
            f"could not write {path}",
            {"path": str(path), "original_error": str(exc)},
        ) from exc

    logger.debug(f"Wrote {len(lines)} lines to {path}")
