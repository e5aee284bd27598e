from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

from .errors import SourceNotFoundError, SourceUnreadableError

STDIN = "-"

log = logging.getLogger(__name__)


def source_exists(path: Union[str, Path]) -> bool:
    return str(path) == STDIN or Path(path).is_file()


def read_source(path: Union[str, Path]) -> bytes:
    """Drain standard input (``"-"``) or the named file completely."""
    if str(path) == STDIN:
        data = sys.stdin.buffer.read()
        log.debug("read %d bytes from stdin", len(data))
        return data
    p = Path(path)
    try:
        data = p.read_bytes()
    except FileNotFoundError:
        raise SourceNotFoundError(f"input file not found: {p}") from None
    except (PermissionError, IsADirectoryError) as exc:
        raise SourceUnreadableError(f"cannot read input {p}: {exc.strerror}") from None
    log.debug("read %d bytes from %s", len(data), p)
    return data
