"""
Flat-file storage primitives.

Provides the handful of operations the animal repository needs from its
backing file: check existence, create empty, read all lines, and overwrite
with full contents. Every OSError is raised as StorageError so callers deal
with a single failure type.

Handles are scoped to a single call; nothing here keeps a file open between
operations.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable

from farmhand.errors import StorageError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# =============================================================================
# Handle Management
# =============================================================================


@contextmanager
def open_file(path: Path, mode: str = "r"):
    """
    Context manager for a text handle on the data file.

    Opens the file, yields the handle and closes it on exit. Any OSError
    raised while opening or using the handle is re-raised as StorageError.

    Usage:
        with open_file(path) as fh:
            for line in fh:
                ...
    """
    try:
        with open(path, mode, encoding=ENCODING, newline="") as fh:
            yield fh
    except OSError as e:
        raise StorageError(f"Cannot access data file {path}: {e.strerror or e}", path) from e


# =============================================================================
# Queries
# =============================================================================


def exists(path: Path) -> bool:
    """Return True if the data file is present."""
    return Path(path).exists()


def read_lines(path: Path) -> list[str]:
    """
    Read every line of the data file.

    Args:
        path: Location of the data file

    Returns:
        List of lines with their terminators stripped, empty list for an
        empty file
    """
    with open_file(path) as fh:
        return [line.rstrip("\r\n") for line in fh]


# =============================================================================
# Writes
# =============================================================================


def create_empty(path: Path) -> None:
    """Create an empty data file, including any missing parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create directory for {path}: {e.strerror or e}", path) from e
    with open_file(path, "w"):
        pass
    logger.info("Created empty data file %s", path)


def write_lines(path: Path, lines: Iterable[str]) -> None:
    """
    Overwrite the data file with the given lines.

    The full contents are written to a temporary file in the same directory
    and swapped into place with os.replace, so the data file is either the
    old version or the new one, never a mix of both.

    Args:
        path: Location of the data file
        lines: Lines to write, without terminators
    """
    path = Path(path)
    contents = "".join(f"{line}\n" for line in lines)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=ENCODING,
            newline="",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(contents)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        raise StorageError(f"Cannot write data file {path}: {e.strerror or e}", path) from e
    finally:
        # Only left over when something went wrong before the swap
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
