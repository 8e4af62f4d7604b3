"""Filesystem inspections that report failures instead of raising.

Every function here asks the filesystem one question and turns any
OSError into an answer. Where the failure itself matters to the caller,
the answer is an Inspection carrying both the value and the error that
was discarded to produce it.
"""

from __future__ import annotations

import logging
import os
import stat
from enum import Enum
from typing import Callable

from hamcrest_path.protocols import FileSystem
from hamcrest_path.types import PathLike

logger = logging.getLogger(__name__)

# Errors the os layer raises for paths it cannot inspect. ValueError covers
# malformed paths such as ones with embedded NUL characters.
INSPECTION_ERRORS = (OSError, ValueError)


class Existence(Enum):
    """Outcome of asking whether a path exists."""

    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class Inspection:
    """Result of an inspection that may fail."""

    __slots__ = ("value", "error")

    def __init__(self, value: bool = False, error: Exception | None = None) -> None:
        """Initialize inspection result.

        Args:
            value: The answer, always False when error is set.
            error: The error raised while inspecting, if any.
        """
        self.value = value and error is None
        self.error = error

    @property
    def succeeded(self) -> bool:
        """True if the filesystem answered without error."""
        return self.error is None

    def __repr__(self) -> str:
        return f"Inspection(value={self.value!r}, error={self.error!r})"


def stat_path(fs: FileSystem, path: PathLike, follow_links: bool = True) -> os.stat_result | None:
    """Stat a path, returning None if it cannot be inspected."""
    try:
        return fs.stat(path, follow_symlinks=follow_links)
    except INSPECTION_ERRORS:
        return None


def existence(fs: FileSystem, path: PathLike, follow_links: bool = True) -> Existence:
    """Determine whether a path exists.

    Only a missing entry is ABSENT. Any other failure, for example
    permission denied on a parent directory or a non-directory in the
    middle of the path, leaves existence UNKNOWN.

    Args:
        fs: Filesystem to query.
        path: Path to check.
        follow_links: Check the link target rather than the link.

    Returns:
        The Existence of the path.
    """
    try:
        fs.stat(path, follow_symlinks=follow_links)
    except FileNotFoundError:
        return Existence.ABSENT
    except INSPECTION_ERRORS as e:
        logger.debug("Existence of %s cannot be determined: %s", path, e)
        return Existence.UNKNOWN
    return Existence.PRESENT


def has_mode(
    fs: FileSystem, path: PathLike, test: Callable[[int], bool], follow_links: bool = True
) -> bool:
    """Check a path's file type with a stat.S_IS* function."""
    st = stat_path(fs, path, follow_links)
    return st is not None and bool(test(st.st_mode))


def is_symbolic_link(fs: FileSystem, path: PathLike) -> bool:
    """Check whether the path itself is a symbolic link."""
    return has_mode(fs, path, stat.S_ISLNK, follow_links=False)


def can_access(fs: FileSystem, path: PathLike, mode: int) -> bool:
    """Check access rights, treating any failure as denied."""
    try:
        return fs.access(path, mode)
    except INSPECTION_ERRORS:
        return False


def inspect_hidden(fs: FileSystem, path: PathLike) -> Inspection:
    """Check whether a path is hidden.

    Args:
        fs: Filesystem to query.
        path: Path to check.

    Returns:
        Inspection whose error is set when the hidden marker is unreadable.
    """
    try:
        return Inspection(fs.is_hidden(path))
    except INSPECTION_ERRORS as e:
        return Inspection(error=e)


def inspect_same_file(fs: FileSystem, path: PathLike, other: PathLike) -> Inspection:
    """Check whether two paths locate the same filesystem object.

    Both paths are resolved by the filesystem, following symbolic links
    and relative segments, and compared by device and inode.

    Args:
        fs: Filesystem to query.
        path: First path.
        other: Second path.

    Returns:
        Inspection whose error is set when either path cannot be resolved.
    """
    try:
        first = fs.stat(path)
        second = fs.stat(other)
    except INSPECTION_ERRORS as e:
        return Inspection(error=e)
    return Inspection((first.st_dev, first.st_ino) == (second.st_dev, second.st_ino))
