"""Filesystem abstraction for testability.

This module provides the filesystem probe that path matchers query. The
RealFileSystem implementation wraps standard library os and stat calls.
"""

from __future__ import annotations

import os
import stat
import sys

from hamcrest_path.types import PathLike


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os operations.
    Satisfies the FileSystem protocol structurally.
    """

    def stat(self, path: PathLike, follow_symlinks: bool = True) -> os.stat_result:
        """Get the status of a path."""
        return os.stat(path, follow_symlinks=follow_symlinks)

    def access(self, path: PathLike, mode: int) -> bool:
        """Check whether the caller has the given access to a path."""
        return os.access(path, mode)

    def is_hidden(self, path: PathLike) -> bool:
        """Check whether a path carries the platform's hidden marker.

        On Windows a path is hidden when it is not a directory and its
        FILE_ATTRIBUTE_HIDDEN attribute is set. Elsewhere a path is hidden
        when its final name component starts with a period.
        """
        if sys.platform == "win32":
            st = os.stat(path)
            if stat.S_ISDIR(st.st_mode):
                return False
            return bool(st.st_file_attributes & stat.FILE_ATTRIBUTE_HIDDEN)
        name = os.path.basename(os.fsdecode(path).rstrip(os.sep))
        return name.startswith(".")
