"""Protocol definitions for core abstractions.

This module defines the interface path matchers use to observe the
filesystem. Designing to an interface enables:
- Matchers that never touch real files in tests
- Easy substitution of test doubles
- A clear contract for what a matcher may ask of the filesystem

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from hamcrest_path.types import PathLike


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for read-only filesystem metadata queries.

    Implementations only observe state. They never create, modify or lock
    filesystem objects. Every method may raise OSError; callers decide how
    failures are reported.
    """

    def stat(self, path: PathLike, follow_symlinks: bool = True) -> os.stat_result:
        """Get the status of a path.

        Args:
            path: Path to inspect.
            follow_symlinks: Inspect the link target rather than the link.

        Returns:
            The stat result.

        Raises:
            FileNotFoundError: If the entry does not exist.
            OSError: If the status cannot be determined.
        """
        ...

    def access(self, path: PathLike, mode: int) -> bool:
        """Check whether the caller has the given access to a path.

        Args:
            path: Path to check.
            mode: Combination of os.R_OK, os.W_OK and os.X_OK.

        Returns:
            True if access would be granted, False otherwise.
        """
        ...

    def is_hidden(self, path: PathLike) -> bool:
        """Check whether a path carries the platform's hidden marker.

        Args:
            path: Path to check.

        Returns:
            True if hidden, False otherwise.

        Raises:
            OSError: If the marker cannot be read.
        """
        ...
