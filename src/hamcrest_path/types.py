"""Shared data types for path matchers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

__all__ = [
    "NOFOLLOW_LINKS",
    "ConfigurationError",
    "LinkOption",
    "LinkPolicy",
    "PathLike",
]

PathLike = Union[str, os.PathLike]


class ConfigurationError(ValueError):
    """Error in the options a matcher was built with."""

    pass


class LinkOption(str, Enum):
    """Options controlling how symbolic links are handled."""

    NOFOLLOW_LINKS = "nofollow_links"


NOFOLLOW_LINKS = LinkOption.NOFOLLOW_LINKS


@dataclass(frozen=True)
class LinkPolicy:
    """Whether symbolic links are followed before a path is inspected.

    Attributes:
        follow_links: True to inspect the link target, False to inspect
            the link itself.
    """

    follow_links: bool = True

    @classmethod
    def from_options(cls, options: Iterable[object] = ()) -> LinkPolicy:
        """Build a policy from link options.

        Args:
            options: Zero or more LinkOption values.

        Returns:
            The matching LinkPolicy.

        Raises:
            ConfigurationError: If an option is not a LinkOption.
        """
        follow_links = True
        for option in options:
            try:
                link_option = LinkOption(option)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Unsupported link option: {option!r}") from None
            if link_option is LinkOption.NOFOLLOW_LINKS:
                follow_links = False
        return cls(follow_links=follow_links)

    @property
    def prefix(self) -> str:
        """Expectation text placed before the predicate's own text."""
        return "" if self.follow_links else "a non-symbolic link to "
