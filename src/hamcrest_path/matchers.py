"""PyHamcrest matchers for filesystem paths.

Each factory binds one predicate, a link policy and a filesystem into an
immutable PathMatcher. Matchers hold no state between evaluations, so a
single matcher may be reused across assertions and combined with
PyHamcrest's all_of, any_of and not_.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from hamcrest_path.description import describe_expectation, describe_mismatch
from hamcrest_path.filesystem import RealFileSystem
from hamcrest_path.predicates import PREDICATES, Predicate, PredicateKind, same_file_predicate
from hamcrest_path.protocols import FileSystem
from hamcrest_path.types import LinkOption, LinkPolicy, PathLike

__all__ = [
    "PathMatcher",
    "a_directory",
    "a_regular_file",
    "executable",
    "exists",
    "hidden",
    "readable",
    "same_file",
    "symbolic_link",
    "writable",
]

logger = logging.getLogger(__name__)


class PathMatcher(BaseMatcher[Any]):
    """Matches paths satisfying a predicate.

    Follows Separate Use from Creation: the constructor takes every
    dependency. Use the module factory functions in tests.
    """

    def __init__(
        self,
        predicate: Predicate,
        policy: LinkPolicy | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        """Initialize matcher.

        Args:
            predicate: The question asked of each path.
            policy: How symbolic links are handled. Defaults to following them.
            filesystem: Filesystem to inspect. Defaults to the real one.
        """
        self._predicate = predicate
        self._policy = policy or LinkPolicy()
        self._fs = filesystem or RealFileSystem()

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    @property
    def policy(self) -> LinkPolicy:
        return self._policy

    def _matches(self, item: Any) -> bool:
        if not _is_text_path(item):
            return False
        return self._predicate(self._fs, item, self._policy)

    def describe_to(self, description: Description) -> None:
        describe_expectation(self._predicate, self._policy, description)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if self._predicate.kind is PredicateKind.SAME_FILE or not _is_text_path(item):
            super().describe_mismatch(item, mismatch_description)
            return
        describe_mismatch(self._fs, item, self._policy, mismatch_description)

    def __repr__(self) -> str:
        return f"PathMatcher({self._predicate.kind.name}, {self._policy!r})"


def _is_text_path(item: Any) -> bool:
    """Check whether item is a str path or a path-like yielding str."""
    if isinstance(item, str):
        return True
    if not isinstance(item, os.PathLike):
        return False
    try:
        return isinstance(os.fspath(item), str)
    except TypeError:
        return False


def _build(
    kind: PredicateKind,
    options: tuple[LinkOption | str, ...] = (),
    filesystem: FileSystem | None = None,
) -> PathMatcher:
    policy = LinkPolicy.from_options(options)
    logger.debug("Built %s matcher with %s", kind.value, policy)
    return PathMatcher(PREDICATES[kind], policy, filesystem)


def exists(*options: LinkOption | str, filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths that can be determined to exist.

    Symbolic links are followed unless NOFOLLOW_LINKS is given, in which
    case a dangling link still exists.

    For example::

        assert_that(Path("/tmp"), exists())

    Args:
        options: Link options.
        filesystem: Filesystem to inspect instead of the real one.

    Returns:
        Matcher that is False for paths that do not exist or whose
        existence cannot be determined.

    Raises:
        ConfigurationError: If an option is not a LinkOption.
    """
    return _build(PredicateKind.EXISTS, options, filesystem)


def a_directory(*options: LinkOption | str, filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths that are directories.

    Symbolic links are followed unless NOFOLLOW_LINKS is given.

    For example::

        assert_that(Path("/tmp"), is_(a_directory()))

    Raises:
        ConfigurationError: If an option is not a LinkOption.
    """
    return _build(PredicateKind.DIRECTORY, options, filesystem)


def a_regular_file(*options: LinkOption | str, filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths that are regular files.

    Symbolic links are followed unless NOFOLLOW_LINKS is given.

    For example::

        assert_that(Path("/tmp"), is_(not_(a_regular_file())))

    Raises:
        ConfigurationError: If an option is not a LinkOption.
    """
    return _build(PredicateKind.REGULAR_FILE, options, filesystem)


def symbolic_link(filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths that are themselves symbolic links."""
    return _build(PredicateKind.SYMBOLIC_LINK, filesystem=filesystem)


def readable(filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths the caller may read."""
    return _build(PredicateKind.READABLE, filesystem=filesystem)


def writable(filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths the caller may write."""
    return _build(PredicateKind.WRITABLE, filesystem=filesystem)


def executable(filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths the caller may execute.

    For a directory on POSIX systems this means permission to search it.
    """
    return _build(PredicateKind.EXECUTABLE, filesystem=filesystem)


def hidden(filesystem: FileSystem | None = None) -> PathMatcher:
    """Match hidden paths.

    On POSIX a path is hidden when its name starts with a period. On
    Windows the hidden attribute decides. A path whose hidden marker cannot
    be read does not match.
    """
    return _build(PredicateKind.HIDDEN, filesystem=filesystem)


def same_file(expected: PathLike, filesystem: FileSystem | None = None) -> PathMatcher:
    """Match paths that locate the same filesystem object as expected.

    Relative segments and symbolic links are resolved before comparing.

    For example::

        assert_that(Path("/tmp/../tmp"), is_(same_file(Path("/tmp"))))

    Args:
        expected: Path of the object to compare against.
        filesystem: Filesystem to inspect instead of the real one.

    Returns:
        Matcher that is False when either path cannot be resolved.
    """
    logger.debug("Built same_file matcher for %s", expected)
    return PathMatcher(same_file_predicate(expected), filesystem=filesystem)
