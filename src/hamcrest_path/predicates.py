"""Predicates over filesystem paths.

Each predicate is a tagged value: a PredicateKind, the text describing
what it expects, and the function that evaluates it. Predicates never
raise for paths that are missing or cannot be inspected; they answer
False instead.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from hamcrest_path.inspection import (
    Existence,
    can_access,
    existence,
    has_mode,
    inspect_hidden,
    inspect_same_file,
    is_symbolic_link,
)
from hamcrest_path.protocols import FileSystem
from hamcrest_path.types import LinkPolicy, PathLike

__all__ = ["PREDICATES", "Predicate", "PredicateKind", "same_file_predicate"]

logger = logging.getLogger(__name__)

Evaluator = Callable[[FileSystem, PathLike, LinkPolicy], bool]


class PredicateKind(Enum):
    """The questions a path matcher can ask."""

    EXISTS = "exists"
    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"
    SYMBOLIC_LINK = "symbolic_link"
    READABLE = "readable"
    WRITABLE = "writable"
    EXECUTABLE = "executable"
    HIDDEN = "hidden"
    SAME_FILE = "same_file"


@dataclass(frozen=True)
class Predicate:
    """A question about a path.

    Attributes:
        kind: Which question this is.
        expectation: Text describing a path that answers yes. Empty for
            SAME_FILE, which is described by its expected path.
        evaluate: Function answering the question for a path.
        uses_link_policy: True if the answer depends on the LinkPolicy.
        expected: The other path, for SAME_FILE only.
    """

    kind: PredicateKind
    expectation: str
    evaluate: Evaluator
    uses_link_policy: bool = False
    expected: PathLike | None = None

    def __call__(self, fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
        return self.evaluate(fs, path, policy)


def _exists(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
    return existence(fs, path, policy.follow_links) is Existence.PRESENT


def _is_directory(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
    return has_mode(fs, path, stat.S_ISDIR, policy.follow_links)


def _is_regular_file(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
    return has_mode(fs, path, stat.S_ISREG, policy.follow_links)


def _is_symbolic_link(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
    # Always the link itself, whatever the policy says.
    return is_symbolic_link(fs, path)


def _access_check(mode: int) -> Evaluator:
    def check(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
        return can_access(fs, path, mode)

    return check


def _is_hidden(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
    inspection = inspect_hidden(fs, path)
    if not inspection.succeeded:
        logger.debug("Treating %s as not hidden: %s", path, inspection.error)
    return inspection.value


PREDICATES: dict[PredicateKind, Predicate] = {
    PredicateKind.EXISTS: Predicate(
        PredicateKind.EXISTS, "an existing filesystem entry", _exists, uses_link_policy=True
    ),
    PredicateKind.DIRECTORY: Predicate(
        PredicateKind.DIRECTORY, "a directory", _is_directory, uses_link_policy=True
    ),
    PredicateKind.REGULAR_FILE: Predicate(
        PredicateKind.REGULAR_FILE, "a regular file", _is_regular_file, uses_link_policy=True
    ),
    PredicateKind.SYMBOLIC_LINK: Predicate(
        PredicateKind.SYMBOLIC_LINK, "a symbolic link", _is_symbolic_link
    ),
    PredicateKind.READABLE: Predicate(
        PredicateKind.READABLE, "a readable file or directory", _access_check(os.R_OK)
    ),
    PredicateKind.WRITABLE: Predicate(
        PredicateKind.WRITABLE, "a writable file or directory", _access_check(os.W_OK)
    ),
    PredicateKind.EXECUTABLE: Predicate(
        PredicateKind.EXECUTABLE, "an executable file or directory", _access_check(os.X_OK)
    ),
    PredicateKind.HIDDEN: Predicate(
        PredicateKind.HIDDEN, "a hidden file or directory", _is_hidden
    ),
}


def same_file_predicate(expected: PathLike) -> Predicate:
    """Build the predicate matching paths that locate the same object as expected.

    Args:
        expected: Path of the object to compare against.

    Returns:
        A SAME_FILE predicate bound to expected.
    """

    def is_same_file(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> bool:
        inspection = inspect_same_file(fs, path, expected)
        if not inspection.succeeded:
            logger.debug("Treating %s as not the same file as %s: %s", path, expected, inspection.error)
        return inspection.value

    return Predicate(PredicateKind.SAME_FILE, "", is_same_file, expected=expected)
