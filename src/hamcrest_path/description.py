"""Descriptions of path expectations and mismatches.

One renderer serves every predicate. The expectation text is static; the
mismatch narrative is built from the path's state at the time it is
rendered, which may already differ from the state the predicate saw.

The narrative decides whether the entry is there without following links,
then describes what the path reaches by following them. Only the "does not
exist" branch honours the matcher's own link policy. A no-follow matcher
rejecting a link to a directory therefore reports "symbolic link to a ...
directory": the message names the object actually reached while the match
itself was decided on the link.
"""

from __future__ import annotations

import os
import stat

from hamcrest.core.description import Description
from hamcrest.core.string_description import StringDescription

from hamcrest_path.inspection import (
    Existence,
    can_access,
    existence,
    has_mode,
    inspect_hidden,
    is_symbolic_link,
)
from hamcrest_path.predicates import Predicate, PredicateKind
from hamcrest_path.protocols import FileSystem
from hamcrest_path.types import LinkPolicy, PathLike

__all__ = [
    "describe_expectation",
    "describe_mismatch",
    "render_expectation",
    "render_mismatch",
]

_ACCESS_WORDS = (
    (os.R_OK, "readable"),
    (os.W_OK, "writable"),
    (os.X_OK, "executable"),
)


def describe_expectation(predicate: Predicate, policy: LinkPolicy, description: Description) -> None:
    """Append what a matching path looks like.

    Args:
        predicate: The predicate being described.
        policy: Link policy the matcher was built with.
        description: Description to append to.
    """
    if predicate.kind is PredicateKind.SAME_FILE:
        description.append_description_of(predicate.expected)
        return
    if predicate.uses_link_policy:
        description.append_text(policy.prefix)
    description.append_text(predicate.expectation)


def describe_mismatch(
    fs: FileSystem, path: PathLike, policy: LinkPolicy, description: Description
) -> None:
    """Append what the path currently is.

    Args:
        fs: Filesystem to inspect.
        path: The path that failed to match.
        policy: Link policy the matcher was built with.
        description: Description to append to.
    """
    if existence(fs, path, follow_links=False) is Existence.PRESENT:
        description.append_description_of(path).append_text(" is a ")
        if is_symbolic_link(fs, path):
            description.append_text("symbolic link to a ")
        description.append_text(", ".join(_access_state(fs, path)))

        # An unreadable hidden marker leaves the clause out.
        if inspect_hidden(fs, path).value:
            description.append_text(", hidden")

        description.append_text(" " + _entry_type(fs, path))
    elif existence(fs, path, policy.follow_links) is Existence.ABSENT:
        description.append_description_of(path).append_text(" does not exist")
    else:
        description.append_text("file system status for ").append_description_of(path).append_text(
            " cannot be determined"
        )


def _access_state(fs: FileSystem, path: PathLike) -> list[str]:
    return [word if can_access(fs, path, mode) else "un" + word for mode, word in _ACCESS_WORDS]


def _entry_type(fs: FileSystem, path: PathLike) -> str:
    if has_mode(fs, path, stat.S_ISDIR):
        return "directory"
    if has_mode(fs, path, stat.S_ISREG):
        return "regular file"
    return "non-existent entry"


def render_expectation(predicate: Predicate, policy: LinkPolicy) -> str:
    """Return the expectation text as a string."""
    description = StringDescription()
    describe_expectation(predicate, policy, description)
    return str(description)


def render_mismatch(fs: FileSystem, path: PathLike, policy: LinkPolicy) -> str:
    """Return the mismatch narrative as a string."""
    description = StringDescription()
    describe_mismatch(fs, path, policy, description)
    return str(description)
