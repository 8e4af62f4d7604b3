"""PyHamcrest matchers for filesystem paths.

Matchers test whether paths correspond to files, directories or symbolic
links, and whether those objects are readable, writable, executable or
hidden.

The result of any match is outdated as soon as it is returned. A passing
exists() or readable() gives no guarantee that a later access will succeed,
so these matchers must not be used to make security decisions.
"""

__version__ = "1.0.0"

from hamcrest_path.matchers import (
    PathMatcher,
    a_directory,
    a_regular_file,
    executable,
    exists,
    hidden,
    readable,
    same_file,
    symbolic_link,
    writable,
)
from hamcrest_path.protocols import FileSystem
from hamcrest_path.types import NOFOLLOW_LINKS, ConfigurationError, LinkOption, LinkPolicy

__all__ = [
    "__version__",
    "ConfigurationError",
    "FileSystem",
    "LinkOption",
    "LinkPolicy",
    "NOFOLLOW_LINKS",
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
