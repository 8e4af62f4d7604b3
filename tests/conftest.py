"""Shared test fixtures."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from helpers import SampleTree


# ============================================================================
# Sample Tree Fixtures
# ============================================================================


def _try_symlink(link: Path, target: Path, target_is_directory: bool = False) -> Path | None:
    try:
        link.symlink_to(target, target_is_directory=target_is_directory)
    except (OSError, NotImplementedError):
        return None
    return link


@pytest.fixture
def sample_tree(tmp_path: Path) -> Iterator[SampleTree]:
    """Create a folder holding a read-only file, a hidden file and links."""
    folder = tmp_path / "folder"
    folder.mkdir()

    test_file = folder / "test-file"
    test_file.write_text("Some text\n")
    test_file.chmod(stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)

    no_file = folder / "no-file"

    hidden_file = folder / ".hidden"
    hidden_file.write_text("Hidden\n")

    tree = SampleTree(
        folder=folder,
        test_file=test_file,
        no_file=no_file,
        hidden_file=hidden_file,
        link_file=_try_symlink(folder / "link-file", test_file),
        link_no_file=_try_symlink(folder / "link-no-file", no_file),
        link_dir=_try_symlink(folder / "link-dir", tmp_path, target_is_directory=True),
    )
    yield tree
    test_file.chmod(stat.S_IRUSR | stat.S_IWUSR)


@pytest.fixture
def link_file(sample_tree: SampleTree) -> Path:
    """Symbolic link to the sample regular file."""
    if sample_tree.link_file is None:
        pytest.skip("symbolic links are not supported here")
    return sample_tree.link_file


@pytest.fixture
def link_no_file(sample_tree: SampleTree) -> Path:
    """Symbolic link to a path that does not exist."""
    if sample_tree.link_no_file is None:
        pytest.skip("symbolic links are not supported here")
    return sample_tree.link_no_file


@pytest.fixture
def link_dir(sample_tree: SampleTree) -> Path:
    """Symbolic link to a directory."""
    if sample_tree.link_dir is None:
        pytest.skip("symbolic links are not supported here")
    return sample_tree.link_dir


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    By default every path is missing, inaccessible and not hidden.
    """
    fs = MagicMock()
    fs.stat.side_effect = FileNotFoundError(2, "No such file or directory")
    fs.access.return_value = False
    fs.is_hidden.return_value = False
    return fs
