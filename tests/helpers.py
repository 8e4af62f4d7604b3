"""Shared test helpers: stat results, skip markers and the sample tree type."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pytest

RUNNING_AS_ROOT = hasattr(os, "geteuid") and os.geteuid() == 0

requires_non_root = pytest.mark.skipif(
    RUNNING_AS_ROOT, reason="permission bits are not enforced for root"
)
posix_only = pytest.mark.skipif(os.name != "posix", reason="POSIX permission semantics")


def make_stat(mode: int, ino: int = 1, dev: int = 1) -> os.stat_result:
    """Build a stat result with the given mode, inode and device."""
    return os.stat_result((mode, ino, dev, 1, 0, 0, 0, 0, 0, 0))


@dataclass
class SampleTree:
    """Paths of a small directory tree built for a test."""

    folder: Path
    test_file: Path
    no_file: Path
    hidden_file: Path
    link_file: Path | None
    link_no_file: Path | None
    link_dir: Path | None
