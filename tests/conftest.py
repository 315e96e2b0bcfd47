"""
Shared pytest fixtures for hashmux tests.

This module provides:
- isolated_app: autouse fixture giving every test a clean container,
  no HASHMUX_* environment and a scratch working directory
- registry: a fresh registry with the default algorithms
- sample_file: a small binary file on disk
"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from hashmux.core.bootstrap import reset as reset_app
from hashmux.hashing.registry import HashAlgorithmRegistry

SAMPLE_BYTES = b"The quick brown fox jumps over the lazy dog\n" * 1000


@pytest.fixture(autouse=True)
def isolated_app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run each test in its own directory with an un-bootstrapped container."""
    for key in list(os.environ):
        if key.startswith("HASHMUX_"):
            monkeypatch.delenv(key, raising=False)

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    reset_app()
    yield workdir
    reset_app()


@pytest.fixture
def registry() -> HashAlgorithmRegistry:
    """A fresh registry with md5, sha1 and sha256."""
    return HashAlgorithmRegistry()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A ~44KB file with known content."""
    path = tmp_path / "sample.bin"
    path.write_bytes(SAMPLE_BYTES)
    return path
