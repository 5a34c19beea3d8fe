"""Tests for the filesystem storage root."""

from pathlib import Path

import pytest

from course_library.infrastructure.storage import StorageRoot
from course_library.modules.common.exceptions import StorageError, ValidationError


def test_ensure_creates_root(tmp_path: Path):
    root = StorageRoot(tmp_path / "a" / "b")

    assert root.ensure() == (tmp_path / "a" / "b").resolve()
    assert root.path.is_dir()


def test_ensure_is_idempotent(storage: StorageRoot):
    storage.ensure()

    assert storage.path.is_dir()


def test_ensure_fails_when_root_is_a_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(StorageError):
        StorageRoot(blocker / "files").ensure()


def test_resolve_inside_root(storage: StorageRoot):
    assert storage.resolve("anglais-1", "td", "2024") == storage.path / "anglais-1" / "td" / "2024"


@pytest.mark.parametrize("segments", [("..",), ("anglais-1", "..", "..", "etc"), ("/etc",)])
def test_resolve_rejects_escape(storage: StorageRoot, segments):
    with pytest.raises(ValidationError):
        storage.resolve(*segments)


def test_relative_uses_forward_slashes(storage: StorageRoot):
    assert storage.relative(storage.path / "anglais-1" / "td" / "x.pdf") == "anglais-1/td/x.pdf"
