"""Shared pytest fixtures for grouperror tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def err_closed() -> OSError:
    return OSError("file already closed")


@pytest.fixture
def err_exist() -> FileExistsError:
    return FileExistsError("file already exists")


@pytest.fixture
def path_error(tmp_path: Path) -> FileNotFoundError:
    """A real FileNotFoundError raised by opening a missing file."""
    missing = tmp_path / "file does not exist"
    with pytest.raises(FileNotFoundError) as excinfo:
        missing.open(encoding="utf-8")
    return excinfo.value
