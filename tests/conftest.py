from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's real ~/.ccinit.yaml and CCINIT_* variables out of tests."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for variable in ("CCINIT_DRY_RUN", "CCINIT_VERBOSE", "CCINIT_LOG_CONFIG"):
        monkeypatch.delenv(variable, raising=False)
    return home


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory that is also the working directory."""

    project = tmp_path / "demo-project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


def _snapshot(directory: Path) -> dict[str, tuple[bytes, int]]:
    return {
        path.relative_to(directory).as_posix(): (path.read_bytes(), path.stat().st_mtime_ns)
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


@pytest.fixture()
def snapshot() -> Callable[[Path], dict[str, tuple[bytes, int]]]:
    """Map every file below a directory to its content and mtime."""

    return _snapshot
