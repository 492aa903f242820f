from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lookpath.config.loader import CONFIG_ENV_VAR  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own lookpath config out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def make_executable(path: Path, mode: int = 0o755) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(mode)
    return path


def make_plain_file(path: Path) -> Path:
    return make_executable(path, stat.S_IRUSR | stat.S_IWUSR)


def set_search_path(monkeypatch: pytest.MonkeyPatch, *dirs: Path | str) -> None:
    monkeypatch.setenv("PATH", os.pathsep.join(str(d) for d in dirs))
