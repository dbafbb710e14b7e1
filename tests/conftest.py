"""Test configuration."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import mctl.paths as paths_module  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_app_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep config lookups and log files inside the test's temp directory."""

    class _AppDirs:
        def __init__(self, app_name: str, appauthor: bool | None = None) -> None:
            del appauthor
            self.user_data_dir = str(tmp_path / "data" / app_name)
            self.user_config_dir = str(tmp_path / "config" / app_name)

    monkeypatch.setattr(paths_module, "AppDirs", _AppDirs)
    paths_module.get_app_dirs.cache_clear()
    yield
    paths_module.get_app_dirs.cache_clear()
