from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ENV_VARS = ("NODEVERSION_CURRENT", "NODEVERSION_RELEASES", "NODEVERSION_ENV_FILE")


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    # setenv first so monkeypatch also removes anything load_dotenv writes later.
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def write_releases(tmp_path: Path):
    def _write(text: str, *, name: str = "releases.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
