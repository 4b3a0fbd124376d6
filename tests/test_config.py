from __future__ import annotations

from pathlib import Path

import pytest

from nodeversion.config import load_settings


def test_load_settings_defaults_to_unset(clean_env: pytest.MonkeyPatch) -> None:
    settings = load_settings()
    assert settings.current_version is None
    assert settings.releases_path is None


def test_load_settings_reads_environment(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("NODEVERSION_CURRENT", "  3.1.0  ")
    clean_env.setenv("NODEVERSION_RELEASES", str(tmp_path / "releases.yaml"))
    settings = load_settings()
    assert settings.current_version == "3.1.0"
    assert settings.releases_path == tmp_path / "releases.yaml"


def test_blank_values_are_unset(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("NODEVERSION_CURRENT", "   ")
    assert load_settings().current_version is None


def test_load_settings_reads_dotenv_from_cwd(
    clean_env: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    (tmp_path / ".env").write_text("NODEVERSION_CURRENT=2.2.0-rc1\n", encoding="utf-8")
    assert load_settings().current_version == "2.2.0-rc1"


def test_explicit_env_file_takes_precedence(
    clean_env: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    (tmp_path / ".env").write_text("NODEVERSION_CURRENT=1.0.0\n", encoding="utf-8")
    deploy_env = tmp_path / "deploy.env"
    deploy_env.write_text("NODEVERSION_CURRENT=3.1.0\n", encoding="utf-8")
    clean_env.setenv("NODEVERSION_ENV_FILE", str(deploy_env))
    assert load_settings().current_version == "3.1.0"


def test_environment_overrides_env_file(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("NODEVERSION_CURRENT=1.0.0\n", encoding="utf-8")
    clean_env.setenv("NODEVERSION_CURRENT", "2.0.0")
    assert load_settings().current_version == "2.0.0"
