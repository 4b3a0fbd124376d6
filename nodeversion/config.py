from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _env_file() -> str | None:
    # Nodes usually ship their release pin in a deployment-specific env file.
    explicit = (os.getenv("NODEVERSION_ENV_FILE") or "").strip()
    if explicit:
        return explicit
    checkout_env = repo_root() / ".env"
    if checkout_env.exists():
        return str(checkout_env)
    return find_dotenv(usecwd=True) or None


def load_env() -> None:
    # Real environment variables always win over the file.
    env_path = _env_file()
    if env_path is not None:
        load_dotenv(env_path)


@dataclass(frozen=True)
class NodeVersionSettings:
    current_version: str | None
    releases_path: Path | None


def load_settings() -> NodeVersionSettings:
    load_env()
    releases_raw = (os.getenv("NODEVERSION_RELEASES") or "").strip()
    return NodeVersionSettings(
        current_version=(os.getenv("NODEVERSION_CURRENT") or "").strip() or None,
        releases_path=Path(releases_raw) if releases_raw else None,
    )
