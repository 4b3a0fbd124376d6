from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import cmp_to_key
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from nodeversion.schemas import CompatibilityReport, ReleaseEntry, ReleaseList
from nodeversion.version import Version, compare

logger = logging.getLogger(__name__)


def _parse_entry(raw: Any, *, index: int) -> ReleaseEntry:
    if isinstance(raw, str):
        raw = {"version": raw}
    elif isinstance(raw, (int, float)):
        # YAML reads an unquoted `3.10` as the float 3.1.
        raise ValueError(f"releases[{index}] must be quoted; YAML read it as the number {raw!r}")
    if not isinstance(raw, dict):
        raise ValueError(f"releases[{index}] must be a version string or a mapping")
    try:
        return ReleaseEntry.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"releases[{index}]: {e}") from e


def parse_release_list(data: Any) -> ReleaseList:
    if data is None:
        return ReleaseList()
    if isinstance(data, list):
        raw_releases: Any = data
    elif isinstance(data, dict):
        raw_releases = data.get("releases")
    else:
        raise ValueError("release list must be a YAML mapping or list")

    if raw_releases is None:
        return ReleaseList()
    if not isinstance(raw_releases, list):
        raise ValueError("releases must be a list")

    return ReleaseList(
        releases=[_parse_entry(raw, index=i) for i, raw in enumerate(raw_releases)]
    )


def load_release_list(path: Path) -> ReleaseList:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"release list is not valid YAML: {path}") from e
    release_list = parse_release_list(data)
    logger.debug("loaded %d releases from %s", len(release_list.releases), path)
    return release_list


def _by_version(a: ReleaseEntry, b: ReleaseEntry) -> int:
    return compare(a.parsed(), b.parsed()).sign


def sorted_releases(
    releases: Iterable[ReleaseEntry], *, include_yanked: bool = False
) -> list[ReleaseEntry]:
    kept: list[ReleaseEntry] = []
    for entry in releases:
        if entry.yanked and not include_yanked:
            logger.debug("skipping yanked release %s", entry.version)
            continue
        kept.append(entry)
    return sorted(kept, key=cmp_to_key(_by_version))


def _newest(
    releases: Iterable[ReleaseEntry],
    *,
    include_pre_release: bool,
    include_yanked: bool,
    client: Version | None = None,
) -> ReleaseEntry | None:
    ordered = sorted_releases(releases, include_yanked=include_yanked)
    for entry in reversed(ordered):
        version = entry.parsed()
        if version.pre_release is not None and not include_pre_release:
            continue
        if client is not None and not client.is_supported_by(version):
            continue
        return entry
    return None


def latest_release(
    releases: Iterable[ReleaseEntry],
    *,
    include_pre_release: bool = False,
    include_yanked: bool = False,
) -> ReleaseEntry | None:
    return _newest(
        releases, include_pre_release=include_pre_release, include_yanked=include_yanked
    )


def newest_supporting_release(
    releases: Iterable[ReleaseEntry],
    client: Version,
    *,
    include_pre_release: bool = False,
    include_yanked: bool = False,
) -> ReleaseEntry | None:
    return _newest(
        releases,
        include_pre_release=include_pre_release,
        include_yanked=include_yanked,
        client=client,
    )


def check_compatibility(client: Version, provider: Version) -> CompatibilityReport:
    return CompatibilityReport(
        client=str(client),
        provider=str(provider),
        supported=client.is_supported_by(provider),
        ordering=compare(client, provider),
    )
