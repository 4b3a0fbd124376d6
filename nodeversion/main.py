from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from functools import cmp_to_key
from pathlib import Path

from nodeversion.config import NodeVersionSettings, load_settings
from nodeversion.releases import (
    check_compatibility,
    latest_release,
    load_release_list,
    newest_supporting_release,
)
from nodeversion.version import Version, compare, parse_version

logger = logging.getLogger(__name__)


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _provider_version(*, raw: str | None, settings: NodeVersionSettings) -> Version:
    if raw is None:
        raw = settings.current_version
        if raw is None:
            raise SystemExit("--provider or NODEVERSION_CURRENT is required")
        logger.debug("provider version from NODEVERSION_CURRENT: %s", raw)
    return parse_version(raw.strip())


def _releases_path(*, raw: Path | None, settings: NodeVersionSettings) -> Path:
    if raw is not None:
        return raw
    if settings.releases_path is None:
        raise SystemExit("--releases or NODEVERSION_RELEASES is required")
    if not settings.releases_path.exists():
        raise SystemExit(f"NODEVERSION_RELEASES not found: {settings.releases_path}")
    return settings.releases_path


def _version_fields(version: Version) -> dict[str, object]:
    fields = asdict(version)
    for key in ("pre_release", "build"):
        if fields[key] is not None:
            fields[key] = list(fields[key])
    return fields


def _run(args: argparse.Namespace) -> int:
    if args.cmd == "parse":
        version = parse_version(args.version)
        if args.json:
            print(json.dumps(_version_fields(version), indent=2))
        else:
            print(version)
        return 0

    if args.cmd == "compare":
        print(compare(parse_version(args.a), parse_version(args.b)).value)
        return 0

    if args.cmd == "sort":
        versions = [parse_version(v) for v in args.versions]
        for version in sorted(versions, key=cmp_to_key(lambda a, b: compare(a, b).sign)):
            print(version)
        return 0

    settings = load_settings()

    if args.cmd == "supports":
        client = parse_version(args.client)
        provider = _provider_version(raw=args.provider, settings=settings)
        report = check_compatibility(client, provider)
        print(report.model_dump_json(indent=2))
        return 0 if report.supported else 1

    if args.cmd == "latest":
        release_list = load_release_list(_releases_path(raw=args.releases, settings=settings))
        if args.client is not None:
            entry = newest_supporting_release(
                release_list.releases,
                parse_version(args.client),
                include_pre_release=args.pre_release,
                include_yanked=args.include_yanked,
            )
        else:
            entry = latest_release(
                release_list.releases,
                include_pre_release=args.pre_release,
                include_yanked=args.include_yanked,
            )
        if entry is None:
            print("no matching release", file=sys.stderr)
            return 1
        print(entry.version)
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nodeversion")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    parse_p = sub.add_parser("parse", help="parse a version and print its canonical form")
    parse_p.add_argument("version")
    parse_p.add_argument("--json", action="store_true", help="print the parsed fields as JSON")

    compare_p = sub.add_parser("compare", help="print less/equal/greater for A relative to B")
    compare_p.add_argument("a")
    compare_p.add_argument("b")

    supports_p = sub.add_parser(
        "supports", help="check whether a provider version can serve a client version"
    )
    supports_p.add_argument("client")
    supports_p.add_argument(
        "--provider",
        type=str,
        default=None,
        help="provider version (default: $NODEVERSION_CURRENT)",
    )

    sort_p = sub.add_parser("sort", help="print versions in ascending order")
    sort_p.add_argument("versions", nargs="+")

    latest_p = sub.add_parser("latest", help="pick the newest release from a release list")
    latest_p.add_argument(
        "--releases",
        type=_existing_path,
        default=None,
        help="release list YAML (default: $NODEVERSION_RELEASES)",
    )
    latest_p.add_argument("--pre-release", action="store_true", help="consider pre-releases")
    latest_p.add_argument("--include-yanked", action="store_true")
    latest_p.add_argument(
        "--client",
        type=str,
        default=None,
        help="only consider releases that can serve this client version",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _run(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
