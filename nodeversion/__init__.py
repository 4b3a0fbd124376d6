from __future__ import annotations

from nodeversion.errors import InvalidFormat, ParseError
from nodeversion.releases import (
    check_compatibility,
    latest_release,
    load_release_list,
    newest_supporting_release,
    parse_release_list,
    sorted_releases,
)
from nodeversion.schemas import CompatibilityReport, ReleaseEntry, ReleaseList
from nodeversion.version import Ordering, Version, compare, compare_identifiers, parse_version

__all__ = [
    "__version__",
    # Errors
    "ParseError",
    "InvalidFormat",
    # Version
    "Version",
    "Ordering",
    "parse_version",
    "compare",
    "compare_identifiers",
    # Schemas
    "ReleaseEntry",
    "ReleaseList",
    "CompatibilityReport",
    # Release lists
    "load_release_list",
    "parse_release_list",
    "sorted_releases",
    "latest_release",
    "newest_supporting_release",
    "check_compatibility",
]

__version__ = "0.1.0"
