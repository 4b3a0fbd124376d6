from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from nodeversion.errors import InvalidFormat

# MAJOR.MINOR, optionally .PATCH and a fourth numeric field after it.
_NUMERIC_PREFIX = re.compile(r"([0-9]+)\.([0-9]+)(?:\.([0-9]+)(?:\.([0-9]+))?)?")
_IDENTIFIER = re.compile(r"[A-Za-z0-9-]+")
_DIGITS = re.compile(r"[0-9]+")
# Below CPython's default int/str conversion limit (4300 digits), so int() and str() never refuse.
_MAX_NUMERIC_DIGITS = 4000


class Ordering(str, Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"

    @property
    def sign(self) -> int:
        if self is Ordering.LESS:
            return -1
        if self is Ordering.GREATER:
            return 1
        return 0

    def reversed(self) -> "Ordering":
        if self is Ordering.LESS:
            return Ordering.GREATER
        if self is Ordering.GREATER:
            return Ordering.LESS
        return self


@dataclass(frozen=True, eq=False)
class Version:
    major: int
    minor: int
    patch: int = 0
    extra_numeric: int | None = None
    pre_release: tuple[str, ...] | None = None
    build: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.extra_numeric is not None and self.extra_numeric < 0:
            raise ValueError("extra_numeric must be >= 0")
        if self.pre_release is not None and not self.pre_release:
            raise ValueError("pre_release must be None or non-empty")
        if self.build is not None and not self.build:
            raise ValueError("build must be None or non-empty")

    @classmethod
    def parse(cls, text: str) -> "Version":
        return parse_version(text)

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.extra_numeric is not None:
            out += f".{self.extra_numeric}"
        if self.pre_release is not None:
            out += "-" + ".".join(self.pre_release)
        if self.build is not None:
            out += "+" + ".".join(self.build)
        return out

    def compare_to(self, other: "Version") -> Ordering:
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __hash__(self) -> int:
        # Must agree with __eq__: absent extra is 0 and numeric segments compare by value.
        return hash(
            (
                self.major,
                self.minor,
                self.patch,
                self.extra_numeric or 0,
                _identifiers_key(self.pre_release),
                _identifiers_key(self.build),
            )
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def is_supported_by(self, other: "Version") -> bool:
        """True when a provider running `other` can serve a client built against `self`.

        Only major/minor/patch are consulted. Majors must match; a newer minor
        supports any patch, the same minor needs a patch at least as high.
        """
        if other.major != self.major:
            return False
        if other.minor != self.minor:
            return other.minor > self.minor
        return other.patch >= self.patch

    def find_supporting_version(self, *candidates: "Version") -> "Version | None":
        """Return the first candidate (in argument order) that supports this version."""
        for candidate in candidates:
            if self.is_supported_by(candidate):
                return candidate
        return None


def _sign(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _numeric_key(digits: str) -> tuple[int, str]:
    # Orders digit strings by value without int(), which caps out at a few thousand digits.
    stripped = digits.lstrip("0")
    return (len(stripped), stripped)


def _identifiers_key(parts: tuple[str, ...] | None) -> tuple[object, ...] | None:
    if parts is None:
        return None
    return tuple(_numeric_key(p) if _DIGITS.fullmatch(p) else p for p in parts)


def _compare_segment(x: str, y: str) -> Ordering:
    x_numeric = _DIGITS.fullmatch(x) is not None
    y_numeric = _DIGITS.fullmatch(y) is not None
    if x_numeric and y_numeric:
        return _sign(_numeric_key(x), _numeric_key(y))
    # A numeric segment ranks below an alphanumeric one.
    if x_numeric:
        return Ordering.LESS
    if y_numeric:
        return Ordering.GREATER
    return _sign(x, y)


def compare_identifiers(a: Sequence[str], b: Sequence[str]) -> Ordering:
    for x, y in zip(a, b):
        result = _compare_segment(x, y)
        if result is not Ordering.EQUAL:
            return result
    # All shared segments equal: the shorter list ranks lower.
    return _sign(len(a), len(b))


def _compare_section(
    a: tuple[str, ...] | None, b: tuple[str, ...] | None, *, when_a_absent: Ordering
) -> Ordering:
    if a is None and b is None:
        return Ordering.EQUAL
    if a is None:
        return when_a_absent
    if b is None:
        return when_a_absent.reversed()
    return compare_identifiers(a, b)


def compare(a: Version, b: Version) -> Ordering:
    pairs = (
        (a.major, b.major),
        (a.minor, b.minor),
        (a.patch, b.patch),
        (a.extra_numeric or 0, b.extra_numeric or 0),
    )
    for x, y in pairs:
        if x != y:
            return _sign(x, y)

    # A release outranks any of its pre-releases.
    result = _compare_section(a.pre_release, b.pre_release, when_a_absent=Ordering.GREATER)
    if result is not Ordering.EQUAL:
        return result

    # Build metadata is a tie-breaker: a bare version sorts below any of its builds.
    return _compare_section(a.build, b.build, when_a_absent=Ordering.LESS)


def _parse_identifiers(raw: str, *, section: str, text: str) -> tuple[str, ...]:
    if not raw:
        raise InvalidFormat(f"empty {section} section", text=text)
    parts = tuple(raw.split("."))
    for part in parts:
        if not part:
            raise InvalidFormat(f"empty {section} identifier", text=text)
        if not _IDENTIFIER.fullmatch(part):
            raise InvalidFormat(f"invalid {section} identifier {part!r}", text=text)
    return parts


def parse_version(text: str) -> Version:
    if not isinstance(text, str):
        raise InvalidFormat("version must be a string", text=text)

    m = _NUMERIC_PREFIX.match(text)
    if m is None:
        raise InvalidFormat("expected MAJOR.MINOR[.PATCH[.EXTRA]]", text=text)
    major_s, minor_s, patch_s, extra_s = m.groups()

    pre_release: tuple[str, ...] | None = None
    build: tuple[str, ...] | None = None
    rest = text[m.end():]
    if rest:
        # Only the first "+" splits; any "-" after the first belongs to the pre-release text.
        head, plus, build_s = rest.partition("+")
        if head:
            if not head.startswith("-"):
                raise InvalidFormat(
                    "numeric components must be followed by '-', '+' or the end", text=text
                )
            pre_release = _parse_identifiers(head[1:], section="pre-release", text=text)
        if plus:
            build = _parse_identifiers(build_s, section="build", text=text)

    for digits in (major_s, minor_s, patch_s, extra_s):
        if digits is not None and len(digits) > _MAX_NUMERIC_DIGITS:
            raise InvalidFormat("numeric component is too long", text=text)

    return Version(
        major=int(major_s),
        minor=int(minor_s),
        patch=int(patch_s) if patch_s is not None else 0,
        extra_numeric=int(extra_s) if extra_s is not None else None,
        pre_release=pre_release,
        build=build,
    )
