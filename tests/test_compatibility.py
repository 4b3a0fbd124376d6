from __future__ import annotations

import itertools

import pytest

from nodeversion import parse_version


def _supported(client: str, provider: str) -> bool:
    return parse_version(client).is_supported_by(parse_version(provider))


def test_version_supports_itself() -> None:
    for text in ("3.0.2", "1.0.0-alpha", "2.1.5.123+b1", "3.2"):
        v = parse_version(text)
        assert v.is_supported_by(v)


def test_newer_patch_supports_older_patch() -> None:
    assert _supported("1.2.3", "1.2.4")
    assert not _supported("1.2.4", "1.2.3")


def test_newer_minor_supports_older_minor() -> None:
    assert _supported("1.2.3", "1.3.3")
    assert not _supported("1.3.3", "1.2.3")


def test_newer_minor_ignores_patch() -> None:
    assert _supported("3.0.1", "3.1.0")
    assert not _supported("3.1.0", "3.0.1")


def test_different_majors_never_compatible() -> None:
    assert not _supported("2.2.3", "1.3.3")
    assert not _supported("1.3.3", "2.2.3")


def test_major_gate_holds_for_all_pairs() -> None:
    texts = ["1.0", "1.9.9", "2.0.0", "2.5.1-rc1", "3.0.0.4+b"]
    for a, b in itertools.product(texts, repeat=2):
        va, vb = parse_version(a), parse_version(b)
        if va.major != vb.major:
            assert not va.is_supported_by(vb)
            assert not vb.is_supported_by(va)


@pytest.mark.parametrize(
    ("client", "provider"),
    [
        ("1.2.3", "1.2.3-alpha"),
        ("1.2.3-alpha", "1.2.3"),
        ("1.2.3.9", "1.2.3"),
        ("1.2.3+b2", "1.2.3+b1"),
    ],
)
def test_extra_pre_release_and_build_are_ignored(client: str, provider: str) -> None:
    assert _supported(client, provider)


def test_find_supporting_version_returns_first_match() -> None:
    client = parse_version("3.0.1")
    candidates = [parse_version(t) for t in ("2.9.9", "3.0.0", "3.1.0", "3.2.0")]
    assert client.find_supporting_version(*candidates) is candidates[2]


def test_find_supporting_version_none_when_no_candidate() -> None:
    client = parse_version("3.0.1")
    assert client.find_supporting_version(parse_version("4.0.0")) is None
    assert client.find_supporting_version() is None
