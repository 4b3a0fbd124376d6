from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from nodeversion.version import Ordering, Version, parse_version


class ReleaseEntry(BaseModel):
    version: str
    label: str | None = None
    # Yanked releases stay in the list for ordering but are never picked.
    yanked: bool = False

    @field_validator("version")
    @classmethod
    def _valid_version(cls, v: str) -> str:
        v = v.strip()
        parse_version(v)
        return v

    def parsed(self) -> Version:
        return parse_version(self.version)


class ReleaseList(BaseModel):
    releases: list[ReleaseEntry] = Field(default_factory=list)


class CompatibilityReport(BaseModel):
    client: str
    provider: str
    supported: bool
    ordering: Ordering
