"""Report part selection."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, field_validator

from buildreport.utils.constants import Constants


def split_part_names(value: str | Iterable[str] | None) -> list[str]:
    """Split a comma-separated string or a list of strings into part names.

    Surrounding whitespace and empty entries are dropped; case is
    normalised to lower case.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    names: list[str] = []
    for item in value:
        names.extend(s.strip().lower() for s in str(item).split(",") if s.strip())
    return names


def expand_part_names(names: Iterable[str]) -> list[str]:
    """Expand aliases and drop repeated parts, keeping the first occurrence.

    Unknown names are kept as given; they are rejected when the report is
    rendered.
    """
    expanded: list[str] = []
    seen: set[str] = set()
    for name in names:
        for part in Constants.PART_ALIASES.get(name, (name,)):
            if part not in seen:
                seen.add(part)
                expanded.append(part)
    return expanded


class ReportSelection(BaseModel):
    """Which parts to show and how to show them."""

    parts: tuple[str, ...] = ()
    short_display: bool = False
    show_checksum: bool = False

    model_config = {"frozen": True}

    @field_validator("parts", mode="before")
    @classmethod
    def normalise_parts(cls, v):
        """Accept comma strings or lists, expand aliases and deduplicate."""
        return tuple(expand_part_names(split_part_names(v)))
