from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from contracts.organize import GroupQuery, Presets, SortMode

from .errors import MissingProjectionError


def _coerce_sort(sort: Any) -> SortMode | None:
    if sort is None or sort is False:
        return None
    if sort is True:
        return SortMode.ASC
    if isinstance(sort, SortMode):
        return sort
    if isinstance(sort, str):
        try:
            return SortMode(sort.strip().upper())
        except ValueError:
            pass
    raise ValueError(f"sort must be one of ASC, DESC, UNOCSS, true/false or None, got {sort!r}")


def _is_query(q: Any) -> bool:
    return isinstance(q, (str, re.Pattern))


@dataclass(frozen=True, slots=True, kw_only=True)
class PlainOptions:
    """
    Options for organizing values that are already strings.

    `groups` is the ordered list of group identifiers: preset keys, literal
    patterns (str or compiled) or DEFAULT_GROUP. `sort` is normalized to a
    SortMode (True => ASC) or None (no sorting).
    """

    groups: Sequence[GroupQuery]
    presets: Presets | None = None
    sort: SortMode | bool | str | None = None
    ignore_case: bool = False

    def validate(self) -> None:
        if isinstance(self.groups, (str, bytes)) or not isinstance(self.groups, Sequence):
            raise TypeError("groups must be a sequence of group identifiers")
        for g in self.groups:
            if not _is_query(g):
                raise TypeError(f"group identifiers must be str or compiled patterns, got {g!r}")
        if self.presets is not None:
            if not isinstance(self.presets, Mapping):
                raise TypeError("presets must be a mapping of name -> query or list of queries")
            for name, preset in self.presets.items():
                if not isinstance(name, str):
                    raise TypeError(f"preset names must be str, got {name!r}")
                items = [preset] if _is_query(preset) else preset
                if not isinstance(items, (list, tuple)) or not all(_is_query(q) for q in items):
                    raise TypeError(f"preset {name!r} must be a query or a list of queries")

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "sort", _coerce_sort(self.sort))
        object.__setattr__(self, "ignore_case", bool(self.ignore_case))
        self.validate()

    def project(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        raise MissingProjectionError(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectedOptions(PlainOptions):
    """Options carrying a `map` projection from arbitrary values to their comparison string."""

    map: Callable[[Any], str]

    def validate(self) -> None:
        PlainOptions.validate(self)
        if not callable(self.map):
            raise TypeError("map must be callable")

    def project(self, value: Any) -> str:
        return self.map(value)


def options_from_dict(d: Mapping[str, Any]) -> PlainOptions:
    """
    Build options from a JSON-style config mapping.

    Recognized keys: groups, presets, sort, ignore_case (or ignoreCase), map_key.
    When `map_key` is set, values are expected to be mappings and are projected
    through that key.
    """
    if "groups" not in d:
        raise ValueError("config is missing required key 'groups'")
    groups_raw = d["groups"]
    if not isinstance(groups_raw, (list, tuple)):
        raise TypeError(f"groups must be a list of group identifiers, got {type(groups_raw).__name__}")

    presets_raw = d.get("presets")
    presets: dict[str, Any] | None = None
    if presets_raw is not None:
        if not isinstance(presets_raw, Mapping):
            raise TypeError("presets must be an object")
        presets = {
            str(k): (list(v) if isinstance(v, (list, tuple)) else v) for k, v in presets_raw.items()
        }

    kwargs: dict[str, Any] = {
        "groups": list(groups_raw),
        "presets": presets,
        "sort": d.get("sort"),
        "ignore_case": bool(d.get("ignore_case", d.get("ignoreCase", False))),
    }

    map_key = d.get("map_key")
    if map_key is None:
        return PlainOptions(**kwargs)
    return ProjectedOptions(map=operator.itemgetter(str(map_key)), **kwargs)
