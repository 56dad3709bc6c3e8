from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Mapping, Sequence, TypeVar, Union

T = TypeVar("T")

# Sentinel group identifier: "put everything unmatched here".
DEFAULT_GROUP = "$DEFAULT"

GroupQuery = Union[str, re.Pattern]
Presets = Mapping[str, Union[GroupQuery, Sequence[GroupQuery]]]


class SortMode(str, Enum):
    ASC = "ASC"
    DESC = "DESC"
    UNOCSS = "UNOCSS"


def query_label(query: GroupQuery) -> str:
    """
    JSON-friendly label for a query: compiled patterns report their source.
    """
    if isinstance(query, re.Pattern):
        return query.pattern
    return str(query)


@dataclass(slots=True)
class Rule(Generic[T]):
    """
    A resolved match rule. Internal to a single organize() call.

    The fallback rule has no pattern and `unknown=True`; it is never tested,
    only used as the catch-all receiver.
    """

    query: GroupQuery
    pattern: re.Pattern[str] | None = None
    unknown: bool = False
    values: list[T] = field(default_factory=list)

    @staticmethod
    def fallback() -> "Rule[Any]":
        return Rule(query=DEFAULT_GROUP, pattern=None, unknown=True)


@dataclass(frozen=True, slots=True)
class OrganizedGroup(Generic[T]):
    query: GroupQuery
    values: list[T]

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": query_label(self.query),
            "values": list(self.values),
        }


@dataclass(frozen=True, slots=True)
class OrganizedResult(Generic[T]):
    groups: list[OrganizedGroup[T]]
    flat: list[T]  # all groups' values concatenated in rule order

    def to_dict(self) -> dict[str, Any]:
        return {
            "groups": [g.to_dict() for g in self.groups],
            "flat": list(self.flat),
        }

    @staticmethod
    def from_rules(rules: Sequence[Rule[T]]) -> "OrganizedResult[T]":
        groups = [OrganizedGroup(query=r.query, values=list(r.values)) for r in rules]
        flat = [v for g in groups for v in g.values]
        return OrganizedResult(groups=groups, flat=flat)
