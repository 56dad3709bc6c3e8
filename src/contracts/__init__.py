"""
Canonical data contracts for value organization.

These models are the boundary between the organize engine and its callers:
- group queries and preset tables (inputs)
- resolved rules (internal, per call)
- organized groups/results (outputs)

Engine code should consume/produce these contract objects (not ad-hoc dicts).
"""

from .organize import (
    DEFAULT_GROUP,
    GroupQuery,
    OrganizedGroup,
    OrganizedResult,
    Presets,
    Rule,
    SortMode,
    query_label,
)

__all__ = [
    "DEFAULT_GROUP",
    "GroupQuery",
    "Presets",
    "Rule",
    "SortMode",
    "OrganizedGroup",
    "OrganizedResult",
    "query_label",
]
