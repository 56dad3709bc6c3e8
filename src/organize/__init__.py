"""
Value organization: pattern-driven grouping with optional per-group ordering.

- resolve group identifiers (presets, aliases, $DEFAULT) into ordered rules
- first-match classification (substring search), unmatched -> default group
- optional sort: ASC / DESC / UNOCSS heuristic

No semantic interpretation of class names; values are only matched as strings.
"""

from contracts.organize import DEFAULT_GROUP, OrganizedGroup, OrganizedResult, SortMode

from .config import PlainOptions, ProjectedOptions, options_from_dict
from .errors import InvalidPatternError, MissingProjectionError, OrganizeError, PresetCycleError
from .module import organize

__all__ = [
    "DEFAULT_GROUP",
    "SortMode",
    "OrganizedGroup",
    "OrganizedResult",
    "PlainOptions",
    "ProjectedOptions",
    "options_from_dict",
    "OrganizeError",
    "InvalidPatternError",
    "PresetCycleError",
    "MissingProjectionError",
    "organize",
]
