from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar, overload

from contracts.organize import OrganizedResult

from .classify import classify
from .config import PlainOptions, ProjectedOptions
from .resolve_rules import resolve_rules
from .sort_values import sort_rule_values

logger = logging.getLogger(__name__)

T = TypeVar("T")


@overload
def organize(values: Sequence[str], options: PlainOptions) -> OrganizedResult[str]: ...


@overload
def organize(values: Sequence[T], options: ProjectedOptions) -> OrganizedResult[T]: ...


def organize(values: Sequence[Any], options: PlainOptions) -> OrganizedResult[Any]:
    """
    Partition `values` into the groups described by `options`.

    Pipeline: resolve rules -> first-match classification -> optional
    per-group sort. Every value lands in exactly one group; with no sort,
    each group keeps input order. Raises OrganizeError subclasses
    (InvalidPatternError, PresetCycleError, MissingProjectionError); no partial
    result is ever returned.
    """
    rules = resolve_rules(options.groups, presets=options.presets, ignore_case=options.ignore_case)
    classify(values, rules, options.project)

    if options.sort is not None:
        for rule in rules:
            rule.values = sort_rule_values(rule.values, options.sort, options.project)

    result = OrganizedResult.from_rules(rules)
    logger.debug(
        f"Organized {len(result.flat)} value(s) into {len(result.groups)} group(s) "
        f"(sort={None if options.sort is None else options.sort.value})"
    )
    return result
