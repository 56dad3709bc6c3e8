from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

from contracts.organize import Rule

logger = logging.getLogger(__name__)


def classify(
    values: Iterable[Any],
    rules: Sequence[Rule[Any]],
    project: Callable[[Any], str],
) -> None:
    """
    Append every value to the first rule whose pattern occurs in its
    comparison string (re.search, not fullmatch). Unmatched values go to the
    first fallback rule, regardless of where it sits in the rule list.
    """
    fallback = next(r for r in rules if r.unknown)
    matchers = [r for r in rules if r.pattern is not None]

    unmatched = 0
    for value in values:
        mapped = project(value)
        for rule in matchers:
            if rule.pattern.search(mapped):
                rule.values.append(value)
                break
        else:
            fallback.values.append(value)
            unmatched += 1

    logger.debug(f"Classified values into {len(matchers)} pattern rule(s); {unmatched} fell back to default")
