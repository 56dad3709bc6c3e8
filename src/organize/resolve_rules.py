from __future__ import annotations

import logging
import re
from typing import Any, Sequence

from contracts.organize import DEFAULT_GROUP, GroupQuery, Presets, Rule

from .errors import InvalidPatternError, PresetCycleError

logger = logging.getLogger(__name__)


def compile_query(query: GroupQuery, *, ignore_case: bool) -> re.Pattern[str]:
    """
    Compile a literal query. Compiled patterns keep their own flags;
    ignore_case only ever adds re.IGNORECASE.
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        if isinstance(query, re.Pattern):
            return re.compile(query.pattern, query.flags | flags)
        return re.compile(query, flags)
    except re.error as e:
        raise InvalidPatternError(query, str(e)) from e


def _expand(
    query: Any,
    *,
    presets: Presets,
    ignore_case: bool,
    chain: list[str],
) -> list[Rule[Any]]:
    if isinstance(query, (list, tuple)):
        out: list[Rule[Any]] = []
        for q in query:
            out.extend(_expand(q, presets=presets, ignore_case=ignore_case, chain=chain))
        return out

    if query == DEFAULT_GROUP:
        return [Rule.fallback()]

    if isinstance(query, str) and query in presets:
        if query in chain:
            raise PresetCycleError(chain[chain.index(query):] + [query])
        return _expand(
            presets[query],
            presets=presets,
            ignore_case=ignore_case,
            chain=chain + [query],
        )

    return [Rule(query=query, pattern=compile_query(query, ignore_case=ignore_case))]


def resolve_rules(
    groups: Sequence[GroupQuery],
    *,
    presets: Presets | None = None,
    ignore_case: bool = False,
) -> list[Rule[Any]]:
    """
    Expand group identifiers into the ordered rule list.

    Each identifier is either DEFAULT_GROUP (fallback rule), a preset key
    (expanded in place, recursively; lists expand to one rule per element) or
    a literal pattern. A fallback rule is appended when none was requested,
    so exactly one reachable catch-all always exists.
    """
    table: Presets = presets or {}

    rules: list[Rule[Any]] = []
    for g in groups:
        rules.extend(_expand(g, presets=table, ignore_case=ignore_case, chain=[]))

    if not any(r.unknown for r in rules):
        rules.append(Rule.fallback())
        logger.debug("No default group requested; appended fallback rule")

    logger.debug(f"Resolved {len(groups)} group identifier(s) into {len(rules)} rule(s)")
    return rules
