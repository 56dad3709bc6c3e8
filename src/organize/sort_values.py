from __future__ import annotations

import unicodedata
from typing import Any, Callable, Sequence

from contracts.organize import SortMode

Projection = Callable[[Any], str]

# Root-locale (CLDR) primary order of ASCII whitespace, punctuation and symbols.
# All of these sort before digits, which sort before letters.
_ASCII_VARIABLE_ORDER = " _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def _primary_weight(ch: str) -> tuple[int, Any]:
    i = _ASCII_VARIABLE_ORDER.find(ch)
    if i >= 0:
        return (0, i)
    category = unicodedata.category(ch)
    if category[0] in "ZPS" or category == "Cc":
        return (0, len(_ASCII_VARIABLE_ORDER) + ord(ch))
    if category == "Nd":
        return (1, unicodedata.decimal(ch))
    return (2, ch)


def collation_key(text: str) -> tuple[tuple[tuple[int, Any], ...], str, str]:
    """
    Root-locale collation key, compared level by level:

    1. primary: punctuation/symbols < digits < letters, case and accents ignored
       ("text-[12px]" < "text-2xl" < "text-base")
    2. secondary: accents ("e" < "é")
    3. tertiary: lowercase before uppercase ("a" < "A" < "b" < "B")
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    accents = "".join(c for c in decomposed if unicodedata.combining(c))
    return (tuple(_primary_weight(c) for c in base), accents, text.swapcase())


def sort_ascending(values: Sequence[Any], project: Projection) -> list[Any]:
    return sorted(values, key=lambda v: collation_key(project(v)))


# UnoCSS heuristic buckets, tested in this order; first match wins.
# (prefixes, keep_input_order)
UNOCSS_BUCKETS: list[tuple[tuple[str, ...], bool]] = [
    ((":", "@"), True),  # variants / at-rules
    (
        (
            "flex",
            "grid",
            "fc",
            "justify",
            "items",
            "relative",
            "absolute",
            "fixed",
            "sticky",
            "top",
            "left",
            "right",
            "bottom",
        ),
        False,
    ),  # display / position
    (("w-", "h-"), False),  # size
    (("m-", "p-"), False),  # spacing
    (("text",), False),
    (("bg",), False),
]


def unocss_bucket(text: str) -> int:
    """Index into UNOCSS_BUCKETS, or len(UNOCSS_BUCKETS) for unknown attrs."""
    for i, (prefixes, _keep) in enumerate(UNOCSS_BUCKETS):
        if text.startswith(prefixes):
            return i
    return len(UNOCSS_BUCKETS)


def sort_unocss(values: Sequence[Any], project: Projection) -> list[Any]:
    buckets: list[list[Any]] = [[] for _ in range(len(UNOCSS_BUCKETS) + 1)]
    for v in values:
        buckets[unocss_bucket(project(v))].append(v)

    out: list[Any] = []
    for i, bucket in enumerate(buckets):
        keep_order = UNOCSS_BUCKETS[i][1] if i < len(UNOCSS_BUCKETS) else True
        out.extend(bucket if keep_order else sort_ascending(bucket, project))
    return out


def sort_rule_values(values: Sequence[Any], mode: SortMode, project: Projection) -> list[Any]:
    """
    Reorder one group's values. DESC is the exact reverse of the ASC result,
    so ties keep their ascending order before being reversed with the rest.
    """
    if mode is SortMode.UNOCSS:
        return sort_unocss(values, project)
    ordered = sort_ascending(values, project)
    if mode is SortMode.DESC:
        ordered.reverse()
    return ordered
