from __future__ import annotations

from typing import Any


class OrganizeError(Exception):
    pass


class InvalidPatternError(OrganizeError, ValueError):
    def __init__(self, query: Any, reason: str) -> None:
        super().__init__(f"Invalid group pattern {query!r}: {reason}")
        self.query = query


class PresetCycleError(OrganizeError, ValueError):
    def __init__(self, chain: list[str]) -> None:
        super().__init__(f"Preset aliases form a cycle: {' -> '.join(chain)}")
        self.chain = list(chain)


class MissingProjectionError(OrganizeError, TypeError):
    def __init__(self, value: Any) -> None:
        super().__init__(
            "Neither a map function nor string values were passed "
            f"(got {type(value).__name__} value {value!r})."
        )
        self.value = value
