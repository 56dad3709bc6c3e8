from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from contracts.organize import OrganizedResult, query_label


def summarize_organized_result(result: OrganizedResult[Any]) -> dict[str, Any]:
    """
    Counts-only view of a result: total values plus one {query, count} entry
    per group, in rule order. Safe to print for projected (non-JSON) values.
    """
    return {
        "ok": True,
        "values": len(result.flat),
        "groups": [{"query": query_label(g.query), "count": len(g.values)} for g in result.groups],
    }


def serialize_organized_result(result: OrganizedResult[Any]) -> str:
    """
    Deterministic JSON for the full result. Compiled-pattern queries are
    reported by their source; values must themselves be JSON-serializable.
    """
    return json.dumps(result.to_dict(), ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_organized_result_json(*, result: OrganizedResult[Any], out_file: Path) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_organized_result(result), encoding="utf-8")
