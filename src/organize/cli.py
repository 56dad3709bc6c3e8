from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from contracts.organize import SortMode

from .artifacts import summarize_organized_result, write_organized_result_json
from .config import options_from_dict
from .errors import OrganizeError
from .module import organize

logger = logging.getLogger(__name__)


def _read_values(path: Path) -> list[Any]:
    """
    One value per line, or a JSON array when the input starts with '['.
    """
    raw = sys.stdin.read() if str(path) == "-" else path.read_text(encoding="utf-8")
    if raw.lstrip().startswith("["):
        values = json.loads(raw)
        if not isinstance(values, list):
            raise ValueError("JSON input must be an array")
        return values
    return [line.strip() for line in raw.splitlines() if line.strip()]


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="miniorganize",
        description="Group values (e.g. utility classes) by pattern rules and optionally sort each group.",
    )
    p.add_argument("--input", required=True, type=Path, help="Values file (one per line or JSON array); '-' for stdin.")
    p.add_argument("--config", type=Path, default=None, help="JSON options file (groups, presets, sort, ignore_case, map_key).")
    p.add_argument(
        "--group",
        action="append",
        dest="groups",
        default=None,
        help="Group identifier (preset key, pattern or $DEFAULT). Repeatable; overrides config groups.",
    )
    p.add_argument("--sort", choices=[m.value for m in SortMode], default=None, help="Per-group sort mode.")
    p.add_argument("--ignore-case", action="store_true", default=None, help="Case-insensitive pattern matching.")
    p.add_argument("--output", type=Path, default=None, help="Optional path to write the JSON result artifact.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    cfg: dict[str, Any] = {}
    try:
        if args.config is not None:
            cfg = json.loads(args.config.read_text(encoding="utf-8"))
            if not isinstance(cfg, dict):
                raise ValueError("--config must contain a JSON object")
        if args.groups is not None:
            cfg["groups"] = args.groups
        if args.sort is not None:
            cfg["sort"] = args.sort
        if args.ignore_case is not None:
            cfg["ignore_case"] = args.ignore_case

        options = options_from_dict(cfg)
        values = _read_values(args.input)
    except (OSError, ValueError, TypeError) as e:
        parser.error(str(e))

    try:
        result = organize(values, options)
    except OrganizeError as e:
        logger.error(f"Organize failed: {e}")
        print(json.dumps({"ok": False, "error": str(e)}, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
        return 2

    if args.output is not None:
        write_organized_result_json(result=result, out_file=args.output)
        logger.info(f"Wrote result artifact to {args.output}")

    print(json.dumps(summarize_organized_result(result), sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
