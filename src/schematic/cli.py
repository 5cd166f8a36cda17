from __future__ import annotations

import argparse
import importlib
import json
import logging
from pathlib import Path

from .artifacts import serialize_schematic_result
from .config import DEFAULT_MAX_VALUE, SchematicConfig
from .module import ALL_PARTS, SchematicPart, run_schematic


def _assert_local_imports() -> None:
    """
    Guardrail: ensure we are importing the local canonical implementations under repo/src/.
    This prevents accidentally running against a globally installed `schematic` or `contracts`.
    """

    src_root = Path(__file__).resolve().parents[1]

    for name in ("schematic.module", "contracts.schematic"):
        mod = importlib.import_module(name)
        f = Path(getattr(mod, "__file__", "")).resolve()
        if not str(f).startswith(str(src_root)):
            raise RuntimeError(f"Imported {mod.__name__} from unexpected path: {f}")


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sq-schematic",
        description="Engine schematic scan: part-number sum (part1) and gear-ratio sum (part2).",
    )
    p.add_argument("--input", required=True, type=Path, help="Path to the schematic text file.")
    p.add_argument("--part", choices=["part1", "part2", "both"], default="both")
    p.add_argument("--empty-glyph", default=".")
    p.add_argument("--gear-glyph", default="*")
    p.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE)
    p.add_argument("--json", action="store_true", default=False, help="Print the full result object.")
    p.add_argument("--verbose", action="store_true", default=False)
    return p


def main(argv: list[str] | None = None) -> int:
    _assert_local_imports()
    ap = _build_arg_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        cfg = SchematicConfig(
            empty_glyph=args.empty_glyph,
            gear_glyph=args.gear_glyph,
            max_value=args.max_value,
        )
    except ValueError as e:
        ap.error(str(e))

    parts = ALL_PARTS if args.part == "both" else (SchematicPart(args.part),)
    text = args.input.read_text(encoding="utf-8")
    result = run_schematic(text=text, config=cfg, parts=parts)

    if args.json:
        print(serialize_schematic_result(result), end="")
    elif not result.ok:
        for e in result.errors:
            print(f"{e.code}: {e.message}")
    elif len(parts) == 1:
        print(result.part_one if parts[0] == SchematicPart.PART_ONE else result.part_two)
    else:
        print(json.dumps({"part1": result.part_one, "part2": result.part_two}, sort_keys=True, separators=(",", ":")))

    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
