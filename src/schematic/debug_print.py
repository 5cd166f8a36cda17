from __future__ import annotations

import argparse
from pathlib import Path

from contracts.schematic import Cell, NumberSpan, Symbol

from .config import SchematicConfig
from .gears import adjacent_numbers
from .tokenizer import tokenize_schematic


def _cell_str(c: Cell) -> str:
    return f"({c.row},{c.col})"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="sq-schematic-debug")
    ap.add_argument("--input", required=True, type=Path, help="Schematic text file.")
    ap.add_argument("--gear-glyph", default="*")
    ap.add_argument("--max-tokens", type=int, default=0, help="If >0, truncate token listing after N tokens.")
    args = ap.parse_args(argv)

    cfg = SchematicConfig(gear_glyph=args.gear_glyph)
    tokens = tokenize_schematic(args.input.read_text(encoding="utf-8"), cfg)

    numbers = sum(1 for t in tokens if isinstance(t, NumberSpan))
    print(f"tokens={len(tokens)} numbers={numbers} symbols={len(tokens) - numbers}")

    print("\n-- TOKENS (scan order) --")
    for i, t in enumerate(tokens):
        if args.max_tokens and i >= args.max_tokens:
            print(f"... (truncated at {args.max_tokens})")
            break
        if isinstance(t, NumberSpan):
            print(f"NUM {t.value:>6} len={t.length} cells={_cell_str(t.start)}-{_cell_str(Cell(t.row, t.end_col))}")
        else:
            print(f"SYM {t.char!r:>6} cell={_cell_str(t.cell)}")

    print("\n-- GEAR CANDIDATES --")
    for t in tokens:
        if not (isinstance(t, Symbol) and t.is_gear(cfg.gear_glyph)):
            continue
        nums = adjacent_numbers(t, tokens)
        mark = "gear" if len(nums) == 2 else "skip"
        print(f"{_cell_str(t.cell)} {mark} adjacent={[n.value for n in nums]}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
