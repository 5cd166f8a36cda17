from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable

from contracts.schematic import NumberSpan, SchematicError, SchematicResult, Symbol, Token

from .config import SchematicConfig
from .errors import MalformedNumberLiteral
from .gears import find_gears
from .part_numbers import find_part_numbers
from .tokenizer import tokenize_schematic

logger = logging.getLogger(__name__)

_SCHEMATIC_VERSION = "schematic_v1"


class SchematicPart(str, Enum):
    PART_ONE = "part1"
    PART_TWO = "part2"


ALL_PARTS: tuple[SchematicPart, ...] = (SchematicPart.PART_ONE, SchematicPart.PART_TWO)


def _base_meta(cfg: SchematicConfig, parts: Iterable[SchematicPart]) -> dict[str, Any]:
    return {
        "version": _SCHEMATIC_VERSION,
        "parts": [p.value for p in parts],
        "config": cfg.to_dict(),
        "counts": {},
    }


def _token_counts(text: str, tokens: tuple[Token, ...], gear_glyph: str) -> dict[str, int]:
    return {
        "rows": len(text.splitlines()),
        "numbers": sum(1 for t in tokens if isinstance(t, NumberSpan)),
        "symbols": sum(1 for t in tokens if isinstance(t, Symbol)),
        "gear_candidates": sum(1 for t in tokens if isinstance(t, Symbol) and t.is_gear(gear_glyph)),
    }


def run_schematic(
    *,
    text: str,
    config: SchematicConfig | None = None,
    parts: Iterable[SchematicPart] = ALL_PARTS,
) -> SchematicResult:
    """
    Tokenize a schematic and compute the requested part sums.

    A malformed literal yields ok=False with a SCHEMATIC_MALFORMED_NUMBER error
    and no sums. Parts not requested are reported as None.
    """

    cfg = config or SchematicConfig()
    cfg.validate()
    wanted = [SchematicPart(p) for p in parts]
    meta = _base_meta(cfg, wanted)

    try:
        tokens = tokenize_schematic(text, cfg)
    except MalformedNumberLiteral as e:
        logger.warning("schematic rejected: %s", e)
        return SchematicResult(
            ok=False,
            errors=[SchematicError(code="SCHEMATIC_MALFORMED_NUMBER", message=str(e), detail=e.detail())],
            meta=meta,
            part_one=None,
            part_two=None,
        )

    meta["counts"] = _token_counts(text, tokens, cfg.gear_glyph)

    part_one: int | None = None
    part_two: int | None = None

    if SchematicPart.PART_ONE in wanted:
        part_numbers = find_part_numbers(tokens, use_row_index=cfg.use_row_index)
        meta["counts"]["part_numbers"] = len(part_numbers)
        part_one = sum(p.value for p in part_numbers)

    if SchematicPart.PART_TWO in wanted:
        gears = find_gears(tokens, cfg.gear_glyph, use_row_index=cfg.use_row_index)
        meta["counts"]["gears"] = len(gears)
        part_two = sum(g.ratio for g in gears)

    logger.debug("schematic result: part_one=%s part_two=%s", part_one, part_two)
    return SchematicResult(ok=True, errors=[], meta=meta, part_one=part_one, part_two=part_two)


def compute(text: str, part: SchematicPart | str, config: SchematicConfig | None = None) -> int:
    """
    Single-answer entry point. Raises MalformedNumberLiteral instead of
    returning a failed result.
    """

    p = SchematicPart(part)
    cfg = config or SchematicConfig()
    tokens = tokenize_schematic(text, cfg)
    if p == SchematicPart.PART_ONE:
        return sum(n.value for n in find_part_numbers(tokens, use_row_index=cfg.use_row_index))
    return sum(g.ratio for g in find_gears(tokens, cfg.gear_glyph, use_row_index=cfg.use_row_index))
