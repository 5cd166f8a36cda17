from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from contracts.schematic import NumberSpan, Symbol, Token

from .adjacency import index_by_row, neighbour_rows, span_touches

logger = logging.getLogger(__name__)

DEFAULT_GEAR_GLYPH = "*"


@dataclass(frozen=True, slots=True)
class Gear:
    symbol: Symbol
    numbers: tuple[NumberSpan, NumberSpan]

    @property
    def ratio(self) -> int:
        a, b = self.numbers
        return a.value * b.value


def adjacent_numbers(
    symbol: Symbol,
    tokens: Sequence[Token],
    *,
    spans_by_row: dict[int, list[NumberSpan]] | None = None,
) -> list[NumberSpan]:
    """Distinct NumberSpans touching `symbol`, in token order."""
    if spans_by_row is not None:
        candidates = neighbour_rows(spans_by_row, symbol.cell.row)
    else:
        candidates = [t for t in tokens if isinstance(t, NumberSpan)]

    out: list[NumberSpan] = []
    for span in candidates:
        # Spans are frozen dataclasses: equal fields means the same grid run.
        if span_touches(span, symbol) and span not in out:
            out.append(span)
    return out


def find_gears(
    tokens: Sequence[Token],
    gear_glyph: str = DEFAULT_GEAR_GLYPH,
    *,
    use_row_index: bool = True,
) -> list[Gear]:
    """
    Gear-glyph symbols touching exactly two numbers, in token order.

    Candidates with 0, 1 or 3+ neighbours are not gears and are skipped.
    A span shared by two gears belongs to both.
    """

    spans_by_row = index_by_row(tokens, NumberSpan) if use_row_index else None

    gears: list[Gear] = []
    for tok in tokens:
        if not (isinstance(tok, Symbol) and tok.is_gear(gear_glyph)):
            continue
        nums = adjacent_numbers(tok, tokens, spans_by_row=spans_by_row)
        if len(nums) == 2:
            gears.append(Gear(symbol=tok, numbers=(nums[0], nums[1])))
    return gears


def sum_gear_ratios(
    tokens: Sequence[Token],
    gear_glyph: str = DEFAULT_GEAR_GLYPH,
    *,
    use_row_index: bool = True,
) -> int:
    gears = find_gears(tokens, gear_glyph, use_row_index=use_row_index)
    total = sum(g.ratio for g in gears)
    logger.debug("gears: glyph=%r count=%d sum=%d", gear_glyph, len(gears), total)
    return total
