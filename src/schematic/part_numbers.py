from __future__ import annotations

import logging
from typing import Sequence

from contracts.schematic import NumberSpan, Symbol, Token

from .adjacency import index_by_row, neighbour_rows, span_touches

logger = logging.getLogger(__name__)


def find_part_numbers(tokens: Sequence[Token], *, use_row_index: bool = True) -> list[NumberSpan]:
    """
    NumberSpans adjacent to at least one Symbol of any glyph, in token order.

    Each span appears once no matter how many symbols it touches.
    """

    symbols_by_row = index_by_row(tokens, Symbol)
    all_symbols = [s for row in sorted(symbols_by_row) for s in symbols_by_row[row]]

    out: list[NumberSpan] = []
    for tok in tokens:
        if not isinstance(tok, NumberSpan):
            continue
        candidates = neighbour_rows(symbols_by_row, tok.row) if use_row_index else all_symbols
        if any(span_touches(tok, sym) for sym in candidates):
            out.append(tok)
    return out


def sum_part_numbers(tokens: Sequence[Token], *, use_row_index: bool = True) -> int:
    parts = find_part_numbers(tokens, use_row_index=use_row_index)
    total = sum(p.value for p in parts)
    logger.debug("part numbers: count=%d sum=%d", len(parts), total)
    return total
