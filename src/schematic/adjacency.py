from __future__ import annotations

from collections import defaultdict
from typing import Iterable, TypeVar

from contracts.schematic import NumberSpan, Symbol, Token, is_adjacent

T = TypeVar("T", NumberSpan, Symbol)


def _row_of(tok: Token) -> int:
    return tok.start.row if isinstance(tok, NumberSpan) else tok.cell.row


def index_by_row(tokens: Iterable[Token], kind: type[T]) -> dict[int, list[T]]:
    """
    Group tokens of one kind by grid row, preserving token order within each row.
    """

    out: dict[int, list[T]] = defaultdict(list)
    for tok in tokens:
        if isinstance(tok, kind):
            out[_row_of(tok)].append(tok)
    return dict(out)


def neighbour_rows(index: dict[int, list[T]], row: int) -> list[T]:
    """Tokens on rows row-1, row, row+1 (in that order)."""
    out: list[T] = []
    for r in (row - 1, row, row + 1):
        out.extend(index.get(r, ()))
    return out


def span_touches(span: NumberSpan, symbol: Symbol) -> bool:
    return span.is_adjacent_to(symbol.cell)


__all__ = ["index_by_row", "is_adjacent", "neighbour_rows", "span_touches"]
