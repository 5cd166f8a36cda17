from __future__ import annotations

import logging

from contracts.schematic import Cell, NumberSpan, Symbol, Token

from .config import SchematicConfig
from .errors import MalformedNumberLiteral

logger = logging.getLogger(__name__)


def _is_ascii_digit(ch: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits.
    return "0" <= ch <= "9"


def _flush_digits(
    *,
    digits: list[str],
    row: int,
    end_col: int,
    max_value: int,
) -> NumberSpan:
    """
    Build a NumberSpan from a pending digit buffer.

    `end_col` is exclusive: the column of the character that ended the run,
    or the line length when the run ends at end-of-line. Both cases share the
    same arithmetic, so the first digit is always at end_col - len(digits).
    """

    literal = "".join(digits)
    start = Cell(row, end_col - len(literal))
    # Width check first: int() refuses very long digit strings with a bare ValueError.
    significant = literal.lstrip("0")
    if len(significant) > len(str(max_value)):
        raise MalformedNumberLiteral(literal=literal, cell=start, limit=max_value)
    value = int(significant or "0")
    if value > max_value:
        raise MalformedNumberLiteral(literal=literal, cell=start, limit=max_value)
    return NumberSpan(value=value, length=len(literal), start=start)


def tokenize_line(row: int, line: str, config: SchematicConfig) -> list[Token]:
    tokens: list[Token] = []
    digits: list[str] = []

    for col, ch in enumerate(line):
        if _is_ascii_digit(ch):
            digits.append(ch)
            continue

        if digits:
            tokens.append(_flush_digits(digits=digits, row=row, end_col=col, max_value=config.max_value))
            digits = []

        if ch == config.empty_glyph:
            continue
        tokens.append(Symbol(char=ch, cell=Cell(row, col)))

    # A run touching the last column must not be dropped.
    if digits:
        tokens.append(_flush_digits(digits=digits, row=row, end_col=len(line), max_value=config.max_value))

    return tokens


def tokenize_schematic(text: str, config: SchematicConfig | None = None) -> tuple[Token, ...]:
    """
    Single row-major scan of the schematic.

    Returns an immutable, input-ordered token sequence. Empty cells produce no
    token. Raises MalformedNumberLiteral for a literal above `config.max_value`.
    """

    cfg = config or SchematicConfig()
    tokens: list[Token] = []
    rows = text.splitlines()
    for row, line in enumerate(rows):
        tokens.extend(tokenize_line(row, line, cfg))

    logger.debug("tokenized schematic: rows=%d tokens=%d", len(rows), len(tokens))
    return tuple(tokens)

