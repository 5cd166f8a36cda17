"""
Canonical schematic contracts.

These models are the schema boundary between the tokenizer, the aggregators
and any caller serializing results. Stage code should consume/produce these
contract objects (not ad-hoc dicts).
"""

from .schematic import (
    Cell,
    NumberSpan,
    SchematicError,
    SchematicResult,
    Symbol,
    Token,
    is_adjacent,
    token_from_dict,
)

__all__ = [
    "Cell",
    "NumberSpan",
    "Symbol",
    "Token",
    "SchematicError",
    "SchematicResult",
    "is_adjacent",
    "token_from_dict",
]
