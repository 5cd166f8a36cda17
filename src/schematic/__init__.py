"""
Schematic scan: engine-schematic grid -> tokens -> adjacency sums.

- tokenizer: one row-major pass, NumberSpan / Symbol tokens with grid cells
- adjacency: 8-connected (Chebyshev distance 1) predicate + per-row index
- part_numbers: sum of numbers touching any symbol
- gears: sum of ratios of gear glyphs touching exactly two numbers

Pure functions over text; file loading lives in the CLI only.
"""

from .config import SchematicConfig
from .errors import MalformedNumberLiteral, SchematicParseError
from .gears import Gear, find_gears, sum_gear_ratios
from .module import SchematicPart, compute, run_schematic
from .part_numbers import find_part_numbers, sum_part_numbers
from .tokenizer import tokenize_schematic

__all__ = [
    "Gear",
    "MalformedNumberLiteral",
    "SchematicConfig",
    "SchematicParseError",
    "SchematicPart",
    "compute",
    "find_gears",
    "find_part_numbers",
    "run_schematic",
    "sum_gear_ratios",
    "sum_part_numbers",
    "tokenize_schematic",
]
