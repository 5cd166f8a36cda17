from __future__ import annotations

from dataclasses import dataclass

# Unsigned 32-bit ceiling for a single literal.
DEFAULT_MAX_VALUE = 2**32 - 1


def _is_glyph(s: str) -> bool:
    return len(s) == 1 and not ("0" <= s <= "9")


@dataclass(frozen=True, slots=True)
class SchematicConfig:
    """
    Schematic scan parameters.

    Defaults are explicit constants. Glyphs are single characters and may not
    be ASCII digits, since digits always start or extend a number.
    """

    empty_glyph: str = "."
    gear_glyph: str = "*"
    max_value: int = DEFAULT_MAX_VALUE
    use_row_index: bool = True  # restrict neighbour checks to rows r-1..r+1

    def validate(self) -> None:
        if not _is_glyph(self.empty_glyph):
            raise ValueError("empty_glyph must be a single non-digit character")
        if not _is_glyph(self.gear_glyph):
            raise ValueError("gear_glyph must be a single non-digit character")
        if self.gear_glyph == self.empty_glyph:
            raise ValueError("gear_glyph must differ from empty_glyph")
        if self.max_value < 9:
            raise ValueError("max_value must be >= 9")

    def __post_init__(self) -> None:
        self.validate()

    def to_dict(self) -> dict[str, object]:
        return {
            "empty_glyph": self.empty_glyph,
            "gear_glyph": self.gear_glyph,
            "max_value": self.max_value,
            "use_row_index": self.use_row_index,
        }
