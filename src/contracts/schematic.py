from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union


def is_adjacent(cells: Iterable["Cell"], target: "Cell") -> bool:
    """8-connected adjacency: True iff any occupied cell is within Chebyshev distance 1 of `target`."""
    return any(c.chebyshev(target) <= 1 for c in cells)


@dataclass(frozen=True, slots=True)
class Cell:
    """
    Grid coordinate (0-indexed):
    - row grows downward
    - col grows rightward
    """

    row: int
    col: int

    def chebyshev(self, other: "Cell") -> int:
        return max(abs(self.row - other.row), abs(self.col - other.col))

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Cell":
        return Cell(row=int(d["row"]), col=int(d["col"]))

    def to_dict(self) -> dict[str, Any]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True, slots=True)
class NumberSpan:
    """
    Unsigned base-10 literal occupying a contiguous horizontal run of cells.

    `length` is the digit count as written in the grid, so a literal with
    leading zeros keeps its full width.
    """

    value: int
    length: int
    start: Cell

    @property
    def row(self) -> int:
        return self.start.row

    @property
    def end_col(self) -> int:
        # inclusive
        return self.start.col + self.length - 1

    def cells(self) -> list[Cell]:
        return [Cell(self.start.row, c) for c in range(self.start.col, self.start.col + self.length)]

    def is_adjacent_to(self, target: Cell) -> bool:
        # Checked against every occupied cell, not just `start`.
        return is_adjacent(self.cells(), target)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "NumberSpan":
        return NumberSpan(value=int(d["value"]), length=int(d["length"]), start=Cell.from_dict(d["start"]))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "number", "value": self.value, "length": self.length, "start": self.start.to_dict()}


@dataclass(frozen=True, slots=True)
class Symbol:
    char: str
    cell: Cell

    def is_gear(self, gear_glyph: str) -> bool:
        return self.char == gear_glyph

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Symbol":
        return Symbol(char=str(d["char"]), cell=Cell.from_dict(d["cell"]))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "symbol", "char": self.char, "cell": self.cell.to_dict()}


Token = Union[NumberSpan, Symbol]


def token_from_dict(d: dict[str, Any]) -> Token:
    kind = d.get("kind")
    if kind == "number":
        return NumberSpan.from_dict(d)
    if kind == "symbol":
        return Symbol.from_dict(d)
    raise TypeError(f"Unknown token kind: {kind!r}")


@dataclass(frozen=True, slots=True)
class SchematicError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "SchematicError":
        return SchematicError(
            code=str(d["code"]),
            message=str(d.get("message", "")),
            detail=(None if d.get("detail") is None else dict(d["detail"])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": None if self.detail is None else dict(self.detail)}


@dataclass(frozen=True, slots=True)
class SchematicResult:
    """
    Machine-readable scan outcome.

    On failure `ok` is False and both sums are None; a sum is only reported
    once the whole grid has been scanned.
    """

    ok: bool
    errors: list[SchematicError]
    meta: dict[str, Any]  # version, effective config, counts
    part_one: int | None
    part_two: int | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
            "part_one": self.part_one,
            "part_two": self.part_two,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "SchematicResult":
        errors_raw = d.get("errors") or []
        if not isinstance(errors_raw, list):
            raise TypeError("SchematicResult.errors must be a list")
        return SchematicResult(
            ok=bool(d.get("ok", False)),
            errors=[SchematicError.from_dict(e) for e in errors_raw],
            meta=dict(d.get("meta") or {}),
            part_one=(None if d.get("part_one") is None else int(d["part_one"])),
            part_two=(None if d.get("part_two") is None else int(d["part_two"])),
        )
