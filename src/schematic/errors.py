from __future__ import annotations

from contracts.schematic import Cell


class SchematicParseError(Exception):
    pass


class MalformedNumberLiteral(SchematicParseError):
    """A digit run that does not fit the configured unsigned width."""

    def __init__(self, *, literal: str, cell: Cell, limit: int) -> None:
        super().__init__(
            f"Number literal {literal!r} at row={cell.row} col={cell.col} exceeds max_value={limit}"
        )
        self.literal = literal
        self.cell = cell
        self.limit = limit

    def detail(self) -> dict[str, object]:
        return {"literal": self.literal, "row": self.cell.row, "col": self.cell.col, "limit": self.limit}
