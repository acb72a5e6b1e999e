"""Spreadsheet cell values as an explicit variant: Empty, Text or Number."""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Sequence, Union


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    value: float


Cell = Union[Empty, Text, Number]
Grid = Sequence[Sequence[Cell]]

EMPTY = Empty()


def to_cell(value: Any) -> Cell:
    """Convert a raw spreadsheet value (as read by pandas) into a Cell.

    Only strings become Text. Booleans, dates and any other non-numeric
    value are Empty, so they never start a product block.
    """
    if value is None:
        return EMPTY
    if isinstance(value, str):
        return Text(value) if value else EMPTY
    if isinstance(value, bool):
        return EMPTY
    if isinstance(value, numbers.Real):
        if math.isnan(value):
            return EMPTY
        return Number(float(value))
    return EMPTY


def to_grid(rows) -> list[list[Cell]]:
    """Convert an iterable of raw rows into a grid of cells."""
    return [[to_cell(value) for value in row] for row in rows]


def cell_at(grid: Grid, row: int, col: int) -> Cell:
    """Return the cell at (row, col), or Empty when out of range."""
    if row < 0 or col < 0 or row >= len(grid):
        return EMPTY
    cells = grid[row]
    if col >= len(cells):
        return EMPTY
    return cells[col]


def text_of(cell: Cell) -> str | None:
    """Return the string content of a Text cell, None for anything else."""
    match cell:
        case Text(value=value) if value:
            return value
        case _:
            return None
