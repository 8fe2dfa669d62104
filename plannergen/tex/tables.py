from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Union

from .snippets import NL


CellValue = Union[str, int]


class Cell:
    def __init__(self, value: CellValue = "") -> None:
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class Row:
    """Ordered, mutable run of cells; week-number cells go in at either end."""

    def __init__(self, cells: Optional[Iterable[Cell]] = None) -> None:
        self.cells: List[Cell] = list(cells or [])

    def unshift(self, cell: Cell) -> "Row":
        self.cells.insert(0, cell)
        return self

    def push(self, cell: Cell) -> "Row":
        self.cells.append(cell)
        return self

    def values(self) -> List[CellValue]:
        return [cell.value for cell in self.cells]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __str__(self) -> str:
        return " & ".join(str(cell) for cell in self.cells)


class Table:
    """tabularx environment built from rows of cells."""

    def __init__(self, width: str = r"\linewidth", column_format: Optional[str] = None) -> None:
        self.width = width
        self.column_format = column_format
        self.rows: List[Row] = []

    def add_row(self, row: Row) -> "Table":
        self.rows.append(row)
        return self

    def add_rows(self, rows: Iterable[Row]) -> "Table":
        for row in rows:
            self.add_row(row)
        return self

    @property
    def column_count(self) -> int:
        counts = {len(row) for row in self.rows}
        if not counts:
            return 0
        if len(counts) > 1:
            raise ValueError(f"Table rows have different cell counts: {sorted(counts)}")
        return counts.pop()

    def _column_format(self) -> str:
        if self.column_format:
            return self.column_format
        return "@{}" + ("Y" * self.column_count) + "@{}"

    def __str__(self) -> str:
        body = (r"\\" + NL).join(str(row) for row in self.rows)
        return (
            rf"\begin{{tabularx}}{{{self.width}}}{{{self._column_format()}}}" + NL
            + body + NL
            + r"\end{tabularx}"
        )
