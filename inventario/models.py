"""Table model over stored components and a filtering view of it."""

from __future__ import annotations

import re

from inventario.database import DatabaseManager

HEADERS = ("ID", "Nombre", "Tipo", "Cantidad", "Ubicación", "Fecha")
QUANTITY_COLUMN = 3
TYPE_COLUMN = 2
LOW_STOCK_LIMIT = 5


class ComponentTableModel:
    """Rows of text cells loaded from a database, one row per component."""

    def __init__(self, database: DatabaseManager) -> None:
        self._database = database
        self._rows: list[list[str]] = []
        self.refresh()

    def refresh(self) -> None:
        """Reload every row from the database."""
        self._rows = [c.as_row() for c in self._database.all_components()]

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return len(HEADERS)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} out of range")

    def data(self, row: int, column: int) -> str:
        """Return the text of one cell."""
        self._check_row(row)
        if not 0 <= column < len(HEADERS):
            raise IndexError(f"column {column} out of range")
        return self._rows[row][column]

    def is_low_stock(self, row: int) -> bool:
        """Whether the quantity in this row is below the low-stock limit."""
        self._check_row(row)
        try:
            quantity = int(self._rows[row][QUANTITY_COLUMN])
        except ValueError:
            quantity = 0
        return quantity < LOW_STOCK_LIMIT

    def header(self, section: int) -> str:
        if not 0 <= section < len(HEADERS):
            raise IndexError(f"section {section} out of range")
        return HEADERS[section]

    def row(self, row: int) -> list[str]:
        """Return a copy of a row's cells, or an empty list if there is no such row."""
        if 0 <= row < len(self._rows):
            return list(self._rows[row])
        return []


class FilterProxy:
    """Selects source rows by a case-insensitive search pattern and an exact type."""

    def __init__(self, source: ComponentTableModel) -> None:
        self.source = source
        self._search_text = ""
        self._pattern: re.Pattern[str] | None = None
        self._type_filter = ""

    def set_search(self, text: str) -> None:
        """Set the search pattern; an empty text clears it, an invalid one matches nothing."""
        self._search_text = text
        try:
            self._pattern = re.compile(text, re.IGNORECASE) if text else None
        except re.error:
            self._pattern = None

    def set_type_filter(self, tipo: str) -> None:
        """Restrict rows to one component type; an empty string clears the restriction."""
        self._type_filter = tipo

    def accepts_row(self, row: int) -> bool:
        if self._search_text:
            if self._pattern is None:
                return False
            cells = (
                self.source.data(row, column)
                for column in range(self.source.column_count())
            )
            if not any(self._pattern.search(cell) for cell in cells):
                return False
        if self._type_filter and self.source.data(row, TYPE_COLUMN) != self._type_filter:
            return False
        return True

    def rows(self) -> list[int]:
        """Return the indices of the accepted source rows, in source order."""
        return [r for r in range(self.source.row_count()) if self.accepts_row(r)]