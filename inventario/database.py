"""SQLite storage for inventory components."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from datetime import date
from typing import Any

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS components ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT NOT NULL,"
    "type TEXT NOT NULL,"
    "quantity INTEGER NOT NULL,"
    "location TEXT NOT NULL,"
    "purchase_date TEXT NOT NULL)"
)


class DatabaseError(Exception):
    """Raised when the inventory database cannot complete an operation."""


@dataclass(frozen=True)
class Component:
    """One stored inventory component."""

    id: int
    name: str
    type: str
    quantity: int
    location: str
    purchase_date: date

    def as_row(self) -> list[str]:
        """Return the component as the six text cells shown in tables and reports."""
        return [
            str(self.id),
            self.name,
            self.type,
            str(self.quantity),
            self.location,
            self.purchase_date.isoformat(),
        ]


class DatabaseManager:
    """Opens an SQLite inventory database and performs component operations."""

    def __init__(self, path: str | os.PathLike[str] = "inventario.db") -> None:
        self.path = os.fspath(path)
        connection = None
        try:
            connection = sqlite3.connect(self.path)
            with connection:
                connection.execute(_SCHEMA)
        except sqlite3.Error as exc:
            if connection is not None:
                connection.close()
            raise DatabaseError(f"cannot open database {self.path!r}: {exc}") from exc
        self._connection = connection

    def _execute(self, sql: str, params: dict[str, Any] | None = None) -> sqlite3.Cursor:
        try:
            with self._connection:
                return self._connection.execute(sql, params or {})
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def add_component(
        self,
        name: str,
        type_: str,
        quantity: int,
        location: str,
        purchase_date: date,
    ) -> int:
        """Insert a component and return its new id."""
        cursor = self._execute(
            "INSERT INTO components (name, type, quantity, location, purchase_date) "
            "VALUES (:name, :type, :quantity, :location, :date)",
            {
                "name": name,
                "type": type_,
                "quantity": quantity,
                "location": location,
                "date": purchase_date.isoformat(),
            },
        )
        return cursor.lastrowid

    def update_component(
        self,
        component_id: int,
        name: str,
        type_: str,
        quantity: int,
        location: str,
        purchase_date: date,
    ) -> bool:
        """Overwrite the component with the given id; return whether a row changed."""
        cursor = self._execute(
            "UPDATE components SET "
            "name = :name, type = :type, quantity = :quantity, "
            "location = :location, purchase_date = :date "
            "WHERE id = :id",
            {
                "id": component_id,
                "name": name,
                "type": type_,
                "quantity": quantity,
                "location": location,
                "date": purchase_date.isoformat(),
            },
        )
        return cursor.rowcount > 0

    def delete_component(self, component_id: int | str) -> bool:
        """Delete the component with the given id; return whether a row was removed."""
        cursor = self._execute(
            "DELETE FROM components WHERE id = :id", {"id": component_id}
        )
        return cursor.rowcount > 0

    def all_components(self) -> list[Component]:
        """Return every component, ordered by name."""
        cursor = self._execute(
            "SELECT id, name, type, quantity, location, purchase_date "
            "FROM components ORDER BY name"
        )
        return [
            Component(
                id=row[0],
                name=row[1],
                type=row[2],
                quantity=row[3],
                location=row[4],
                purchase_date=date.fromisoformat(row[5]),
            )
            for row in cursor.fetchall()
        ]

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection.close()

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()