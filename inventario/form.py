"""Values entered when adding or editing a component."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

COMPONENT_TYPES = ("Electrónico", "Mecánico", "Herramienta", "Consumible")
MIN_QUANTITY = 1
MAX_QUANTITY = 9999


@dataclass
class ComponentForm:
    """The fields of the add/edit component form."""

    name: str = ""
    type: str = ""
    quantity: int = 1
    location: str = ""
    purchase_date: date = field(default_factory=date.today)

    def title(self) -> str:
        """Window title: adding when there is no name yet, editing otherwise."""
        return "Añadir Componente" if not self.name else "Editar Componente"

    def cleaned(self) -> ComponentForm:
        """Return the values as the form accepts them.

        Text is trimmed, an unknown type falls back to the first type and the
        quantity is clamped to the allowed range.
        """
        return ComponentForm(
            name=self.name.strip(),
            type=self.type if self.type in COMPONENT_TYPES else COMPONENT_TYPES[0],
            quantity=min(max(self.quantity, MIN_QUANTITY), MAX_QUANTITY),
            location=self.location.strip(),
            purchase_date=self.purchase_date,
        )