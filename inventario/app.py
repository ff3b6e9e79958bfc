"""Inventory application: ties the database, table model and user interface together."""

from __future__ import annotations

import argparse
import os
from datetime import date
from pathlib import Path

from inventario.database import DatabaseError, DatabaseManager
from inventario.form import COMPONENT_TYPES, ComponentForm
from inventario.models import HEADERS, ComponentTableModel, FilterProxy
from inventario.report import write_csv, write_pdf

FILTER_OPTIONS = ("Todos", *COMPONENT_TYPES)


def type_for_filter_index(index: int) -> str:
    """Component type selected by a filter choice; an empty string means all types."""
    if 1 <= index < len(FILTER_OPTIONS):
        return FILTER_OPTIONS[index]
    return ""


class InventoryApp:
    """Inventory actions, driven by a user interface object.

    ``root`` is the interface: it shows rows, reports the selected visible row,
    asks for component values and file paths, and shows messages.
    """

    def __init__(self, root, database_path: str | os.PathLike[str] = "inventario.db") -> None:
        self.view = root
        try:
            self.database = DatabaseManager(database_path)
        except DatabaseError:
            root.show_error("Error", "No se pudo iniciar la base de datos")
            raise
        self.model = ComponentTableModel(self.database)
        self.proxy = FilterProxy(self.model)
        self._show()

    def _show(self) -> None:
        self.view.show_rows(
            [(self.model.row(r), self.model.is_low_stock(r)) for r in self.proxy.rows()]
        )

    def _reload(self) -> None:
        self.model.refresh()
        self._show()

    def _selected_source_row(self) -> int | None:
        selected = self.view.selected_row()
        if selected is None:
            return None
        visible = self.proxy.rows()
        if 0 <= selected < len(visible):
            return visible[selected]
        return None

    def on_search(self, text: str) -> None:
        self.proxy.set_search(text)
        self._show()

    def on_filter_type(self, index: int) -> None:
        self.proxy.set_type_filter(type_for_filter_index(index))
        self._show()

    def add_component(self) -> bool:
        """Ask for a new component and store it; return whether one was added."""
        form = ComponentForm()
        answer = self.view.ask_component(form, form.title())
        if answer is None:
            return False
        values = answer.cleaned()
        try:
            self.database.add_component(
                values.name, values.type, values.quantity, values.location, values.purchase_date
            )
        except DatabaseError:
            self.view.show_warning("Error", "No se pudo añadir el componente")
            return False
        self._reload()
        self.view.show_info("Éxito", "Componente añadido correctamente")
        return True

    def edit_component(self) -> bool:
        """Edit the selected component; return whether it was updated."""
        source_row = self._selected_source_row()
        if source_row is None:
            self.view.show_warning("Error", "Selecciona un componente para editar")
            return False
        cells = self.model.row(source_row)
        form = ComponentForm(
            name=cells[1],
            type=cells[2],
            quantity=int(cells[3]),
            location=cells[4],
            purchase_date=date.fromisoformat(cells[5]),
        )
        answer = self.view.ask_component(form, form.title())
        if answer is None:
            return False
        values = answer.cleaned()
        try:
            updated = self.database.update_component(
                int(cells[0]),
                values.name,
                values.type,
                values.quantity,
                values.location,
                values.purchase_date,
            )
        except DatabaseError:
            updated = False
        if not updated:
            self.view.show_warning("Error", "No se pudo actualizar el componente")
            return False
        self._reload()
        self.view.show_info("Éxito", "Componente actualizado correctamente")
        return True

    def delete_component(self) -> bool:
        """Delete the selected component; return whether it was removed."""
        source_row = self._selected_source_row()
        if source_row is None:
            return False
        try:
            deleted = self.database.delete_component(int(self.model.data(source_row, 0)))
        except DatabaseError:
            deleted = False
        if not deleted:
            self.view.show_warning("Error", "No se pudo eliminar el componente")
            return False
        self._reload()
        self.view.show_info("Éxito", "Componente eliminado correctamente")
        return True

    def generate_report(self) -> bool:
        """Write CSV and PDF reports to paths chosen by the user."""
        rows = [component.as_row() for component in self.database.all_components()]
        documents = Path.home() / "Documents"

        csv_path = self.view.ask_save_path(
            "Guardar reporte CSV", str(documents / "reporte.csv"), ("CSV", "*.csv")
        )
        if not csv_path:
            return False
        try:
            write_csv(csv_path, rows)
        except OSError:
            self.view.show_warning("Error", "No se pudo guardar el archivo CSV")
            return False

        pdf_path = self.view.ask_save_path(
            "Guardar reporte PDF", str(documents / "reporte.pdf"), ("PDF", "*.pdf")
        )
        if not pdf_path:
            return False
        try:
            write_pdf(pdf_path, rows)
        except OSError:
            self.view.show_warning("Error", "No se pudo guardar el archivo PDF")
            return False

        self.view.show_info("Reporte", "Reportes CSV y PDF generados correctamente.")
        return True


class _TkView:
    """Tk user interface for InventoryApp."""

    def __init__(self, root) -> None:
        import tkinter as tk
        from tkinter import filedialog, messagebox, ttk

        self._tk = tk
        self._ttk = ttk
        self._filedialog = filedialog
        self._messagebox = messagebox
        self._root = root
        self._app: InventoryApp | None = None
        self._sort_reverse = False

        root.title("Inventario")
        top = ttk.Frame(root)
        top.pack(fill="x", padx=6, pady=6)
        ttk.Label(top, text="Buscar:").pack(side="left")
        self._search = tk.StringVar()
        ttk.Entry(top, textvariable=self._search).pack(
            side="left", fill="x", expand=True, padx=4
        )
        self._filter = ttk.Combobox(top, values=FILTER_OPTIONS, state="readonly")
        self._filter.current(0)
        self._filter.pack(side="left")

        self._tree = ttk.Treeview(root, columns=HEADERS, show="headings", selectmode="browse")
        for column, header in enumerate(HEADERS):
            self._tree.heading(header, text=header, command=lambda c=column: self._sort_by(c))
            self._tree.column(header, width=110)
        self._tree.tag_configure("low", background="red")
        self._tree.pack(fill="both", expand=True, padx=6)

        buttons = ttk.Frame(root)
        buttons.pack(fill="x", padx=6, pady=6)
        for text, action in (
            ("Añadir", "add_component"),
            ("Editar", "edit_component"),
            ("Eliminar", "delete_component"),
            ("Reporte", "generate_report"),
        ):
            ttk.Button(buttons, text=text, command=lambda a=action: self._run(a)).pack(
                side="left", padx=2
            )

    def _run(self, action: str) -> None:
        if self._app is not None:
            getattr(self._app, action)()

    def attach(self, app: InventoryApp) -> None:
        self._app = app
        self._search.trace_add("write", lambda *_: app.on_search(self._search.get()))
        self._filter.bind(
            "<<ComboboxSelected>>", lambda _event: app.on_filter_type(self._filter.current())
        )
        self._tree.bind("<Double-1>", lambda _event: app.edit_component())

    def show_rows(self, rows) -> None:
        self._tree.delete(*self._tree.get_children(""))
        for index, (cells, low_stock) in enumerate(rows):
            tags = ("low",) if low_stock else ()
            self._tree.insert("", "end", iid=str(index), values=cells, tags=tags)

    def _sort_by(self, column: int) -> None:
        def key(item):
            value = self._tree.set(item, HEADERS[column])
            try:
                return (0, int(value), "")
            except ValueError:
                return (1, 0, value.lower())

        items = sorted(self._tree.get_children(""), key=key, reverse=self._sort_reverse)
        for position, item in enumerate(items):
            self._tree.move(item, "", position)
        self._sort_reverse = not self._sort_reverse

    def selected_row(self) -> int | None:
        selection = self._tree.selection()
        return int(selection[0]) if selection else None

    def ask_component(self, form: ComponentForm, title: str) -> ComponentForm | None:
        tk, ttk = self._tk, self._ttk
        dialog = tk.Toplevel(self._root)
        dialog.title(title)
        dialog.transient(self._root)

        name = tk.StringVar(value=form.name)
        kind = tk.StringVar(value=form.type if form.type in COMPONENT_TYPES else COMPONENT_TYPES[0])
        quantity = tk.StringVar(value=str(form.quantity))
        location = tk.StringVar(value=form.location)
        purchased = tk.StringVar(value=form.purchase_date.isoformat())

        fields = (
            ("Nombre", ttk.Entry(dialog, textvariable=name)),
            ("Tipo", ttk.Combobox(dialog, textvariable=kind, values=COMPONENT_TYPES, state="readonly")),
            ("Cantidad", ttk.Spinbox(dialog, from_=1, to=9999, textvariable=quantity)),
            ("Ubicación", ttk.Entry(dialog, textvariable=location)),
            ("Fecha (AAAA-MM-DD)", ttk.Entry(dialog, textvariable=purchased)),
        )
        for line, (label, widget) in enumerate(fields):
            ttk.Label(dialog, text=label).grid(row=line, column=0, sticky="w", padx=6, pady=3)
            widget.grid(row=line, column=1, sticky="ew", padx=6, pady=3)

        result: list[ComponentForm] = []

        def accept() -> None:
            try:
                values = ComponentForm(
                    name=name.get(),
                    type=kind.get(),
                    quantity=int(quantity.get()),
                    location=location.get(),
                    purchase_date=date.fromisoformat(purchased.get().strip()),
                )
            except ValueError:
                self._messagebox.showwarning("Error", "Valores no válidos", parent=dialog)
                return
            result.append(values)
            dialog.destroy()

        actions = ttk.Frame(dialog)
        actions.grid(row=len(fields), column=0, columnspan=2, pady=6)
        ttk.Button(actions, text="Aceptar", command=accept).pack(side="left", padx=2)
        ttk.Button(actions, text="Cancelar", command=dialog.destroy).pack(side="left", padx=2)
        dialog.grab_set()
        self._root.wait_window(dialog)
        return result[0] if result else None

    def ask_save_path(self, title: str, default: str, file_type: tuple[str, str]) -> str | None:
        chosen = self._filedialog.asksaveasfilename(
            parent=self._root,
            title=title,
            initialdir=os.path.dirname(default),
            initialfile=os.path.basename(default),
            filetypes=[file_type],
        )
        return chosen or None

    def show_info(self, title: str, message: str) -> None:
        self._messagebox.showinfo(title, message, parent=self._root)

    def show_warning(self, title: str, message: str) -> None:
        self._messagebox.showwarning(title, message, parent=self._root)

    def show_error(self, title: str, message: str) -> None:
        self._messagebox.showerror(title, message, parent=self._root)


def main(argv=None) -> int:
    """Start the inventory window."""
    parser = argparse.ArgumentParser(prog="inventario", description="Inventario de componentes")
    parser.add_argument(
        "--database",
        default=os.path.abspath("inventario.db"),
        help="path of the SQLite database",
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    view = _TkView(root)
    try:
        app = InventoryApp(view, args.database)
    except DatabaseError:
        root.destroy()
        return 1
    view.attach(app)
    try:
        root.mainloop()
    finally:
        app.database.close()
    return 0