# inventario

A small desktop inventory for workshop and lab components. Each component has
a name, a type (Electrónico, Mecánico, Herramienta or Consumible), a quantity,
a location and a purchase date. Components are stored in an SQLite database.

## Installing

```
pip install .
```

The window is built with Tkinter, which ships with most Python installations.
The package has no other runtime dependencies.

## Running

```
inventario
inventario --database /path/to/inventario.db
```

By default the database is `inventario.db` in the directory the program is
started from. It is created, with its `components` table, if it does not
exist. If it cannot be opened, an error is shown and the command exits with
status 1.

The main window lists every component sorted by name. From there you can:

- type in the search box to show only rows where some column matches the
  text; the text is a regular expression matched without regard to case, and
  a text that is not a valid expression shows no rows;
- pick a type in the drop-down to show only components of that type, or
  "Todos" to show them all (search and type filter apply together);
- click a column heading to sort the shown rows by it (numbers numerically),
  clicking again to reverse the order;
- add a component, or edit the selected one (double-clicking a row also edits
  it); the date is entered as `AAAA-MM-DD`, names and locations are trimmed,
  and quantities are kept between 1 and 9999;
- delete the selected component (there is no confirmation step);
- generate a report: you are asked first for a CSV path, then for a PDF path,
  both proposed in `~/Documents`. Cancelling either choice stops there.

Rows whose quantity is below 5 are shown with a red background as low stock.

## Reports

`inventario.report` writes the two report formats:

- `csv_text(rows)` / `write_csv(path, rows)`: UTF-8 text starting with a
  byte-order mark (so spreadsheet programs read accents correctly), the header
  line `ID,Nombre,Tipo,Cantidad,Ubicacion,Fecha de compra`, and one line per
  row with every field in double quotes and inner quotes doubled.
- `write_pdf(path, rows)`: a PDF table on A4 pages in Helvetica, with the
  header row repeated on every page. Text is encoded as Windows-1252;
  characters outside it are printed as `?`.
- `column_widths(rows, measure)`: the width of each PDF column, the widest of
  its header and cells as given by `measure`, plus padding.

## Using it from Python

The pieces behind the window can be used on their own:

```python
from datetime import date

from inventario.database import DatabaseManager
from inventario.models import ComponentTableModel, FilterProxy
from inventario.report import write_csv

with DatabaseManager("inventario.db") as db:
    new_id = db.add_component("Resistencia 10k", "Electrónico", 3, "Cajón A", date(2024, 5, 1))

    model = ComponentTableModel(db)
    proxy = FilterProxy(model)
    proxy.set_type_filter("Electrónico")
    proxy.set_search("10k")
    for row in proxy.rows():
        print(model.row(row), model.is_low_stock(row))

    write_csv("reporte.csv", [c.as_row() for c in db.all_components()])
```

- `DatabaseManager.add_component` returns the new id;
  `update_component` and `delete_component` return whether a row was changed.
  `all_components()` returns `Component` records ordered by name, and
  `Component.as_row()` gives the six text cells used by the table and reports.
  Any SQLite failure raises `inventario.database.DatabaseError`.
- `ComponentTableModel` holds the rows as text; call `refresh()` after
  changing the database.
- `inventario.form.ComponentForm` holds the values of the add/edit form;
  `cleaned()` trims the text, replaces an unknown type with "Electrónico" and
  clamps the quantity to 1–9999.
- `inventario.app.InventoryApp` runs the same actions as the window against
  any interface object that provides `show_rows`, `selected_row`,
  `ask_component`, `ask_save_path`, `show_info`, `show_warning` and
  `show_error`.

## Tests

```
pip install .[test]
pytest
```