from datetime import date

import pytest

from inventario.app import InventoryApp, type_for_filter_index
from inventario.database import DatabaseError, DatabaseManager
from inventario.form import ComponentForm


class FakeView:
    def __init__(self):
        self.shown = []
        self.messages = []
        self.selection = None
        self.form_reply = None
        self.forms_asked = []
        self.save_paths = []
        self.path_requests = []

    def show_rows(self, rows):
        self.shown = list(rows)

    def selected_row(self):
        return self.selection

    def ask_component(self, form, title):
        self.forms_asked.append((form, title))
        return self.form_reply

    def ask_save_path(self, title, default, file_type):
        self.path_requests.append(title)
        return self.save_paths.pop(0) if self.save_paths else None

    def show_info(self, title, message):
        self.messages.append(("info", title, message))

    def show_warning(self, title, message):
        self.messages.append(("warning", title, message))

    def show_error(self, title, message):
        self.messages.append(("error", title, message))


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "inv.db"
    with DatabaseManager(path) as db:
        db.add_component("Resistor", "Electrónico", 10, "Cajón A", date(2024, 1, 15))
        db.add_component("Motor", "Mecánico", 3, "Estante B", date(2023, 6, 1))
    return path


@pytest.fixture
def app(db_path):
    view = FakeView()
    application = InventoryApp(view, db_path)
    yield application
    application.database.close()


def _names(app):
    return [cells[1] for cells, _ in app.view.shown]


def test_type_for_filter_index():
    assert type_for_filter_index(0) == ""
    assert type_for_filter_index(1) == "Electrónico"
    assert type_for_filter_index(4) == "Consumible"
    assert type_for_filter_index(5) == ""
    assert type_for_filter_index(-1) == ""


def test_initial_rows_and_low_stock(app):
    assert _names(app) == ["Motor", "Resistor"]
    flags = {cells[1]: low for cells, low in app.view.shown}
    assert flags == {"Motor": True, "Resistor": False}


def test_database_failure_reports_error(tmp_path):
    view = FakeView()
    with pytest.raises(DatabaseError):
        InventoryApp(view, tmp_path)
    assert view.messages == [("error", "Error", "No se pudo iniciar la base de datos")]


def test_add_component(tmp_path):
    view = FakeView()
    application = InventoryApp(view, tmp_path / "new.db")
    view.form_reply = ComponentForm("  Capacitor ", "Electrónico", 20, " Caja C ", date(2024, 3, 1))
    assert application.add_component() is True
    stored = application.database.all_components()
    assert [c.name for c in stored] == ["Capacitor"]
    assert stored[0].location == "Caja C"
    assert view.shown == [(stored[0].as_row(), False)]
    assert view.forms_asked[0][1] == "Añadir Componente"
    assert view.messages[-1] == ("info", "Éxito", "Componente añadido correctamente")
    application.database.close()


def test_add_cancelled(app):
    assert app.add_component() is False
    assert len(app.database.all_components()) == 2
    assert app.view.messages == []


def test_edit_without_selection(app):
    assert app.edit_component() is False
    assert app.view.messages == [("warning", "Error", "Selecciona un componente para editar")]


def test_edit_selected(app):
    app.view.selection = 1
    app.view.form_reply = ComponentForm("Resistencia", "Electrónico", 12, "Cajón A", date(2024, 1, 15))
    assert app.edit_component() is True
    form, title = app.view.forms_asked[0]
    assert (form.name, form.quantity, form.purchase_date) == ("Resistor", 10, date(2024, 1, 15))
    assert title == "Editar Componente"
    assert _names(app) == ["Motor", "Resistencia"]
    assert app.view.messages[-1] == ("info", "Éxito", "Componente actualizado correctamente")


def test_search_filters_rows(app):
    app.on_search("res")
    assert _names(app) == ["Resistor"]
    app.on_search("")
    assert _names(app) == ["Motor", "Resistor"]
    app.on_search("(")
    assert app.view.shown == []


def test_filter_by_type(app):
    app.on_filter_type(2)
    assert _names(app) == ["Motor"]
    app.on_filter_type(0)
    assert _names(app) == ["Motor", "Resistor"]


def test_delete_maps_visible_row(app):
    app.on_filter_type(1)
    app.view.selection = 0
    assert app.delete_component() is True
    assert [c.name for c in app.database.all_components()] == ["Motor"]
    assert app.view.messages[-1] == ("info", "Éxito", "Componente eliminado correctamente")


def test_delete_without_selection(app):
    assert app.delete_component() is False
    assert len(app.database.all_components()) == 2
    assert app.view.messages == []


def test_generate_report(app, tmp_path):
    csv_path = tmp_path / "r.csv"
    pdf_path = tmp_path / "r.pdf"
    app.view.save_paths = [str(csv_path), str(pdf_path)]
    assert app.generate_report() is True
    text = csv_path.read_text(encoding="utf-8")
    assert text.startswith("\ufeffID,Nombre,Tipo,Cantidad,Ubicacion,Fecha de compra\n")
    assert '"Resistor"' in text
    assert pdf_path.read_bytes().startswith(b"%PDF-")
    assert app.view.path_requests == ["Guardar reporte CSV", "Guardar reporte PDF"]
    assert app.view.messages[-1] == (
        "info",
        "Reporte",
        "Reportes CSV y PDF generados correctamente.",
    )


def test_generate_report_cancelled(app):
    assert app.generate_report() is False
    assert app.view.messages == []


def test_generate_report_csv_failure(app, tmp_path):
    app.view.save_paths = [str(tmp_path / "missing" / "r.csv")]
    assert app.generate_report() is False
    assert app.view.messages == [("warning", "Error", "No se pudo guardar el archivo CSV")]