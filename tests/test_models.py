from datetime import date

import pytest

from inventario.database import DatabaseManager
from inventario.models import HEADERS, ComponentTableModel, FilterProxy


@pytest.fixture
def db(tmp_path):
    with DatabaseManager(tmp_path / "inventario.db") as manager:
        yield manager


@pytest.fixture
def filled(db):
    today = date(2023, 6, 1)
    db.add_component("Resistor", "Electrónico", 4, "Cajón A", today)
    db.add_component("Martillo", "Herramienta", 5, "Pared", today)
    db.add_component("Tornillo", "Mecánico", 200, "Cajón B", today)
    return db


def test_model_matches_database(filled):
    model = ComponentTableModel(filled)
    rows = [c.as_row() for c in filled.all_components()]
    assert model.row_count() == len(rows)
    assert model.column_count() == 6
    assert [model.row(r) for r in range(model.row_count())] == rows
    assert model.data(0, 1) == rows[0][1]


def test_headers():
    model_headers = [ComponentTableModel.header(None, i) for i in range(6)]
    assert model_headers == list(HEADERS)
    assert model_headers[4] == "Ubicación"


def test_header_out_of_range(db):
    with pytest.raises(IndexError):
        ComponentTableModel(db).header(6)


def test_refresh_picks_up_changes(db):
    model = ComponentTableModel(db)
    assert model.row_count() == 0
    db.add_component("Cable", "Consumible", 9, "Caja", date.today())
    assert model.row_count() == 0
    model.refresh()
    assert model.row_count() == 1


def test_low_stock_threshold(filled):
    model = ComponentTableModel(filled)
    by_name = {model.data(r, 1): r for r in range(model.row_count())}
    assert model.is_low_stock(by_name["Resistor"]) is True
    assert model.is_low_stock(by_name["Martillo"]) is False
    assert model.is_low_stock(by_name["Tornillo"]) is False


def test_row_out_of_range_is_empty(filled):
    model = ComponentTableModel(filled)
    assert model.row(-1) == []
    assert model.row(model.row_count()) == []


def test_data_out_of_range_raises(filled):
    model = ComponentTableModel(filled)
    with pytest.raises(IndexError):
        model.data(model.row_count(), 0)
    with pytest.raises(IndexError):
        model.data(0, 6)


def test_proxy_without_filters_accepts_all(filled):
    model = ComponentTableModel(filled)
    assert FilterProxy(model).rows() == list(range(model.row_count()))


def test_search_is_case_insensitive(filled):
    model = ComponentTableModel(filled)
    proxy = FilterProxy(model)
    proxy.set_search("CAJÓN")
    names = {model.data(r, 1) for r in proxy.rows()}
    assert names == {"Resistor", "Tornillo"}


def test_search_is_a_pattern(filled):
    model = ComponentTableModel(filled)
    proxy = FilterProxy(model)
    proxy.set_search("^mart")
    assert [model.data(r, 1) for r in proxy.rows()] == ["Martillo"]


def test_invalid_pattern_matches_nothing(filled):
    proxy = FilterProxy(ComponentTableModel(filled))
    proxy.set_search("(")
    assert proxy.rows() == []


def test_clearing_search_restores_all(filled):
    model = ComponentTableModel(filled)
    proxy = FilterProxy(model)
    proxy.set_search("zzz")
    assert proxy.rows() == []
    proxy.set_search("")
    assert len(proxy.rows()) == model.row_count()


def test_type_filter_exact(filled):
    model = ComponentTableModel(filled)
    proxy = FilterProxy(model)
    proxy.set_type_filter("Mecánico")
    assert [model.data(r, 1) for r in proxy.rows()] == ["Tornillo"]
    proxy.set_type_filter("mecánico")
    assert proxy.rows() == []


def test_search_and_type_combined(filled):
    model = ComponentTableModel(filled)
    proxy = FilterProxy(model)
    proxy.set_search("cajón")
    proxy.set_type_filter("Electrónico")
    assert [model.data(r, 1) for r in proxy.rows()] == ["Resistor"]
    assert all(proxy.accepts_row(r) for r in proxy.rows())