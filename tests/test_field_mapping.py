"""Tests for stored record <-> item mapping."""

from stockroom.models import Beverage, Collection, Material
from stockroom.services.field_mapping import (
    from_record,
    item_fields,
    mapped_fields,
    stored_name,
    to_record,
)


class TestFromRecord:
    def test_material_record(self):
        record = {
            "id": 7,
            "nome": "Toalha de mesa",
            "quantidade": 18,
            "ponto_reposicao": 20,
            "imagem_url": "https://cdn/x.png",
            "categoria": "Estofados",
            "setor": "Salão",
        }
        item = from_record(Collection.MATERIALS, record)
        assert item == Material(
            id="7",
            name="Toalha de mesa",
            current_quantity=18,
            reorder_point=20,
            image="https://cdn/x.png",
            category="Estofados",
            sector="Salão",
        )

    def test_missing_and_null_fields_default(self):
        item = from_record(Collection.MATERIALS, {"id": "a", "nome": "Faca", "imagem_url": None})
        assert item.current_quantity == 0
        assert item.reorder_point == 0
        assert item.image == ""
        assert item.category == ""
        assert item.sector == ""

    def test_numbers_coerced_and_clamped(self):
        record = {"id": "a", "nome": "Copo", "quantidade": "12", "ponto_reposicao": -3}
        item = from_record(Collection.BEVERAGES, record)
        assert item.current_quantity == 12
        assert item.reorder_point == 0

    def test_deprecated_beverage_columns_ignored(self):
        record = {"id": "b", "nome": "Cerveja", "quantidade": 48, "data_validade": "2024-05-01"}
        item = from_record(Collection.BEVERAGES, record)
        assert isinstance(item, Beverage)
        assert not hasattr(item, "data_validade")

    def test_beverage_ignores_stored_sector(self):
        item = from_record(Collection.BEVERAGES, {"id": "b", "nome": "Vinho", "setor": "Bar"})
        assert item.sector == ""


class TestToRecord:
    def test_full_material_payload(self):
        fields = {
            "name": "Garfo",
            "current_quantity": 40,
            "reorder_point": 10,
            "image": "",
            "category": "Talheres",
            "sector": "Salão",
        }
        assert to_record(Collection.MATERIALS, fields) == {
            "nome": "Garfo",
            "quantidade": 40,
            "ponto_reposicao": 10,
            "imagem_url": "",
            "categoria": "Talheres",
            "setor": "Salão",
        }

    def test_never_writes_id(self):
        payload = to_record(Collection.MATERIALS, {"id": "x", "name": "Garfo"})
        assert payload == {"nome": "Garfo"}

    def test_beverage_drops_sector(self):
        payload = to_record(Collection.BEVERAGES, {"name": "Suco", "sector": "Bar"})
        assert "setor" not in payload

    def test_single_field_update(self):
        assert to_record(Collection.MATERIALS, {"current_quantity": 0}) == {"quantidade": 0}


class TestHelpers:
    def test_mapped_fields(self):
        assert "sector" in mapped_fields(Collection.MATERIALS)
        assert "sector" not in mapped_fields(Collection.BEVERAGES)

    def test_stored_name(self):
        assert stored_name("reorder_point") == "ponto_reposicao"

    def test_item_fields_round_trip(self, make_material):
        item = make_material()
        record = to_record(Collection.MATERIALS, item_fields(Collection.MATERIALS, item))
        record["id"] = item.id
        assert from_record(Collection.MATERIALS, record) == item
