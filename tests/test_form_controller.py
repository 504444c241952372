"""Tests for item form seeding and submission."""

import pytest

from stockroom.models import Beverage, Collection, Material
from stockroom.services.form_controller import (
    FormController,
    FormDraft,
    SubmissionKind,
)
from stockroom.services.exceptions import ValidationError
from stockroom.utils.validators import validate_draft


class TestSeed:
    def test_seed_none_gives_blank_draft(self):
        form = FormController(Collection.MATERIALS)
        draft = form.seed(None)
        assert draft == FormDraft()
        assert form.is_editing is False
        assert form.original is None

    def test_seed_copies_item_fields(self, make_material):
        item = make_material(name="Garfo", current_quantity=40, reorder_point=10,
                             category="Talheres", sector="Salão", image="https://x/y.png")
        form = FormController(Collection.MATERIALS)
        draft = form.seed(item)
        assert draft == FormDraft(
            name="Garfo",
            current_quantity=40,
            reorder_point=10,
            image="https://x/y.png",
            category="Talheres",
            sector="Salão",
        )
        assert form.is_editing is True

    def test_seed_beverage_has_empty_sector(self, make_beverage):
        form = FormController(Collection.BEVERAGES)
        assert form.seed(make_beverage()).sector == ""

    def test_reseed_with_none_resets(self, make_material):
        form = FormController(Collection.MATERIALS)
        form.seed(make_material())
        form.seed(None)
        assert form.draft == FormDraft()
        assert form.is_editing is False


class TestUpdate:
    def test_update_replaces_values(self):
        form = FormController(Collection.BEVERAGES)
        form.seed(None)
        draft = form.update(name="Guaraná", current_quantity=6)
        assert draft.name == "Guaraná"
        assert draft.current_quantity == 6
        assert draft.reorder_point == 0

    def test_unknown_field_rejected(self):
        form = FormController(Collection.BEVERAGES)
        with pytest.raises(TypeError):
            form.update(expiration_date="2024-01-01")


class TestSubmit:
    def test_create_payload_has_no_id(self):
        form = FormController(Collection.MATERIALS)
        form.seed(None)
        form.update(name="X", current_quantity=3, reorder_point=1, category="Y")

        submission = form.submit()

        assert submission.kind is SubmissionKind.CREATE
        assert submission.item is None
        assert "id" not in submission.fields
        assert submission.fields == {
            "name": "X",
            "current_quantity": 3,
            "reorder_point": 1,
            "image": "",
            "category": "Y",
            "sector": "",
        }

    def test_beverage_create_never_carries_sector(self):
        form = FormController(Collection.BEVERAGES)
        form.seed(None)
        form.update(name="Água", current_quantity=12, reorder_point=6, category="Águas", sector="Bar")

        submission = form.submit()

        assert "sector" not in submission.fields

    def test_update_keeps_id_and_merges_draft(self, make_material):
        item = make_material(id="abc", name="Garfo", current_quantity=40, sector="Salão")
        form = FormController(Collection.MATERIALS)
        form.seed(item)
        form.update(current_quantity=35, sector="Cozinha")

        submission = form.submit()

        assert submission.kind is SubmissionKind.UPDATE
        assert isinstance(submission.item, Material)
        assert submission.item.id == "abc"
        assert submission.item.current_quantity == 35
        assert submission.item.sector == "Cozinha"
        assert submission.item.name == "Garfo"

    def test_beverage_update_stays_a_beverage(self, make_beverage):
        item = make_beverage(id="b9", name="Suco")
        form = FormController(Collection.BEVERAGES)
        form.seed(item)
        form.update(name="Suco de Laranja")

        submission = form.submit()

        assert isinstance(submission.item, Beverage)
        assert submission.item.id == "b9"
        assert submission.item.name == "Suco de Laranja"

    def test_submit_does_not_touch_original(self, make_material):
        item = make_material(current_quantity=10)
        form = FormController(Collection.MATERIALS)
        form.seed(item)
        form.update(current_quantity=99)
        form.submit()
        assert item.current_quantity == 10


class TestDraftValidation:
    def test_valid_draft(self):
        validate_draft(FormDraft(name="Garfo", current_quantity=1, reorder_point=0, category="Talheres"))

    def test_collects_every_problem(self):
        draft = FormDraft(name=" ", current_quantity="abc", reorder_point=-1, category="")
        with pytest.raises(ValidationError) as exc_info:
            validate_draft(draft)
        errors = exc_info.value.errors
        assert len(errors) == 4
        assert errors[0].startswith("Name")
        assert any(e.startswith("Current quantity") for e in errors)
        assert any(e.startswith("Reorder point") for e in errors)
        assert any(e.startswith("Category") for e in errors)
