"""Tests for the SQL and Supabase repositories."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from stockroom.models import Collection
from stockroom.services.exceptions import RepositoryError
from stockroom.services.repository import (
    SqlRepository,
    SupabaseRepository,
    create_repository,
)
from stockroom.utils.config import Config


class TestSqlRepository:
    def test_list_empty(self, repository):
        assert repository.list(Collection.MATERIALS) == []

    def test_insert_assigns_id(self, repository):
        repository.insert(Collection.MATERIALS, {"nome": "Garfo", "quantidade": 40, "ponto_reposicao": 10})
        records = repository.list(Collection.MATERIALS)
        assert len(records) == 1
        assert records[0]["id"]
        assert records[0]["nome"] == "Garfo"
        assert records[0]["quantidade"] == 40

    def test_insert_ignores_client_id(self, repository):
        repository.insert(Collection.BEVERAGES, {"id": "mine", "nome": "Suco"})
        assert repository.list(Collection.BEVERAGES)[0]["id"] != "mine"

    def test_insert_ignores_unknown_columns(self, repository):
        repository.insert(Collection.BEVERAGES, {"nome": "Suco", "setor": "Bar"})
        assert "setor" not in repository.list(Collection.BEVERAGES)[0]

    def test_ids_unique(self, repository):
        for name in ("A", "B", "C"):
            repository.insert(Collection.MATERIALS, {"nome": name})
        ids = [r["id"] for r in repository.list(Collection.MATERIALS)]
        assert len(set(ids)) == 3

    def test_collections_are_separate(self, repository):
        repository.insert(Collection.MATERIALS, {"nome": "Garfo"})
        assert repository.list(Collection.BEVERAGES) == []

    def test_update(self, repository):
        repository.insert(Collection.MATERIALS, {"nome": "Garfo", "quantidade": 40})
        item_id = repository.list(Collection.MATERIALS)[0]["id"]

        repository.update(Collection.MATERIALS, item_id, {"quantidade": 12, "setor": "Cozinha"})

        record = repository.list(Collection.MATERIALS)[0]
        assert record["quantidade"] == 12
        assert record["setor"] == "Cozinha"
        assert record["nome"] == "Garfo"

    def test_update_missing_id(self, repository):
        with pytest.raises(RepositoryError) as exc_info:
            repository.update(Collection.MATERIALS, "nope", {"quantidade": 1})
        assert exc_info.value.operation == "update"

    def test_delete(self, repository):
        repository.insert(Collection.BEVERAGES, {"nome": "Suco"})
        item_id = repository.list(Collection.BEVERAGES)[0]["id"]
        repository.delete(Collection.BEVERAGES, item_id)
        assert repository.list(Collection.BEVERAGES) == []

    def test_delete_missing_id(self, repository):
        with pytest.raises(RepositoryError):
            repository.delete(Collection.BEVERAGES, "nope")

    def test_negative_quantity_rejected_by_table(self, repository):
        with pytest.raises(RepositoryError):
            repository.insert(Collection.MATERIALS, {"nome": "Garfo", "quantidade": -1})

    def test_database_error_wrapped(self, repository):
        error = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with patch("stockroom.services.repository.session_scope", side_effect=error):
            with pytest.raises(RepositoryError) as exc_info:
                repository.list(Collection.MATERIALS)
        assert exc_info.value.original_error is error


class TestSupabaseRepository:
    def test_list_selects_all_from_table(self, supabase_client):
        table = supabase_client.table.return_value
        table.execute.return_value = MagicMock(data=[{"id": "1", "nome": "Garfo"}])

        records = SupabaseRepository(supabase_client).list(Collection.MATERIALS)

        supabase_client.table.assert_called_with("materiais")
        table.select.assert_called_once_with("*")
        assert records == [{"id": "1", "nome": "Garfo"}]

    def test_list_none_data(self, supabase_client):
        supabase_client.table.return_value.execute.return_value = MagicMock(data=None)
        assert SupabaseRepository(supabase_client).list(Collection.BEVERAGES) == []

    def test_insert_strips_id(self, supabase_client):
        SupabaseRepository(supabase_client).insert(Collection.BEVERAGES, {"id": "x", "nome": "Suco"})
        supabase_client.table.assert_called_with("bebidas")
        supabase_client.table.return_value.insert.assert_called_once_with({"nome": "Suco"})

    def test_update_filters_by_id(self, supabase_client):
        table = supabase_client.table.return_value
        SupabaseRepository(supabase_client).update(Collection.MATERIALS, "42", {"quantidade": 0})
        table.update.assert_called_once_with({"quantidade": 0})
        table.eq.assert_called_once_with("id", "42")
        table.execute.assert_called_once()

    def test_delete_filters_by_id(self, supabase_client):
        table = supabase_client.table.return_value
        SupabaseRepository(supabase_client).delete(Collection.MATERIALS, "42")
        table.delete.assert_called_once_with()
        table.eq.assert_called_once_with("id", "42")

    @pytest.mark.parametrize("operation", ["list", "insert", "update", "delete"])
    def test_errors_become_repository_errors(self, supabase_client, operation):
        boom = RuntimeError("permission denied for table materiais")
        supabase_client.table.return_value.execute.side_effect = boom
        repository = SupabaseRepository(supabase_client)

        calls = {
            "list": lambda: repository.list(Collection.MATERIALS),
            "insert": lambda: repository.insert(Collection.MATERIALS, {"nome": "x"}),
            "update": lambda: repository.update(Collection.MATERIALS, "1", {"nome": "x"}),
            "delete": lambda: repository.delete(Collection.MATERIALS, "1"),
        }
        with pytest.raises(RepositoryError) as exc_info:
            calls[operation]()

        assert exc_info.value.operation == operation
        assert exc_info.value.collection == "materials"
        assert exc_info.value.original_error is boom
        assert "permission denied" in exc_info.value.message


class TestCreateRepository:
    def test_development_uses_sql(self):
        assert isinstance(create_repository(Config("development")), SqlRepository)

    def test_production_uses_given_client(self, supabase_client):
        repository = create_repository(Config("production"), client=supabase_client)
        assert isinstance(repository, SupabaseRepository)
        assert repository.client is supabase_client

    def test_production_builds_client(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://demo.supabase.co")
        monkeypatch.setenv("SUPABASE_KEY", "anon")
        with patch("stockroom.services.repository.create_client") as create_client:
            repository = create_repository(Config("production"))
        create_client.assert_called_once_with("https://demo.supabase.co", "anon")
        assert repository.client is create_client.return_value
