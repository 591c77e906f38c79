# tests/test_accounts.py
import pytest
from sqlalchemy import inspect

from accountdemo.models import Account
from accountdemo.repository import SqlAlchemyAccountRepository
from accountdemo.services import AccountService


def test_credit_and_debit_in_memory():
    a = Account("Test", 100)
    assert a.id is None
    a.credit(50)
    assert a.balance == 150
    a.debit(200)
    assert a.balance == -50


@pytest.fixture
def empty_service(settings):
    from accountdemo.db import init_db, make_engine, make_session_factory

    engine = make_engine(settings)
    init_db(engine)
    yield AccountService(SqlAlchemyAccountRepository(make_session_factory(engine)))
    engine.dispose()


def test_schema_has_balance_column(app):
    engine = app.extensions["engine"]
    columns = {c["name"] for c in inspect(engine).get_columns("Accounts", schema="demo")}
    assert columns == {"id", "name", "balance"}


def test_save_assigns_ids(empty_service):
    accounts = [Account("One", 1), Account("Two", 2)]
    empty_service.save(accounts)
    assert all(a.id is not None for a in accounts)
    assert accounts[0].id != accounts[1].id
    assert empty_service.total_accounts() == 2


def test_find_all_ordered(empty_service):
    empty_service.save([Account("B", 1), Account("A", 2)])
    names = [a.name for a in empty_service.find_all()]
    assert names == ["B", "A"]


def test_find_is_case_insensitive(service):
    names = {a.name for a in service.find("a")}
    assert {"Ayesha", "Max", "Maya", "Ada"} <= names
    assert "Bobo" not in names
    assert all("a" in n.lower() for n in names)


def test_find_uppercase_match(service):
    assert [a.name for a in service.find("ZO")] == ["Zoe"]


def test_find_wildcards_are_literal(empty_service):
    empty_service.save([Account("100%", 1), Account("Plain", 2), Account("a_b", 3)])
    assert [a.name for a in empty_service.find("%")] == ["100%"]
    assert [a.name for a in empty_service.find("_")] == ["a_b"]


def test_find_accented_names(empty_service):
    empty_service.save([Account("José", 1), Account("Zoë", 2), Account("Bobo", 3)])
    assert [a.name for a in empty_service.find("é")] == ["José"]
    assert [a.name for a in empty_service.find("É")] == ["José"]
    assert [a.name for a in empty_service.find("Ë")] == ["Zoë"]
    assert [a.name for a in empty_service.find("zOË")] == ["Zoë"]


def test_delete_all(empty_service):
    empty_service.save([Account("One", 1), Account("Two", 2)])
    assert empty_service.delete_all() == 2
    assert empty_service.total_accounts() == 0
    assert empty_service.delete_all() == 0


def test_find_nothing(service):
    assert service.find("xyz") == []


def test_service_passes_through():
    calls = []

    class FakeRepository:
        def count(self):
            calls.append("count")
            return 7

        def save(self, accounts):
            calls.append(("save", len(accounts)))

        def find_all(self):
            calls.append("find_all")
            return []

        def delete_all(self):
            calls.append("delete_all")
            return 0

        def find_by_name_like(self, match):
            calls.append(("like", match))
            return []

    s = AccountService(FakeRepository())
    assert s.total_accounts() == 7
    s.save([Account("x", 1)])
    s.find_all()
    s.delete_all()
    s.find("m")
    assert calls == ["count", ("save", 1), "find_all", "delete_all", ("like", "m")]


def test_store_errors_propagate():
    class BrokenRepository:
        def count(self):
            raise ConnectionError("lost")

    with pytest.raises(ConnectionError):
        AccountService(BrokenRepository()).total_accounts()
