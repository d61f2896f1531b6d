"""Pytest fixtures for the contracts API tests."""

import pytest
from fastapi.testclient import TestClient

from contracts_api.api.main import create_app
from contracts_api.database.models import Contract, Job, Profile
from contracts_api.database.seed import seed
from contracts_api.database.store import Store
from contracts_api.utils.config_loader import AppConfig, DatabaseConfig


class DataFactory:
    """Adds rows to a store and reads balances back."""

    def __init__(self, store: Store):
        self.store = store

    def profile(self, **kwargs) -> int:
        data = {"first_name": "Test", "last_name": "User", "profession": "Tester", "balance": 0.0, "type": "client"}
        data.update(kwargs)
        with self.store.session() as s:
            p = Profile(**data)
            s.add(p)
            s.flush()
            return p.id

    def contract(self, client_id: int, contractor_id: int, status: str = "in_progress") -> int:
        with self.store.session() as s:
            c = Contract(terms="terms", status=status, client_id=client_id, contractor_id=contractor_id)
            s.add(c)
            s.flush()
            return c.id

    def job(self, contract_id: int, price: float, paid=None, payment_date=None) -> int:
        with self.store.session() as s:
            j = Job(description="work", price=price, paid=paid, payment_date=payment_date, contract_id=contract_id)
            s.add(j)
            s.flush()
            return j.id

    def balance(self, profile_id: int) -> float:
        with self.store.session() as s:
            return self.store.get_profile(s, profile_id).balance

    def get_job(self, job_id: int) -> Job:
        with self.store.session() as s:
            return s.get(Job, job_id)


@pytest.fixture
def store():
    """In-memory SQLite store loaded with the sample data."""
    s = Store("sqlite://")
    seed(s)
    yield s
    s.engine.dispose()


@pytest.fixture
def empty_store():
    s = Store("sqlite://")
    s.create_tables()
    yield s
    s.engine.dispose()


@pytest.fixture
def factory(store):
    return DataFactory(store)


@pytest.fixture
def empty_factory(empty_store):
    return DataFactory(empty_store)


@pytest.fixture
def client(store):
    config = AppConfig(database=DatabaseConfig(url="sqlite://", create_tables=False))
    app = create_app(config=config, store=store)
    with TestClient(app) as c:
        yield c
