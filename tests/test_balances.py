"""Tests for client deposits and the unpaid-total cap."""

import pytest

from contracts_api.controllers import BalanceController
from contracts_api.errors import DepositLimitExceededError, ForbiddenError, NotFoundError


def _as(profile_id):
    return {"profile_id": str(profile_id)}


def _load(store, profile_id):
    with store.session() as s:
        return store.get_profile(s, profile_id)


def test_deposit_within_cap(client, factory):
    # client 1 owes 201 on in-progress contracts, cap is 50.25
    resp = client.post("/balances/deposit/1", json={"amount": 50}, headers=_as(1))
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == 1
    assert body["balance"] == pytest.approx(1200)
    assert factory.balance(1) == pytest.approx(1200)


def test_deposit_over_cap(client, factory):
    resp = client.post("/balances/deposit/1", json={"amount": 51}, headers=_as(1))
    assert resp.status_code == 400
    assert resp.json()["error"] == "Deposit exceeds 25% of unpaid jobs total"
    assert factory.balance(1) == pytest.approx(1150)


def test_deposit_by_contractor_is_forbidden(client):
    resp = client.post("/balances/deposit/1", json={"amount": 1}, headers=_as(6))
    assert resp.status_code == 403


def test_deposit_to_contractor_is_not_found(client):
    resp = client.post("/balances/deposit/6", json={"amount": 1}, headers=_as(1))
    assert resp.status_code == 404


def test_deposit_to_unknown_profile_is_not_found(client):
    resp = client.post("/balances/deposit/999", json={"amount": 1}, headers=_as(1))
    assert resp.status_code == 404


@pytest.mark.parametrize("body", [{}, {"amount": -5}, {"amount": 0}, {"amount": "lots"}])
def test_deposit_rejects_invalid_body(client, body):
    resp = client.post("/balances/deposit/1", json=body, headers=_as(1))
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request"


def test_cap_example(empty_store, empty_factory):
    c = empty_factory.profile(balance=0)
    k = empty_factory.profile(type="contractor")
    contract_id = empty_factory.contract(c, k)
    empty_factory.job(contract_id, 60)
    empty_factory.job(contract_id, 40)
    controller = BalanceController(empty_store)
    caller = _load(empty_store, c)

    with pytest.raises(DepositLimitExceededError) as excinfo:
        controller.deposit(c, 30, caller)
    assert excinfo.value.max_deposit == pytest.approx(25)
    assert empty_factory.balance(c) == 0

    out = controller.deposit(c, 25, caller)
    assert out["balance"] == pytest.approx(25)
    assert empty_factory.balance(c) == pytest.approx(25)


def test_cap_ignores_paid_and_inactive_contract_jobs(empty_store, empty_factory):
    c = empty_factory.profile()
    k = empty_factory.profile(type="contractor")
    active = empty_factory.contract(c, k)
    empty_factory.job(active, 100, paid=False)
    empty_factory.job(active, 1000, paid=True)
    empty_factory.job(empty_factory.contract(c, k, status="new"), 1000)
    empty_factory.job(empty_factory.contract(c, k, status="terminated"), 1000)
    controller = BalanceController(empty_store)
    caller = _load(empty_store, c)

    with pytest.raises(DepositLimitExceededError):
        controller.deposit(c, 25.01, caller)
    controller.deposit(c, 25, caller)


def test_no_unpaid_jobs_means_no_deposit(empty_store, empty_factory):
    c = empty_factory.profile()
    with pytest.raises(DepositLimitExceededError):
        BalanceController(empty_store).deposit(c, 0.01, _load(empty_store, c))


def test_cap_uses_target_not_caller(client, factory):
    # caller 1 could deposit at most 50.25 for itself, but the cap is taken
    # from target client 2, who owes 402 (cap 100.5)
    resp = client.post("/balances/deposit/2", json={"amount": 100}, headers=_as(1))
    assert resp.status_code == 200
    assert factory.balance(2) == pytest.approx(331.11)
    assert factory.balance(1) == pytest.approx(1150)


def test_configured_cap_ratio(empty_store, empty_factory):
    c = empty_factory.profile()
    k = empty_factory.profile(type="contractor")
    empty_factory.job(empty_factory.contract(c, k), 100)
    controller = BalanceController(empty_store, deposit_cap_ratio=0.5)
    out = controller.deposit(c, 50, _load(empty_store, c))
    assert out["balance"] == pytest.approx(50)


def test_controller_access_errors(store):
    controller = BalanceController(store)
    with pytest.raises(ForbiddenError):
        controller.deposit(1, 1, _load(store, 5))
    with pytest.raises(NotFoundError):
        controller.deposit(7, 1, _load(store, 1))
