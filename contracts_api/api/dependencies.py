import logging
from typing import Optional

from fastapi import Depends, Header, Request

from contracts_api.controllers import AdminController, BalanceController, ContractController, JobController
from contracts_api.database.models import Profile
from contracts_api.database.store import Store
from contracts_api.errors import UnauthorizedError
from contracts_api.utils.config_loader import AppConfig

logger = logging.getLogger(__name__)


def get_db(request: Request) -> Store:
    """Store handed to the app by create_app"""
    return request.app.state.store


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_profile(
    profile_id: Optional[str] = Header(default=None, alias="profile_id", convert_underscores=False),
    db: Store = Depends(get_db),
) -> Profile:
    """Resolve the caller from the `profile_id` header; unknown callers never reach a handler."""
    candidate = (profile_id or "").strip()
    if not candidate.isdigit():
        logger.info("Profile check failed: header_present=%s", bool(profile_id))
        raise UnauthorizedError("Unknown profile")

    with db.session() as s:
        profile = db.get_profile(s, int(candidate))
    if profile is None:
        logger.info("Profile check failed: no profile with id=%s", candidate)
        raise UnauthorizedError("Unknown profile")
    return profile


def get_contract_controller(db: Store = Depends(get_db)) -> ContractController:
    return ContractController(db)


def get_job_controller(db: Store = Depends(get_db)) -> JobController:
    return JobController(db)


def get_balance_controller(db: Store = Depends(get_db), config: AppConfig = Depends(get_config)) -> BalanceController:
    return BalanceController(db, deposit_cap_ratio=config.business.deposit_cap_ratio)


def get_admin_controller(db: Store = Depends(get_db), config: AppConfig = Depends(get_config)) -> AdminController:
    return AdminController(
        db,
        default_limit=config.reporting.best_clients_default_limit,
        max_limit=config.reporting.best_clients_max_limit,
    )
