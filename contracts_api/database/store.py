"""
SQLAlchemy-backed store for profiles, contracts and jobs.

Every query takes the session it runs in, so a controller can compose
several reads and writes into one transaction via `Store.session()`.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional

from sqlalchemy import create_engine, func, or_, select, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, joinedload, selectinload, sessionmaker
from sqlalchemy.pool import StaticPool

from contracts_api.database.models import Base, Contract, Job, Profile

logger = logging.getLogger(__name__)


def _normalize_connection_string(s: str) -> str:
    """Strip common mistakes: 'psql \'...\'', extra quotes, whitespace."""
    s = s.strip()
    if re.match(r"^psql\s+", s, re.IGNORECASE):
        s = re.sub(r"^psql\s+", "", s, flags=re.IGNORECASE).strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        s = s[1:-1].strip()
    return s


def _unpaid():
    return or_(Job.paid.is_(None), Job.paid.is_(False))


class Store:
    """
    Data access for the contracts API. Works against Postgres in production
    and SQLite for local runs and tests.
    """

    def __init__(self, connection_string: str, pool_size: int = 5, max_overflow: int = 10) -> None:
        connection_string = _normalize_connection_string(connection_string)
        url = make_url(connection_string)
        if url.get_backend_name() == "sqlite":
            kwargs = {"connect_args": {"check_same_thread": False}}
            if url.database in (None, "", ":memory:"):
                # one shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool
            self.engine = create_engine(connection_string, **kwargs)
        else:
            self.engine = create_engine(
                connection_string, pool_pre_ping=True, pool_size=pool_size, max_overflow=max_overflow
            )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    @contextmanager
    def session(self) -> Iterator[Session]:
        s = self.SessionLocal()
        try:
            yield s
            s.commit()
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()

    # ------------------------------------------------------------------ #
    # Profiles
    # ------------------------------------------------------------------ #
    def get_profile(self, s: Session, profile_id: int, *, for_update: bool = False) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == profile_id)
        if for_update:
            stmt = stmt.with_for_update()
        return s.execute(stmt).scalar_one_or_none()

    def lock_profiles(self, s: Session, profile_ids: List[int]) -> List[Profile]:
        # ordered by id so two concurrent payments take the locks in the same order
        stmt = (
            select(Profile)
            .where(Profile.id.in_(profile_ids))
            .order_by(Profile.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return list(s.execute(stmt).scalars().all())

    # ------------------------------------------------------------------ #
    # Contracts
    # ------------------------------------------------------------------ #
    def get_contract(self, s: Session, contract_id: int) -> Optional[Contract]:
        stmt = (
            select(Contract)
            .options(joinedload(Contract.client), joinedload(Contract.contractor))
            .where(Contract.id == contract_id)
        )
        return s.execute(stmt).scalar_one_or_none()

    def list_active_contracts(self, s: Session, profile_id: int) -> List[Contract]:
        stmt = (
            select(Contract)
            .where(
                Contract.status != "terminated",
                or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id),
            )
            .order_by(Contract.id)
        )
        return list(s.execute(stmt).scalars().all())

    # ------------------------------------------------------------------ #
    # Jobs
    # ------------------------------------------------------------------ #
    def list_unpaid_jobs(self, s: Session, profile_id: int) -> List[Job]:
        stmt = (
            select(Job)
            .join(Job.contract)
            .options(selectinload(Job.contract))
            .where(
                _unpaid(),
                Contract.status == "in_progress",
                or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id),
            )
            .order_by(Job.id)
        )
        return list(s.execute(stmt).scalars().all())

    def get_payable_job(self, s: Session, job_id: int) -> Optional[Job]:
        """Job that has never been paid (paid IS NULL), row-locked for the payment."""
        stmt = (
            select(Job)
            .options(joinedload(Job.contract, innerjoin=True))
            .where(Job.id == job_id, Job.paid.is_(None))
            .with_for_update(of=Job)
        )
        return s.execute(stmt).scalar_one_or_none()

    def unpaid_total_for_client(self, s: Session, client_id: int) -> float:
        stmt = (
            select(func.coalesce(func.sum(Job.price), 0.0))
            .join(Job.contract)
            .where(_unpaid(), Contract.client_id == client_id, Contract.status == "in_progress")
        )
        return float(s.execute(stmt).scalar_one())

    # ------------------------------------------------------------------ #
    # Reports
    # ------------------------------------------------------------------ #
    def best_profession(self, s: Session, start: datetime, end: datetime) -> Optional[dict]:
        total_earned = func.sum(Job.price).label("total_earned")
        stmt = (
            select(Profile.profession, total_earned)
            .join(Contract, Contract.contractor_id == Profile.id)
            .join(Job, Job.contract_id == Contract.id)
            .where(Job.paid.is_(True), Job.payment_date.between(start, end))
            .group_by(Profile.profession)
            .order_by(total_earned.desc())
            .limit(1)
        )
        row = s.execute(stmt).mappings().first()
        return dict(row) if row else None

    def best_clients(self, s: Session, start: datetime, end: datetime, limit: int) -> List[dict]:
        total_paid = func.sum(Job.price).label("total_paid")
        stmt = (
            select(
                Profile.id.label("id"),
                (Profile.first_name + " " + Profile.last_name).label("fullName"),
                total_paid,
            )
            .join(Contract, Contract.client_id == Profile.id)
            .join(Job, Job.contract_id == Contract.id)
            .where(Job.paid.is_(True), Job.payment_date.between(start, end))
            .group_by(Profile.id, Profile.first_name, Profile.last_name)
            .order_by(total_paid.desc())
            .limit(limit)
        )
        return [dict(row) for row in s.execute(stmt).mappings().all()]
