"""Controller for the admin earnings reports."""
from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional, Tuple
import logging

from sqlalchemy.exc import SQLAlchemyError

from contracts_api.errors import InternalError, InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)


def _parse_bound(value: str, name: str, *, end_of_day: bool) -> datetime:
    value = value.strip()
    try:
        # a bare date covers the whole day on the upper bound
        d = date.fromisoformat(value)
        return datetime.combine(d, time.max if end_of_day else time.min)
    except ValueError:
        pass
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidRequestError(f"Invalid {name} date: {value!r}") from e
    if dt.tzinfo is not None:
        # stored payment dates are naive UTC
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def parse_date_range(start: Optional[str], end: Optional[str]) -> Tuple[datetime, datetime]:
    if not start or not end:
        raise InvalidRequestError("Start and end dates are required")
    start_dt = _parse_bound(start, "start", end_of_day=False)
    end_dt = _parse_bound(end, "end", end_of_day=True)
    if start_dt > end_dt:
        raise InvalidRequestError("Start date must not be after end date")
    return start_dt, end_dt


def parse_limit(limit: Optional[str], default: int, maximum: int = 1000) -> int:
    if limit is None or str(limit).strip() == "":
        return default
    try:
        value = int(str(limit).strip(), 10)
    except ValueError as e:
        raise InvalidRequestError(f"Invalid limit: {limit!r}") from e
    if value < 1:
        raise InvalidRequestError("Limit must be a positive integer")
    if value > maximum:
        raise InvalidRequestError(f"Limit must not exceed {maximum}")
    return value


class AdminController:
    def __init__(self, db, default_limit: int = 2, max_limit: int = 1000):
        self.db = db
        self.default_limit = default_limit
        self.max_limit = max_limit

    def best_profession(self, start: Optional[str], end: Optional[str]) -> Dict[str, Any]:
        start_dt, end_dt = parse_date_range(start, end)
        try:
            with self.db.session() as s:
                row = self.db.best_profession(s, start_dt, end_dt)
        except SQLAlchemyError as e:
            logger.error("Query Error: %s", e, exc_info=True)
            raise InternalError("Internal server error", details=str(e)) from e

        if row is None:
            raise NotFoundError("No data found for the given time range")
        return row

    def best_clients(self, start: Optional[str], end: Optional[str], limit: Optional[str] = None) -> List[Dict[str, Any]]:
        start_dt, end_dt = parse_date_range(start, end)
        n = parse_limit(limit, self.default_limit, self.max_limit)
        try:
            with self.db.session() as s:
                rows = self.db.best_clients(s, start_dt, end_dt, n)
        except SQLAlchemyError as e:
            logger.error("Query Error: %s", e, exc_info=True)
            raise InternalError("Internal server error", details=str(e)) from e

        if not rows:
            raise NotFoundError("No data found for the given time range")
        return rows
