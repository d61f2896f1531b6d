"""Domain errors raised by the controllers and mapped to HTTP responses in the API layer."""
from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(ApiError):
    status_code = 404


class ForbiddenError(ApiError):
    status_code = 403


class UnauthorizedError(ApiError):
    status_code = 401


class InvalidRequestError(ApiError):
    """Missing or malformed request parameters."""

    status_code = 400


class BusinessRuleViolation(ApiError):
    status_code = 400


class InsufficientBalanceError(BusinessRuleViolation):
    pass


class DepositLimitExceededError(BusinessRuleViolation):
    def __init__(self, message: str, *, amount: float, max_deposit: float) -> None:
        super().__init__(message, details={"amount": amount, "max_deposit": max_deposit})
        self.amount = amount
        self.max_deposit = max_deposit


class InternalError(ApiError):
    status_code = 500
