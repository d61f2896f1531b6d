"""Error payload helpers for the API exception handlers."""
from typing import Any, Dict
import logging

from contracts_api.errors import ApiError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: ApiError, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if exc.status_code >= 500:
            logger.error("Request failed: %s (context=%s)", exc, context or {}, exc_info=exc)
        else:
            logger.info("Request rejected with %s: %s", exc.status_code, exc.message)
        payload: Dict[str, Any] = {"error": exc.message}
        if exc.details is not None:
            payload["details"] = exc.details
        return payload
