"""
Admin reports. Not behind the profile check.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from contracts_api.api.dependencies import get_admin_controller
from contracts_api.controllers import AdminController

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/best-profession")
def best_profession(
    start: Optional[str] = None,
    end: Optional[str] = None,
    controller: AdminController = Depends(get_admin_controller),
) -> Dict[str, Any]:
    """
    Profession whose contractors earned the most from jobs paid in [start, end].

    Example: /admin/best-profession?start=2020-08-01&end=2020-08-31
    """
    return controller.best_profession(start, end)


@router.get("/best-clients")
def best_clients(
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: Optional[str] = None,
    controller: AdminController = Depends(get_admin_controller),
) -> List[Dict[str, Any]]:
    """Clients who paid the most for jobs in [start, end], highest first."""
    return controller.best_clients(start, end, limit)
