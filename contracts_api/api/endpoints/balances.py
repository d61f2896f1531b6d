from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from contracts_api.api.dependencies import get_balance_controller, get_profile
from contracts_api.controllers import BalanceController
from contracts_api.database.models import Profile

router = APIRouter(tags=["Balances"])


class DepositRequest(BaseModel):
    amount: float = Field(..., gt=0, description="Amount to add to the client's balance")


@router.post("/balances/deposit/{user_id}")
def deposit(
    user_id: int,
    body: DepositRequest,
    profile: Profile = Depends(get_profile),
    controller: BalanceController = Depends(get_balance_controller),
) -> Dict[str, Any]:
    return controller.deposit(user_id, body.amount, profile)
