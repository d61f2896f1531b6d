from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from contracts_api.api.dependencies import get_contract_controller, get_profile
from contracts_api.controllers import ContractController
from contracts_api.database.models import Profile

router = APIRouter(tags=["Contracts"])


@router.get("/contracts/{contract_id}")
def get_contract(
    contract_id: int,
    profile: Profile = Depends(get_profile),
    controller: ContractController = Depends(get_contract_controller),
) -> Dict[str, Any]:
    return controller.get_contract(contract_id, profile)


@router.get("/contracts")
def list_contracts(
    profile: Profile = Depends(get_profile),
    controller: ContractController = Depends(get_contract_controller),
) -> List[Dict[str, Any]]:
    """Non-terminated contracts the caller is a client or contractor on."""
    return controller.list_contracts(profile)
