"""Controller for contract lookups, restricted to the contracts the caller takes part in."""
from typing import Any, Dict, List
import logging

from contracts_api.database.models import Contract, Profile
from contracts_api.errors import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class ContractController:
    def __init__(self, db):
        self.db = db

    def get_contract(self, contract_id: int, caller: Profile) -> Dict[str, Any]:
        with self.db.session() as s:
            contract = self.db.get_contract(s, contract_id)
            if contract is None:
                raise NotFoundError("Contract not found")
            if not contract.has_participant(caller.id):
                raise ForbiddenError("Unauthorized user")
            return self._to_dict(contract, include_profiles=True)

    def list_contracts(self, caller: Profile) -> List[Dict[str, Any]]:
        with self.db.session() as s:
            contracts = self.db.list_active_contracts(s, caller.id)
            return [self._to_dict(c) for c in contracts]

    @staticmethod
    def _to_dict(contract: Contract, include_profiles: bool = False) -> Dict[str, Any]:
        out = {
            "id": contract.id,
            "terms": contract.terms,
            "status": contract.status,
            "ClientId": contract.client_id,
            "ContractorId": contract.contractor_id,
            "createdAt": contract.created_at,
            "updatedAt": contract.updated_at,
        }
        if include_profiles:
            out["Client"] = ContractController._profile_to_dict(contract.client)
            out["Contractor"] = ContractController._profile_to_dict(contract.contractor)
        return out

    @staticmethod
    def _profile_to_dict(profile: Profile) -> Dict[str, Any]:
        return {
            "id": profile.id,
            "firstName": profile.first_name,
            "lastName": profile.last_name,
            "profession": profile.profession,
            "balance": profile.balance,
            "type": profile.type,
            "createdAt": profile.created_at,
            "updatedAt": profile.updated_at,
        }
