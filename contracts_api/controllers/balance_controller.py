"""Controller for client balance deposits."""
from typing import Any, Dict
import logging

from contracts_api.database.models import Profile
from contracts_api.errors import DepositLimitExceededError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class BalanceController:
    def __init__(self, db, deposit_cap_ratio: float = 0.25):
        self.db = db
        self.deposit_cap_ratio = deposit_cap_ratio

    def deposit(self, user_id: int, amount: float, caller: Profile) -> Dict[str, Any]:
        """Add `amount` to the balance of client `user_id`.

        The cap is a share of the *target* client's unpaid total on in-progress
        contracts, whoever the (client) caller is.
        """
        if caller.type != "client":
            raise ForbiddenError("Only clients can deposit")

        with self.db.session() as s:
            user = self.db.get_profile(s, user_id, for_update=True)
            if user is None or user.type != "client":
                raise NotFoundError("Client not found")

            unpaid_total = self.db.unpaid_total_for_client(s, user.id)
            max_deposit = unpaid_total * self.deposit_cap_ratio
            logger.debug("Client %s unpaid total %.2f, max deposit %.2f", user.id, unpaid_total, max_deposit)
            if amount > max_deposit:
                logger.info("Deposit of %.2f to client %s rejected (max %.2f)", amount, user.id, max_deposit)
                raise DepositLimitExceededError(
                    f"Deposit exceeds {self.deposit_cap_ratio:.0%} of unpaid jobs total",
                    amount=amount,
                    max_deposit=max_deposit,
                )

            user.balance += amount
            s.flush()
            logger.info("Deposited %.2f to client %s by profile %s", amount, user.id, caller.id)
            return self._to_dict(user)

    def _to_dict(self, profile: Profile) -> Dict[str, Any]:
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
