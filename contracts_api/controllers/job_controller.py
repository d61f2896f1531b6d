"""Controller for unpaid job listings and job payment.

A payment moves the job price from the contract's client to its contractor
and marks the job paid. All three writes happen in one store session, so
they commit together or not at all.
"""
from datetime import datetime
from typing import Any, Dict, List
import logging

from contracts_api.controllers.contract_controller import ContractController
from contracts_api.database.models import Job, Profile
from contracts_api.errors import ForbiddenError, InsufficientBalanceError, NotFoundError

logger = logging.getLogger(__name__)


class JobController:
    def __init__(self, db):
        self.db = db

    def list_unpaid_jobs(self, caller: Profile) -> List[Dict[str, Any]]:
        with self.db.session() as s:
            jobs = self.db.list_unpaid_jobs(s, caller.id)
            if not jobs:
                raise NotFoundError("No unpaid jobs found")
            return [self._to_dict(j, include_contract=True) for j in jobs]

    def pay_job(self, job_id: int, caller: Profile) -> Dict[str, Any]:
        with self.db.session() as s:
            # paid IS NULL filter: an already paid job looks the same as an unknown one
            job = self.db.get_payable_job(s, job_id)
            if job is None:
                raise NotFoundError("Job not found")

            contract = job.contract
            if caller.id != contract.client_id:
                raise ForbiddenError("Unauthorized user")

            # re-read both balances under a row lock before the read-modify-write
            profiles = {p.id: p for p in self.db.lock_profiles(s, [contract.client_id, contract.contractor_id])}
            client = profiles[contract.client_id]
            contractor = profiles[contract.contractor_id]

            if client.balance < job.price:
                logger.info(
                    "Payment of job %s rejected: client %s balance %.2f < price %.2f",
                    job.id, client.id, client.balance, job.price,
                )
                raise InsufficientBalanceError("Insufficient balance")

            client.balance -= job.price
            contractor.balance += job.price
            job.paid = True
            job.payment_date = datetime.utcnow()
            s.flush()

            logger.info(
                "Job %s paid: %.2f moved from client %s to contractor %s",
                job.id, job.price, client.id, contractor.id,
            )
            return self._to_dict(job)

    def _to_dict(self, job: Job, include_contract: bool = False) -> Dict[str, Any]:
        out = {
            "id": job.id,
            "description": job.description,
            "price": job.price,
            "paid": job.paid,
            "paymentDate": job.payment_date,
            "ContractId": job.contract_id,
            "createdAt": job.created_at,
            "updatedAt": job.updated_at,
        }
        if include_contract:
            out["Contract"] = ContractController._to_dict(job.contract)
        return out
