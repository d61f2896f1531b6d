from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from contracts_api.api.dependencies import get_job_controller, get_profile
from contracts_api.controllers import JobController
from contracts_api.database.models import Profile

router = APIRouter(tags=["Jobs"])


@router.get("/jobs/unpaid")
def list_unpaid_jobs(
    profile: Profile = Depends(get_profile),
    controller: JobController = Depends(get_job_controller),
) -> List[Dict[str, Any]]:
    return controller.list_unpaid_jobs(profile)


@router.post("/jobs/{job_id}/pay")
def pay_job(
    job_id: int,
    profile: Profile = Depends(get_profile),
    controller: JobController = Depends(get_job_controller),
) -> Dict[str, Any]:
    """Pay a job from the caller's (client) balance to the contractor."""
    return controller.pay_job(job_id, profile)
