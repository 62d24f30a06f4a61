from typing import Optional

from fastapi import APIRouter, Query, Request

from ..models.beacon import BeaconRequest
from .deps import get_beacon_counter

router = APIRouter(prefix="/beacon")


@router.post("")
async def record_beacon(request: Request, body: BeaconRequest):
    counter = get_beacon_counter(request)
    counter.record(body.job_id, body.user_id)
    return {"success": True, "message": "Beacon recorded"}


@router.get("")
async def beacon_count(request: Request, job_id: Optional[str] = Query(None, alias="jobId")):
    counter = get_beacon_counter(request)
    return {"count": counter.count(job_id)}
