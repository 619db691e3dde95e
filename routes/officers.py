import logging

from fastapi import APIRouter, Depends, HTTPException, status

from dependencies import get_storage
from schemas import OfficerStats
from storage import Storage

router = APIRouter(prefix="/api/officers", tags=["Officers"])
logger = logging.getLogger("civictrack.routes.officers")


@router.get("/{officer_id}/stats", response_model=OfficerStats)
def officer_stats(officer_id: str, storage: Storage = Depends(get_storage)):
    """
    Workload summary for an officer. Officers are plain identifiers, so an
    unknown one simply has zero complaints in every bucket.
    """
    try:
        return storage.get_officer_stats(officer_id)
    except Exception as exc:
        logger.exception("Failed to fetch stats for officer %s", officer_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch officer stats",
        ) from exc
