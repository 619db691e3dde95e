import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dependencies import get_storage
from schemas import ReviewCreate, ReviewOut
from storage import Storage

router = APIRouter(prefix="/api", tags=["Reviews"])
logger = logging.getLogger("civictrack.routes.reviews")


@router.post("/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
def create_review(payload: ReviewCreate, storage: Storage = Depends(get_storage)):
    # A complaintId with no matching complaint fails on the foreign key (500)
    try:
        return storage.create_review(payload)
    except Exception as exc:
        logger.exception("Failed to create review for complaint #%s", payload.complaint_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create review",
        ) from exc


@router.get("/complaints/{complaint_id}/reviews", response_model=List[ReviewOut])
def list_complaint_reviews(complaint_id: int, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_reviews_by_complaint(complaint_id)
    except Exception as exc:
        logger.exception("Failed to fetch reviews for complaint #%s", complaint_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch reviews",
        ) from exc
