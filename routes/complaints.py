import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dependencies import get_storage
from schemas import APIError, ComplaintCreate, ComplaintOut, ComplaintStatusUpdate
from storage import UNSET, Storage

router = APIRouter(prefix="/api/complaints", tags=["Complaints"])
logger = logging.getLogger("civictrack.routes.complaints")

NOT_FOUND_RESPONSE = {404: {"model": APIError}}


def complaint_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Complaint not found"
    )


def storage_failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
    )


@router.get("", response_model=List[ComplaintOut])
def list_complaints(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_complaints()
    except Exception as exc:
        raise storage_failure("Failed to fetch complaints") from exc


@router.get(
    "/{complaint_id}", response_model=ComplaintOut, responses=NOT_FOUND_RESPONSE
)
def get_complaint(complaint_id: int, storage: Storage = Depends(get_storage)):
    try:
        complaint = storage.get_complaint(complaint_id)
    except Exception as exc:
        raise storage_failure("Failed to fetch complaint") from exc

    if not complaint:
        raise complaint_not_found()
    return complaint


@router.post("", response_model=ComplaintOut, status_code=status.HTTP_201_CREATED)
def create_complaint(payload: ComplaintCreate, storage: Storage = Depends(get_storage)):
    try:
        return storage.create_complaint(payload)
    except Exception as exc:
        raise storage_failure("Failed to create complaint") from exc


@router.patch(
    "/{complaint_id}/status", response_model=ComplaintOut, responses=NOT_FOUND_RESPONSE
)
def update_complaint_status(
    complaint_id: int,
    payload: ComplaintStatusUpdate,
    storage: Storage = Depends(get_storage),
):
    """
    Officers move a complaint along its lifecycle. Any status text is
    accepted; officerId is only written when present in the body.
    """
    if not payload.status:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Status is required"
        )

    # An explicit null clears the officer, an omitted field leaves it alone
    officer_id = (
        payload.officer_id if "officer_id" in payload.model_fields_set else UNSET
    )

    try:
        complaint = storage.update_complaint_status(
            complaint_id, payload.status, officer_id
        )
    except Exception as exc:
        raise storage_failure("Failed to update complaint") from exc

    if not complaint:
        raise complaint_not_found()
    return complaint
