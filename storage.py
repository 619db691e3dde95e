"""
Persistence layer for complaints and reviews.

Routes only talk to the `Storage` interface. `DatabaseStorage` is the one
implementation, bound to a SQLAlchemy session per request (see
`dependencies.get_storage`). Database failures surface as `SQLAlchemyError`
(driver errors such as `OverflowError` pass through unwrapped); callers
decide how to report them.
"""

import abc
import logging
from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Complaint, Review
from schemas import ComplaintCreate, OfficerStats, ReviewCreate

logger = logging.getLogger("civictrack.storage")

RESOLVED_STATUS = "resolved"
IN_PROGRESS_STATUS = "in-progress"
WORK_DONE_STATUS = "work-done"

# Marks "officer not supplied"; None is a real value that clears the officer
UNSET: Any = object()


class Storage(abc.ABC):
    @abc.abstractmethod
    def get_all_complaints(self) -> List[Complaint]: ...

    @abc.abstractmethod
    def get_complaint(self, complaint_id: int) -> Optional[Complaint]: ...

    @abc.abstractmethod
    def create_complaint(self, payload: ComplaintCreate) -> Complaint: ...

    @abc.abstractmethod
    def update_complaint_status(
        self, complaint_id: int, status: str, officer_id: Any = UNSET
    ) -> Optional[Complaint]: ...

    @abc.abstractmethod
    def create_review(self, payload: ReviewCreate) -> Review: ...

    @abc.abstractmethod
    def get_reviews_by_complaint(self, complaint_id: int) -> List[Review]: ...

    @abc.abstractmethod
    def get_officer_stats(self, officer_id: str) -> OfficerStats: ...


class DatabaseStorage(Storage):
    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def get_all_complaints(self) -> List[Complaint]:
        return (
            self.db.query(Complaint)
            .order_by(Complaint.created_at.desc(), Complaint.id.desc())
            .all()
        )

    def get_complaint(self, complaint_id: int) -> Optional[Complaint]:
        return self.db.query(Complaint).filter(Complaint.id == complaint_id).first()

    def create_complaint(self, payload: ComplaintCreate) -> Complaint:
        # Unset or null status falls through to the column default
        values = payload.model_dump(exclude_none=True)
        complaint = Complaint(**values)

        self.db.add(complaint)
        self._commit()
        self.db.refresh(complaint)
        logger.info("Complaint #%s created", complaint.id)
        return complaint

    def update_complaint_status(
        self, complaint_id: int, status: str, officer_id: Any = UNSET
    ) -> Optional[Complaint]:
        complaint = self.get_complaint(complaint_id)
        if not complaint:
            return None

        complaint.status = status
        if officer_id is not UNSET:
            complaint.officer_id = officer_id

        self._commit()
        self.db.refresh(complaint)
        logger.info("Complaint #%s moved to %r", complaint.id, status)
        return complaint

    def create_review(self, payload: ReviewCreate) -> Review:
        # complaint_id is not checked here; the foreign key rejects strays
        review = Review(
            complaint_id=payload.complaint_id,
            rating=payload.rating,
            review_text=payload.review_text,
        )

        self.db.add(review)
        self._commit()
        self.db.refresh(review)
        return review

    def get_reviews_by_complaint(self, complaint_id: int) -> List[Review]:
        return self.db.query(Review).filter(Review.complaint_id == complaint_id).all()

    def get_officer_stats(self, officer_id: str) -> OfficerStats:
        counts = dict(
            self.db.query(Complaint.status, func.count(Complaint.id))
            .filter(Complaint.officer_id == officer_id)
            .group_by(Complaint.status)
            .all()
        )
        return OfficerStats(
            resolved=counts.get(RESOLVED_STATUS, 0),
            in_progress=counts.get(IN_PROGRESS_STATUS, 0),
            work_done=counts.get(WORK_DONE_STATUS, 0),
        )
