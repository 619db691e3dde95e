from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Iterable, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored timestamps are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class APIError(BaseModel):
    error: str


class ComplaintCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str
    category: str
    location: str
    status: Optional[str] = None
    officer_id: Optional[str] = Field(default=None, alias="officerId")

    model_config = ConfigDict(populate_by_name=True)


class ComplaintStatusUpdate(BaseModel):
    # Presence of status is checked by the route to keep its own message
    status: Optional[str] = None
    officer_id: Optional[str] = Field(default=None, alias="officerId")

    model_config = ConfigDict(populate_by_name=True)


class ReviewCreate(BaseModel):
    complaint_id: int = Field(alias="complaintId", strict=True)
    rating: int = Field(strict=True)
    review_text: Optional[str] = Field(default=None, alias="reviewText")

    model_config = ConfigDict(populate_by_name=True)


class ComplaintOut(BaseModel):
    id: int
    title: str
    description: str
    category: str
    location: str
    status: str
    officer_id: Optional[str] = Field(alias="officerId")
    created_at: UTCDateTime = Field(alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ReviewOut(BaseModel):
    id: int
    complaint_id: int = Field(alias="complaintId")
    rating: int
    review_text: Optional[str] = Field(alias="reviewText")
    created_at: UTCDateTime = Field(alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class OfficerStats(BaseModel):
    resolved: int = 0
    in_progress: int = Field(default=0, alias="inProgress")
    work_done: int = Field(default=0, alias="workDone")

    model_config = ConfigDict(populate_by_name=True)


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Render pydantic error dicts as one readable line, e.g.
    ``Validation error: Field required at "title"``.
    """
    messages = []
    for err in errors:
        # FastAPI prefixes the request part ("body", "path", ...)
        loc = [str(part) for part in err.get("loc", ())[1:]]
        message = err.get("msg", "Invalid value")
        if loc:
            message = f'{message} at "{".".join(loc)}"'
        messages.append(message)

    if not messages:
        return "Validation error"
    return "Validation error: " + "; ".join(messages)
