from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VisitStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Location(str, Enum):
    site_a = "SiteA"
    site_b = "SiteB"
    unset = ""


# Half-hour slots offered by the request form, 8h00 through 19h30.
TIME_SLOTS: tuple[str, ...] = tuple(
    f"{hour}h{minute:02d}" for hour in range(8, 20) for minute in (0, 30)
)

MAX_PARTY_SIZE = 50


class VisitRequestDraft(BaseModel):
    model_config = ConfigDict(extra="forbid")

    requesterName: str = ""
    numberOfPeople: int = Field(default=1, ge=1, le=MAX_PARTY_SIZE)
    visitDate: date | None = None
    startTime: str = ""
    endTime: str = ""
    isClient: bool = False
    clientNumber: str = ""
    needsCatering: bool = False
    location: Location = Location.unset
    deliveryTime: str = ""
    allergies: str = ""
    clientReference: str = ""
    comments: str = ""


class VisitRequest(VisitRequestDraft):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    status: VisitStatus = VisitStatus.pending
    createdAt: datetime
    requesterId: str

