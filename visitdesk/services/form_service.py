import logging
from datetime import date

from pydantic import ValidationError

from visitdesk.core.exceptions import FormValidationError
from visitdesk.schemas.auth import Identity
from visitdesk.schemas.visit import TIME_SLOTS, Location, VisitRequest, VisitRequestDraft
from visitdesk.services.visit_repository import VisitRequestRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("visitDate", "startTime", "endTime", "location")


class VisitRequestForm:
    """Accumulates edits into one draft and hands it to the repository on submit.

    ``clientNumber`` and ``deliveryTime`` are only meaningful when ``isClient``
    and ``needsCatering`` are set, but neither is checked here.
    """

    def __init__(self, repository: VisitRequestRepository, requester: Identity):
        self._repository = repository
        self._requester = requester
        self.draft = self._blank_draft()

    def _blank_draft(self) -> VisitRequestDraft:
        return VisitRequestDraft(requesterName=self._requester.name)

    def edit(self, **changes) -> VisitRequestDraft:
        try:
            self.draft = VisitRequestDraft.model_validate({**self.draft.model_dump(), **changes})
        except ValidationError as exc:
            fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise FormValidationError("Invalid value for one or more fields", fields) from exc
        return self.draft

    def reset(self) -> VisitRequestDraft:
        self.draft = self._blank_draft()
        return self.draft

    def missing_fields(self) -> list[str]:
        draft = self.draft
        missing = []
        if draft.visitDate is None:
            missing.append("visitDate")
        if not draft.startTime:
            missing.append("startTime")
        if not draft.endTime:
            missing.append("endTime")
        if draft.location == Location.unset:
            missing.append("location")
        return missing

    def _check(self, today: date) -> None:
        missing = self.missing_fields()
        if missing:
            raise FormValidationError("Please fill in all required fields", missing)

        unknown_slots = [
            name for name in ("startTime", "endTime") if getattr(self.draft, name) not in TIME_SLOTS
        ]
        if unknown_slots:
            raise FormValidationError("Unknown time slot", unknown_slots)

        if self.draft.visitDate <= today:
            raise FormValidationError("Visit date must be after today", ["visitDate"])

    def submit(self, today: date | None = None) -> VisitRequest:
        try:
            self._check(today or date.today())
        except FormValidationError as exc:
            logger.info("visit_form.submit rejected fields=%s", ",".join(exc.fields))
            raise

        request = self._repository.create(self.draft, self._requester)
        self.reset()
        return request
