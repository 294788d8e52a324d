import logging
import uuid
from datetime import datetime, timezone
from threading import Lock

from pydantic import TypeAdapter, ValidationError

from visitdesk.core.exceptions import InvalidStatusTransition, VisitRequestNotFound
from visitdesk.schemas.auth import Identity
from visitdesk.schemas.visit import VisitRequest, VisitRequestDraft, VisitStatus
from visitdesk.services.local_storage import LocalStorage

logger = logging.getLogger(__name__)

_snapshot_adapter = TypeAdapter(list[VisitRequest])

_RESOLVED_STATUSES = {VisitStatus.approved, VisitStatus.rejected}


class VisitRequestRepository:
    """Owns the visit-request collection and mirrors it to one storage slot.

    Every mutation rewrites the whole snapshot; records are never deleted.
    Mutations hold ``_lock`` from reading the collection until the new
    snapshot is stored.
    """

    def __init__(self, storage: LocalStorage, key: str = "visitRequests"):
        self._storage = storage
        self._key = key
        self._requests: list[VisitRequest] = []
        self._lock = Lock()

    def load(self) -> list[VisitRequest]:
        with self._lock:
            self._requests = self._read_snapshot()
            return list(self._requests)

    def _read_snapshot(self) -> list[VisitRequest]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            requests = _snapshot_adapter.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "visit_requests.load dropped malformed snapshot key=%s errors=%d",
                self._key,
                exc.error_count(),
            )
            return []
        if len({r.id for r in requests}) != len(requests):
            logger.warning("visit_requests.load dropped snapshot with duplicate ids key=%s", self._key)
            return []
        return requests

    def create(self, draft: VisitRequestDraft, requester: Identity) -> VisitRequest:
        with self._lock:
            existing_ids = {r.id for r in self._requests}
            request_id = str(uuid.uuid4())
            while request_id in existing_ids:
                request_id = str(uuid.uuid4())

            request = VisitRequest(
                **draft.model_dump(),
                id=request_id,
                status=VisitStatus.pending,
                createdAt=datetime.now(timezone.utc),
                requesterId=requester.id,
            )
            self._save([*self._requests, request])
        logger.info(
            "visit_requests.create id=%s requester_id=%s location=%s",
            request.id,
            request.requesterId,
            request.location.value,
        )
        return request

    def update_status(self, request_id: str, status: VisitStatus | str) -> VisitRequest:
        target = VisitStatus(status)
        with self._lock:
            for index, request in enumerate(self._requests):
                if request.id != request_id:
                    continue
                if target not in _RESOLVED_STATUSES or request.status != VisitStatus.pending:
                    raise InvalidStatusTransition(request_id, request.status.value, target.value)
                updated = request.model_copy(update={"status": target})
                requests = list(self._requests)
                requests[index] = updated
                self._save(requests)
                break
            else:
                raise VisitRequestNotFound(request_id)
        logger.info("visit_requests.update_status id=%s status=%s", request_id, target.value)
        return updated

    def _save(self, requests: list[VisitRequest]) -> None:
        payload = _snapshot_adapter.dump_json(requests).decode("utf-8")
        self._storage.set_item(self._key, payload)
        self._requests = requests

    def get(self, request_id: str) -> VisitRequest | None:
        for request in self._requests:
            if request.id == request_id:
                return request
        return None

    def list(self) -> list[VisitRequest]:
        return list(self._requests)
