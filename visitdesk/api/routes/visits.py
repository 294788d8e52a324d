import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from visitdesk.api.deps import get_current_identity, get_repository, require_roles
from visitdesk.schemas.auth import Identity
from visitdesk.schemas.visit import VisitRequest, VisitRequestDraft, VisitStatus
from visitdesk.services import view_service
from visitdesk.services.form_service import VisitRequestForm
from visitdesk.services.visit_repository import VisitRequestRepository

router = APIRouter()
logger = logging.getLogger(__name__)


def _serialize(request: VisitRequest, identity: Identity, view: str | None = None) -> dict:
    data = request.model_dump(mode="json")
    data["actions"] = view_service.available_actions(request, identity, view)
    return data


@router.get("")
def list_visits(
    view: str = Query(default="all"),
    identity: Identity = Depends(get_current_identity),
    repository: VisitRequestRepository = Depends(get_repository),
):
    if view not in view_service.VIEWS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"view must be one of {', '.join(view_service.VIEWS)}",
        )
    rows = view_service.select_view(view, repository.list(), identity)
    return {"data": [_serialize(row, identity, view) for row in rows]}


@router.get("/stats")
def visit_stats(
    _: Identity = Depends(get_current_identity),
    repository: VisitRequestRepository = Depends(get_repository),
):
    return {"data": view_service.stats(repository.list())}


@router.post("", status_code=status.HTTP_201_CREATED)
def submit_visit(
    payload: VisitRequestDraft,
    identity: Identity = Depends(require_roles("requester")),
    repository: VisitRequestRepository = Depends(get_repository),
):
    form = VisitRequestForm(repository, identity)
    form.edit(**payload.model_dump(exclude_unset=True))
    request = form.submit()
    return {"data": _serialize(request, identity)}


def _resolve(request_id: str, target: VisitStatus, identity: Identity, repository: VisitRequestRepository):
    request = repository.update_status(request_id, target)
    logger.info("visits.%s id=%s approver_id=%s", target.value, request_id, identity.id)
    return {"data": _serialize(request, identity)}


@router.post("/{request_id}/approve")
def approve_visit(
    request_id: str,
    identity: Identity = Depends(require_roles("approver")),
    repository: VisitRequestRepository = Depends(get_repository),
):
    return _resolve(request_id, VisitStatus.approved, identity, repository)


@router.post("/{request_id}/reject")
def reject_visit(
    request_id: str,
    identity: Identity = Depends(require_roles("approver")),
    repository: VisitRequestRepository = Depends(get_repository),
):
    return _resolve(request_id, VisitStatus.rejected, identity, repository)
