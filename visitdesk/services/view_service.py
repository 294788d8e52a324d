from typing import Iterable

from visitdesk.schemas.auth import Identity, Role
from visitdesk.schemas.visit import VisitRequest, VisitStatus

VIEWS = ("all", "mine", "pending", "approved", "rejected")


def mine(requests: Iterable[VisitRequest], identity: Identity) -> list[VisitRequest]:
    return [r for r in requests if r.requesterId == identity.id]


def pending(requests: Iterable[VisitRequest]) -> list[VisitRequest]:
    return [r for r in requests if r.status == VisitStatus.pending]


def approved(requests: Iterable[VisitRequest]) -> list[VisitRequest]:
    return [r for r in requests if r.status == VisitStatus.approved]


def rejected(requests: Iterable[VisitRequest]) -> list[VisitRequest]:
    return [r for r in requests if r.status == VisitStatus.rejected]


def all_requests(requests: Iterable[VisitRequest]) -> list[VisitRequest]:
    return list(requests)


def select_view(view: str, requests: Iterable[VisitRequest], identity: Identity) -> list[VisitRequest]:
    if view == "mine":
        return mine(requests, identity)
    if view == "pending":
        return pending(requests)
    if view == "approved":
        return approved(requests)
    if view == "rejected":
        return rejected(requests)
    if view == "all":
        return all_requests(requests)
    raise ValueError(f"Unknown view: {view}")


def stats(requests: Iterable[VisitRequest]) -> dict:
    rows = list(requests)
    return {
        "pending": len(pending(rows)),
        "approved": len(approved(rows)),
        "rejected": len(rejected(rows)),
        "total": len(rows),
    }


def available_actions(request: VisitRequest, identity: Identity, view: str | None) -> list[str]:
    """Approve/reject are only offered on pending rows of the pending view."""
    if view != "pending":
        return []
    if identity.role != Role.approver or request.status != VisitStatus.pending:
        return []
    return ["approve", "reject"]


def default_tab(identity: Identity) -> str:
    return "manage-requests" if identity.role == Role.approver else "new-request"
