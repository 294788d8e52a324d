from fastapi import Depends, HTTPException, Request, status

from visitdesk.core.exceptions import AuthError
from visitdesk.schemas.auth import Identity
from visitdesk.services.session_store import SessionStore
from visitdesk.services.visit_repository import VisitRequestRepository


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_repository(request: Request) -> VisitRequestRepository:
    return request.app.state.repository


def get_current_identity(store: SessionStore = Depends(get_session_store)) -> Identity:
    try:
        return store.require()
    except AuthError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not signed in")


def require_roles(*roles: str):
    def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role.value not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return identity

    return dependency
