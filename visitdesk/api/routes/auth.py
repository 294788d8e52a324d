from fastapi import APIRouter, Depends

from visitdesk.api.deps import get_current_identity, get_session_store
from visitdesk.schemas.auth import Identity, LoginRequest, RegisterRequest
from visitdesk.services.session_store import SessionStore
from visitdesk.services.view_service import default_tab

router = APIRouter()


def _session_payload(identity: Identity) -> dict:
    return {"user": identity.model_dump(mode="json"), "defaultTab": default_tab(identity)}


@router.post("/login")
def login(payload: LoginRequest, store: SessionStore = Depends(get_session_store)):
    identity = store.login(email=payload.email, password=payload.password, role=payload.role)
    return {"data": _session_payload(identity)}


@router.post("/register")
def register(payload: RegisterRequest, store: SessionStore = Depends(get_session_store)):
    identity = store.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return {"data": _session_payload(identity)}


@router.post("/logout")
def logout(store: SessionStore = Depends(get_session_store)):
    store.logout()
    return {"data": {"status": "ok"}}


@router.get("/me")
def me(identity: Identity = Depends(get_current_identity)):
    return {"data": _session_payload(identity)}
