"""Who is using the desk right now.

Login and registration go through an :class:`Authenticator`. The store
rejects empty credentials itself; the only authenticator shipped here,
:class:`StubAuthenticator`, accepts whatever reaches it and mints a fresh
identity each time. Swap in a real implementation at integration time.
"""

import logging
import time
import uuid
from typing import Callable, Protocol

from visitdesk.core.exceptions import AuthError
from visitdesk.schemas.auth import Credentials, Identity, Role

logger = logging.getLogger(__name__)


class Authenticator(Protocol):
    def authenticate(self, credentials: Credentials) -> Identity:
        """Return the identity for ``credentials`` or raise :class:`AuthError`."""
        ...


class StubAuthenticator:
    def authenticate(self, credentials: Credentials) -> Identity:
        email = credentials.email.strip()
        name = (credentials.name or "").strip() or email.split("@")[0]
        return Identity(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            role=credentials.role,
        )


class SessionStore:
    def __init__(
        self,
        authenticator: Authenticator | None = None,
        delay_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._authenticator = authenticator or StubAuthenticator()
        self._delay_seconds = delay_seconds
        self._sleep = sleep
        self._identity: Identity | None = None

    @property
    def current(self) -> Identity | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def require(self) -> Identity:
        if self._identity is None:
            raise AuthError()
        return self._identity

    def login(self, email: str, password: str, role: Role | str = Role.requester) -> Identity:
        return self._sign_in(Credentials(email=email, password=password, role=Role(role)))

    def register(
        self, name: str, email: str, password: str, role: Role | str = Role.requester
    ) -> Identity:
        if not (name or "").strip():
            raise AuthError("Name, email and password are required")
        return self._sign_in(Credentials(email=email, password=password, role=Role(role), name=name))

    def logout(self) -> None:
        if self._identity is not None:
            logger.info("session.logout identity_id=%s", self._identity.id)
        self._identity = None

    def _sign_in(self, credentials: Credentials) -> Identity:
        if not credentials.email.strip() or not credentials.password:
            raise AuthError("Email and password are required")
        if self._delay_seconds > 0:
            self._sleep(self._delay_seconds)
        identity = self._authenticator.authenticate(credentials)
        self._identity = identity
        logger.info("session.sign_in identity_id=%s role=%s", identity.id, identity.role.value)
        return identity
