from __future__ import annotations

from datetime import date, timedelta

import pytest

from visitdesk.db.base import Base
from visitdesk.db.session import build_engine, build_session_factory
from visitdesk.schemas.auth import Identity, Role
from visitdesk.services.local_storage import LocalStorage
from visitdesk.services.visit_repository import VisitRequestRepository


@pytest.fixture
def engine():
    eng = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def storage(engine) -> LocalStorage:
    return LocalStorage(build_session_factory(engine))


@pytest.fixture
def repository(storage: LocalStorage) -> VisitRequestRepository:
    repo = VisitRequestRepository(storage)
    repo.load()
    return repo


@pytest.fixture
def alice() -> Identity:
    return Identity(id="u-alice", name="Alice", email="alice@example.com", role=Role.requester)


@pytest.fixture
def bob() -> Identity:
    return Identity(id="u-bob", name="Bob", email="bob@example.com", role=Role.requester)


@pytest.fixture
def approver() -> Identity:
    return Identity(id="u-val", name="Valerie", email="val@example.com", role=Role.approver)


@pytest.fixture
def visit_day() -> date:
    return date.today() + timedelta(days=7)
