"""Key-value slots backed by the ``local_storage`` table.

Mirrors the browser ``localStorage`` contract: string keys, string values,
``None`` for a key that was never written.
"""

import logging

from sqlalchemy.orm import Session, sessionmaker

from visitdesk.db.models import StorageSlot

logger = logging.getLogger(__name__)


class LocalStorage:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_item(self, key: str) -> str | None:
        db: Session = self._session_factory()
        try:
            row = db.get(StorageSlot, key)
            return row.value if row else None
        finally:
            db.close()

    def set_item(self, key: str, value: str) -> None:
        db: Session = self._session_factory()
        try:
            row = db.get(StorageSlot, key)
            if row:
                row.value = value
            else:
                db.add(StorageSlot(key=key, value=value))
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("local_storage.set_item failed key=%s", key)
            raise
        finally:
            db.close()

    def remove_item(self, key: str) -> None:
        db: Session = self._session_factory()
        try:
            row = db.get(StorageSlot, key)
            if not row:
                return
            db.delete(row)
            db.commit()
        finally:
            db.close()
