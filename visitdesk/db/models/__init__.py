from visitdesk.db.models.storage_slot import StorageSlot

__all__ = [
    "StorageSlot",
]
