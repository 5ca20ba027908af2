"""Lock inventory listing and rendering."""

import logging
from typing import List

from tf_lock_checker.domain.interfaces import LockBackend
from tf_lock_checker.domain.models import LockRecord

logger = logging.getLogger(__name__)

LEADING_FIELDS = ("Info", "Operation")


def format_record(record: LockRecord, identity_label: str) -> str:
    """Render a record as ``Label: id, Key: value, ...``.

    Info and Operation come first when present, the rest in key order.
    """
    keys = [key for key in LEADING_FIELDS if key in record.display_info]
    keys += sorted(key for key in record.display_info if key not in LEADING_FIELDS)
    parts = [f"{identity_label}: {record.identity}"]
    parts += [f"{key}: {record.display_info[key]}" for key in keys]
    return ", ".join(parts)


class InventoryLister:
    """Fetches the complete lock inventory and prints it."""

    def __init__(self, backend: LockBackend):
        self._backend = backend

    def fetch(self) -> List[LockRecord]:
        """Return every lock in the backend.

        LockListError propagates untouched: nothing is printed for a
        failed listing.
        """
        return self._backend.list_locks()

    def render(self, records: List[LockRecord]) -> None:
        description = self._backend.description
        if not records:
            print(f"No locks found in {description}.")
            return

        print(f"Current locks in {description}:")
        for record in records:
            print(format_record(record, self._backend.identity_label))
