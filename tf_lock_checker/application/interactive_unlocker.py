"""Per-record unlock confirmation."""

import logging
from enum import Enum

from tf_lock_checker.domain.exceptions import LockDeleteError
from tf_lock_checker.domain.interfaces import LockBackend, Prompter
from tf_lock_checker.domain.models import LockRecord

logger = logging.getLogger(__name__)

CONFIRM_ANSWERS = frozenset({"y", "Y"})


class UnlockOutcome(str, Enum):
    """Terminal state of one offered record."""

    DELETED = "deleted"
    DELETE_FAILED = "delete_failed"
    DECLINED = "declined"


class InteractiveUnlocker:
    """Offers one lock at a time for deletion.

    Only ``y``/``Y`` confirms. Anything else, including an empty answer,
    declines without touching the backend. A failed delete is reported
    and returned as an outcome, never raised.
    """

    def __init__(self, backend: LockBackend, prompter: Prompter):
        self._backend = backend
        self._prompter = prompter

    def offer(self, record: LockRecord) -> UnlockOutcome:
        label = self._backend.identity_label
        answer = self._prompter.ask(
            f"Do you want to unlock {label} {record.identity}? (y/n): "
        )

        if answer not in CONFIRM_ANSWERS:
            logger.debug("Operator declined %s %s", label, record.identity)
            return UnlockOutcome.DECLINED

        try:
            self._backend.delete_lock(record.identity)
        except LockDeleteError as e:
            logger.error("Failed to delete %s %s: %s", label, record.identity, e)
            print(f"Failed to delete {label} {record.identity}: {e}")
            return UnlockOutcome.DELETE_FAILED

        print(f"Deleted {label} {record.identity}")
        return UnlockOutcome.DELETED
