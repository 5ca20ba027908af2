"""Unlock session use case."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tf_lock_checker.application.interactive_unlocker import InteractiveUnlocker, UnlockOutcome
from tf_lock_checker.application.inventory_lister import InventoryLister
from tf_lock_checker.domain.interfaces import LockBackend, Prompter

logger = logging.getLogger(__name__)


@dataclass
class UnlockSummary:
    """Result of one unlock pass."""

    outcomes: List[Tuple[str, UnlockOutcome]] = field(default_factory=list)

    def count(self, outcome: UnlockOutcome) -> int:
        return sum(1 for _, result in self.outcomes if result == outcome)

    @property
    def deleted(self) -> int:
        return self.count(UnlockOutcome.DELETED)

    @property
    def declined(self) -> int:
        return self.count(UnlockOutcome.DECLINED)

    @property
    def failed(self) -> int:
        return self.count(UnlockOutcome.DELETE_FAILED)


class UnlockSessionUseCase:
    """Orchestrates one listing pass followed by the interactive unlock pass."""

    def __init__(
        self,
        backend: LockBackend,
        prompter: Prompter,
        lister: Optional[InventoryLister] = None,
        unlocker: Optional[InteractiveUnlocker] = None,
    ):
        """Initialize UnlockSessionUseCase.

        Args:
            backend: Backend holding the locks.
            prompter: Source of operator answers.
            lister: InventoryLister instance (optional, for testing).
            unlocker: InteractiveUnlocker instance (optional, for testing).
        """
        self._backend = backend
        self._lister = lister or InventoryLister(backend)
        self._unlocker = unlocker or InteractiveUnlocker(backend, prompter)

    def execute(self) -> UnlockSummary:
        """Connect, list every lock, then offer each one for deletion.

        Returns:
            UnlockSummary with one outcome per offered record, in listing order.

        Raises:
            BackendConnectionError: If the backend client cannot be built.
            LockListError: If the listing fails. No record is shown or offered.
        """
        logger.info("Connecting to %s", self._backend.description)
        self._backend.connect()

        records = self._lister.fetch()
        self._lister.render(records)

        summary = UnlockSummary()
        if not records:
            return summary

        for record in records:
            summary.outcomes.append((record.identity, self._unlocker.offer(record)))

        print(
            f"Unlock pass complete: {summary.deleted} deleted, "
            f"{summary.declined} declined, {summary.failed} failed."
        )
        return summary
