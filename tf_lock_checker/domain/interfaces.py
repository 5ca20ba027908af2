"""Domain interfaces."""

from abc import ABC, abstractmethod
from typing import List

from tf_lock_checker.domain.models import LockRecord


class LockBackend(ABC):
    """Storage holding infrastructure state locks."""

    identity_label: str = "Identity"
    description: str = "lock backend"

    @abstractmethod
    def connect(self) -> None:
        """Build the backend client.

        Raises:
            BackendConnectionError: If the client cannot be created.
        """

    @abstractmethod
    def list_locks(self) -> List[LockRecord]:
        """Return every lock currently stored, across all pages.

        Raises:
            BackendConnectionError: If credentials are rejected or the endpoint is unreachable.
            LockListError: If the enumeration fails.
        """

    @abstractmethod
    def delete_lock(self, identity: str) -> None:
        """Delete the lock with the given identity.

        Deleting a lock that no longer exists is not an error.

        Raises:
            LockDeleteError: If the deletion fails.
        """


class Prompter(ABC):
    """Line-oriented operator input."""

    @abstractmethod
    def ask(self, question: str) -> str:
        """Show a question and return the answer with surrounding whitespace removed."""
