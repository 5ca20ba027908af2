"""Exceptions raised by the lock checker.

Fatal conditions (invalid selection, connection, listing) end the session.
Delete failures are reported per record and never abort the unlock pass.
"""

from typing import Optional


class LockCheckerError(Exception):
    """Base exception for all lock checker errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidSelectionError(LockCheckerError):
    """Raised when the operator picks an unknown backend."""

    def __init__(self, selection: str, details: Optional[str] = None):
        self.selection = selection
        super().__init__(f"Invalid cloud provider specified: {selection!r}", details)


class BackendConnectionError(LockCheckerError):
    """Raised when the backend client cannot be built or authenticated."""


class LockListError(LockCheckerError):
    """Raised when enumerating locks fails."""


class LockDeleteError(LockCheckerError):
    """Raised when a single lock cannot be deleted."""

    def __init__(self, identity: str, details: Optional[str] = None):
        self.identity = identity
        super().__init__(f"Failed to delete lock {identity}", details)
