"""Backend kind enumerations."""

from enum import Enum

from tf_lock_checker.domain.exceptions import InvalidSelectionError


class BackendKind(str, Enum):
    """Lock backend implementation kinds."""

    AWS = "aws"
    AZURE = "azure"

    @classmethod
    def parse(cls, value: str) -> "BackendKind":
        """Parse an operator answer, ignoring case and surrounding whitespace."""
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            choices = "/".join(kind.value for kind in cls)
            raise InvalidSelectionError(value, f"expected one of {choices}") from exc
