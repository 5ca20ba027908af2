"""Domain models for lock inventory."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_PARTITION_KEY = "LockID"
DEFAULT_ENDPOINT_SUFFIX = "core.windows.net"


@dataclass(frozen=True)
class LockRecord:
    """One lock entry, independent of the backend that stores it.

    Attributes:
        identity: Backend-specific key (DynamoDB partition key value or blob name).
        display_info: Descriptive fields shown to the operator.
    """

    identity: str
    display_info: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if not self.identity:
            raise ValueError("LockRecord requires a non-empty identity")
        object.__setattr__(self, "display_info", MappingProxyType(dict(self.display_info)))


@dataclass(frozen=True)
class DynamoDBConnectionParams:
    """Connection parameters for a DynamoDB lock table."""

    table_name: str
    region_name: Optional[str] = None
    partition_key: str = DEFAULT_PARTITION_KEY


@dataclass(frozen=True)
class BlobConnectionParams:
    """Connection parameters for an Azure Blob lock container."""

    account_name: str
    account_key: str
    container_name: str
    endpoint_suffix: str = DEFAULT_ENDPOINT_SUFFIX

    @property
    def account_url(self) -> str:
        """Blob service URL for the storage account."""
        return f"https://{self.account_name}.blob.{self.endpoint_suffix}"

    def __repr__(self) -> str:
        return (
            f"BlobConnectionParams(account_name={self.account_name!r}, "
            f"account_key='***', container_name={self.container_name!r}, "
            f"endpoint_suffix={self.endpoint_suffix!r})"
        )
