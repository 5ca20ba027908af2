"""Factory for creating LockBackend instances."""

from typing import Union

from tf_lock_checker.domain.interfaces import LockBackend
from tf_lock_checker.domain.models import BlobConnectionParams, DynamoDBConnectionParams
from tf_lock_checker.infrastructure.backends.backend_kinds import BackendKind
from tf_lock_checker.infrastructure.backends.blob_backend import AzureBlobLockBackend
from tf_lock_checker.infrastructure.backends.dynamodb_backend import DynamoDBLockBackend

ConnectionParams = Union[DynamoDBConnectionParams, BlobConnectionParams]


class LockBackendFactory:
    """Factory for creating LockBackend instances from connection parameters."""

    @staticmethod
    def create(kind: BackendKind, params: ConnectionParams) -> LockBackend:
        """Create LockBackend instance.

        Args:
            kind: Backend kind chosen by the operator.
            params: Connection parameters matching the kind.
                Examples:
                - BackendKind.AWS, DynamoDBConnectionParams(table_name="terraform-locks")
                - BackendKind.AZURE, BlobConnectionParams("acct", "key", "tfstate")

        Returns:
            LockBackend instance (not yet connected).
        """
        if kind == BackendKind.AWS:
            if not isinstance(params, DynamoDBConnectionParams):
                raise ValueError("AWS backend requires DynamoDBConnectionParams")
            if not params.table_name:
                raise ValueError("DynamoDB backend requires a table name")
            return DynamoDBLockBackend(params)

        if kind == BackendKind.AZURE:
            if not isinstance(params, BlobConnectionParams):
                raise ValueError("Azure backend requires BlobConnectionParams")
            missing = [
                name
                for name in ("account_name", "account_key", "container_name")
                if not getattr(params, name)
            ]
            if missing:
                raise ValueError(f"Azure Blob backend requires {', '.join(missing)}")
            return AzureBlobLockBackend(params)

        raise ValueError(f"Unhandled backend kind: {kind}")  # pragma: no cover
