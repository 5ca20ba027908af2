"""Lock backend implementations."""

from tf_lock_checker.infrastructure.backends.backend_factory import LockBackendFactory
from tf_lock_checker.infrastructure.backends.backend_kinds import BackendKind
from tf_lock_checker.infrastructure.backends.blob_backend import AzureBlobLockBackend
from tf_lock_checker.infrastructure.backends.dynamodb_backend import DynamoDBLockBackend

__all__ = [
    "AzureBlobLockBackend",
    "BackendKind",
    "DynamoDBLockBackend",
    "LockBackendFactory",
]
