"""Azure Blob Storage lock inventory (Terraform azurerm backend)."""

import logging
from typing import Any, List, Optional

from azure.core.credentials import AzureNamedKeyCredential
from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    ResourceNotFoundError,
    ServiceRequestError,
)
from azure.storage.blob import BlobServiceClient

from tf_lock_checker.domain.exceptions import (
    BackendConnectionError,
    LockDeleteError,
    LockListError,
)
from tf_lock_checker.domain.interfaces import LockBackend
from tf_lock_checker.domain.models import BlobConnectionParams, LockRecord

logger = logging.getLogger(__name__)


class AzureBlobLockBackend(LockBackend):
    """Lists and deletes blobs in a single storage container.

    The blob name is the only description available, so records carry no
    extra display info.
    """

    identity_label = "BlobName"
    description = "Azure Blob container"

    def __init__(self, params: BlobConnectionParams, container_client: Optional[Any] = None):
        """Initialize Azure Blob lock backend.

        Args:
            params: Storage account, key and container name.
            container_client: Existing container client to use (for testing).
        """
        self._params = params
        self._container_client = container_client

    @property
    def container_name(self) -> str:
        return self._params.container_name

    def connect(self) -> None:
        self._get_container_client()

    def _get_container_client(self):
        """Get or create the container client."""
        if self._container_client is None:
            try:
                credential = AzureNamedKeyCredential(
                    self._params.account_name, self._params.account_key
                )
                service_client = BlobServiceClient(
                    account_url=self._params.account_url, credential=credential
                )
                self._container_client = service_client.get_container_client(
                    self.container_name
                )
            except (AzureError, ValueError, TypeError) as e:
                raise BackendConnectionError(
                    "Failed to create Azure service client", str(e)
                ) from e
            logger.debug(
                "Created container client for %s/%s",
                self._params.account_url,
                self.container_name,
            )

        return self._container_client

    def list_locks(self) -> List[LockRecord]:
        """List every blob in the container without a delimiter."""
        container_client = self._get_container_client()

        try:
            records = [LockRecord(identity=blob.name) for blob in container_client.list_blobs()]
        except (ClientAuthenticationError, ServiceRequestError) as e:
            raise BackendConnectionError(
                f"Failed to connect to storage account {self._params.account_name}", str(e)
            ) from e
        except AzureError as e:
            logger.error("Listing container %s failed: %s", self.container_name, e)
            raise LockListError(f"Failed to list blobs in {self.container_name}", str(e)) from e

        logger.info("Found %d blobs in container %s", len(records), self.container_name)
        return records

    def delete_lock(self, identity: str) -> None:
        container_client = self._get_container_client()

        try:
            container_client.delete_blob(identity)
        except ResourceNotFoundError:
            logger.warning("Blob %s no longer exists, nothing to delete", identity)
            return
        except AzureError as e:
            raise LockDeleteError(identity, str(e)) from e

        logger.info("Deleted blob %s from container %s", identity, self.container_name)
