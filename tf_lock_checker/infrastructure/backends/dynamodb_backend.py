"""DynamoDB-backed lock inventory (Terraform S3 backend lock table)."""

import logging
from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.types import TypeDeserializer
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
)

from tf_lock_checker.domain.exceptions import (
    BackendConnectionError,
    LockDeleteError,
    LockListError,
)
from tf_lock_checker.domain.interfaces import LockBackend
from tf_lock_checker.domain.models import DynamoDBConnectionParams, LockRecord

logger = logging.getLogger(__name__)

AUTH_ERROR_CODES = frozenset(
    {
        "UnrecognizedClientException",
        "InvalidSignatureException",
        "ExpiredTokenException",
        "InvalidClientTokenId",
        "MissingAuthenticationToken",
    }
)


class DynamoDBLockBackend(LockBackend):
    """Lists and deletes lock items in a DynamoDB table.

    Each item is keyed by a single string partition key (``LockID`` in the
    Terraform schema); every other attribute is shown as descriptive info.
    """

    identity_label = "LockID"
    description = "DynamoDB table"

    def __init__(self, params: DynamoDBConnectionParams, client: Optional[Any] = None):
        """Initialize DynamoDB lock backend.

        Args:
            params: Table name, region and partition key attribute.
            client: Existing DynamoDB client to use (for testing).
        """
        self._params = params
        self._client = client
        self._deserializer = TypeDeserializer()

    @property
    def table_name(self) -> str:
        return self._params.table_name

    def connect(self) -> None:
        self._get_client()

    def _get_client(self):
        """Get or create DynamoDB client."""
        if self._client is None:
            kwargs = {
                k: v
                for k, v in {"region_name": self._params.region_name}.items()
                if v is not None
            }
            try:
                self._client = boto3.client("dynamodb", **kwargs)
            except BotoCoreError as e:
                raise BackendConnectionError("Failed to connect to AWS", str(e)) from e
            logger.debug("Created DynamoDB client for table %s", self.table_name)

        return self._client

    def list_locks(self) -> List[LockRecord]:
        """Scan the whole table, following every page."""
        client = self._get_client()
        records = []

        try:
            paginator = client.get_paginator("scan")
            for page in paginator.paginate(TableName=self.table_name):
                for item in page.get("Items", []):
                    record = self._to_record(item)
                    if record is not None:
                        records.append(record)
        except (NoCredentialsError, EndpointConnectionError) as e:
            raise BackendConnectionError("Failed to connect to AWS", str(e)) from e
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in AUTH_ERROR_CODES:
                raise BackendConnectionError("Failed to authenticate with AWS", str(e)) from e
            logger.error("Scan of DynamoDB table %s failed: %s", self.table_name, e)
            raise LockListError(f"Failed to scan DynamoDB table {self.table_name}", str(e)) from e
        except BotoCoreError as e:
            logger.error("Scan of DynamoDB table %s failed: %s", self.table_name, e)
            raise LockListError(f"Failed to scan DynamoDB table {self.table_name}", str(e)) from e

        logger.info("Found %d lock items in table %s", len(records), self.table_name)
        return records

    def _to_record(self, item: Dict[str, Any]) -> Optional[LockRecord]:
        """Decode a raw DynamoDB item into a LockRecord."""
        decoded = {key: self._deserializer.deserialize(value) for key, value in item.items()}
        key_name = self._params.partition_key
        identity = decoded.pop(key_name, None)

        if not isinstance(identity, str) or not identity:
            logger.warning("Skipping item without a usable %s attribute: %s", key_name, item)
            return None

        return LockRecord(
            identity=identity,
            display_info={key: str(value) for key, value in decoded.items()},
        )

    def delete_lock(self, identity: str) -> None:
        """Delete the item keyed by ``identity``.

        DynamoDB reports success for a key that is already gone.
        """
        client = self._get_client()

        try:
            client.delete_item(
                TableName=self.table_name,
                Key={self._params.partition_key: {"S": identity}},
            )
        except (ClientError, BotoCoreError) as e:
            raise LockDeleteError(identity, str(e)) from e

        logger.info("Deleted lock item %s from table %s", identity, self.table_name)
