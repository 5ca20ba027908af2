"""Backend selection from operator answers."""

import logging
from typing import Dict, Optional

from tf_lock_checker.domain.interfaces import LockBackend, Prompter
from tf_lock_checker.domain.models import BlobConnectionParams, DynamoDBConnectionParams
from tf_lock_checker.infrastructure.backends.backend_factory import (
    ConnectionParams,
    LockBackendFactory,
)
from tf_lock_checker.infrastructure.backends.backend_kinds import BackendKind

logger = logging.getLogger(__name__)


def _mask(secret: str) -> str:
    return f"***{secret[-4:]}" if len(secret) > 8 else "***"


class BackendSelector:
    """Asks which cloud holds the locks and builds the matching backend."""

    def __init__(
        self,
        prompter: Prompter,
        defaults: Optional[Dict[str, str]] = None,
        factory: Optional[LockBackendFactory] = None,
    ):
        """Initialize BackendSelector.

        Args:
            prompter: Source of operator answers.
            defaults: Default answers keyed by parameter name (see config.load_prompt_defaults).
            factory: Backend factory (optional, for testing).
        """
        self._prompter = prompter
        self._defaults = defaults or {}
        self._factory = factory or LockBackendFactory()

    def select(self) -> LockBackend:
        """Run the selection prompts and return an unconnected backend.

        Raises:
            InvalidSelectionError: If the provider answer is not aws or azure.
                No parameter prompts are issued in that case.
        """
        kind = self.select_kind()
        params = self.collect_params(kind)
        logger.info("Selected %s backend with %r", kind.value, params)
        return self._factory.create(kind, params)

    def select_kind(self) -> BackendKind:
        answer = self._prompter.ask("Which cloud provider are you using? (aws/azure): ")
        return BackendKind.parse(answer)

    def collect_params(self, kind: BackendKind) -> ConnectionParams:
        """Prompt for the connection parameters of ``kind``."""
        if kind == BackendKind.AWS:
            region = self._ask("AWS region", "region_name")
            table_name = self._ask("DynamoDB table name for locking", "table_name")
            return DynamoDBConnectionParams(table_name=table_name, region_name=region or None)

        account_name = self._ask("Azure storage account name", "account_name")
        account_key = self._ask("Azure storage account key", "account_key", secret=True)
        container_name = self._ask("Azure Blob container name for locking", "container_name")
        return BlobConnectionParams(
            account_name=account_name,
            account_key=account_key,
            container_name=container_name,
        )

    def _ask(self, label: str, name: str, secret: bool = False) -> str:
        default = self._defaults.get(name, "")
        if default:
            shown = _mask(default) if secret else default
            question = f"Enter the {label} [{shown}]: "
        else:
            question = f"Enter the {label}: "
        return self._prompter.ask(question) or default
