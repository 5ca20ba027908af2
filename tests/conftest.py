"""Pytest configuration and shared fixtures."""

import pytest

from tests.builders import FakeLockBackend, LockRecordBuilder


@pytest.fixture
def build_lock_item():
    """Factory for raw DynamoDB items as returned by the low-level client."""

    def _build(lock_id: str, info: str = "", operation: str = ""):
        item = {"LockID": {"S": lock_id}}
        if info:
            item["Info"] = {"S": info}
        if operation:
            item["Operation"] = {"S": operation}
        return item

    return _build


@pytest.fixture
def two_table_records():
    """Records matching the two-item lock table scenario."""
    return [
        LockRecordBuilder().with_identity("L1").with_info("build").with_operation("apply").build(),
        LockRecordBuilder().with_identity("L2").with_info("plan").with_operation("plan").build(),
    ]


@pytest.fixture
def fake_backend(two_table_records):
    """Fake backend holding two locks."""
    return FakeLockBackend(two_table_records)
