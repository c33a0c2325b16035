"""Pytest configuration for market tests."""

from unittest.mock import AsyncMock

import pytest

from apps.market.application.common.ports import TransactionManager


@pytest.fixture
def mock_tx() -> AsyncMock:
    """커밋/롤백 호출을 기록하는 TransactionManager mock."""
    return AsyncMock(spec=TransactionManager)
