from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

from chronoretry.config import reset_default_registry

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing observers.

    Returns:
        A Mock object that can be used as an observer.
    """
    return Mock()


@pytest.fixture(autouse=True)
def _reset_default_registry() -> Generator[None, None, None]:
    """Give every test a fresh process-wide policy registry."""
    reset_default_registry()
    yield
    reset_default_registry()
