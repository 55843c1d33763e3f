"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import patch


@pytest.fixture
def mock_get():
    """Patch the HTTP layer so no test touches the network."""
    with patch("itunes_service.requests.get") as get:
        yield get
