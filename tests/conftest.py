"""
Pytest Configuration and Fixtures

This module provides:
- Shared fixtures for all tests (stores, generators, Flask client)
- Test category markers
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import test configuration
from tests.test_config import CONFIG, get_idea_payload


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def sample_payload():
    """Provide a single save/update payload dict."""
    return get_idea_payload(0)


@pytest.fixture
def sample_draft(sample_payload):
    """Provide a single IdeaDraft built from the sample payload."""
    from ideagen.models.idea import IdeaDraft
    return IdeaDraft.from_dict(sample_payload)


@pytest.fixture
def memory_store():
    """Provide an empty in-memory idea store."""
    from ideagen.storage import MemoryIdeaStore
    return MemoryIdeaStore()


@pytest.fixture
def generator():
    """Provide an IdeaGenerator with test credentials."""
    from ideagen.services.idea_generator import IdeaGenerator
    return IdeaGenerator(
        api_key=CONFIG["test_api_key"],
        model=CONFIG["test_model"],
        api_url=CONFIG["test_api_url"],
        timeout=5,
    )


@pytest.fixture
def mock_generator():
    """Provide a mock generator that returns a fixed draft."""
    from ideagen.models.idea import IdeaDraft
    from ideagen.services.idea_generator import IdeaGenerator

    mock = Mock(spec=IdeaGenerator)
    mock.model = CONFIG["test_model"]
    mock.is_available.return_value = True
    mock.generate.side_effect = lambda topic: IdeaDraft(
        topic=topic,
        name="PawPal",
        description="Matches busy owners with vetted dog walkers.",
        features=["Walker matching", "Live GPS walks", "Vet record sharing"],
        city="Portland",
        latitude="45.5152",
        longitude="-122.6784",
    )
    return mock


@pytest.fixture
def app(memory_store, mock_generator):
    """Flask application wired to the in-memory store and mock generator."""
    from web.app import create_app
    flask_app = create_app(store=memory_store, generator=mock_generator)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as client:
        yield client


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "cli_behavior: CLI interface tests"
    )
    config.addinivalue_line(
        "markers", "api: HTTP API tests through the Flask test client"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single module"
    )
