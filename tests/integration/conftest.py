import os

import pytest

from nexus_notes.ai.config import DEFAULT_LMSTUDIO_URL
from nexus_notes.ai.lmstudio import check_lmstudio_available


def pytest_collection_modifyitems(config, items):
    skip_integration = os.getenv("SKIP_INTEGRATION", "").lower() in ("1", "true", "yes")
    integration_marker = pytest.mark.skip(reason="SKIP_INTEGRATION is set")

    for item in items:
        if "integration" in item.keywords and skip_integration:
            item.add_marker(integration_marker)


@pytest.fixture
def gemini_api_key():
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")


@pytest.fixture
def skip_if_no_gemini(gemini_api_key):
    if not gemini_api_key:
        pytest.skip("GEMINI_API_KEY not configured")


@pytest.fixture
def lmstudio_url():
    return os.getenv("NEXUS_NOTES_LMSTUDIO_URL", DEFAULT_LMSTUDIO_URL)


@pytest.fixture
def skip_if_no_lmstudio(lmstudio_url):
    if not check_lmstudio_available(lmstudio_url):
        pytest.skip(f"LM Studio not available at {lmstudio_url}")
