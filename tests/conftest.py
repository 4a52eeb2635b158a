"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def registry():
    """Provide a fresh, empty registry."""
    from assessment.question import QuestionRegistry
    return QuestionRegistry()


@pytest.fixture
def factory(registry):
    """Provide a factory bound to the test's own registry."""
    from assessment.question import QuestionFactory
    return QuestionFactory(registry, validate_choice_entries=False)


@pytest.fixture
def default_registry():
    """Provide the process-wide registry, emptied before and after the test."""
    from assessment.question import QUESTION_MAP
    QUESTION_MAP.clear()
    yield QUESTION_MAP
    QUESTION_MAP.clear()


@pytest.fixture
def clean_settings(monkeypatch):
    """Drop cached settings so environment changes take effect."""
    from config import get_settings
    for name in ("ASSESSMENT_LOG_LEVEL", "ASSESSMENT_VALIDATE_CHOICE_ENTRIES"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
