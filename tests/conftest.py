"""Shared fixtures"""

import pytest

from scoped_logger import LoggerConfig, ScopeRegistry


@pytest.fixture(autouse=True)
def clean_scope_registry():
    """Start and end every test with an empty process-wide registry."""
    ScopeRegistry.default().clear()
    yield
    ScopeRegistry.default().clear()


@pytest.fixture
def plain_config():
    """Config without time and date so output is deterministic."""
    return LoggerConfig(log_time=False, log_date=False)
