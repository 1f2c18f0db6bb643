"""
Pytest configuration and fixtures for the Webdock client tests.

This file provides test isolation and shared fixtures.
"""
import pytest


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """
    Reset any singleton/global state between tests.

    This prevents test pollution from the config, global client and log context.
    """
    yield

    import config as cfg
    cfg._config = None

    import api.client as api_client_module
    api_client_module._global_client = None

    from utils.logging import clear_context
    clear_context()
