"""
Global pytest configuration and fixtures.
Provides a clean process-wide container and configuration for every test.
"""

import pytest


@pytest.fixture(scope="function", autouse=True)
def reset_global_container(monkeypatch):
    """Reset the process-wide container and configuration before each test."""
    import container
    from config_factory import reset_config

    monkeypatch.setattr(container, '_app_container', None)
    monkeypatch.setattr(container, '_is_initialized', False)
    reset_config()

    yield

    reset_config()


@pytest.fixture(scope="function")
def factory_calls():
    """Counts factory invocations by service name."""
    return {}


@pytest.fixture(scope="function")
def counting_factory(factory_calls):
    """Build factories that return a fresh {'id': n} and count their calls."""
    def make(name):
        def factory(_container):
            count = factory_calls.get(name, 0)
            factory_calls[name] = count + 1
            return {'id': count}
        return factory
    return make
