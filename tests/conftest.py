"""Shared fixtures for the dispatcher tests"""

import pytest

from eventdispatch import Dispatcher, DispatcherConfig, EventRegistry, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from a default configuration, ignoring the environment"""
    config = DispatcherConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def dispatcher(default_config):
    return Dispatcher(config=default_config)


@pytest.fixture
def registry():
    return EventRegistry()


@pytest.fixture
def class_path():
    """Import path for a class defined in a test module"""
    def _class_path(cls):
        return f"{cls.__module__}:{cls.__qualname__}"
    return _class_path


class LookupContainer:
    """Minimal has/get container"""

    def __init__(self, services=None):
        self.services = dict(services or {})
        self.requests = []

    def has(self, identifier):
        return identifier in self.services

    def get(self, identifier):
        self.requests.append(identifier)
        return self.services[identifier]


class CallableLookupContainer(LookupContainer):
    """Container exposing both provider shapes"""

    def __init__(self, services=None, fallback=None):
        super().__init__(services)
        self.fallback = fallback
        self.calls = []

    def __call__(self, identifier, params):
        self.calls.append((identifier, list(params)))
        return self.fallback


@pytest.fixture
def lookup_container():
    return LookupContainer


@pytest.fixture
def callable_lookup_container():
    return CallableLookupContainer
