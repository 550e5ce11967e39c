"""Pytest configuration for all tests."""

from typing import Generator

import pytest

from hookkit.core.config import get_settings
from hookkit.core.hooks import HookRegistrar, get_registrar
from hookkit.host import HookTable, HostRuntime, get_runtime
from hookkit.host.plugin import bootstrap


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Give every test a fresh settings, runtime and registrar."""
    get_settings.cache_clear()
    get_runtime.cache_clear()
    get_registrar.cache_clear()
    yield
    get_settings.cache_clear()
    get_runtime.cache_clear()
    get_registrar.cache_clear()


@pytest.fixture
def runtime() -> HostRuntime:
    """A runtime whose host has not booted and has no base path."""
    return HostRuntime()


@pytest.fixture
def registrar(runtime: HostRuntime) -> HookRegistrar:
    """A registrar bound to the unbooted runtime."""
    return HookRegistrar(runtime)


@pytest.fixture
def host(runtime: HostRuntime) -> HookTable:
    """Boot the runtime's host and return its hook table."""
    return bootstrap(runtime)
