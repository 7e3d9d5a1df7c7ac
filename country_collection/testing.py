"""Testing utilities and :mod:`pytest` fixtures.

This module is used as a :mod:`pytest` plugin; see the ``addopts`` setting in
:file:`pyproject.toml`.
"""

import logging
from collections.abc import Generator
from types import ModuleType

import pytest

from country_collection import registry as _registry
from country_collection.collection import CountryCollection
from country_collection.util.config import Config

log = logging.getLogger(__name__)

#: Configuration used for the shared registry during tests. This does not depend on the
#: user's configuration file or environment variables.
TEST_CONFIG = dict(display_names="data", locale=None)

# pytest hooks


def pytest_sessionstart(session: pytest.Session) -> None:
    """Configure the shared registry with :data:`TEST_CONFIG`."""
    try:
        _registry.configure(Config(**TEST_CONFIG))
    except RuntimeError:  # pragma: no cover
        log.warning("Registry built before test session; user configuration applies")


def pytest_report_header(config, start_path) -> str:
    """Add the registry configuration to the pytest report header."""
    return f"country-collection registry config: {_registry._CONFIG}"


# Fixtures


@pytest.fixture(scope="session")
def registry() -> CountryCollection:
    """The shared, read-only registry."""
    return _registry.get_registry()


@pytest.fixture
def collection() -> CountryCollection:
    """A new :class:`.CountryCollection`, independent of other tests."""
    return CountryCollection()


@pytest.fixture
def fresh_registry(monkeypatch) -> Generator[ModuleType, None, None]:
    """The :mod:`.registry` module, with no registry built and no configuration.

    The shared registry used by other tests is restored afterwards.
    """
    monkeypatch.setattr(_registry, "_REGISTRY", None)
    monkeypatch.setattr(_registry, "_CONFIG", None)
    yield _registry
