"""Shared, read-only registry of countries.

The registry is built on first access from the package data file
:file:`data/iso3166.yaml` (or :attr:`.Config.data_path`), and then shared by all code
in the process. Its records are the ones returned by :func:`get_country`, so changes to
their :attr:`~.CountryRecord.display_name` or :attr:`~.CountryRecord.full_name` are
visible to all users of the registry. Use a :class:`.CountryCollection` instance for an
independent copy.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Optional

from .collection import Code, CountryCollection
from .names import get_resolver
from .record import CountryRecord
from .util.common import load_package_data
from .util.config import Config

__all__ = [
    "configure",
    "contains",
    "countries",
    "get_country",
    "get_registry",
    "load_records",
    "normalize",
]

log = logging.getLogger(__name__)

#: Guards construction of :data:`_REGISTRY`.
_LOCK = threading.Lock()

#: The shared registry, once built.
_REGISTRY: Optional[CountryCollection] = None

#: Configuration for building the registry; see :func:`configure`.
_CONFIG: Optional[Config] = None


def _read_rows(config: Config) -> list[dict[str, Any]]:
    if config.data_path is None:
        return load_package_data("iso3166")

    import yaml

    with open(Path(config.data_path), encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_records(config: Optional[Config] = None) -> list[CountryRecord]:
    """Load country records from the data file given by `config`.

    Each entry in the file is a mapping with the keys "alpha_2", "alpha_3", "numeric",
    "name", and optionally "official_name" and "common_name". The display name of each
    record is set according to :attr:`.Config.display_names`; see
    :func:`.get_resolver`.

    Raises
    ------
    .MissingValueError
    .FormatError
        if any entry is incomplete or malformed.
    """
    config = config or Config()
    rows = _read_rows(config)

    resolver = get_resolver(
        config, {row.get("alpha_2"): row.get("common_name") for row in rows}
    )

    return [
        CountryRecord(
            row.get("alpha_2"),
            row.get("alpha_3"),
            row.get("numeric"),
            row.get("name"),
            full_name=row.get("official_name"),
            resolver=resolver,
        )
        for row in rows
    ]


def configure(config: Config) -> None:
    """Set the configuration used to build the registry.

    Raises
    ------
    RuntimeError
        if the registry has already been built.
    """
    global _CONFIG

    with _LOCK:
        if _REGISTRY is not None:
            raise RuntimeError("Country registry is already built; cannot configure")
        _CONFIG = config


def get_registry() -> CountryCollection:
    """Return the shared, read-only registry, building it if necessary.

    The registry is built exactly once, even if this function is first called from
    several threads at the same time. If :func:`configure` was not called, the
    configuration is given by :meth:`.Config.load`.
    """
    global _REGISTRY

    if _REGISTRY is None:
        with _LOCK:
            if _REGISTRY is None:
                config = _CONFIG or Config.load()
                registry = CountryCollection.frozen(load_records(config))
                log.info(f"Build shared registry from {len(registry)} records")
                _REGISTRY = registry

    return _REGISTRY


def get_country(code: Code) -> Optional[CountryRecord]:
    """Return the country identified by `code` in the registry, or :any:`None`.

    See :meth:`.CountryCollection.get`.
    """
    return get_registry().get(code)


def contains(code: Code) -> bool:
    """Return :any:`True` if `code` identifies a country in the registry."""
    return get_registry().contains(code)


def normalize(code: Code) -> Optional[str]:
    """Return the canonical form of `code`, or :any:`None` if it is not found.

    See :meth:`.CountryCollection.normalize`.
    """
    return get_registry().normalize(code)


def countries() -> tuple[CountryRecord, ...]:
    """Return all countries in the registry, in order of their alpha-2 codes."""
    return get_registry().records
