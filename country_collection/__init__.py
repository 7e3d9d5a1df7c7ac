from importlib.metadata import PackageNotFoundError, version

from country_collection.collection import CountryCollection
from country_collection.exceptions import (
    ArgumentNullError,
    CountryCollectionError,
    DuplicateCodeError,
    FormatError,
    MissingValueError,
    ReadOnlyError,
)
from country_collection.record import CountryRecord
from country_collection.registry import (
    configure,
    contains,
    countries,
    get_country,
    get_registry,
    normalize,
)
from country_collection.util._logging import setup as setup_logging
from country_collection.util.config import Config

__all__ = [
    "ArgumentNullError",
    "Config",
    "CountryCollection",
    "CountryCollectionError",
    "CountryRecord",
    "DuplicateCodeError",
    "FormatError",
    "MissingValueError",
    "ReadOnlyError",
    "configure",
    "contains",
    "countries",
    "get_country",
    "get_registry",
    "normalize",
]

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed
    __version__ = "999"

# By default, no logging to console
setup_logging(console=False)
