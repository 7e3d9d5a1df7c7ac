"""Exceptions raised by :mod:`country_collection`.

"Not found" is never an error: lookups return :any:`None` for codes that are absent.
"""

__all__ = [
    "ArgumentNullError",
    "CountryCollectionError",
    "DuplicateCodeError",
    "FormatError",
    "MissingValueError",
    "ReadOnlyError",
]


class CountryCollectionError(Exception):
    """Base class for errors raised by :mod:`country_collection`."""


class ArgumentNullError(CountryCollectionError, ValueError):
    """A required code argument was :any:`None`."""

    def __init__(self, name: str = "code") -> None:
        self.name = name
        super().__init__(f"{name} must not be None")


class MissingValueError(CountryCollectionError, ValueError):
    """A required field of :class:`.CountryRecord` was :any:`None`."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


class FormatError(CountryCollectionError, ValueError):
    """A code or name does not have the required shape.

    Parameters
    ----------
    field : str
        Name of the offending field, e.g. "alpha_2".
    message : str
        Description of the expected shape.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field} {message}")


class DuplicateCodeError(CountryCollectionError, KeyError):
    """:meth:`.CountryCollection.add` targets a code that is already present."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Country code {self.code!r} already exists"


class ReadOnlyError(CountryCollectionError, TypeError):
    """Mutation was attempted on the shared, read-only registry."""
