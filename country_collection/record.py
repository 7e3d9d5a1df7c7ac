"""Country records."""

from collections.abc import Callable
from typing import Optional

from .exceptions import FormatError, MissingValueError
from .index import is_numeric, keys_equal

__all__ = [
    "CountryRecord",
    "NameResolver",
]

#: Signature of a display-name resolver: given an alpha-2 code, return a name or
#: :any:`None`.
NameResolver = Callable[[str], Optional[str]]


def _check(field: str, value, length: int, kind: str) -> str:
    if value is None:
        raise MissingValueError(field)
    elif not isinstance(value, str):
        raise FormatError(field, f"must be str; got {type(value).__name__}")

    ok = value.isalpha() if kind == "letters" else is_numeric(value)
    if len(value) != length or not ok:
        raise FormatError(field, f"must be exactly {length} {kind}; got {value!r}")

    return value


class CountryRecord:
    """Information about one country.

    The three codes and the ISO short name are read-only. :attr:`display_name` and
    :attr:`full_name` may be changed; a change is visible through every reference to
    the same record, including records in the shared registry.

    Parameters
    ----------
    alpha_2 : str
        ISO 3166-1 alpha-2 code: exactly 2 letters.
    alpha_3 : str
        ISO 3166-1 alpha-3 code: exactly 3 letters.
    numeric : str
        ISO 3166-1 numeric code: exactly 3 digits, zero-padded, e.g. "020".
    short_name : str
        ISO 3166-1 English short name.
    display_name : str, optional
        General name for display. If not given, `resolver` is called with `alpha_2`; if
        that gives no name, `short_name` is used.
    full_name : str, optional
        Formal name.
    resolver : callable, optional
        See :data:`NameResolver`.

    Raises
    ------
    .MissingValueError
        if any of `alpha_2`, `alpha_3`, `numeric`, or `short_name` is :any:`None`.
    .FormatError
        if any of the codes does not have the expected length and characters.
    """

    __slots__ = (
        "_alpha_2",
        "_alpha_3",
        "_numeric",
        "_short_name",
        "display_name",
        "full_name",
    )

    #: General name for display.
    display_name: str

    #: Formal name; may be empty or :any:`None`.
    full_name: Optional[str]

    def __init__(
        self,
        alpha_2: str,
        alpha_3: str,
        numeric: str,
        short_name: str,
        display_name: Optional[str] = None,
        full_name: Optional[str] = None,
        *,
        resolver: Optional[NameResolver] = None,
    ) -> None:
        if short_name is None:
            raise MissingValueError("short_name")

        self._alpha_2 = _check("alpha_2", alpha_2, 2, "letters")
        self._alpha_3 = _check("alpha_3", alpha_3, 3, "letters")
        self._numeric = _check("numeric", numeric, 3, "digits")
        self._short_name = short_name

        if display_name is None:
            display_name = (resolver and resolver(alpha_2)) or short_name

        self.display_name = display_name
        self.full_name = full_name

    @property
    def alpha_2(self) -> str:
        """ISO 3166-1 alpha-2 code, e.g. "AD"."""
        return self._alpha_2

    @property
    def alpha_3(self) -> str:
        """ISO 3166-1 alpha-3 code, e.g. "AND"."""
        return self._alpha_3

    @property
    def numeric(self) -> str:
        """ISO 3166-1 numeric code as a zero-padded string, e.g. "020"."""
        return self._numeric

    @property
    def short_name(self) -> str:
        """ISO 3166-1 English short name."""
        return self._short_name

    @property
    def codes(self) -> tuple[str, str, str]:
        """The alpha-2, alpha-3, and numeric codes."""
        return self._alpha_2, self._alpha_3, self._numeric

    def matches(self, code: str) -> bool:
        """Return :any:`True` if `code` identifies this record.

        Unlike :meth:`__eq__`, this uses the case- and zero-padding-tolerant comparison
        of :func:`.keys_equal`.
        """
        return any(keys_equal(code, c) for c in self.codes)

    def copy(self) -> "CountryRecord":
        """Return an independent copy of the record."""
        return type(self)(
            *self.codes, self._short_name, self.display_name, self.full_name
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, CountryRecord):
            return NotImplemented
        return self.codes == other.codes

    def __hash__(self) -> int:
        return hash(self.codes)

    def __int__(self) -> int:
        return int(self._numeric)

    def __str__(self) -> str:
        return self._alpha_2

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self._alpha_2} {self._alpha_3} {self._numeric}: "
            f"{self.display_name!r}>"
        )
