"""Country collections."""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional, Union

from .exceptions import ArgumentNullError, DuplicateCodeError, ReadOnlyError
from .index import LookupIndex, is_numeric
from .record import CountryRecord

__all__ = ["CountryCollection"]

log = logging.getLogger(__name__)

#: Type of codes accepted by :meth:`.CountryCollection.get` and related methods.
Code = Union[str, int]


class CountryCollection:
    """Collection of countries, searchable by any of their codes.

    A new instance contains copies of the records in the shared registry (see
    :func:`.get_registry`), or of `records`, if given. Countries can be added and
    removed with :meth:`add` and :meth:`remove`; this does not affect the registry or
    any other instance.

    The shared registry is itself a CountryCollection, created with :meth:`frozen`, that
    cannot be modified.

    Codes given to :meth:`get`, :meth:`contains`, :meth:`normalize`, :meth:`remove`,
    and the ``[]`` and ``in`` operators may be:

    - :class:`str`: an alpha-2, alpha-3, or numeric code. Letter case is ignored, and
      numeric codes may have fewer or more leading zeros ("20" or "0020" for "020").
    - :class:`int`: a numeric code.

    A code of :any:`None` raises :class:`.ArgumentNullError`.

    This class is not safe for concurrent use of :meth:`add` or :meth:`remove` from
    multiple threads.

    Parameters
    ----------
    records : iterable of .CountryRecord, optional
        Records to copy into the new collection.

    Examples
    --------
    >>> c = CountryCollection()
    >>> c.normalize("usa")
    'USA'
    >>> record = c.add("ZZ", "ZZZ", "999", "Test")
    >>> "zzz" in c
    True
    """

    __slots__ = ("_countries", "_index", "_numeric", "_read_only")

    _countries: list[CountryRecord]

    #: Records by alpha-2, alpha-3, and numeric code.
    _index: LookupIndex[CountryRecord]

    #: Records by integer value of the numeric code.
    _numeric: dict[int, CountryRecord]

    def __init__(self, records: Optional[Iterable[CountryRecord]] = None) -> None:
        if records is None:
            from .registry import get_registry

            records = get_registry()

        self._load(r.copy() for r in records)
        self._read_only = False

    @classmethod
    def frozen(cls, records: Iterable[CountryRecord]) -> "CountryCollection":
        """Create a read-only collection that holds `records` themselves, not copies.

        :meth:`add` and :meth:`remove` on the result raise :class:`.ReadOnlyError`.
        """
        result = cls.__new__(cls)
        result._load(records)
        result._read_only = True
        return result

    def _load(self, records: Iterable[CountryRecord]) -> None:
        self._countries = list(records)
        self._index = LookupIndex()
        self._numeric = dict()

        # Insert all alpha-2 codes, then all alpha-3, then all numeric
        for i in range(3):
            for record in self._countries:
                code = record.codes[i]
                if code in self._index:
                    raise DuplicateCodeError(code)
                self._index[code] = record

        self._numeric.update((int(record), record) for record in self._countries)

    @property
    def read_only(self) -> bool:
        """:any:`True` if the collection cannot be modified."""
        return self._read_only

    @property
    def records(self) -> tuple[CountryRecord, ...]:
        """All records, in the order they were added."""
        return tuple(self._countries)

    def get(self, code: Code) -> Optional[CountryRecord]:
        """Return the country identified by `code`, or :any:`None` if there is none.

        Raises
        ------
        .ArgumentNullError
            if `code` is :any:`None`.
        TypeError
            if `code` is neither :class:`str` nor :class:`int`.
        """
        if code is None:
            raise ArgumentNullError("code")
        elif isinstance(code, int):
            return self._numeric.get(code)
        elif isinstance(code, str):
            return self._index.get(code)
        raise TypeError(f"code must be str or int; got {type(code).__name__}")

    def contains(self, code: Code) -> bool:
        """Return :any:`True` if a country is identified by `code`."""
        return self.get(code) is not None

    def normalize(self, code: Code) -> Optional[str]:
        """Return the canonical form of `code`, or :any:`None` if it is not found.

        The form of the result matches the form of `code`:

        - :class:`int` or all digits: the 3-digit numeric code, e.g. "020" for "20".
        - 2 characters: the alpha-2 code, e.g. "US" for "us".
        - 3 characters: the alpha-3 code, e.g. "USA" for "usa".
        """
        record = self.get(code)

        if record is None:
            return None
        elif isinstance(code, int) or is_numeric(code):
            return record.numeric
        elif len(code) == 2:
            return record.alpha_2
        elif len(code) == 3:
            return record.alpha_3
        else:
            return None

    def add(
        self,
        alpha_2: str,
        alpha_3: str,
        numeric: str,
        short_name: str,
        display_name: Optional[str] = None,
        full_name: Optional[str] = None,
    ) -> CountryRecord:
        """Add a country and return its record.

        See :class:`.CountryRecord` for the parameters.

        Raises
        ------
        .MissingValueError
            if a required argument is :any:`None`.
        .FormatError
            if a code is malformed.
        .DuplicateCodeError
            if any of the codes already identifies a country in the collection.
        .ReadOnlyError
            if the collection is read-only.
        """
        self._check_writable()

        record = CountryRecord(
            alpha_2, alpha_3, numeric, short_name, display_name, full_name
        )

        for code in record.codes:
            if code in self._index:
                raise DuplicateCodeError(code)

        self._countries.append(record)
        for code in record.codes:
            self._index[code] = record
        self._numeric[int(record)] = record

        log.debug(f"Add {record!r}")
        return record

    def remove(self, code: Code) -> None:
        """Remove the country identified by `code`.

        The country is removed under all its codes. If no country is identified by
        `code`, nothing happens.

        Raises
        ------
        .ArgumentNullError
            if `code` is :any:`None`.
        .ReadOnlyError
            if the collection is read-only.
        """
        if code is None:
            raise ArgumentNullError("code")
        self._check_writable()

        record = self.get(code)
        if record is None:
            return

        self._countries.remove(record)
        for c in record.codes:
            del self._index[c]
        del self._numeric[int(record)]

        log.debug(f"Remove {record!r}")

    def _check_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyError(f"{type(self).__name__} is read-only")

    def __contains__(self, code: Code) -> bool:
        return self.contains(code)

    def __getitem__(self, code: Code) -> Optional[CountryRecord]:
        """Same as :meth:`get`: :any:`None` if no country is identified by `code`."""
        return self.get(code)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._countries)

    def __len__(self) -> int:
        return len(self._countries)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}{' (read-only)' if self._read_only else ''}: "
            f"{len(self)} countries>"
        )
