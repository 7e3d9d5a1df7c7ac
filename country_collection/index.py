"""Lookup index for country codes.

Any of the three forms of a country code (alpha-2, alpha-3, or numeric) resolves to the
same record. Matching is tolerant of letter case ("us", "US", "Us") and of leading
zeros on numeric codes ("20", "020", "0020"). This tolerance is expressed by a pair of
pure functions, :func:`keys_equal` and :func:`key_hash`, that parameterize the generic
:class:`LookupIndex` mapping.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from functools import reduce
from operator import xor
from typing import Generic, Optional, TypeVar, Union

__all__ = [
    "LookupIndex",
    "is_numeric",
    "key_hash",
    "keys_equal",
]

V = TypeVar("V")


def is_numeric(code: str) -> bool:
    """Return :any:`True` if `code` is non-empty and contains only ASCII digits."""
    return code.isascii() and code.isdigit()


def keys_equal(a: str, b: str) -> bool:
    """Return :any:`True` if lookup keys `a` and `b` identify the same code.

    - Keys of equal length are compared without regard to case.
    - Keys of different lengths are equal only if both are numeric and they are
      identical once leading zeros are removed. A key of all zeros is thus equal to any
      other key of all zeros, but to no other numeric key.

    The result does not depend on the order of the arguments.
    """
    if len(a) == len(b):
        return a.upper() == b.upper()
    elif is_numeric(a) and is_numeric(b):
        return a.lstrip("0") == b.lstrip("0")
    else:
        return False


def key_hash(key: str) -> int:
    """Hash `key` consistently with :func:`keys_equal`.

    The character codes of the key are folded with exclusive-or: after removing leading
    zeros for a numeric key, or after converting to upper case otherwise. A numeric key
    of all zeros hashes to 0.
    """
    return reduce(xor, map(ord, key.lstrip("0") if is_numeric(key) else key.upper()), 0)


class LookupIndex(MutableMapping[str, V], Generic[V]):
    """Mapping with string keys compared using custom equality and hash functions.

    Entries are stored in buckets, one per distinct hash value. Within a bucket, keys
    are compared with `equal`. Setting a key that is equal to a stored key replaces the
    value; the stored key is kept.

    Iteration order over keys is arbitrary.

    Parameters
    ----------
    data : mapping or iterable of (key, value), optional
        Initial contents.
    equal : callable, optional
        Key equality; default :func:`keys_equal`.
    hash : callable, optional
        Key hash; default :func:`key_hash`. For any keys `a` and `b`, `equal(a, b)`
        **must** imply `hash(a) == hash(b)`.
    """

    __slots__ = ("_buckets", "_equal", "_hash", "_len")

    _buckets: dict[int, list[list]]

    def __init__(
        self,
        data: Union[Mapping[str, V], Iterable[tuple[str, V]]] = (),
        *,
        equal: Callable[[str, str], bool] = keys_equal,
        hash: Callable[[str], int] = key_hash,
    ) -> None:
        self._buckets = dict()
        self._equal = equal
        self._hash = hash
        self._len = 0
        self.update(data)

    def _locate(self, key: str) -> tuple[int, Optional[list]]:
        """Return the hash of `key` and the stored [key, value] entry equal to it."""
        h = self._hash(key)
        for entry in self._buckets.get(h, ()):
            if self._equal(entry[0], key):
                return h, entry
        return h, None

    def __getitem__(self, key: str) -> V:
        _, entry = self._locate(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __setitem__(self, key: str, value: V) -> None:
        h, entry = self._locate(key)
        if entry is None:
            self._buckets.setdefault(h, []).append([key, value])
            self._len += 1
        else:
            entry[1] = value

    def __delitem__(self, key: str) -> None:
        h, entry = self._locate(key)
        if entry is None:
            raise KeyError(key)

        bucket = self._buckets[h]
        bucket.remove(entry)
        if not bucket:
            del self._buckets[h]
        self._len -= 1

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets.values():
            yield from [entry[0] for entry in bucket]

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self._len} keys>"
