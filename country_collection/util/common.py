import logging
from pathlib import Path
from typing import Any, Optional

log = logging.getLogger(__name__)

#: Directory containing country_collection.__init__.
PACKAGE_PATH = Path(__file__).parents[1]

#: Package data already loaded with :func:`load_package_data`.
PACKAGE_DATA: dict[str, Any] = dict()


def _make_path(
    base_path: Path, *parts: str, default_suffix: Optional[str] = None
) -> Path:
    p = base_path.joinpath(*parts)
    return p.with_suffix(p.suffix or default_suffix) if default_suffix else p


def load_package_data(*parts: str, suffix: Optional[str] = ".yaml") -> Any:
    """Load a :mod:`country_collection` package data file and return its contents.

    Data is re-used if already loaded.

    Example
    -------

    The single call:

    >>> rows = load_package_data("iso3166")

    1. loads the file :file:`data/iso3166.yaml`, parsing its contents,
    2. stores those values at ``PACKAGE_DATA["iso3166"]`` for use by other code, and
    3. returns the loaded values.

    Parameters
    ----------
    parts : iterable of str
        Used to construct a path under :file:`country_collection/data/`.
    suffix : str, optional
        File name suffix, including, the ".", e.g. :file:`.yaml`.

    Raises
    ------
    ValueError
        if the file suffix is not supported.
    """
    key = " ".join(parts)
    if key in PACKAGE_DATA:
        log.debug(f"{repr(key)} already loaded; skip")
        return PACKAGE_DATA[key]

    path = _make_path(PACKAGE_PATH / "data", *parts, default_suffix=suffix)

    if path.suffix == ".yaml":
        import yaml

        with open(path, encoding="utf-8") as f:
            PACKAGE_DATA[key] = yaml.safe_load(f)
    else:
        raise ValueError(path.suffix)

    return PACKAGE_DATA[key]
