"""Display-name resolvers using :mod:`pycountry`.

A resolver is any callable that takes an alpha-2 code and returns a name, or
:any:`None` if it has none; see :data:`.NameResolver`.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from pycountry import LOCALES_DIR, countries

from .util._logging import once

if TYPE_CHECKING:
    from gettext import NullTranslations

    from .record import NameResolver
    from .util.config import Config

__all__ = [
    "get_resolver",
    "localized_resolver",
    "pycountry_name",
]

log = logging.getLogger(__name__)


def pycountry_name(alpha_2: str) -> Optional[str]:
    """Return the English name of the country with code `alpha_2`.

    This is the `common_name` of the :mod:`pycountry` ISO 3166-1 entry, if any, else its
    `name`. If `alpha_2` is not in the :mod:`pycountry` database, returns :any:`None`.
    """
    country = countries.get(alpha_2=alpha_2)
    if country is None:
        return None
    return getattr(country, "common_name", None) or country.name


@lru_cache
def _translation(language: str) -> "NullTranslations":
    import gettext

    try:
        return gettext.translation("iso3166-1", LOCALES_DIR, languages=[language])
    except FileNotFoundError:
        once(log, logging.WARNING, f"No ISO 3166-1 names for locale {language!r}")
        return gettext.NullTranslations()


def localized_resolver(language: str) -> "NameResolver":
    """Return a resolver giving names translated to `language`.

    The translations are the "iso3166-1" :mod:`gettext` catalogs distributed with
    :mod:`pycountry`. If there is no catalog for `language`, a warning is logged and
    the resolver returns untranslated names, like :func:`pycountry_name`.
    """
    translation = _translation(language)

    def resolve(alpha_2: str) -> Optional[str]:
        name = pycountry_name(alpha_2)
        return None if name is None else translation.gettext(name)

    return resolve


def get_resolver(
    config: "Config", common_names: Optional[Mapping[str, str]] = None
) -> Optional["NameResolver"]:
    """Return the resolver selected by `config`, if any.

    Parameters
    ----------
    config
        :attr:`.Config.display_names` selects the resolver:

        - "data": look up `common_names`.
        - "pycountry": :func:`pycountry_name`, or :func:`localized_resolver` if
          :attr:`.Config.locale` is set; for codes without a name, look up
          `common_names`.
        - "short": no resolver; the record's short name is used.
    common_names : mapping, optional
        Common names from the data file, keyed by alpha-2 code.
    """
    fallback = (common_names or {}).get

    if config.display_names == "short":
        return None
    elif config.display_names == "data":
        return fallback

    names = localized_resolver(config.locale) if config.locale else pycountry_name

    def resolve(alpha_2: str) -> Optional[str]:
        return names(alpha_2) or fallback(alpha_2)

    return resolve
