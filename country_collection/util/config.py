import logging
import os
from collections.abc import Hashable
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Literal, Optional

log = logging.getLogger(__name__)

#: Values for :attr:`.Config.display_names`.
DISPLAY_NAMES = ("data", "pycountry", "short")


def _display_names_factory() -> str:
    """Default value for :attr:`.Config.display_names`."""
    return os.environ.get("COUNTRY_COLLECTION_DISPLAY_NAMES", "") or "data"


def _locale_factory() -> Optional[str]:
    """Default value for :attr:`.Config.locale`."""
    return os.environ.get("COUNTRY_COLLECTION_LOCALE", "") or None


def user_config_path() -> Path:
    """Path of the user's configuration file.

    This is :file:`config.yaml` within the directory given by
    :func:`.platformdirs.user_config_path`, for instance
    :file:`$HOME/.config/country-collection/config.yaml`.
    """
    from platformdirs import user_config_path

    return user_config_path("country-collection").joinpath("config.yaml")


@dataclass
class ConfigHelper:
    """Mix-in for :class:`dataclass`-based configuration classes.

    :meth:`read_file` accepts names with spaces or hyphens in place of underscores, so
    that a file may contain, e.g., "display names" or "display-names" for the field
    `display_names`.
    """

    @classmethod
    def _canonical_name(cls, name: Hashable) -> Optional[str]:
        """Return the field name for `name`, or :any:`None` if there is none."""
        result = str(name).replace(" ", "_").replace("-", "_")
        return result if result in {f.name for f in fields(cls)} else None

    def read_file(self, path: Path, fail="raise") -> None:
        """Update configuration from file.

        Parameters
        ----------
        path
            to a :file:`.yaml` or :file:`.json` file containing a top-level mapping.
        fail : str
            if "raise" (the default), any names in `path` which do not match fields of
            the dataclass raise a ValueError. Otherwise, a message is logged.
        """
        if path.suffix == ".yaml":
            import yaml

            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif path.suffix == ".json":
            import json

            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise NotImplementedError(f"Read from {path.suffix}")

        for key, value in (data or {}).items():
            name = self._canonical_name(key)
            if name:
                setattr(self, name, value)
                continue

            msg = f"{type(self).__name__} has no field for {key!r} in {path.name}"
            if fail == "raise":
                raise ValueError(msg)
            log.info(f"{msg}; ignored")


@dataclass
class Config(ConfigHelper):
    """Settings for building the shared :mod:`country_collection` registry.

    Default values are taken from the environment variables
    ``COUNTRY_COLLECTION_DISPLAY_NAMES`` and ``COUNTRY_COLLECTION_LOCALE``, if set.
    """

    #: Source of :attr:`.CountryRecord.display_name` for registry records:
    #:
    #: - "data": the common name in the package data file.
    #: - "pycountry": the name from :mod:`pycountry`, translated to :attr:`locale` if
    #:   that is set. Codes unknown to :mod:`pycountry` use the common name.
    #: - "short": the ISO 3166-1 short name.
    display_names: Literal["data", "pycountry", "short"] = field(
        default_factory=_display_names_factory  # type: ignore [arg-type]
    )

    #: Language code, e.g. "de" or "pt_BR", for translated display names.
    locale: Optional[str] = field(default_factory=_locale_factory)

    #: Path to a YAML file with country data, used instead of the package data file.
    #: The file must have the same structure as :file:`data/iso3166.yaml`.
    data_path: Optional[Path] = None

    def __post_init__(self) -> None:
        self.check()

    def check(self) -> None:
        """Check the settings.

        Raises
        ------
        ValueError
            if :attr:`display_names` is not one of the supported values.
        """
        if self.display_names not in DISPLAY_NAMES:
            raise ValueError(
                f"display_names={self.display_names!r}; expected one of {DISPLAY_NAMES}"
            )
        if self.data_path is not None:
            self.data_path = Path(self.data_path)

    def read_file(self, path: Path, fail="raise") -> None:
        super().read_file(path, fail)
        self.check()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Return a Config with defaults, updated from the user's configuration file.

        Parameters
        ----------
        path : optional
            Configuration file to read. Default: :func:`user_config_path`. If the file
            does not exist, only the defaults are used.
        """
        result = cls()
        path = path or user_config_path()
        if path.exists():
            log.info(f"Read configuration from {path}")
            result.read_file(path)
        return result
