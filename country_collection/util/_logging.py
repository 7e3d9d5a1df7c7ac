"""Logging for :mod:`country_collection`.

The package logs through standard :mod:`logging` loggers named after its modules. On
import, :func:`setup` attaches a console handler to the top-level package logger with
output disabled; call :func:`setup` again with a `level` to see messages.
"""

import logging
import sys
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from logging import Logger, LogRecord

__all__ = [
    "Formatter",
    "OnceFilter",
    "StreamHandler",
    "once",
    "setup",
]

#: Name of the top-level package logger.
PACKAGE = __name__.split(".")[0]

#: Console handler created by :func:`setup`, if any.
_CONSOLE: dict[str, logging.Handler] = dict()


class Formatter(logging.Formatter):
    """Formatter for console output.

    A record from ``country_collection.registry`` emitted in :func:`.get_registry`
    appears as::

        .registry.get_registry  Build shared registry from 249 records

    A further record from the same logger repeats only the function name, after
    "...". With `use_colour`, :mod:`colorama` highlights the logger name.
    """

    def __init__(self, use_colour: bool = True):
        super().__init__()
        self._last_name = None

        if use_colour:
            import colorama

            colorama.just_fix_windows_console()
            self._styles = (
                colorama.Fore.CYAN,
                colorama.Style.DIM,
                colorama.Style.RESET_ALL,
            )
        else:
            self._styles = ("", "", "")

    def format(self, record: "LogRecord") -> str:
        name = record.name
        if name == PACKAGE or name.startswith(f"{PACKAGE}."):
            name = name[len(PACKAGE) :]

        highlight, dim, reset = self._styles
        if name == self._last_name:
            prefix = f"{dim}..."
        else:
            self._last_name = name
            prefix = f"{highlight}{name}."

        return f"{prefix}{record.funcName}{reset}  {record.getMessage()}"


class OnceFilter(logging.Filter):
    """Reject records whose message is `msg`."""

    __slots__ = ("msg",)

    def __init__(self, msg: str) -> None:
        self.msg = msg

    def filter(self, record: "LogRecord") -> bool:
        return record.msg != self.msg


class StreamHandler(logging.StreamHandler):
    """Handler writing to the :mod:`sys` stream named `stream_name`.

    The stream is looked up on every write, so replacements of :data:`sys.stdout`,
    e.g. by :mod:`pytest` output capture, are respected.
    """

    def __init__(self, stream_name: str = "stdout"):
        logging.Handler.__init__(self)
        self.stream_name = stream_name

    @property
    def stream(self):
        return getattr(sys, self.stream_name)


def once(logger: "Logger", level: int, *args, **kwargs) -> None:
    """Log a message on `logger`, then filter out any repeat of the same message."""
    # Attribute the record to the caller of once()
    kwargs.setdefault("stacklevel", 2)
    logger.log(level, *args, **kwargs)
    logger.addFilter(OnceFilter(args[0]))


def setup(level: Union[str, int] = 99, console: bool = True) -> None:
    """Configure console output from the package logger.

    Parameters
    ----------
    level : str or int, optional
        Minimum level of records written to the console. The default, 99, writes
        nothing.
    console : bool, optional
        If :any:`False`, write nothing regardless of `level`.
    """
    if "console" not in _CONSOLE:
        handler = StreamHandler("stdout")
        handler.setFormatter(Formatter())
        logging.getLogger(PACKAGE).addHandler(handler)
        _CONSOLE["console"] = handler

        # Debug messages from loading the pycountry databases are not of interest
        logging.getLogger("pycountry.db").setLevel(logging.WARNING)

    _CONSOLE["console"].setLevel(level if console else 99)
