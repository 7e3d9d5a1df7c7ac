import logging

import pytest

from country_collection.util import _logging
from country_collection.util._logging import Formatter, StreamHandler, once, setup


def test_once(caplog):
    log = logging.getLogger("country_collection.test_once")

    for _ in range(3):
        once(log, logging.WARNING, "Logged once")

    # Also filtered when logged directly
    log.warning("Logged once")
    log.warning("Logged again")

    assert ["Logged once", "Logged again"] == caplog.messages
    # Function name of the caller is recorded
    assert "test_once" == caplog.records[0].funcName


def test_formatter():
    f = Formatter(use_colour=False)

    def record(name, func, msg):
        return logging.LogRecord(name, logging.INFO, __file__, 0, msg, (), None, func)

    assert ".registry.get_registry  Foo" == f.format(
        record("country_collection.registry", "get_registry", "Foo")
    )
    # Repeated logger name is abbreviated
    assert "...get_registry  Bar" == f.format(
        record("country_collection.registry", "get_registry", "Bar")
    )
    # Other loggers keep the full name
    assert "pycountry.db.__init__  Baz" == f.format(
        record("pycountry.db", "__init__", "Baz")
    )


def test_formatter_colour():
    f = Formatter()
    record = logging.LogRecord(
        "country_collection.names", logging.WARNING, __file__, 0, "Foo", (), None, "f"
    )

    result = f.format(record)

    assert result.startswith("\x1b[")
    assert ".names.f" in result
    assert result.endswith("  Foo")


@pytest.fixture
def console(monkeypatch):
    """The console handler, restored to no output afterwards."""
    handler = _logging._CONSOLE["console"]
    monkeypatch.setattr(handler, "formatter", Formatter(use_colour=False))
    yield handler
    setup(console=False)


def test_setup(capsys, console):
    log = logging.getLogger("country_collection.collection")

    # By default, nothing is written to the console
    log.warning("Not shown")
    assert "" == capsys.readouterr().out

    setup(level=logging.ERROR)
    log.error("Shown")
    log.warning("Not shown")

    assert isinstance(console, StreamHandler)
    # Handler writes to the current sys.stdout, as replaced by capsys
    out = capsys.readouterr().out
    assert "Shown" in out
    assert "Not shown" not in out

    # Setup does not add a second handler
    setup(level=logging.ERROR)
    assert 1 == sum(
        isinstance(h, StreamHandler)
        for h in logging.getLogger("country_collection").handlers
    )

    setup(level=logging.ERROR, console=False)
    log.error("Not shown")
    assert "" == capsys.readouterr().out
