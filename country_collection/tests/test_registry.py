"""Tests of :mod:`country_collection.registry`."""

import logging
import threading
from unittest.mock import patch

import pytest

import country_collection
from country_collection import (
    ArgumentNullError,
    Config,
    CountryCollection,
    FormatError,
    MissingValueError,
    ReadOnlyError,
)
from country_collection.registry import load_records


@pytest.mark.parametrize("code", ["US", "USA", "840", "us", "usa", "20", 840, 20])
def test_contains(code) -> None:
    assert country_collection.contains(code)


@pytest.mark.parametrize("code", ["ZZ", "ZZZ", "000", "zz", "zzz", "00", 9999, 0])
def test_contains_invalid(code) -> None:
    assert not country_collection.contains(code)
    assert None is country_collection.get_country(code)
    assert None is country_collection.normalize(code)


@pytest.mark.parametrize(
    "func",
    [
        country_collection.contains,
        country_collection.get_country,
        country_collection.normalize,
    ],
)
def test_null(func) -> None:
    with pytest.raises(ArgumentNullError):
        func(None)


def test_get_country() -> None:
    us = country_collection.get_country("US")

    assert us is country_collection.get_country("us")
    assert us is country_collection.get_country("USA")
    assert us is country_collection.get_country("840")
    assert us is country_collection.get_country(840)

    assert country_collection.get_country("20") is country_collection.get_country("020")


@pytest.mark.parametrize(
    "code, expected",
    [("us", "US"), ("usa", "USA"), ("840", "840"), (840, "840"), ("20", "020")],
)
def test_normalize(code, expected) -> None:
    assert expected == country_collection.normalize(code)


def test_countries(registry) -> None:
    result = country_collection.countries()

    assert 249 == len(result)

    # Ordered by alpha-2 code
    codes = [r.alpha_2 for r in result]
    assert sorted(codes) == codes

    # Records are those of the registry
    assert all(a is b for a, b in zip(result, registry))


def test_all_forms() -> None:
    for r in country_collection.countries():
        assert r is country_collection.get_country(r.alpha_2)
        assert r is country_collection.get_country(r.alpha_3)
        assert r is country_collection.get_country(r.numeric)
        assert r is country_collection.get_country(int(r))
        assert r.numeric == country_collection.normalize(r.numeric)


def test_registry_read_only(registry) -> None:
    assert registry.read_only
    assert registry is country_collection.get_registry()

    with pytest.raises(ReadOnlyError):
        registry.add("ZZ", "ZZZ", "999", "Test")
    with pytest.raises(ReadOnlyError):
        registry.remove("US")
    with pytest.raises(ArgumentNullError):
        registry.remove(None)

    assert "US" in registry


def test_instance_independent(registry) -> None:
    c = CountryCollection()
    c.add("ZZ", "ZZZ", "999", "Test")
    c.remove("US")

    assert "ZZ" in c
    assert not country_collection.contains("ZZ")
    assert "ZZ" not in CountryCollection()
    assert country_collection.contains("US")
    assert country_collection.contains(840)


def test_shared_records(monkeypatch) -> None:
    """Changes to the display fields of registry records are visible to all users."""
    us = country_collection.get_country("US")

    monkeypatch.setattr(us, "display_name", "USA!")
    monkeypatch.setattr(us, "full_name", "The USA")

    assert "USA!" == country_collection.get_country("US").display_name
    assert "The USA" == country_collection.get_country(840).full_name

    # A new instance copies the current values
    assert "USA!" == CountryCollection()["US"].display_name


class TestGetRegistry:
    def test_configure(self, registry, fresh_registry) -> None:
        fresh_registry.configure(Config(display_names="short"))
        result = fresh_registry.get_registry()

        assert "United States of America (the)" == result["US"].display_name

        # Cannot configure once built
        with pytest.raises(RuntimeError, match="already built"):
            fresh_registry.configure(Config())

        # The registry built for the test session is not affected
        assert result is not registry
        assert "United States" == registry["US"].display_name

    def test_default_config(self, fresh_registry, tmp_path, monkeypatch) -> None:
        """Without :func:`.configure`, the user configuration file is used."""
        path = tmp_path.joinpath("config.yaml")
        path.write_text("display names: short\n")
        monkeypatch.setattr(
            "country_collection.util.config.user_config_path", lambda: path
        )

        result = fresh_registry.get_registry()

        assert "United States of America (the)" == result["US"].display_name

    def test_log(self, caplog, fresh_registry) -> None:
        caplog.set_level(logging.INFO, logger="country_collection")
        fresh_registry.configure(Config())

        fresh_registry.get_registry()
        fresh_registry.get_registry()

        assert ["Build shared registry from 249 records"] == caplog.messages

    def test_threads(self, fresh_registry) -> None:
        """The registry is built exactly once under concurrent first access."""
        fresh_registry.configure(Config())

        N = 16
        barrier = threading.Barrier(N)
        results = [None] * N

        def target(i: int) -> None:
            barrier.wait()
            results[i] = fresh_registry.get_registry()

        with patch.object(
            fresh_registry, "load_records", wraps=fresh_registry.load_records
        ) as mock:
            threads = [threading.Thread(target=target, args=(i,)) for i in range(N)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        assert 1 == mock.call_count
        assert all(r is results[0] for r in results)
        assert 249 == len(results[0])


class TestLoadRecords:
    def test_default(self) -> None:
        result = load_records(Config(display_names="data"))

        assert 249 == len(result)

        ad = result[0]
        assert ("AD", "AND", "020") == ad.codes
        assert "Andorra" == ad.short_name
        assert "Andorra" == ad.display_name
        assert "The Principality of Andorra" == ad.full_name

        # Entry with an empty official name
        fk = next(r for r in result if r.alpha_2 == "FK")
        assert "" == fk.full_name
        assert "Falkland Islands" == fk.display_name

        # Records are new objects on each call
        assert ad is not load_records(Config(display_names="data"))[0]

    def test_short(self) -> None:
        result = {r.alpha_2: r for r in load_records(Config(display_names="short"))}

        assert "Bahamas (the)" == result["BS"].display_name
        assert "Korea (the Republic of)" == result["KR"].display_name

    def test_pycountry(self) -> None:
        result = {r.alpha_2: r for r in load_records(Config(display_names="pycountry"))}

        # pycountry name
        assert "Bahamas" in result["BS"].display_name
        # pycountry common_name
        assert "Bolivia" == result["BO"].display_name
        # Short names are unchanged
        assert "Bahamas (the)" == result["BS"].short_name

    @pytest.fixture
    def data_file(self, tmp_path):
        path = tmp_path.joinpath("countries.yaml")
        path.write_text(
            """
- alpha_2: "XA"
  alpha_3: "XAA"
  numeric: "901"
  name: "Example A"
- alpha_2: "XB"
  alpha_3: "XBB"
  numeric: "902"
  name: "Example B"
  official_name: "The Example Republic of B"
  common_name: "B-land"
"""
        )
        return path

    def test_data_path(self, data_file) -> None:
        result = load_records(Config(data_path=data_file))

        assert 2 == len(result)
        assert "Example A" == result[0].display_name
        assert None is result[0].full_name
        assert "B-land" == result[1].display_name

        c = CountryCollection(result)
        assert "XB" == c.normalize("xb")
        assert "901" == c.normalize(901)

    @pytest.mark.parametrize(
        "text, exc, field",
        [
            ("{alpha_2: XA, alpha_3: XAA, name: A}", MissingValueError, "numeric"),
            (
                "{alpha_2: XA, alpha_3: XAA, numeric: 901, name: A}",
                FormatError,
                "numeric",
            ),
            (
                "{alpha_2: XA, alpha_3: XA, numeric: '901', name: A}",
                FormatError,
                "alpha_3",
            ),
        ],
    )
    def test_data_path_invalid(self, tmp_path, text, exc, field) -> None:
        path = tmp_path.joinpath("countries.yaml")
        path.write_text(f"- {text}")

        with pytest.raises(exc) as e:
            load_records(Config(data_path=path))

        assert field == e.value.field
