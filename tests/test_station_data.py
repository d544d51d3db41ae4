"""
Tests for the station registry and the response cache.
"""

import json

import pytest  # type: ignore
from unittest.mock import Mock

from src.fieldclimate_et0.core import constants
from src.fieldclimate_et0.services import ResponseCache, StationRegistry


class TestStationRegistry:
    """Test cases for StationRegistry."""

    def test_known_station(self):
        registry = StationRegistry(
            stations={"ABC": {"latitude": -10.5, "longitude": -44.0, "altitude": 500, "timezone": -3}},
            logger=Mock()
        )

        station = registry.get("ABC")

        assert station.station_id == "ABC"
        assert station.latitude == -10.5
        assert station.altitude == 500
        assert "ABC" in registry
        assert len(registry) == 1

    def test_unknown_station_gets_default(self):
        registry = StationRegistry(logger=Mock())

        station = registry.get("UNKNOWN1")

        assert station.station_id == "UNKNOWN1"
        assert station.latitude == -12.15
        assert station.longitude == -45.00
        assert station.altitude == 400
        assert station.timezone == -3
        assert "UNKNOWN1" not in registry

    def test_custom_default(self):
        registry = StationRegistry(default={"latitude": -15.0}, logger=Mock())

        station = registry.get("X")

        assert station.latitude == -15.0
        assert station.altitude == constants.DEFAULT_ALTITUDE

    def test_bundled_file(self):
        registry = StationRegistry.from_file(logger=Mock())
        assert constants.DEFAULT_STATION_ID in registry

    def test_from_file(self, tmp_path):
        path = tmp_path / "stations.json"
        path.write_text(json.dumps({
            "default": {"latitude": -9.0},
            "stations": {"S1": {"latitude": -11.0, "day_of_year": 100}},
        }), encoding="utf-8")

        registry = StationRegistry.from_file(path, logger=Mock())

        assert registry.get("S1").day_of_year == 100
        assert registry.get("S2").latitude == -9.0

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            StationRegistry.from_file(tmp_path / "absent.json")

    def test_from_file_not_an_object(self, tmp_path):
        path = tmp_path / "stations.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError):
            StationRegistry.from_file(path)

    def test_registry_is_isolated_from_input(self):
        stations = {"ABC": {"latitude": -10.0}}
        registry = StationRegistry(stations=stations, logger=Mock())

        stations["ABC"]["latitude"] = 0.0

        assert registry.get("ABC").latitude == -10.0


class TestResponseCache:
    """Test cases for ResponseCache."""

    def test_set_and_get(self, fake_clock):
        cache = ResponseCache(ttl_seconds=60, clock=fake_clock)

        cache.set("k", {"v": 1})

        assert cache.get("k") == {"v": 1}
        assert len(cache) == 1

    def test_entries_expire(self, fake_clock):
        cache = ResponseCache(ttl_seconds=60, clock=fake_clock)
        cache.set("k", "v")

        fake_clock.advance(59)
        assert cache.get("k") == "v"

        fake_clock.advance(1)
        assert cache.get("k") is None
        assert len(cache) == 0

    def test_disabled_cache(self, fake_clock):
        cache = ResponseCache(ttl_seconds=0, clock=fake_clock)
        cache.set("k", "v")

        assert not cache.enabled
        assert cache.get("k") is None

    def test_get_or_fetch(self, fake_clock):
        cache = ResponseCache(ttl_seconds=60, clock=fake_clock)
        fetch = Mock(return_value=["station"])

        assert cache.get_or_fetch(("stations",), fetch) == ["station"]
        assert cache.get_or_fetch(("stations",), fetch) == ["station"]
        fetch.assert_called_once()

        fake_clock.advance(61)
        cache.get_or_fetch(("stations",), fetch)
        assert fetch.call_count == 2

    def test_invalidate_and_clear(self, fake_clock):
        cache = ResponseCache(ttl_seconds=60, clock=fake_clock)
        cache.set("a", 1)
        cache.set("b", 2)

        cache.invalidate("a")
        assert cache.get("a") is None
        assert cache.get("b") == 2

        cache.clear()
        assert len(cache) == 0
