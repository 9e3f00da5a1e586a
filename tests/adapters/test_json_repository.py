"""Tests for the JSON network repository."""

import json

import pytest

from metro_planner.adapters.network import JSONNetworkRepository
from metro_planner.config import NetworkConfig
from metro_planner.domain.errors import NetworkDataError, StationNotFoundError
from metro_planner.domain.models import Exit


@pytest.fixture
def repository(network_file):
    config = NetworkConfig(data_dir=network_file.parent, network_file=network_file.name)
    return JSONNetworkRepository(config)


class TestJSONNetworkRepository:
    """Test suite for JSONNetworkRepository."""

    def test_load_parses_stations_and_lines(self, repository):
        data = repository.load()

        assert len(data.stations) == 13
        assert [line.id for line in data.lines] == ["red", "blue", "green", "yellow"]
        red = data.lines[0]
        assert red.stations == ("A", "B", "C", "D", "E")
        assert red.color == "metro-red"

    def test_station_metadata_passes_through(self, repository):
        station = repository.get_station_or_raise("C")

        assert station.name == "Station C"
        assert station.name_hi == "स्टेशन C"
        assert station.lines == ("red", "blue")
        assert station.is_interchange
        assert station.location.latitude == 28.6
        assert station.first_train == "05:30"
        assert station.exits == (Exit(name="Gate 1", landmark="Market", distance_m=120.0),)
        assert station.nearby_transport == ("bus",)
        assert station.display_name("hi") == "स्टेशन C"
        assert station.display_name("en") == "Station C"

    def test_load_is_cached_until_cleared(self, repository, network_file):
        first = repository.load()
        network_file.write_text(json.dumps({"stations": [], "lines": []}), encoding="utf-8")

        assert repository.load() is first

        repository.clear_cache()
        assert repository.load().stations == ()
        assert repository.get_station("A") is None

    def test_get_station_unknown(self, repository):
        assert repository.get_station("NOPE") is None
        with pytest.raises(StationNotFoundError) as excinfo:
            repository.get_station_or_raise("NOPE")
        assert excinfo.value.station_id == "NOPE"

    def test_get_line(self, repository):
        assert repository.get_line("green").stations == ("D", "J", "K")
        assert repository.get_line("purple") is None

    def test_list_stations_and_lines(self, repository):
        assert [s.id for s in repository.list_stations()][:3] == ["A", "B", "C"]
        assert len(repository.list_lines()) == 4

    def test_missing_file_raises(self, tmp_path):
        repository = JSONNetworkRepository(NetworkConfig(data_dir=tmp_path))

        with pytest.raises(NetworkDataError) as excinfo:
            repository.load()
        assert excinfo.value.file_path == str(tmp_path / "demo-stations.json")

    def test_malformed_document_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"stations": [{"name": "no id"}], "lines": []}', encoding="utf-8")
        repository = JSONNetworkRepository(
            NetworkConfig(data_dir=tmp_path, network_file="broken.json")
        )

        with pytest.raises(NetworkDataError):
            repository.load()

    def test_missing_coordinates_default_to_zero(self, tmp_path):
        path = tmp_path / "sparse.json"
        path.write_text(
            json.dumps({"stations": [{"id": "A"}], "lines": [{"id": "red", "stations": ["A"]}]}),
            encoding="utf-8",
        )
        repository = JSONNetworkRepository(
            NetworkConfig(data_dir=tmp_path, network_file="sparse.json")
        )

        station = repository.get_station_or_raise("A")
        assert station.name == "A"
        assert station.location.latitude == 0.0
        assert station.location.longitude == 0.0


class TestStationSearch:
    """Test suite for station name search."""

    def test_substring_match(self, repository):
        results = repository.search_stations("station c")

        assert [s.id for s in results] == ["C"]

    def test_search_is_case_insensitive_and_limited(self, repository):
        results = repository.search_stations("STATION", limit=3)

        assert [s.id for s in results] == ["A", "B", "C"]

    def test_hindi_names_only_searched_in_hindi(self, repository):
        assert [s.id for s in repository.search_stations("स्टेशन K", language="hi")] == ["K"]

    def test_fuzzy_match_fills_remaining_slots(self, repository):
        results = repository.search_stations("Statoin K", limit=1)

        assert [s.id for s in results] == ["K"]

    def test_empty_query_returns_nothing(self, repository):
        assert repository.search_stations("   ") == []
        assert repository.search_stations("Station", limit=0) == []

    def test_unrelated_query_returns_nothing(self, repository):
        assert repository.search_stations("qqqqqqqq") == []
