import logging
from pathlib import Path

import pytest

from metro_planner.adapters.network import JSONNetworkRepository
from metro_planner.config import NetworkConfig
from metro_planner.domain.errors import DataIntegrityError
from metro_planner.domain.models import (
    DuplicateStation,
    IntegrityIssueKind,
    Line,
    Station,
)
from metro_planner.graph.builder import build_graph
from metro_planner.graph.integrity import (
    scan_dangling_references,
    scan_duplicate_station_ids,
)

from conftest import make_lines, make_stations

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _duplicate_network():
    stations = [
        Station(id="A", name="Alpha"),
        Station(id="DUP", name="First"),
        Station(id="B", name="Bravo"),
        Station(id="C", name="Charlie"),
        Station(id="DUP", name="Second"),
        Station(id="D", name="Delta"),
    ]
    lines = [
        Line(id="red", name="Red", stations=("A", "DUP", "B")),
        Line(id="blue", name="Blue", stations=("C", "DUP", "D")),
    ]
    return stations, lines


def test_build_graph_contains_all_stations(stations, lines):
    graph = build_graph(stations, lines)

    assert len(graph) == len(stations)
    for station in stations:
        assert station.id in graph
    assert not graph.has_issues


def test_edges_follow_consecutive_line_pairs(stations, lines):
    graph = build_graph(stations, lines)

    assert sorted(graph.neighbor_ids("C")) == ["B", "D", "G", "H"]
    assert sorted(graph.neighbor_ids("A")) == ["B"]
    # Stations that are only non-adjacent on a line are not connected
    assert "C" not in graph.neighbor_ids("A")
    assert graph.neighbor_ids("Z") == []


def test_edges_are_bidirectional_with_constant_time(stations, lines):
    graph = build_graph(stations, lines)

    c, h = graph.index_of("C"), graph.index_of("H")
    forward = [edge for edge in graph.edges_from(c) if edge.target == h]
    backward = [edge for edge in graph.edges_from(h) if edge.target == c]

    assert len(forward) == len(backward) == 1
    assert forward[0].line == backward[0].line == "blue"
    assert forward[0].time == backward[0].time == 2.5


def test_edge_time_is_configurable(stations, lines):
    graph = build_graph(stations, lines, edge_time=4.0)

    assert all(edge.time == 4.0 for edge in graph.edges_from(graph.index_of("C")))


def test_shared_pair_keeps_last_processed_line():
    stations = make_stations(["P", "Q", "R"])
    lines = make_lines({"red": ("r", ["P", "Q", "R"]), "blue": ("b", ["P", "Q"])})

    graph = build_graph(stations, lines)

    p, q = graph.index_of("P"), graph.index_of("Q")
    assert [edge.line for edge in graph.edges_from(p)] == ["blue"]
    assert {edge.line for edge in graph.edges_from(q) if edge.target == p} == {"blue"}


def test_shared_pair_keeps_every_line_when_parallel_edges_enabled():
    stations = make_stations(["P", "Q", "R"])
    lines = make_lines({"red": ("r", ["P", "Q", "R"]), "blue": ("b", ["P", "Q"])})

    graph = build_graph(stations, lines, keep_parallel_edges=True)

    p = graph.index_of("P")
    assert sorted(edge.line for edge in graph.edges_from(p)) == ["blue", "red"]


def test_dangling_reference_is_skipped_and_reported(caplog):
    stations = make_stations(["A", "B"])
    lines = [Line(id="red", name="Red", stations=("A", "GHOST", "B"))]

    with caplog.at_level(logging.WARNING, logger="metro_planner.graph.builder"):
        graph = build_graph(stations, lines)

    assert graph.neighbor_ids("A") == []
    assert graph.neighbor_ids("B") == []
    assert [issue.kind for issue in graph.issues] == [
        IntegrityIssueKind.DANGLING_STATION_REFERENCE
    ]
    assert graph.issues[0].station_id == "GHOST"
    assert graph.issues[0].line_id == "red"
    assert "Line references unknown station" in caplog.text


def test_duplicate_station_ids_are_reported(caplog):
    stations, lines = _duplicate_network()

    with caplog.at_level(logging.WARNING, logger="metro_planner.graph.builder"):
        graph = build_graph(stations, lines)

    duplicate_issues = [
        issue
        for issue in graph.issues
        if issue.kind == IntegrityIssueKind.DUPLICATE_STATION_ID
    ]
    assert len(duplicate_issues) == 1
    assert duplicate_issues[0].station_id == "DUP"
    assert "Duplicate station id" in caplog.text


def test_duplicate_station_records_get_distinct_nodes():
    stations, lines = _duplicate_network()

    graph = build_graph(stations, lines)

    # Every record has its own node; the id resolves to the first one
    assert len(graph) == 6
    assert graph.station("DUP").name == "First"
    assert graph.nodes[4].station.name == "Second"
    assert graph.nodes[4].neighbors == {}
    assert sorted(graph.neighbor_ids("DUP")) == ["A", "B", "C", "D"]


def test_duplicate_station_ids_raise_in_strict_mode():
    stations, lines = _duplicate_network()

    with pytest.raises(DataIntegrityError) as excinfo:
        build_graph(stations, lines, strict=True)

    assert excinfo.value.station_ids == ("DUP",)


def test_scan_duplicate_station_ids():
    stations, _ = _duplicate_network()

    assert scan_duplicate_station_ids(stations) == [
        DuplicateStation(
            station_id="DUP",
            first_index=1,
            first_name="First",
            second_index=4,
            second_name="Second",
        )
    ]


def test_scan_reports_each_repeat_against_first_record():
    stations = [Station(id="S", name=f"S{n}") for n in range(3)]

    duplicates = scan_duplicate_station_ids(stations)

    assert [(d.first_index, d.second_index) for d in duplicates] == [(0, 1), (0, 2)]


def test_scan_dangling_references_clean_network(stations, lines):
    assert scan_dangling_references(stations, lines) == []
    assert scan_duplicate_station_ids(stations) == []


def test_demo_network_has_no_integrity_issues():
    repository = JSONNetworkRepository(NetworkConfig(data_dir=DATA_DIR))
    data = repository.load()

    graph = build_graph(data.stations, data.lines)

    assert graph.issues == []
    assert len(graph) == len(data.stations)
