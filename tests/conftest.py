"""Shared network fixtures.

The sample network::

    red:    A - B - C - D - E
    blue:   F - G - C - H - I
    green:  D - J - K
    yellow: B - X - H

Z is a station served by no line.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

import pytest

from metro_planner.config import RoutingConfig, reset_config
from metro_planner.domain.models import Line, Station

SAMPLE_LINES = {
    "red": ("metro-red", ["A", "B", "C", "D", "E"]),
    "blue": ("metro-blue", ["F", "G", "C", "H", "I"]),
    "green": ("metro-green", ["D", "J", "K"]),
    "yellow": ("metro-yellow", ["B", "X", "H"]),
}


def make_stations(ids: Sequence[str]) -> List[Station]:
    return [Station(id=code, name=f"Station {code}") for code in ids]


def make_lines(layout: dict) -> List[Line]:
    return [
        Line(id=line_id, name=f"{line_id.title()} Line", color=color, stations=tuple(stops))
        for line_id, (color, stops) in layout.items()
    ]


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def routing_config() -> RoutingConfig:
    return RoutingConfig()


@pytest.fixture
def stations() -> List[Station]:
    return make_stations(["A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "X", "Z"])


@pytest.fixture
def lines() -> List[Line]:
    return make_lines(SAMPLE_LINES)


@pytest.fixture
def network_file(tmp_path: Path, stations: List[Station], lines: List[Line]) -> Path:
    """Write the sample network as a JSON document."""
    document = {
        "stations": [
            {
                "id": station.id,
                "name": station.name,
                "nameHi": f"स्टेशन {station.id}",
                "lines": [line.id for line in lines if station.id in line.stations],
                "lat": 28.6,
                "lng": 77.2,
                "isInterchange": station.id in {"B", "C", "D", "H"},
                "facilities": ["lift"],
                "firstTrain": "05:30",
                "lastTrain": "23:30",
                "exits": [{"name": "Gate 1", "landmark": "Market", "distance": 120}],
                "nearbyTransport": ["bus"],
            }
            for station in stations
        ],
        "lines": [
            {
                "id": line.id,
                "name": line.name,
                "nameHi": "",
                "color": line.color,
                "stations": list(line.stations),
            }
            for line in lines
        ],
    }
    path = tmp_path / "network.json"
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return path
