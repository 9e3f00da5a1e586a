"""Immutable domain models for the metro route planner.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
business concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Exit:
    """A station exit and the landmark it leads to."""

    name: str
    landmark: str = ""
    distance_m: float = 0.0


@dataclass(frozen=True, slots=True)
class Station:
    """A metro station with its location and operational metadata.

    Only ``id`` takes part in routing. Everything else is carried
    through untouched for the presentation layer.

    Attributes:
        id: Unique station identifier (e.g., 'rajiv-chowk')
        name: English display name
        name_hi: Hindi display name
        lines: Ids of the lines serving this station
        location: GPS coordinates of the station
        is_interchange: Whether riders can change lines here
        facilities: Free-form facility labels (lifts, parking, ...)
        first_train: First departure, as published (e.g. '05:30')
        last_train: Last departure, as published
        exits: Station exits
        nearby_transport: Other transport reachable from the station
    """

    id: str
    name: str
    name_hi: str = ""
    lines: tuple[str, ...] = field(default_factory=tuple)
    location: GeoLocation = field(default_factory=lambda: GeoLocation(0.0, 0.0))
    is_interchange: bool = False
    facilities: tuple[str, ...] = field(default_factory=tuple)
    first_train: str = ""
    last_train: str = ""
    exits: tuple[Exit, ...] = field(default_factory=tuple)
    nearby_transport: tuple[str, ...] = field(default_factory=tuple)

    def display_name(self, language: str = "en") -> str:
        """Return the station name for the given language."""
        if language == "hi" and self.name_hi:
            return self.name_hi
        return self.name


@dataclass(frozen=True, slots=True)
class Line:
    """A metro line: an ordered sequence of station ids in track order.

    Attributes:
        id: Unique line identifier (e.g., 'Blue')
        name: English display name
        name_hi: Hindi display name
        color: Display color token for the line
        stations: Station ids in physical track order
    """

    id: str
    name: str
    name_hi: str = ""
    color: str = ""
    stations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class NetworkData:
    """Stations and lines of a network, as supplied by a repository."""

    stations: tuple[Station, ...] = field(default_factory=tuple)
    lines: tuple[Line, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class PathStep:
    """A station on a path and the line used to arrive there.

    Attributes:
        station_id: Station reached by this step
        line_id: Line ridden to reach the station
    """

    station_id: str
    line_id: str


@dataclass(frozen=True, slots=True)
class RouteSegment:
    """A maximal run of a route on a single line.

    A transfer station is the last station of the segment being left;
    it is not repeated at the start of the next segment.
    """

    line: str
    stations: tuple[str, ...]
    color: str

    @property
    def first_station(self) -> str:
        return self.stations[0]

    @property
    def last_station(self) -> str:
        return self.stations[-1]


@dataclass(frozen=True, slots=True)
class Route:
    """A rider-facing itinerary between two stations.

    Attributes:
        segments: Ordered line segments from origin to destination
        total_stops: Number of hops ridden (path length minus one)
        total_time: Travel plus transfer walking time, in whole minutes
        transfers: Number of line changes
        fare: Fare for the whole trip
        walking_time: Time spent walking between platforms, in minutes
    """

    segments: tuple[RouteSegment, ...]
    total_stops: int
    total_time: int
    transfers: int
    fare: int
    walking_time: float

    @property
    def stations(self) -> tuple[str, ...]:
        """Return the full ordered station path."""
        return tuple(code for segment in self.segments for code in segment.stations)

    @property
    def origin(self) -> str:
        return self.segments[0].first_station

    @property
    def destination(self) -> str:
        return self.segments[-1].last_station

    @property
    def transfer_stations(self) -> tuple[str, ...]:
        """Return the stations where the rider changes line."""
        return tuple(segment.last_station for segment in self.segments[:-1])

    @property
    def legs(self) -> tuple[tuple[str, ...], ...]:
        """Return the stations ridden on each line, boarding station included.

        Unlike ``segments``, every leg after the first starts at the
        transfer station it is boarded from.
        """
        legs = []
        boarding: Optional[str] = None
        for segment in self.segments:
            if boarding is None:
                legs.append(segment.stations)
            else:
                legs.append((boarding,) + segment.stations)
            boarding = segment.last_station
        return tuple(legs)

    @property
    def is_direct(self) -> bool:
        """Check if the route stays on a single line."""
        return self.transfers == 0


class IntegrityIssueKind(Enum):
    """Kinds of network data problems found while building the graph."""

    DUPLICATE_STATION_ID = auto()
    DANGLING_STATION_REFERENCE = auto()


@dataclass(frozen=True, slots=True)
class IntegrityIssue:
    """A non-fatal network data problem.

    Attributes:
        kind: What went wrong
        station_id: The station id involved
        detail: Human-readable description
        line_id: The line involved, for dangling references
    """

    kind: IntegrityIssueKind
    station_id: str
    detail: str
    line_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DuplicateStation:
    """Two station records sharing one id.

    Attributes:
        station_id: The repeated id
        first_index: Position of the first record in the input
        first_name: Name of the first record
        second_index: Position of the repeated record
        second_name: Name of the repeated record
    """

    station_id: str
    first_index: int
    first_name: str
    second_index: int
    second_name: str
