"""Typed domain errors for the metro route planner.

Not finding a route is an ordinary result of the search functions and
never raises. These errors are raised by the loading and service
layers, where a caller needs to tell the rider what went wrong.

All errors inherit from MetroPlannerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MetroPlannerError(Exception):
    """Base error for the route planner domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NetworkDataError(MetroPlannerError):
    """Network data could not be loaded or parsed.

    Attributes:
        file_path: Path to the network data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DataIntegrityError(MetroPlannerError):
    """Network data violates an invariant and strict checking is on.

    Attributes:
        station_ids: The station ids involved
    """

    station_ids: tuple[str, ...] = ()


@dataclass
class StationNotFoundError(MetroPlannerError):
    """Station id not found in the network.

    Attributes:
        station_id: The station id that was not found
    """

    station_id: str = ""


@dataclass
class NoRouteFoundError(MetroPlannerError):
    """No path exists between the requested stations.

    Attributes:
        origin: Origin station id
        destination: Destination station id
    """

    origin: str = ""
    destination: str = ""


@dataclass
class SameStationError(MetroPlannerError):
    """Origin and destination are the same station."""

    station_id: str = ""
