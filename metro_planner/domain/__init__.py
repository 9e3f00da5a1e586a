"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DataIntegrityError,
    MetroPlannerError,
    NetworkDataError,
    NoRouteFoundError,
    SameStationError,
    StationNotFoundError,
)
from .models import (
    DuplicateStation,
    Exit,
    GeoLocation,
    IntegrityIssue,
    IntegrityIssueKind,
    Line,
    NetworkData,
    PathStep,
    Route,
    RouteSegment,
    Station,
)

__all__ = [
    # Models
    "GeoLocation",
    "Exit",
    "Station",
    "Line",
    "NetworkData",
    "PathStep",
    "RouteSegment",
    "Route",
    "IntegrityIssueKind",
    "IntegrityIssue",
    "DuplicateStation",
    # Errors
    "MetroPlannerError",
    "NetworkDataError",
    "DataIntegrityError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "SameStationError",
]
