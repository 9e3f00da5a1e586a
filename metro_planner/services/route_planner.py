"""Route planner service - Main orchestrator.

This service ties the network repository, the graph cache and the route
solver together for callers that work with a loaded network (console,
web front-end).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..adapters.cache import NullCache
from ..domain.errors import (
    MetroPlannerError,
    NoRouteFoundError,
    SameStationError,
    StationNotFoundError,
)
from ..domain.models import Route
from ..graph.builder import NetworkGraph
from ..ports.cache import CachePort
from ..ports.network import NetworkRepositoryPort
from ..ports.routing import RouteSolverPort

GRAPH_CACHE_KEY = "network-graph"


@dataclass
class RoutePlannerService:
    """Main service for planning metro routes.

    This service orchestrates:
    1. Query validation (known, distinct stations)
    2. Graph construction (cached until the network is reloaded)
    3. Primary and alternate route search

    Attributes:
        repository: Loads stations and lines
        solver: Builds graphs and computes routes
        cache: Holds the built graph between queries
    """

    repository: NetworkRepositoryPort
    solver: RouteSolverPort
    cache: CachePort[NetworkGraph] = field(default_factory=NullCache)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def graph(self) -> NetworkGraph:
        """Return the graph for the current network data."""
        return self.cache.get_or_compute(GRAPH_CACHE_KEY, self._build_graph)

    def _build_graph(self) -> NetworkGraph:
        data = self.repository.load()
        graph = self.solver.build(data.stations, data.lines)
        self._logger.info(
            "Graph built",
            extra={"nodes": len(graph), "issues": len(graph.issues)},
        )
        return graph

    def reload(self) -> None:
        """Drop loaded network data and the cached graph."""
        self.repository.clear_cache()
        self.cache.invalidate(GRAPH_CACHE_KEY)
        self._logger.info("Network reload requested")

    def plan(self, origin: str, destination: str) -> List[Route]:
        """Plan routes between two stations.

        Args:
            origin: Origin station id.
            destination: Destination station id.

        Returns:
            ``[primary]`` or ``[primary, alternate]``.

        Raises:
            SameStationError: If origin and destination are the same.
            StationNotFoundError: If either station is unknown.
            NoRouteFoundError: If no path exists between the stations.
        """
        if origin == destination:
            raise SameStationError(
                "Origin and destination must be different stations",
                station_id=origin,
            )

        self.repository.get_station_or_raise(origin)
        self.repository.get_station_or_raise(destination)

        routes = self.solver.find_routes_in(self.graph(), origin, destination)
        if not routes:
            raise NoRouteFoundError(
                f"No path from {origin} to {destination}",
                origin=origin,
                destination=destination,
            )

        self._logger.info(
            "Routes planned",
            extra={
                "origin": origin,
                "destination": destination,
                "routes": len(routes),
                "transfers": routes[0].transfers,
            },
        )
        return routes

    def plan_safe(
        self, origin: str, destination: str
    ) -> tuple[List[Route], Optional[str]]:
        """Plan routes, returning an error message instead of raising.

        Returns:
            Tuple of (routes, error message or None).
        """
        try:
            return self.plan(origin, destination), None
        except SameStationError as e:
            return [], f"Error: {e.message}"
        except StationNotFoundError as e:
            return [], f"Unknown station: {e.station_id}"
        except NoRouteFoundError as e:
            return [], f"No route found between {e.origin} and {e.destination}"
        except MetroPlannerError as e:
            self._logger.exception("Route planning failed")
            return [], f"Error: {e}"

    def station_name(self, station_id: str, language: str = "en") -> str:
        station = self.repository.get_station(station_id)
        return station.display_name(language) if station else station_id

    def format_route(self, route: Route, language: str = "en") -> str:
        """Format a route as human-readable text.

        Args:
            route: The computed route.
            language: Display language for station names.

        Returns:
            Multi-line description: summary, then one line per segment
            with the transfers in between.
        """
        lines = [
            f"{route.total_stops} stops, {route.transfers} transfer(s), "
            f"{route.total_time} min, fare {route.fare}"
        ]
        walk = route.walking_time / route.transfers if route.transfers else 0.0
        for position, segment in enumerate(route.segments):
            names = " -> ".join(
                self.station_name(code, language) for code in segment.stations
            )
            lines.append(f"  [{segment.line}] {names}")
            if position < len(route.segments) - 1:
                lines.append(
                    f"  Change at {self.station_name(segment.last_station, language)}"
                    f" ({walk:g} min walk)"
                )
        return "\n".join(lines)
