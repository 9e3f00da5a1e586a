"""Dijkstra Route Solver adapter.

This adapter wraps the graph-level search and adds:
- Graph construction from routing configuration
- Route assembly (segments, time, fare)
- The alternate-route strategy
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, List, Optional, Sequence

from ...config import RoutingConfig, get_config
from ...domain.models import Line, Route, Station
from ...graph.assembler import RouteAssembler
from ...graph.builder import NetworkGraph, build_graph
from ...graph.dijkstra import dijkstra
from ...ports.routing import AlternateRouteStrategyPort
from .avoid_transfer import AvoidFirstTransferStrategy


@dataclass
class DijkstraRouteSolver:
    """Route solver using a transfer-aware Dijkstra search.

    This adapter implements RouteSolverPort. Not finding a route is an
    ordinary result: the search methods return None or an empty list
    and never raise for unknown or unreachable stations.

    Attributes:
        config: Routing policy
        alternate_strategy: Strategy proposing the second itinerary
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    alternate_strategy: AlternateRouteStrategyPort = field(
        default_factory=AvoidFirstTransferStrategy
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build(self, stations: Sequence[Station], lines: Sequence[Line]) -> NetworkGraph:
        """Build the network graph with the configured edge policy."""
        return build_graph(
            stations,
            lines,
            edge_time=self.config.edge_time_minutes,
            keep_parallel_edges=self.config.keep_parallel_edges,
            strict=self.config.strict_integrity,
        )

    def shortest_path(
        self,
        graph: NetworkGraph,
        origin: str,
        destination: str,
        avoid: AbstractSet[str] = frozenset(),
    ) -> Optional[Route]:
        """Find the cheapest route between two stations.

        Args:
            graph: The network graph.
            origin: Origin station id.
            destination: Destination station id.
            avoid: Station ids the route may not pass through.

        Returns:
            The route, or None if the destination cannot be reached.
        """
        path, cost = dijkstra(
            graph,
            origin,
            destination,
            transfer_penalty=self.config.transfer_penalty_minutes,
            avoid=avoid,
        )

        if not path:
            self._logger.info(
                "No route found",
                extra={
                    "origin": origin,
                    "destination": destination,
                    "avoided": sorted(avoid),
                },
            )
            return None

        route = RouteAssembler(self.config, graph.line_colors).assemble(path)
        self._logger.debug(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "stops": route.total_stops,
                "transfers": route.transfers,
                "cost_minutes": cost,
            },
        )
        return route

    def alternate_path(
        self,
        graph: NetworkGraph,
        origin: str,
        destination: str,
        primary: Route,
    ) -> Optional[Route]:
        """Propose a second route next to ``primary``, or None."""
        return self.alternate_strategy.alternate(
            self, graph, origin, destination, primary
        )

    def find_routes_in(
        self, graph: NetworkGraph, origin: str, destination: str
    ) -> List[Route]:
        """Return ``[primary]`` or ``[primary, alternate]``; empty if unreachable."""
        primary = self.shortest_path(graph, origin, destination)
        if primary is None:
            return []

        routes = [primary]
        alternate = self.alternate_path(graph, origin, destination, primary)
        if alternate is not None:
            routes.append(alternate)

        self._logger.info(
            "Routes computed",
            extra={
                "origin": origin,
                "destination": destination,
                "routes": len(routes),
            },
        )
        return routes

    def find_routes(
        self,
        stations: Sequence[Station],
        lines: Sequence[Line],
        origin: str,
        destination: str,
    ) -> List[Route]:
        """Build a fresh graph and plan routes on it."""
        graph = self.build(stations, lines)
        return self.find_routes_in(graph, origin, destination)
