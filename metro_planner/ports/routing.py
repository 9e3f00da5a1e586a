"""Routing ports - Abstractions for route search.

These protocols separate the primary shortest-path search from the
strategy that proposes a second itinerary, so a different alternate
search (e.g. Yen's k-shortest paths) can be plugged in without touching
route assembly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, List, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Line, Route, Station
    from ..graph.builder import NetworkGraph


class RouteSearchPort(Protocol):
    """Port for a single shortest-path query on a built graph."""

    def shortest_path(
        self,
        graph: NetworkGraph,
        origin: str,
        destination: str,
        avoid: AbstractSet[str] = frozenset(),
    ) -> Optional[Route]:
        """Find the cheapest route, or None if the destination is unreachable.

        Args:
            graph: The network graph.
            origin: Origin station id.
            destination: Destination station id.
            avoid: Station ids the route may not pass through.
        """
        ...


class AlternateRouteStrategyPort(Protocol):
    """Port for proposing a second itinerary next to the primary one.

    Implementation: adapters/routing/avoid_transfer.py
    """

    def alternate(
        self,
        search: RouteSearchPort,
        graph: NetworkGraph,
        origin: str,
        destination: str,
        primary: Route,
    ) -> Optional[Route]:
        """Return an alternate route, or None if there is none."""
        ...


class RouteSolverPort(RouteSearchPort, Protocol):
    """Port for the full route query: primary plus optional alternate.

    Implementation: adapters/routing/dijkstra_solver.py
    """

    def build(self, stations: Sequence[Station], lines: Sequence[Line]) -> NetworkGraph:
        ...

    def alternate_path(
        self,
        graph: NetworkGraph,
        origin: str,
        destination: str,
        primary: Route,
    ) -> Optional[Route]:
        ...

    def find_routes_in(
        self, graph: NetworkGraph, origin: str, destination: str
    ) -> List[Route]:
        ...

    def find_routes(
        self,
        stations: Sequence[Station],
        lines: Sequence[Line],
        origin: str,
        destination: str,
    ) -> List[Route]:
        ...
