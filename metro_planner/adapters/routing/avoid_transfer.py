"""Alternate route by avoiding the primary route's first transfer.

A single-shot heuristic: drop the station where the primary route first
changes line and search again. It yields at most one alternate and is
not a k-shortest-paths enumeration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import Route
from ...graph.builder import NetworkGraph
from ...ports.routing import RouteSearchPort


@dataclass
class AvoidFirstTransferStrategy:
    """Implements AlternateRouteStrategyPort."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def alternate(
        self,
        search: RouteSearchPort,
        graph: NetworkGraph,
        origin: str,
        destination: str,
        primary: Route,
    ) -> Optional[Route]:
        """Search again without the primary route's first transfer station.

        Args:
            search: Search used for the primary route.
            graph: The network graph.
            origin: Origin station id.
            destination: Destination station id.
            primary: The primary route.

        Returns:
            The alternate route, or None when the primary route is direct
            or nothing else reaches the destination.
        """
        if primary.transfers == 0:
            return None

        first_transfer = primary.segments[0].last_station
        alternate = search.shortest_path(
            graph, origin, destination, avoid=frozenset({first_transfer})
        )
        if alternate is None:
            return None

        self._logger.debug(
            "Alternate route found",
            extra={
                "avoided": first_transfer,
                "transfers": alternate.transfers,
                "stops": alternate.total_stops,
            },
        )
        return alternate
