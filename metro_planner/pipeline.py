"""High-level entry point for route planning.

A query runs in three stages:

1. Graph building (from stations and lines, fresh for every call).
2. Primary route search (Dijkstra with a transfer penalty).
3. Alternate route search (only when the primary route transfers).

Callers supply the network data explicitly; this module holds no state
between calls. Rejecting same-station queries is left to the caller.
"""

from typing import List, Optional, Sequence

from .adapters.routing import DijkstraRouteSolver
from .config import RoutingConfig, get_config
from .domain.models import Line, Route, Station


def find_routes(
    stations: Sequence[Station],
    lines: Sequence[Line],
    origin_id: str,
    destination_id: str,
    config: Optional[RoutingConfig] = None,
) -> List[Route]:
    """Plan routes between two stations.

    Returns zero, one or two routes, in the order
    ``[primary, alternate]``. Unknown or unreachable stations give an
    empty list; nothing is raised for them.
    """
    solver = DijkstraRouteSolver(config=config or get_config().routing)
    return solver.find_routes(stations, lines, origin_id, destination_id)
