"""Transfer-aware shortest-path search using Dijkstra's algorithm.

The cost of an edge depends on how its tail was reached: changing line
adds a fixed transfer penalty. The search therefore runs over
(station, arrival line) states rather than bare stations, which keeps it
a plain Dijkstra with non-negative weights.
"""

import heapq
import itertools
from typing import AbstractSet, Dict, List, Optional, Set, Tuple

from ..domain.models import PathStep
from .builder import NetworkGraph

DEFAULT_TRANSFER_PENALTY_MINUTES = 3.0

# (node index, line used to arrive; None at the origin)
State = Tuple[int, Optional[str]]


def dijkstra(
    graph: NetworkGraph,
    start: str,
    end: str,
    *,
    transfer_penalty: float = DEFAULT_TRANSFER_PENALTY_MINUTES,
    avoid: AbstractSet[str] = frozenset(),
) -> Tuple[List[PathStep], float]:
    """Compute the cheapest path between two stations.

    Parameters
    ----------
    graph:
        Network graph as produced by ``build_graph``.
    start:
        Identifier of the origin station.
    end:
        Identifier of the destination station.
    transfer_penalty:
        Minutes added whenever the path switches line.
    avoid:
        Station ids the path may not pass through. The origin and the
        destination are never avoided.

    Returns
    -------
    list[PathStep], float
        The path from ``start`` to ``end`` (inclusive) and its cost in
        minutes. The origin step carries the line of the first ride.
        If no path exists, or ``start == end``, returns
        ``([], float("inf"))``.
    """
    origin = graph.index_of(start)
    destination = graph.index_of(end)
    if origin is None or destination is None or origin == destination:
        return [], float("inf")

    blocked: Set[int] = set()
    for station_id in avoid:
        position = graph.index_of(station_id)
        if position is not None and position not in (origin, destination):
            blocked.add(position)

    initial: State = (origin, None)
    distances: Dict[State, float] = {initial: 0.0}
    previous: Dict[State, State] = {}

    # The counter keeps heap entries comparable when costs tie
    counter = itertools.count()
    heap: List[Tuple[float, int, State]] = [(0.0, next(counter), initial)]
    visited: Set[State] = set()
    reached: Optional[State] = None

    while heap:
        current_cost, _, state = heapq.heappop(heap)

        if state in visited:
            continue

        visited.add(state)
        node, arrival_line = state

        if node == destination:
            reached = state
            break

        for edge in graph.edges_from(node):
            if edge.target in blocked:
                continue

            penalty = 0.0
            if arrival_line is not None and arrival_line != edge.line:
                penalty = transfer_penalty

            new_cost = current_cost + edge.time + penalty
            next_state: State = (edge.target, edge.line)
            if new_cost < distances.get(next_state, float("inf")):
                distances[next_state] = new_cost
                previous[next_state] = state
                heapq.heappush(heap, (new_cost, next(counter), next_state))

    if reached is None:
        return [], float("inf")

    path: List[PathStep] = []
    current = reached
    while current in previous:
        node, line = current
        # Every state after the initial one carries its arrival line
        path.append(PathStep(station_id=graph.station_id(node), line_id=line or ""))
        current = previous[current]

    path.reverse()
    path.insert(0, PathStep(station_id=start, line_id=path[0].line_id))
    return path, distances[reached]
