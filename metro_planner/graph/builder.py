"""Graph construction from stations and lines.

This module defines the in-memory graph searched by the route planner.
Nodes live in an index arena: every Station record gets its own integer
index at build time, and a side map resolves station ids to indices.
Edges are derived only from consecutive station pairs of each line and
are added in both directions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from ..domain.errors import DataIntegrityError
from ..domain.models import IntegrityIssue, Line, Station
from .integrity import (
    duplicate_to_issue,
    scan_dangling_references,
    scan_duplicate_station_ids,
)

logger = logging.getLogger(__name__)

DEFAULT_EDGE_TIME_MINUTES = 2.5


@dataclass(frozen=True, slots=True)
class Edge:
    """A traversal to a neighboring node along one line."""

    target: int
    time: float
    line: str


@dataclass(slots=True)
class Node:
    """A station and its outgoing edges, grouped by neighbor index."""

    index: int
    station: Station
    neighbors: Dict[int, List[Edge]] = field(default_factory=dict)

    def edges(self) -> Iterator[Edge]:
        for edges in self.neighbors.values():
            yield from edges


@dataclass
class NetworkGraph:
    """Adjacency structure of the rail network.

    Attributes:
        nodes: Node arena, indexed by position
        index: Station id to node index (first record wins on duplicates)
        line_colors: Display color per line id
        issues: Integrity problems found while building
    """

    nodes: List[Node] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    line_colors: Dict[str, str] = field(default_factory=dict)
    issues: List[IntegrityIssue] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self.index

    def index_of(self, station_id: str) -> Optional[int]:
        return self.index.get(station_id)

    def station_id(self, index: int) -> str:
        return self.nodes[index].station.id

    def station(self, station_id: str) -> Optional[Station]:
        position = self.index.get(station_id)
        if position is None:
            return None
        return self.nodes[position].station

    def edges_from(self, index: int) -> Iterator[Edge]:
        return self.nodes[index].edges()

    def neighbor_ids(self, station_id: str) -> List[str]:
        """Return the ids of stations adjacent to ``station_id``."""
        position = self.index.get(station_id)
        if position is None:
            return []
        return [self.station_id(i) for i in self.nodes[position].neighbors]

    @property
    def has_issues(self) -> bool:
        return len(self.issues) > 0


def build_graph(
    stations: Sequence[Station],
    lines: Sequence[Line],
    *,
    edge_time: float = DEFAULT_EDGE_TIME_MINUTES,
    keep_parallel_edges: bool = False,
    strict: bool = False,
) -> NetworkGraph:
    """Build the network graph from stations and lines.

    Parameters
    ----------
    stations:
        Station records. Ids are expected to be unique.
    lines:
        Lines, each an ordered sequence of station ids.
    edge_time:
        Traversal time assigned to every edge, in minutes.
    keep_parallel_edges:
        When False, a station pair served by several lines keeps only
        the edge of the line processed last. When True, one edge per
        line is kept.
    strict:
        Raise ``DataIntegrityError`` on duplicate station ids instead of
        logging a warning.

    Returns
    -------
    NetworkGraph
        The graph, with any integrity issues recorded on ``issues``.
    """
    graph = NetworkGraph()

    duplicates = scan_duplicate_station_ids(stations)
    if duplicates and strict:
        raise DataIntegrityError(
            f"{len(duplicates)} duplicate station id(s) in network data",
            station_ids=tuple(d.station_id for d in duplicates),
        )
    for duplicate in duplicates:
        issue = duplicate_to_issue(duplicate)
        graph.issues.append(issue)
        logger.warning(
            "Duplicate station id",
            extra={
                "station_id": duplicate.station_id,
                "first_index": duplicate.first_index,
                "second_index": duplicate.second_index,
            },
        )

    for station in stations:
        position = len(graph.nodes)
        graph.nodes.append(Node(index=position, station=station))
        graph.index.setdefault(station.id, position)

    for issue in scan_dangling_references(stations, lines):
        graph.issues.append(issue)
        logger.warning(
            "Line references unknown station",
            extra={"line_id": issue.line_id, "station_id": issue.station_id},
        )

    for line in lines:
        graph.line_colors[line.id] = line.color
        for from_id, to_id in zip(line.stations, line.stations[1:]):
            from_index = graph.index.get(from_id)
            to_index = graph.index.get(to_id)
            # Dangling ends were already reported above
            if from_index is None or to_index is None or from_index == to_index:
                continue

            _add_edge(graph, from_index, to_index, edge_time, line.id, keep_parallel_edges)
            _add_edge(graph, to_index, from_index, edge_time, line.id, keep_parallel_edges)

    logger.debug(
        "Graph built",
        extra={
            "nodes": len(graph.nodes),
            "lines": len(lines),
            "issues": len(graph.issues),
        },
    )
    return graph


def _add_edge(
    graph: NetworkGraph,
    from_index: int,
    to_index: int,
    time: float,
    line_id: str,
    keep_parallel_edges: bool,
) -> None:
    edge = Edge(target=to_index, time=time, line=line_id)
    neighbors = graph.nodes[from_index].neighbors

    if not keep_parallel_edges:
        neighbors[to_index] = [edge]
        return

    existing = neighbors.setdefault(to_index, [])
    for position, current in enumerate(existing):
        if current.line == line_id:
            existing[position] = edge
            return
    existing.append(edge)
