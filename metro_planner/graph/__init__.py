"""Graph-related utilities for representing the rail network.

This subpackage builds an in-memory graph from stations and lines, runs
the transfer-aware path search on top of it, and assembles the raw path
into a priced route.
"""

from .assembler import RouteAssembler, fare_for_stops
from .builder import Edge, NetworkGraph, Node, build_graph
from .dijkstra import dijkstra
from .integrity import scan_dangling_references, scan_duplicate_station_ids

__all__ = [
    "Edge",
    "Node",
    "NetworkGraph",
    "build_graph",
    "dijkstra",
    "RouteAssembler",
    "fare_for_stops",
    "scan_duplicate_station_ids",
    "scan_dangling_references",
]
