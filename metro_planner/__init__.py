"""Top-level package for the metro route planner.

This package exposes the modules used to turn a fixed-topology rail
network (stations and ordered lines) into rider-facing itineraries:
graph construction, transfer-aware shortest-path search, a heuristic
alternate route, and fare/time assembly.

The main entry point is :func:`metro_planner.pipeline.find_routes`.
"""

__version__ = "0.1.0"
