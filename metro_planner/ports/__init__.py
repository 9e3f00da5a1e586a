"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing core and the adapters
around it. They enable dependency injection and make the system
testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (services)
- Output ports: How the application drives external systems (adapters)
"""

from .cache import CachePort
from .network import NetworkRepositoryPort
from .routing import AlternateRouteStrategyPort, RouteSearchPort, RouteSolverPort

__all__ = [
    # Network
    "NetworkRepositoryPort",
    # Routing
    "RouteSearchPort",
    "RouteSolverPort",
    "AlternateRouteStrategyPort",
    # Cache
    "CachePort",
]
