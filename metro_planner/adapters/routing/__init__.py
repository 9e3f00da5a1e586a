"""Routing adapters - Implementations of routing ports.

Available implementations:
- DijkstraRouteSolver: Primary route plus optional alternate
- AvoidFirstTransferStrategy: Alternate route avoiding the first transfer
"""

from .avoid_transfer import AvoidFirstTransferStrategy
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["DijkstraRouteSolver", "AvoidFirstTransferStrategy"]
