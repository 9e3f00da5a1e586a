"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- RoutePlannerService: Plans routes on the loaded network
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
