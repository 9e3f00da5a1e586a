"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the routing core to:
- Network storage (JSON files)
- Route search (Dijkstra with transfer penalty)
- Caching systems (in-memory, null)
"""
