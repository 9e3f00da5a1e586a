"""Network adapters - Implementations of network ports.

Available implementations:
- JSONNetworkRepository: Loads stations and lines from a JSON file
"""

from .json_repository import JSONNetworkRepository

__all__ = ["JSONNetworkRepository"]
