"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the routing policy
(edge time, transfer penalty, fare table), the network data location
and logging.

Configuration can be overridden via environment variables:
- METRO_ROUTING_TRANSFER_PENALTY_MINUTES=4
- METRO_ROUTING_KEEP_PARALLEL_EDGES=true
- METRO_NETWORK_DATA_DIR=/path/to/data
- METRO_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoutingConfig(BaseSettings):
    """Route search and pricing policy.

    Environment variables prefixed with METRO_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_ROUTING_")

    edge_time_minutes: float = 2.5
    transfer_penalty_minutes: float = 3.0
    walking_time_per_transfer_minutes: float = 3.0

    # (max stops, fare) pairs, checked in order; max_fare beyond the last one
    fare_breakpoints: List[Tuple[int, int]] = Field(
        default_factory=lambda: [(2, 10), (5, 20), (12, 30), (21, 40)]
    )
    max_fare: int = 50

    keep_parallel_edges: bool = False
    strict_integrity: bool = False
    default_line_color: str = "primary"
    cache_graph: bool = True

    @field_validator("fare_breakpoints")
    @classmethod
    def _breakpoints_ascending(
        cls, value: List[Tuple[int, int]]
    ) -> List[Tuple[int, int]]:
        stops = [limit for limit, _ in value]
        if stops != sorted(stops):
            raise ValueError("fare_breakpoints must be sorted by stop count")
        return value


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with METRO_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    network_file: str = "demo-stations.json"
    search_limit: int = 10
    min_similarity: int = 70

    @property
    def network_path(self) -> Path:
        """Full path to the network JSON file."""
        return self.data_dir / self.network_file


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with METRO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.routing.transfer_penalty_minutes)
        print(config.network.network_path)

    Environment variables prefixed with METRO_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
