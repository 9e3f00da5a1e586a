"""Network ports - Abstractions for loading network data.

The repository owns the process-wide copy of the station and line data:
loaded once, served read-only, and replaced only by an explicit reload.
The routing engine never reads it directly; callers pass stations and
lines in as arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Line, NetworkData, Station


class NetworkRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/network/json_repository.py
    """

    def load(self) -> NetworkData:
        """Load the stations and lines of the network.

        Returns:
            The network data, cached after the first call.
        """
        ...

    def get_station(self, station_id: str) -> Optional[Station]:
        """Get station details by id.

        Args:
            station_id: The station id to look up (e.g., 'rajiv-chowk').

        Returns:
            The station, or None if not found.
        """
        ...

    def get_station_or_raise(self, station_id: str) -> Station:
        ...

    def get_line(self, line_id: str) -> Optional[Line]:
        ...

    def list_stations(self) -> Sequence[Station]:
        ...

    def list_lines(self) -> Sequence[Line]:
        ...

    def search_stations(
        self, query: str, language: str = "en", limit: Optional[int] = None
    ) -> Sequence[Station]:
        """Find stations whose name matches a free-text query."""
        ...

    def clear_cache(self) -> None:
        """Forget loaded data so the next access reads it again."""
        ...
