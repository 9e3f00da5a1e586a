"""JSON Network Repository adapter.

Loads the network document (``{"stations": [...], "lines": [...]}``)
once and serves it read-only until ``clear_cache()`` is called:
- Configuration injection (path from config)
- Station and line lookups
- Station name search (substring, then fuzzy)
- Typed errors for unreadable data
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from rapidfuzz import fuzz, process

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkDataError, StationNotFoundError
from ...domain.models import Exit, GeoLocation, Line, NetworkData, Station


@dataclass
class JSONNetworkRepository:
    """Network repository that loads from a JSON file.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (path, search settings)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _data: Optional[NetworkData] = field(default=None, repr=False)
    _stations_by_id: Optional[Dict[str, Station]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> NetworkData:
        """Load the network from the JSON file.

        Returns:
            Stations and lines, in file order.

        Raises:
            NetworkDataError: If the file cannot be read or parsed.
        """
        if self._data is not None:
            return self._data

        path = self.config.network_path
        self._logger.debug("Loading network", extra={"path": str(path)})

        try:
            with path.open(encoding="utf-8") as f:
                document = json.load(f)
            data = NetworkData(
                stations=tuple(_parse_station(raw) for raw in document["stations"]),
                lines=tuple(_parse_line(raw) for raw in document["lines"]),
            )
        except (OSError, KeyError, TypeError, ValueError) as e:
            raise NetworkDataError(
                f"Failed to load network: {e}",
                file_path=str(path),
                cause=e,
            )

        self._data = data
        self._logger.info(
            "Network loaded",
            extra={"stations": len(data.stations), "lines": len(data.lines)},
        )
        return data

    def get_station(self, station_id: str) -> Optional[Station]:
        return self._station_index().get(station_id)

    def get_station_or_raise(self, station_id: str) -> Station:
        """Get station details by id, raising if not found.

        Raises:
            StationNotFoundError: If the station is not found.
        """
        station = self.get_station(station_id)
        if station is None:
            raise StationNotFoundError(
                f"Station not found: {station_id}",
                station_id=station_id,
            )
        return station

    def get_line(self, line_id: str) -> Optional[Line]:
        for line in self.load().lines:
            if line.id == line_id:
                return line
        return None

    def list_stations(self) -> Sequence[Station]:
        return list(self.load().stations)

    def list_lines(self) -> Sequence[Line]:
        return list(self.load().lines)

    def search_stations(
        self, query: str, language: str = "en", limit: Optional[int] = None
    ) -> Sequence[Station]:
        """Find stations by name.

        Substring matches on the English name (and the Hindi name when
        ``language == "hi"``) are returned in network order. Only when
        nothing matches literally, fuzzy matches above the configured
        similarity score are returned, best first.

        Args:
            query: Free-text station name.
            language: Display language of the caller.
            limit: Maximum number of results (defaults to config).

        Returns:
            Matching stations, best first.
        """
        limit = self.config.search_limit if limit is None else limit
        needle = query.strip().lower()
        if not needle or limit <= 0:
            return []

        stations = self.load().stations
        matches: List[Station] = [
            station for station in stations if _name_contains(station, needle, language)
        ]
        if matches:
            return matches[:limit]

        choices = {
            position: station.display_name(language).lower()
            for position, station in enumerate(stations)
        }
        fuzzy = process.extract(
            needle,
            choices,
            scorer=fuzz.WRatio,
            score_cutoff=self.config.min_similarity,
            limit=limit,
        )
        return [stations[position] for _, _, position in fuzzy]

    def _station_index(self) -> Dict[str, Station]:
        if self._stations_by_id is None:
            index: Dict[str, Station] = {}
            for station in self.load().stations:
                # Keep the first record of a repeated id, like the graph builder
                index.setdefault(station.id, station)
            self._stations_by_id = index
        return self._stations_by_id

    def clear_cache(self) -> None:
        """Clear cached network data."""
        self._data = None
        self._stations_by_id = None
        self._logger.debug("Network cache cleared")


def _name_contains(station: Station, needle: str, language: str) -> bool:
    if needle in station.name.lower():
        return True
    return language == "hi" and needle in station.name_hi.lower()


def _parse_station(raw: Mapping[str, Any]) -> Station:
    # Handle missing coordinates gracefully
    try:
        lat = float(raw.get("lat") or 0.0)
        lng = float(raw.get("lng") or 0.0)
    except (TypeError, ValueError):
        lat, lng = 0.0, 0.0

    return Station(
        id=str(raw["id"]).strip(),
        name=raw.get("name") or str(raw["id"]),
        name_hi=raw.get("nameHi", ""),
        lines=tuple(raw.get("lines", ())),
        location=GeoLocation(latitude=lat, longitude=lng),
        is_interchange=bool(raw.get("isInterchange", False)),
        facilities=tuple(raw.get("facilities", ())),
        first_train=raw.get("firstTrain", ""),
        last_train=raw.get("lastTrain", ""),
        exits=tuple(
            Exit(
                name=exit_raw.get("name", ""),
                landmark=exit_raw.get("landmark", ""),
                distance_m=float(exit_raw.get("distance", 0.0)),
            )
            for exit_raw in raw.get("exits", ())
        ),
        nearby_transport=tuple(raw.get("nearbyTransport", ())),
    )


def _parse_line(raw: Mapping[str, Any]) -> Line:
    return Line(
        id=str(raw["id"]),
        name=raw.get("name") or str(raw["id"]),
        name_hi=raw.get("nameHi", ""),
        color=raw.get("color", ""),
        stations=tuple(str(code).strip() for code in raw.get("stations", ())),
    )
