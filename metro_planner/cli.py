"""Interactive console front-end for the route planner.

Asks whether to plan a route or to scan the network file for duplicate
station ids, then prints the result.
"""

from __future__ import annotations

from typing import Optional

from .container import get_container
from .domain.errors import NetworkDataError
from .graph.integrity import scan_dangling_references, scan_duplicate_station_ids
from .logging_setup import configure_logging
from .ports.network import NetworkRepositoryPort
from .services import RoutePlannerService


def resolve_station(repository: NetworkRepositoryPort, text: str) -> Optional[str]:
    """Turn a station id or a (partial) name into a station id."""
    text = text.strip()
    if not text:
        return None
    if repository.get_station(text) is not None:
        return text
    matches = repository.search_stations(text, limit=1)
    return matches[0].id if matches else None


def plan_interactive(planner: RoutePlannerService) -> int:
    origin_text = input("From: ")
    destination_text = input("To: ")

    origin = resolve_station(planner.repository, origin_text)
    destination = resolve_station(planner.repository, destination_text)
    if origin is None or destination is None:
        missing = origin_text if origin is None else destination_text
        print(f"Unknown station: {missing.strip()}")
        return 1

    routes, error = planner.plan_safe(origin, destination)
    if error:
        print(error)
        return 1

    for position, route in enumerate(routes):
        title = "Fastest route" if position == 0 else "Alternative route"
        print(f"\n{title}: {planner.format_route(route)}")
    return 0


def scan_interactive(repository: NetworkRepositoryPort) -> int:
    data = repository.load()
    duplicates = scan_duplicate_station_ids(data.stations)
    dangling = scan_dangling_references(data.stations, data.lines)

    for duplicate in duplicates:
        print(f"DUPLICATE: {duplicate.station_id!r}")
        print(f"  First occurrence [{duplicate.first_index}]: {duplicate.first_name}")
        print(f"  Second occurrence [{duplicate.second_index}]: {duplicate.second_name}")
    for issue in dangling:
        print(f"DANGLING: {issue.detail}")

    unique_ids = len({station.id for station in data.stations})
    print(f"Total stations: {len(data.stations)}")
    print(f"Unique ids: {unique_ids}")

    if not duplicates and not dangling:
        print("No integrity problems found")
        return 0
    print(f"Found {len(duplicates)} duplicate(s), {len(dangling)} dangling reference(s)")
    return 1


def main() -> int:
    configure_logging()
    planner: RoutePlannerService = get_container().resolve(RoutePlannerService)

    print("=== Metro route planner ===")
    print("1) Plan a route")
    print("2) Scan network for duplicate station ids")
    choice = input("Choice (1/2): ").strip().lower()

    try:
        if choice in {"2", "scan", "s"}:
            return scan_interactive(planner.repository)
        return plan_interactive(planner)
    except NetworkDataError as e:
        print(f"Cannot load network data: {e}")
        return 2
