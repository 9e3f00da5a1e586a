"""Network data integrity scans.

Station ids must be unique and every id a line references must name a
known station. Neither condition is enforced by the data files, so these
scans report violations for the graph builder and the console tool.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..domain.models import (
    DuplicateStation,
    IntegrityIssue,
    IntegrityIssueKind,
    Line,
    Station,
)


def scan_duplicate_station_ids(stations: Sequence[Station]) -> List[DuplicateStation]:
    """Find station records that reuse an id seen earlier in the input.

    Each repeated record is reported against the first record that used
    the id.

    Parameters
    ----------
    stations:
        Station records, in input order.

    Returns
    -------
    list[DuplicateStation]
        One entry per repeated record; empty when all ids are unique.
    """
    first_seen: Dict[str, int] = {}
    duplicates: List[DuplicateStation] = []

    for index, station in enumerate(stations):
        if station.id in first_seen:
            first_index = first_seen[station.id]
            duplicates.append(
                DuplicateStation(
                    station_id=station.id,
                    first_index=first_index,
                    first_name=stations[first_index].name,
                    second_index=index,
                    second_name=station.name,
                )
            )
        else:
            first_seen[station.id] = index

    return duplicates


def scan_dangling_references(
    stations: Sequence[Station], lines: Sequence[Line]
) -> List[IntegrityIssue]:
    """Find line entries that reference unknown station ids."""
    known = {station.id for station in stations}
    issues: List[IntegrityIssue] = []

    for line in lines:
        for station_id in line.stations:
            if station_id not in known:
                issues.append(
                    IntegrityIssue(
                        kind=IntegrityIssueKind.DANGLING_STATION_REFERENCE,
                        station_id=station_id,
                        detail=f"Line {line.id} references unknown station {station_id}",
                        line_id=line.id,
                    )
                )

    return issues


def duplicate_to_issue(duplicate: DuplicateStation) -> IntegrityIssue:
    return IntegrityIssue(
        kind=IntegrityIssueKind.DUPLICATE_STATION_ID,
        station_id=duplicate.station_id,
        detail=(
            f"Station id {duplicate.station_id} used by "
            f"[{duplicate.first_index}] {duplicate.first_name} and "
            f"[{duplicate.second_index}] {duplicate.second_name}"
        ),
    )
