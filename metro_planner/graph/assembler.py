"""Turn a raw path into a rider-facing route.

The assembler groups consecutive path steps on the same line into
segments and derives stop count, travel time, transfers, walking time
and fare from them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from ..config import RoutingConfig, get_config
from ..domain.models import PathStep, Route, RouteSegment


def fare_for_stops(
    stops: int,
    breakpoints: Sequence[Tuple[int, int]],
    max_fare: int,
) -> int:
    """Look up the fare for a trip of ``stops`` stops.

    ``breakpoints`` holds ``(max_stops, fare)`` pairs in ascending order;
    trips longer than the last breakpoint pay ``max_fare``.
    """
    for limit, fare in breakpoints:
        if stops <= limit:
            return fare
    return max_fare


def group_segments(
    path: Sequence[PathStep],
    line_colors: Mapping[str, str],
    default_color: str,
) -> List[RouteSegment]:
    """Split a path into maximal single-line runs."""
    runs: List[Tuple[str, List[str]]] = []
    for step in path:
        if runs and runs[-1][0] == step.line_id:
            runs[-1][1].append(step.station_id)
        else:
            runs.append((step.line_id, [step.station_id]))

    return [
        RouteSegment(
            line=line,
            stations=tuple(stations),
            color=line_colors.get(line) or default_color,
        )
        for line, stations in runs
    ]


@dataclass
class RouteAssembler:
    """Builds Route values from path steps.

    Attributes:
        config: Routing policy (edge time, walking time, fare table)
        line_colors: Display color per line id
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    line_colors: Dict[str, str] = field(default_factory=dict)

    def assemble(self, path: Sequence[PathStep]) -> Route:
        """Assemble a route from an origin-to-destination path.

        Args:
            path: Path steps from origin to destination, inclusive.

        Returns:
            The route. Its segments, concatenated, reproduce ``path``.

        Raises:
            ValueError: If ``path`` is empty.
        """
        if not path:
            raise ValueError("Cannot assemble a route from an empty path")

        segments = group_segments(
            path, self.line_colors, self.config.default_line_color
        )

        total_stops = len(path) - 1
        transfers = len(segments) - 1
        walking_time = transfers * self.config.walking_time_per_transfer_minutes
        total_time = math.ceil(total_stops * self.config.edge_time_minutes + walking_time)
        fare = fare_for_stops(
            total_stops, self.config.fare_breakpoints, self.config.max_fare
        )

        return Route(
            segments=tuple(segments),
            total_stops=total_stops,
            total_time=total_time,
            transfers=transfers,
            fare=fare,
            walking_time=walking_time,
        )
