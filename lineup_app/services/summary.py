"""
Per-player totals for a finished lineup.
"""

from typing import Dict, List, Sequence

from lineup_app.models import Player, PlayerId, PlayerSummary, LineupSchedule, Position
from lineup_app.core.config import ALL_POSITIONS


def build_summary(players: Sequence[Player], schedule: LineupSchedule) -> Dict[PlayerId, PlayerSummary]:
    """
    Count innings played at each position and innings on the bench.

    Args:
        players: The roster the schedule was generated for
        schedule: Completed lineup

    Returns:
        Mapping of player id to PlayerSummary, in roster order
    """
    summary = {}
    for player in players:
        summary[player.id] = PlayerSummary(
            player_id=player.id,
            name=player.name,
            positions={pos: 0 for pos in ALL_POSITIONS}
        )

    for inning in schedule.innings:
        for player_id, position in inning.assignments.items():
            entry = summary[player_id]
            if position == Position.BENCH:
                entry.bench += 1
            else:
                entry.positions[position.value] += 1
                entry.played += 1

    return summary


def bench_spread(summary: Dict[PlayerId, PlayerSummary]) -> int:
    """Difference between the most and fewest bench innings on the roster."""
    counts: List[int] = [entry.bench for entry in summary.values()]
    if not counts:
        return 0
    return max(counts) - min(counts)
