"""
Conversion between lineup models and plain dicts for the API and worker.
"""

from datetime import datetime
from typing import Dict, List, Sequence

from lineup_app.models import Player, LineupSchedule
from lineup_app.services.lineup_generator import LineupGenerator
from lineup_app.services.summary import build_summary
from lineup_app.services.validator import LineupValidator


def players_from_dicts(rows: Sequence[Dict]) -> List[Player]:
    """Build players from dicts with id, name and optional can_play_first."""
    return [
        Player(id=row["id"], name=row["name"], can_play_first=bool(row.get("can_play_first", False)))
        for row in rows
    ]


def player_to_dict(player: Player) -> Dict:
    return {"id": player.id, "name": player.name, "can_play_first": player.can_play_first}


def schedule_to_dict(players: Sequence[Player], schedule: LineupSchedule) -> Dict:
    """Innings, summary and diagnostics as JSON-ready data."""
    summary = build_summary(players, schedule)
    return {
        "innings": [
            {
                "inning": inning.inning,
                "assignments": {str(pid): pos.value for pid, pos in inning.assignments.items()}
            }
            for inning in schedule.innings
        ],
        "summary": [
            {
                "player_id": str(entry.player_id),
                "name": entry.name,
                "positions": dict(entry.positions),
                "played": entry.played,
                "bench": entry.bench
            }
            for entry in summary.values()
        ],
        "diagnostics": [
            {
                "kind": d.kind,
                "inning": d.inning,
                "description": d.description,
                "player_ids": [str(pid) for pid in d.player_ids]
            }
            for d in schedule.diagnostics
        ]
    }


def generate_lineup_payload(players: Sequence[Player]) -> Dict:
    """
    Generate, validate and serialize a lineup in one step.

    Raises:
        RosterTooSmallError: If the roster is smaller than FIELD_SPOTS
    """
    start_time = datetime.now()

    schedule = LineupGenerator(players).generate()
    validation_result = LineupValidator().validate_lineup(players, schedule)

    payload = schedule_to_dict(players, schedule)
    payload["validation"] = {
        "is_valid": validation_result.is_valid,
        "hard_violations": len(validation_result.hard_constraint_violations),
        "soft_violations": len(validation_result.soft_constraint_violations),
        "total_penalty": validation_result.total_penalty_score
    }
    payload["success"] = True
    payload["message"] = f"Lineup generated for {len(players)} players"
    payload["generation_time"] = (datetime.now() - start_time).total_seconds()
    return payload
