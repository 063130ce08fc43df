"""
Services for lineup generation, validation, summaries and roster import.
"""

from .lineup_generator import LineupGenerator, generate_lineup
from .summary import build_summary, bench_spread
from .batting_order import generate_batting_order
from .roster_import import parse_names, players_from_names, import_roster, roster_status
from .validator import LineupValidator

__all__ = [
    "LineupGenerator",
    "generate_lineup",
    "build_summary",
    "bench_spread",
    "generate_batting_order",
    "parse_names",
    "players_from_names",
    "import_roster",
    "roster_status",
    "LineupValidator"
]
