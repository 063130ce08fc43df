"""
Lineup validation module for the Youth Baseball Lineup Generator.
Validates lineups against all hard and soft constraints.
"""

from typing import List, Sequence
from collections import defaultdict

from lineup_app.models import (
    Player, Position, Zone, LineupSchedule, LineupConstraint,
    LineupValidationResult
)
from lineup_app.core.config import INNINGS, FIELD_SPOTS, ALL_POSITIONS, PENALTY_WEIGHTS
from lineup_app.core.logging_config import get_logger
from lineup_app.services.summary import build_summary, bench_spread

logger = get_logger(__name__)


class LineupValidator:
    """
    Validates game lineups against all constraints.
    Checks both hard constraints (must be satisfied) and soft constraints (fairness preferences).
    """

    def validate_lineup(self, players: Sequence[Player], schedule: LineupSchedule) -> LineupValidationResult:
        """
        Validate a complete lineup against all constraints.

        Args:
            players: The roster the lineup was built for
            schedule: The lineup to validate

        Returns:
            LineupValidationResult with all violations found
        """
        result = LineupValidationResult(is_valid=True)

        self._check_inning_count(schedule, result)
        self._check_player_coverage(players, schedule, result)
        self._check_field_positions(schedule, result)
        self._check_bench_size(players, schedule, result)
        self._check_first_base(players, schedule, result)
        self._check_consecutive_bench(players, schedule, result)
        self._check_zone_repeats(players, schedule, result)
        self._check_bench_balance(players, schedule, result)

        logger.info(
            f"Validation: valid={result.is_valid}, "
            f"hard={len(result.hard_constraint_violations)}, "
            f"soft={len(result.soft_constraint_violations)}, "
            f"penalty={result.total_penalty_score:.2f}"
        )
        for violation in result.hard_constraint_violations[:10]:  # Show first 10
            logger.warning(f"{violation.constraint_type}: {violation.description}")

        return result

    def _violation(self, constraint_type: str, severity: str, description: str,
                   inning: int = None, players: List = None) -> LineupConstraint:
        return LineupConstraint(
            constraint_type=constraint_type,
            severity=severity,
            description=description,
            inning=inning,
            affected_players=players or [],
            penalty_score=PENALTY_WEIGHTS[constraint_type]
        )

    def _check_inning_count(self, schedule: LineupSchedule, result: LineupValidationResult):
        """A game has exactly INNINGS innings, numbered from 1."""
        numbers = [inning.inning for inning in schedule.innings]
        if numbers != list(range(1, INNINGS + 1)):
            result.add_violation(self._violation(
                "wrong_inning_count", "hard",
                f"Lineup has innings {numbers}, expected 1-{INNINGS}"
            ))

    def _check_player_coverage(self, players: Sequence[Player], schedule: LineupSchedule,
                               result: LineupValidationResult):
        """Every roster player has exactly one entry each inning."""
        roster_ids = {p.id for p in players}
        for inning in schedule.innings:
            assigned_ids = set(inning.assignments.keys())
            missing = [p.id for p in players if p.id not in assigned_ids]
            unknown = [pid for pid in inning.assignments if pid not in roster_ids]
            if missing:
                result.add_violation(self._violation(
                    "player_missing", "hard",
                    f"Inning {inning.inning}: {len(missing)} player(s) have no assignment",
                    inning.inning, missing
                ))
            if unknown:
                result.add_violation(self._violation(
                    "player_missing", "hard",
                    f"Inning {inning.inning}: {len(unknown)} assignment(s) for players not on the roster",
                    inning.inning, unknown
                ))

    def _check_field_positions(self, schedule: LineupSchedule, result: LineupValidationResult):
        """Each field position is filled by exactly one player each inning."""
        for inning in schedule.innings:
            holders = defaultdict(list)
            for player_id, position in inning.assignments.items():
                if position.is_field:
                    holders[position].append(player_id)

            for position in Position.field():
                count = len(holders[position])
                if count == 0:
                    result.add_violation(self._violation(
                        "position_unfilled", "hard",
                        f"Inning {inning.inning}: nobody at {position.value}",
                        inning.inning
                    ))
                elif count > 1:
                    result.add_violation(self._violation(
                        "position_conflict", "hard",
                        f"Inning {inning.inning}: {count} players at {position.value}",
                        inning.inning, holders[position]
                    ))

    def _check_bench_size(self, players: Sequence[Player], schedule: LineupSchedule,
                          result: LineupValidationResult):
        """Exactly roster size minus FIELD_SPOTS players sit each inning."""
        expected = len(players) - FIELD_SPOTS
        for inning in schedule.innings:
            bench = inning.bench()
            if len(bench) != expected:
                result.add_violation(self._violation(
                    "bench_size", "hard",
                    f"Inning {inning.inning}: {len(bench)} on bench (expected {expected})",
                    inning.inning, bench
                ))

    def _check_first_base(self, players: Sequence[Player], schedule: LineupSchedule,
                          result: LineupValidationResult):
        """1B goes to an eligible player whenever one is fielding."""
        by_id = {p.id: p for p in players}
        for inning in schedule.innings:
            holder = inning.player_at(Position.FIRST_BASE)
            if holder is None or holder not in by_id or by_id[holder].can_play_first:
                continue
            eligible_fielders = [pid for pid in inning.fielders() if pid in by_id and by_id[pid].can_play_first]
            if eligible_fielders:
                result.add_violation(self._violation(
                    "first_base_eligibility", "hard",
                    f"Inning {inning.inning}: {by_id[holder].name} at 1B while "
                    f"{len(eligible_fielders)} eligible player(s) were fielding",
                    inning.inning, [holder]
                ))

    def _check_consecutive_bench(self, players: Sequence[Player], schedule: LineupSchedule,
                                 result: LineupValidationResult):
        """No player sits two innings in a row."""
        for previous, current in zip(schedule.innings, schedule.innings[1:]):
            repeated = [pid for pid in current.bench() if previous.position_of(pid) == Position.BENCH]
            if repeated:
                result.add_violation(self._violation(
                    "consecutive_bench", "soft",
                    f"Innings {previous.inning}-{current.inning}: {len(repeated)} player(s) sat twice in a row",
                    current.inning, repeated
                ))

    def _check_zone_repeats(self, players: Sequence[Player], schedule: LineupSchedule,
                            result: LineupValidationResult):
        """Fielders should alternate between infield and outfield."""
        for previous, current in zip(schedule.innings, schedule.innings[1:]):
            repeated = []
            for player in players:
                zone = current.zone_of(player.id)
                if zone in (Zone.INFIELD, Zone.OUTFIELD) and zone == previous.zone_of(player.id):
                    repeated.append(player.id)
            if repeated:
                result.add_violation(self._violation(
                    "zone_repeat", "soft",
                    f"Inning {current.inning}: {len(repeated)} player(s) stayed in the same zone",
                    current.inning, repeated
                ))

    def _check_bench_balance(self, players: Sequence[Player], schedule: LineupSchedule,
                             result: LineupValidationResult):
        """Bench innings should differ by at most one across the roster."""
        summary = build_summary(players, schedule)
        spread = bench_spread(summary)
        if spread > 1:
            result.add_violation(self._violation(
                "bench_imbalance", "soft",
                f"Bench innings range over {spread} (max 1)"
            ))

    def generate_lineup_report(self, players: Sequence[Player], schedule: LineupSchedule) -> str:
        """
        Generate a printable report of the lineup.

        Args:
            players: The roster
            schedule: The lineup to report on

        Returns:
            Formatted report string
        """
        by_id = {p.id: p for p in players}
        name_width = max([len(p.name) for p in players] + [8])
        cell = max(name_width, 5)

        report = []
        report.append("=" * 80)
        report.append("LINEUP REPORT")
        report.append("=" * 80)
        report.append(f"Players: {len(players)}  Innings: {len(schedule.innings)}  "
                      f"Bench per inning: {max(len(players) - FIELD_SPOTS, 0)}")
        report.append("")

        # Position by inning
        header = "Pos".ljust(6) + "".join(f"Inn {i.inning}".ljust(cell + 2) for i in schedule.innings)
        report.append("Position by Inning:")
        report.append(header)
        for code in ALL_POSITIONS:
            position = Position(code)
            row = code.ljust(6)
            for inning in schedule.innings:
                holder = inning.player_at(position)
                row += (by_id[holder].name if holder in by_id else "-").ljust(cell + 2)
            report.append(row.rstrip())
        bench_rows = max([len(i.bench()) for i in schedule.innings] + [0])
        for row_index in range(bench_rows):
            row = ("BENCH" if row_index == 0 else "").ljust(6)
            for inning in schedule.innings:
                bench = inning.bench()
                row += (by_id[bench[row_index]].name if row_index < len(bench) else "").ljust(cell + 2)
            report.append(row.rstrip())
        report.append("")

        # Player by inning with totals
        summary = build_summary(players, schedule)
        report.append("Player Schedule:")
        header = "Player".ljust(name_width + 2)
        header += "".join(str(i.inning).ljust(7) for i in schedule.innings)
        header += "Played  Bench"
        report.append(header)
        for player in players:
            row = player.name.ljust(name_width + 2)
            for position in schedule.get_player_positions(player.id):
                row += (position.value if position else "?").ljust(7)
            entry = summary[player.id]
            row += f"{entry.played:<8}{entry.bench}"
            report.append(row)
        report.append("")

        # Position totals
        report.append("Position Totals:")
        report.append("Player".ljust(name_width + 2) + "".join(code.ljust(4) for code in ALL_POSITIONS) + "BENCH")
        for player in players:
            entry = summary[player.id]
            counts = "".join((str(entry.positions[code]) if entry.positions[code] else ".").ljust(4)
                             for code in ALL_POSITIONS)
            report.append(player.name.ljust(name_width + 2) + counts + str(entry.bench))

        if schedule.diagnostics:
            report.append("")
            report.append("Notes:")
            for diagnostic in schedule.diagnostics:
                report.append(f"  Inning {diagnostic.inning}: {diagnostic.description}")

        report.append("=" * 80)

        return "\n".join(report)
