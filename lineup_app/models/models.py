"""
Data models for the Youth Baseball Lineup Generator.
Defines all data structures used throughout the application.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Union
from enum import Enum

from lineup_app.core.config import INFIELD_POSITIONS, OUTFIELD_POSITIONS, FIELD_SPOTS

PlayerId = Union[str, int]


class Zone(Enum):
    INFIELD = "infield"
    OUTFIELD = "outfield"
    BENCH = "bench"


class Position(Enum):
    PITCHER = "P"
    CATCHER = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SHORTSTOP = "SS"
    LEFT_FIELD = "LF"
    LEFT_CENTER = "LC"
    RIGHT_CENTER = "RC"
    RIGHT_FIELD = "RF"
    BENCH = "BENCH"

    @property
    def zone(self) -> Zone:
        if self.value in INFIELD_POSITIONS:
            return Zone.INFIELD
        if self.value in OUTFIELD_POSITIONS:
            return Zone.OUTFIELD
        return Zone.BENCH

    @property
    def is_field(self) -> bool:
        return self is not Position.BENCH

    @classmethod
    def infield(cls) -> List['Position']:
        return [cls(code) for code in INFIELD_POSITIONS]

    @classmethod
    def outfield(cls) -> List['Position']:
        return [cls(code) for code in OUTFIELD_POSITIONS]

    @classmethod
    def field(cls) -> List['Position']:
        return cls.infield() + cls.outfield()


class RosterTooSmallError(ValueError):
    """Raised when a roster cannot cover every field position."""

    def __init__(self, actual: int, required: int = FIELD_SPOTS):
        self.actual = actual
        self.required = required
        super().__init__(f"Need at least {required} players (got {actual}).")


class RosterImportError(ValueError):
    """Raised when pasted roster text yields no player names."""


@dataclass(frozen=True)
class Player:
    id: PlayerId
    name: str
    can_play_first: bool = False

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Player):
            return self.id == other.id
        return False


@dataclass
class InningAssignment:
    inning: int
    assignments: Dict[PlayerId, Position] = field(default_factory=dict)

    def __str__(self):
        return f"Inning {self.inning}: {len(self.fielders())} fielding, {len(self.bench())} on bench"

    def position_of(self, player_id: PlayerId) -> Optional[Position]:
        return self.assignments.get(player_id)

    def player_at(self, position: Position) -> Optional[PlayerId]:
        for player_id, assigned in self.assignments.items():
            if assigned == position:
                return player_id
        return None

    def bench(self) -> List[PlayerId]:
        return [pid for pid, pos in self.assignments.items() if pos == Position.BENCH]

    def fielders(self) -> List[PlayerId]:
        return [pid for pid, pos in self.assignments.items() if pos.is_field]

    def zone_of(self, player_id: PlayerId) -> Optional[Zone]:
        position = self.assignments.get(player_id)
        return position.zone if position else None


@dataclass
class Diagnostic:
    """A soft rule the generator had to break for a given inning."""
    kind: str
    inning: int
    description: str
    player_ids: List[PlayerId] = field(default_factory=list)


@dataclass
class LineupSchedule:
    innings: List[InningAssignment] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add_inning(self, inning: InningAssignment):
        self.innings.append(inning)

    def get_inning(self, number: int) -> Optional[InningAssignment]:
        for inning in self.innings:
            if inning.inning == number:
                return inning
        return None

    def get_player_positions(self, player_id: PlayerId) -> List[Optional[Position]]:
        return [inning.position_of(player_id) for inning in self.innings]

    def get_diagnostics(self, kind: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]


@dataclass
class PlayerTracking:
    """Per-player bookkeeping for one generation run."""
    index: int
    position_counts: Dict[Position, int] = field(
        default_factory=lambda: {pos: 0 for pos in Position.field()}
    )
    bench_count: int = 0
    last_zone: Optional[Zone] = None
    benched_last: bool = False

    def zone_count(self, zone: Zone) -> int:
        return sum(count for pos, count in self.position_counts.items() if pos.zone == zone)

    def record(self, position: Position):
        if position == Position.BENCH:
            self.bench_count += 1
            self.last_zone = Zone.BENCH
            self.benched_last = True
        else:
            self.position_counts[position] += 1
            self.last_zone = position.zone
            self.benched_last = False


@dataclass
class TrackingState:
    players: Dict[PlayerId, PlayerTracking] = field(default_factory=dict)

    @classmethod
    def for_roster(cls, roster: List[Player]) -> 'TrackingState':
        return cls(players={p.id: PlayerTracking(index=i) for i, p in enumerate(roster)})

    def __getitem__(self, player_id: PlayerId) -> PlayerTracking:
        return self.players[player_id]

    def record_inning(self, inning: InningAssignment):
        for player_id, position in inning.assignments.items():
            self.players[player_id].record(position)


@dataclass
class PlayerSummary:
    player_id: PlayerId
    name: str
    positions: Dict[str, int] = field(default_factory=dict)
    bench: int = 0
    played: int = 0

    @property
    def infield(self) -> int:
        return sum(self.positions.get(code, 0) for code in INFIELD_POSITIONS)

    @property
    def outfield(self) -> int:
        return sum(self.positions.get(code, 0) for code in OUTFIELD_POSITIONS)


@dataclass
class LineupConstraint:
    constraint_type: str
    severity: str
    description: str
    inning: Optional[int] = None
    affected_players: List[PlayerId] = field(default_factory=list)
    penalty_score: float = 0.0


@dataclass
class LineupValidationResult:
    is_valid: bool
    hard_constraint_violations: List[LineupConstraint] = field(default_factory=list)
    soft_constraint_violations: List[LineupConstraint] = field(default_factory=list)
    total_penalty_score: float = 0.0

    def add_violation(self, constraint: LineupConstraint):
        if constraint.severity == 'hard':
            self.hard_constraint_violations.append(constraint)
            self.is_valid = False
        else:
            self.soft_constraint_violations.append(constraint)
        self.total_penalty_score += constraint.penalty_score

    def get_summary(self) -> str:
        summary = f"Lineup Valid: {self.is_valid}\n"
        summary += f"Hard Violations: {len(self.hard_constraint_violations)}\n"
        summary += f"Soft Violations: {len(self.soft_constraint_violations)}\n"
        summary += f"Total Penalty Score: {self.total_penalty_score:.2f}\n"
        return summary
