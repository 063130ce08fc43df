"""
Lineup generator for youth baseball games.

Assigns every player on a roster to a field position (or the bench) for each
inning using greedy passes:

1. Sitter selection - fewest bench innings first, never the same player two
   innings running while rested players remain.
2. Zone balancing - players alternate between infield and outfield.
3. Position assignment - 1B goes to an eligible player, then the rarest-played
   positions are filled by the least experienced players.
4. Tracking update - counts carried into the next inning.

Ties are always broken by roster order so the same roster produces the same
lineup every time.
"""

from typing import List, Tuple, Sequence

from lineup_app.models import (
    Player, Position, Zone, InningAssignment, LineupSchedule,
    Diagnostic, TrackingState, RosterTooSmallError
)
from lineup_app.core.config import (
    INNINGS, FIELD_SPOTS, INFIELD_SPOTS, OUTFIELD_SPOTS
)
from lineup_app.core.logging_config import get_logger

logger = get_logger(__name__)


class LineupGenerator:
    """
    Builds a full-game lineup for a roster.
    Tracking state is created per call to generate(), so one instance can be
    reused and separate instances can run side by side.
    """

    def __init__(self, players: Sequence[Player]):
        """
        Initialize the generator with a roster.

        Args:
            players: Ordered roster; order is the tie-breaker everywhere

        Raises:
            RosterTooSmallError: If there are fewer players than field positions
        """
        if len(players) < FIELD_SPOTS:
            raise RosterTooSmallError(len(players))

        self.players = list(players)
        self.bench_per_inning = len(self.players) - FIELD_SPOTS

    def generate(self) -> LineupSchedule:
        """
        Generate the lineup for every inning.
        This is the main entry point for lineup generation.
        """
        logger.info(
            f"Generating {INNINGS}-inning lineup for {len(self.players)} players "
            f"({self.bench_per_inning} on bench each inning)"
        )

        state = TrackingState.for_roster(self.players)
        schedule = LineupSchedule()

        for number in range(1, INNINGS + 1):
            inning = self._build_inning(number, state, schedule)
            state.record_inning(inning)
            schedule.add_inning(inning)

        if schedule.diagnostics:
            logger.info(f"Lineup generated with {len(schedule.diagnostics)} diagnostics")
        return schedule

    def _build_inning(self, number: int, state: TrackingState, schedule: LineupSchedule) -> InningAssignment:
        """Run sitter selection, zone balancing and position assignment for one inning."""
        assignment = {}

        sitters = self._choose_sitters(number, state, schedule)
        for player in sitters:
            assignment[player.id] = Position.BENCH

        sitting = {player.id for player in sitters}
        fielders = [p for p in self.players if p.id not in sitting]

        infielders, outfielders = self._split_zones(fielders, state)
        infielders, outfielders = self._cover_first_base(infielders, outfielders, state, number)
        self._note_zone_repeats(number, infielders, outfielders, state, schedule)

        self._assign_positions(infielders, Position.infield(), state, assignment, enforce_first_base=True)
        self._assign_positions(outfielders, Position.outfield(), state, assignment, enforce_first_base=False)

        # Keep roster order in the assignment mapping
        ordered = {p.id: assignment[p.id] for p in self.players}
        return InningAssignment(inning=number, assignments=ordered)

    def _choose_sitters(self, number: int, state: TrackingState, schedule: LineupSchedule) -> List[Player]:
        """
        Choose who sits this inning.
        Players who sat last inning are skipped; the rest are ranked by bench
        innings so far, then roster order.
        """
        if self.bench_per_inning == 0:
            return []

        by_bench = lambda p: (state[p.id].bench_count, state[p.id].index)
        rested = [p for p in self.players if not state[p.id].benched_last]
        sitters = sorted(rested, key=by_bench)[:self.bench_per_inning]

        shortfall = self.bench_per_inning - len(sitters)
        if shortfall > 0:
            # More seats than rested players: sit some players again
            repeats = sorted(
                [p for p in self.players if state[p.id].benched_last],
                key=by_bench
            )[:shortfall]
            sitters.extend(repeats)

            description = (
                f"{self.bench_per_inning} bench seats but only {len(rested)} rested players; "
                f"{len(repeats)} player(s) sit consecutive innings"
            )
            logger.warning(f"Inning {number}: {description}")
            schedule.diagnostics.append(Diagnostic(
                kind="consecutive_bench",
                inning=number,
                description=description,
                player_ids=[p.id for p in repeats]
            ))

        return sitters

    def _least_zone_time(self, pool: List[Player], count: int, zone: Zone, state: TrackingState) -> List[Player]:
        """Pick `count` players from pool with the least time already spent in zone."""
        ranked = sorted(pool, key=lambda p: (state[p.id].zone_count(zone), state[p.id].index))
        return ranked[:count]

    def _split_zones(self, fielders: List[Player], state: TrackingState) -> Tuple[List[Player], List[Player]]:
        """
        Split fielders into infield and outfield groups.
        Anyone who was not in the infield last inning prefers infield; last
        inning's infielders prefer outfield.
        """
        prefer_infield = [p for p in fielders if state[p.id].last_zone != Zone.INFIELD]
        prefer_outfield = [p for p in fielders if state[p.id].last_zone == Zone.INFIELD]

        if len(prefer_infield) >= INFIELD_SPOTS and len(prefer_outfield) >= OUTFIELD_SPOTS:
            infielders = self._least_zone_time(prefer_infield, INFIELD_SPOTS, Zone.INFIELD, state)
            outfielders = self._least_zone_time(prefer_outfield, OUTFIELD_SPOTS, Zone.OUTFIELD, state)
        elif len(prefer_infield) >= INFIELD_SPOTS:
            infielders = self._least_zone_time(prefer_infield, INFIELD_SPOTS, Zone.INFIELD, state)
            outfielders = [p for p in fielders if p not in infielders]
        elif len(prefer_outfield) >= OUTFIELD_SPOTS:
            outfielders = self._least_zone_time(prefer_outfield, OUTFIELD_SPOTS, Zone.OUTFIELD, state)
            infielders = [p for p in fielders if p not in outfielders]
        else:
            infielders = self._least_zone_time(fielders, INFIELD_SPOTS, Zone.INFIELD, state)
            outfielders = [p for p in fielders if p not in infielders]

        return infielders, outfielders

    def _cover_first_base(self, infielders: List[Player], outfielders: List[Player],
                          state: TrackingState, number: int) -> Tuple[List[Player], List[Player]]:
        """
        Make sure an eligible 1B player is in the infield when one is fielding.
        Swaps the eligible outfielder with the least infield time for the
        infielder with the least outfield time.
        """
        if any(p.can_play_first for p in infielders):
            return infielders, outfielders

        eligible = [p for p in outfielders if p.can_play_first]
        if not eligible:
            return infielders, outfielders

        incoming = self._least_zone_time(eligible, 1, Zone.INFIELD, state)[0]
        outgoing = self._least_zone_time(infielders, 1, Zone.OUTFIELD, state)[0]
        logger.debug(f"Inning {number}: moving {incoming.name} to infield to cover 1B, {outgoing.name} to outfield")

        infielders = [incoming if p == outgoing else p for p in infielders]
        outfielders = [outgoing if p == incoming else p for p in outfielders]
        return infielders, outfielders

    def _note_zone_repeats(self, number: int, infielders: List[Player], outfielders: List[Player],
                           state: TrackingState, schedule: LineupSchedule):
        """Record fielders who stay in the same zone as last inning."""
        repeats = [p for p in infielders if state[p.id].last_zone == Zone.INFIELD]
        repeats += [p for p in outfielders if state[p.id].last_zone == Zone.OUTFIELD]
        if not repeats:
            return

        names = ", ".join(p.name for p in repeats)
        description = f"{len(repeats)} player(s) stay in the same zone: {names}"
        logger.info(f"Inning {number}: {description}")
        schedule.diagnostics.append(Diagnostic(
            kind="zone_repeat",
            inning=number,
            description=description,
            player_ids=[p.id for p in repeats]
        ))

    def _assign_positions(self, players: List[Player], positions: List[Position], state: TrackingState,
                          assignment: dict, enforce_first_base: bool):
        """
        Assign players to the positions of one zone.
        Handles the 1B restriction first, then fills the rest greedily.
        """
        remaining = list(players)
        open_positions = list(positions)

        if enforce_first_base and Position.FIRST_BASE in open_positions:
            eligible = [p for p in remaining if p.can_play_first]
            if eligible:
                picked = min(eligible, key=lambda p: (
                    state[p.id].position_counts[Position.FIRST_BASE], state[p.id].index
                ))
                assignment[picked.id] = Position.FIRST_BASE
                remaining.remove(picked)
                open_positions.remove(Position.FIRST_BASE)
            # No eligible player: 1B stays open for anyone

        self._greedy_assign(remaining, open_positions, state, assignment)

    def _greedy_assign(self, players: List[Player], positions: List[Position], state: TrackingState,
                       assignment: dict):
        """
        For each position, rarest-played first, pick the player who has
        played it least.
        """
        # sorted() is stable: equal totals keep field order
        ordered = sorted(
            positions,
            key=lambda pos: sum(state[p.id].position_counts[pos] for p in players)
        )

        available = list(players)
        for position in ordered:
            if not available:
                break
            picked = min(available, key=lambda p: (state[p.id].position_counts[position], state[p.id].index))
            assignment[picked.id] = position
            available.remove(picked)


def generate_lineup(players: Sequence[Player]) -> LineupSchedule:
    """
    Generate a full-game lineup for a roster.

    Args:
        players: Ordered roster of at least FIELD_SPOTS players

    Returns:
        LineupSchedule with one InningAssignment per inning

    Raises:
        RosterTooSmallError: If the roster is smaller than FIELD_SPOTS
    """
    return LineupGenerator(players).generate()
