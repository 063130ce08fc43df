"""
Tests for the lineup generator.

Verifies:
1. Every inning fills all ten positions and seats the right number on the bench
2. Nobody sits two innings in a row
3. 1B goes to an eligible player whenever one is fielding
4. Bench time is spread evenly
5. Output is deterministic
"""

import pytest

from conftest import make_roster
from lineup_app.models import Position, RosterTooSmallError, Player, TrackingState
from lineup_app.services.lineup_generator import LineupGenerator, generate_lineup
from lineup_app.services.summary import build_summary
from lineup_app.core.config import INNINGS, FIELD_SPOTS


ELIGIBILITY_PATTERNS = [
    (),
    (0, 1, 2),
    (10, 11, 12),
    (0, 2, 4, 6, 8, 10, 12, 14),
    tuple(range(16)),
    (9,),
]


def eligible_for(size, pattern):
    return [i for i in pattern if i < size]


def test_roster_too_small():
    """Fewer than ten players is rejected with the minimum in the message."""
    with pytest.raises(RosterTooSmallError) as exc_info:
        generate_lineup(make_roster(9))

    assert exc_info.value.required == FIELD_SPOTS
    assert exc_info.value.actual == 9
    assert "10" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_empty_roster_too_small():
    with pytest.raises(RosterTooSmallError):
        LineupGenerator([])


@pytest.mark.parametrize("size", range(10, 21))
@pytest.mark.parametrize("pattern", ELIGIBILITY_PATTERNS)
def test_every_inning_is_complete(size, pattern):
    """Six innings, each with every field position once and size-10 on the bench."""
    players = make_roster(size, eligible_for(size, pattern))
    schedule = generate_lineup(players)

    assert len(schedule.innings) == INNINGS
    assert [inning.inning for inning in schedule.innings] == list(range(1, INNINGS + 1))

    for inning in schedule.innings:
        assert list(inning.assignments.keys()) == [p.id for p in players]
        assert len(inning.bench()) == size - FIELD_SPOTS

        field_positions = [pos for pos in inning.assignments.values() if pos.is_field]
        assert sorted(p.value for p in field_positions) == sorted(p.value for p in Position.field())


@pytest.mark.parametrize("size", range(11, 21))
@pytest.mark.parametrize("pattern", ELIGIBILITY_PATTERNS)
def test_no_consecutive_bench(size, pattern):
    players = make_roster(size, eligible_for(size, pattern))
    schedule = generate_lineup(players)

    for previous, current in zip(schedule.innings, schedule.innings[1:]):
        assert not set(previous.bench()) & set(current.bench())

    assert schedule.get_diagnostics("consecutive_bench") == []


@pytest.mark.parametrize("size", range(10, 21))
@pytest.mark.parametrize("pattern", ELIGIBILITY_PATTERNS)
def test_first_base_goes_to_eligible_fielder(size, pattern):
    players = make_roster(size, eligible_for(size, pattern))
    by_id = {p.id: p for p in players}
    schedule = generate_lineup(players)

    for inning in schedule.innings:
        holder = inning.player_at(Position.FIRST_BASE)
        assert holder is not None
        eligible_fielding = [pid for pid in inning.fielders() if by_id[pid].can_play_first]
        if eligible_fielding:
            assert by_id[holder].can_play_first


@pytest.mark.parametrize("size", range(10, 17))
@pytest.mark.parametrize("pattern", ELIGIBILITY_PATTERNS)
def test_bench_time_is_balanced(size, pattern):
    """Bench innings differ by at most one for typical team sizes."""
    players = make_roster(size, eligible_for(size, pattern))
    summary = build_summary(players, generate_lineup(players))

    bench_counts = [entry.bench for entry in summary.values()]
    assert max(bench_counts) - min(bench_counts) <= 1
    assert sum(bench_counts) == (size - FIELD_SPOTS) * INNINGS


def test_deterministic():
    """Same roster in, same lineup out."""
    first = generate_lineup(make_roster(13, (0, 5, 9)))
    second = generate_lineup(make_roster(13, (0, 5, 9)))

    assert [i.assignments for i in first.innings] == [i.assignments for i in second.innings]
    assert first.diagnostics == second.diagnostics


def test_generator_instance_reusable():
    """Tracking state is per call, so a second generate() repeats the first."""
    generator = LineupGenerator(make_roster(12, (1, 4)))
    first = generator.generate()
    second = generator.generate()

    assert [i.assignments for i in first.innings] == [i.assignments for i in second.innings]


def test_roster_order_breaks_ties():
    """Reordering the roster changes who sits first."""
    players = make_roster(13)
    reordered = list(reversed(players))

    first_inning = generate_lineup(players).innings[0]
    reversed_first_inning = generate_lineup(reordered).innings[0]

    assert first_inning.bench() == ["1", "2", "3"]
    assert reversed_first_inning.bench() == ["13", "12", "11"]


def test_integer_ids():
    players = [Player(id=i, name=f"Player {i}", can_play_first=(i == 4)) for i in range(10)]
    schedule = generate_lineup(players)

    for inning in schedule.innings:
        assert inning.player_at(Position.FIRST_BASE) == 4


def test_ten_players_without_first_base_eligibility():
    """Nobody sits, 1B is still filled, and everyone plays all six innings."""
    players = make_roster(10)
    schedule = generate_lineup(players)
    summary = build_summary(players, schedule)

    for inning in schedule.innings:
        assert inning.bench() == []
        assert inning.player_at(Position.FIRST_BASE) is not None

    for entry in summary.values():
        assert sum(entry.positions.values()) == INNINGS
        assert entry.played == INNINGS
        assert entry.bench == 0


def test_thirteen_players_three_eligible():
    eligible = {"1", "6", "10"}
    players = make_roster(13, (0, 5, 9))
    schedule = generate_lineup(players)

    for inning in schedule.innings:
        assert len(inning.bench()) == 3
        assert inning.player_at(Position.FIRST_BASE) in eligible

    for previous, current in zip(schedule.innings, schedule.innings[1:]):
        assert not set(previous.bench()) & set(current.bench())


def test_first_base_swap_into_infield():
    """A lone eligible player placed in the outfield is moved in to cover 1B."""
    players = make_roster(13, (12,))
    first_inning = generate_lineup(players).innings[0]

    assert first_inning.position_of("13") == Position.FIRST_BASE


def test_zones_swap_when_pools_allow():
    """Last inning's infielders go out and everyone else comes in."""
    players = make_roster(10)
    generator = LineupGenerator(players)
    state = TrackingState.for_roster(players)
    for player in players[:4]:
        state[player.id].record(Position.SHORTSTOP)
    for player in players[4:]:
        state[player.id].record(Position.LEFT_FIELD)

    infielders, outfielders = generator._split_zones(players, state)

    assert infielders == players[4:]
    assert outfielders == players[:4]


def test_zone_split_prefers_least_zone_time():
    """With more infield candidates than spots, those with least infield time go in."""
    players = make_roster(10)
    generator = LineupGenerator(players)
    state = TrackingState.for_roster(players)
    # Players 0 and 1 already have infield innings
    state[players[0].id].position_counts[Position.PITCHER] = 2
    state[players[1].id].position_counts[Position.CATCHER] = 1

    infielders, outfielders = generator._split_zones(players, state)

    assert [p.id for p in infielders] == ["3", "4", "5", "6", "7", "8"]
    assert [p.id for p in outfielders] == ["1", "2", "9", "10"]

def test_zone_repeats_are_reported():
    """Ten players cannot all switch zones every inning; the repeats are recorded."""
    schedule = generate_lineup(make_roster(10))
    repeats = schedule.get_diagnostics("zone_repeat")

    assert repeats
    for diagnostic in repeats:
        inning = schedule.get_inning(diagnostic.inning)
        previous = schedule.get_inning(diagnostic.inning - 1)
        for player_id in diagnostic.player_ids:
            assert inning.zone_of(player_id) == previous.zone_of(player_id)


def test_bench_overflow_relaxes_consecutive_rule():
    """21 players leaves 11 seats but only 10 rested players: one sits again."""
    players = make_roster(21)
    schedule = generate_lineup(players)

    for inning in schedule.innings:
        assert len(inning.bench()) == 11

    diagnostics = schedule.get_diagnostics("consecutive_bench")
    assert [d.inning for d in diagnostics] == [2, 3, 4, 5, 6]
    for diagnostic in diagnostics:
        assert len(diagnostic.player_ids) == 1

