"""
Main entry point for the Youth Baseball Lineup Generator (CLI).
Reads a roster, generates the lineup, validates it and prints a report.
"""

import sys
import random
import argparse
from datetime import datetime

from lineup_app.core.config import DEFAULT_ROSTER, LOG_LEVEL
from lineup_app.core.logging_config import setup_logging
from lineup_app.models import Player, RosterTooSmallError, RosterImportError
from lineup_app.services.lineup_generator import LineupGenerator
from lineup_app.services.batting_order import generate_batting_order
from lineup_app.services.roster_import import import_roster
from lineup_app.services.validator import LineupValidator
from lineup_app.services.formatting import players_from_dicts


def load_players(args) -> list:
    """Build the roster from --names (file or stdin) or the demo roster."""
    if not args.names:
        return players_from_dicts(DEFAULT_ROSTER)

    if args.names == "-":
        text = sys.stdin.read()
    else:
        with open(args.names, encoding="utf-8") as handle:
            text = handle.read()

    players = import_roster(text)
    first_base = {name.strip().lower() for name in args.first_base}
    return [
        Player(id=p.id, name=p.name, can_play_first=p.name.lower() in first_base)
        for p in players
    ]


def main(argv=None):
    """
    Main function to run the lineup generator.
    Coordinates roster loading, lineup generation, validation, and output.
    """
    parser = argparse.ArgumentParser(
        description='Youth Baseball Lineup Generator - fair fielding lineups for a 6-inning game'
    )
    parser.add_argument(
        '--names',
        help='File with one player name per line ("-" reads stdin); defaults to the demo roster'
    )
    parser.add_argument(
        '--first-base',
        action='append',
        default=[],
        metavar='NAME',
        help='Player allowed to play 1B (repeatable)'
    )
    parser.add_argument(
        '--batting-order',
        action='store_true',
        help='Also print a random batting order'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed for the batting order shuffle'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else LOG_LEVEL)

    print("\n" + "=" * 80)
    print("YOUTH BASEBALL LINEUP GENERATOR")
    print("=" * 80)
    print(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 80)

    try:
        players = load_players(args)
        print(f"\nLoaded {len(players)} players "
              f"({sum(1 for p in players if p.can_play_first)} eligible for 1B)")

        schedule = LineupGenerator(players).generate()

        validator = LineupValidator()
        validation_result = validator.validate_lineup(players, schedule)

        print("\n" + validation_result.get_summary())
        print(validator.generate_lineup_report(players, schedule))

        if args.batting_order:
            rng = random.Random(args.seed) if args.seed is not None else None
            print("\nBatting Order:")
            for slot, player in enumerate(generate_batting_order(players, rng=rng), start=1):
                print(f"  {slot:>2}. {player.name}")

        return 0

    except (RosterTooSmallError, RosterImportError) as e:
        print(f"ERROR: {e}")
        return 1

    except OSError as e:
        print(f"ERROR: Could not read roster: {e}")
        return 1

    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 1


if __name__ == '__main__':
    sys.exit(main())
