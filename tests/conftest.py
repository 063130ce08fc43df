"""
Shared roster helpers for the lineup tests.
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lineup_app.models import Player

NAMES = [
    "Alex", "Bailey", "Cameron", "Dakota", "Emery", "Finley", "Gray", "Harper",
    "Indigo", "Jordan", "Kai", "Lane", "Morgan", "Noel", "Oakley", "Parker",
    "Quinn", "Reese", "Sage", "Tatum", "Val", "Wren",
]


def make_roster(size, eligible=()):
    """Roster of `size` players; indexes in `eligible` may play 1B."""
    eligible = set(eligible)
    return [
        Player(id=str(i + 1), name=NAMES[i % len(NAMES)] + ("" if i < len(NAMES) else str(i)),
               can_play_first=i in eligible)
        for i in range(size)
    ]
