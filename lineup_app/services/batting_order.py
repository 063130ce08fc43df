"""
Random batting order.
"""

import random
from typing import List, Optional, Sequence

from lineup_app.models import Player


def generate_batting_order(players: Sequence[Player], rng: Optional[random.Random] = None) -> List[Player]:
    """
    Return a new list with the roster in uniformly random order.
    The roster itself is left untouched.

    Args:
        players: Roster to shuffle
        rng: Optional random.Random instance (seeded for reproducible orders)
    """
    rng = rng or random.Random()
    order = list(players)
    # Fisher-Yates, walking down from the end
    for i in range(len(order) - 1, 0, -1):
        j = rng.randint(0, i)
        order[i], order[j] = order[j], order[i]
    return order
