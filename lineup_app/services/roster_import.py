"""
Roster import from pasted text (one player name per line).
"""

from typing import Dict, List

from lineup_app.models import Player, RosterImportError
from lineup_app.core.config import FIELD_SPOTS


def parse_names(text: str) -> List[str]:
    """Split pasted text into trimmed, non-empty names."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def players_from_names(names: List[str], id_prefix: str = "import") -> List[Player]:
    """Create players in the given order; nobody is 1B-eligible until set."""
    return [
        Player(id=f"{id_prefix}-{i}", name=name, can_play_first=False)
        for i, name in enumerate(names, start=1)
    ]


def import_roster(text: str, id_prefix: str = "import") -> List[Player]:
    """
    Turn pasted text into a roster.

    Raises:
        RosterImportError: If the text holds no names
    """
    names = parse_names(text)
    if not names:
        raise RosterImportError("No player names found. Paste one name per line.")
    return players_from_names(names, id_prefix=id_prefix)


def roster_status(names: List[str]) -> Dict:
    """Describe whether enough names are present to generate a lineup."""
    count = len(names)
    if count == 0:
        message = "No names yet"
    else:
        message = f"{count} player{'s' if count != 1 else ''}"
        if count < FIELD_SPOTS:
            message += f" - need at least {FIELD_SPOTS}"

    return {
        "count": count,
        "ready": count >= FIELD_SPOTS,
        "message": message
    }
