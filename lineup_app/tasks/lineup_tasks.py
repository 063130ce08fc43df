"""
Celery tasks for lineup generation.
"""

import traceback
from typing import Dict, List

from lineup_app.core.celery_app import celery_app
from lineup_app.core.logging_config import get_logger
from lineup_app.models import RosterTooSmallError
from lineup_app.services.formatting import players_from_dicts, generate_lineup_payload

logger = get_logger(__name__)


@celery_app.task(name="generate_lineup")
def generate_lineup_task(player_rows: List[Dict]) -> Dict:
    """
    Async task to generate a game lineup.

    Args:
        player_rows: Roster as dicts with id, name, can_play_first

    Returns:
        dict: Lineup data with innings, summary and validation results
    """
    try:
        players = players_from_dicts(player_rows)
        return generate_lineup_payload(players)

    except RosterTooSmallError as e:
        return {
            "success": False,
            "message": str(e),
            "error": str(e)
        }

    except Exception as e:
        error_trace = traceback.format_exc()
        logger.error(f"Error in generate_lineup_task: {error_trace}")

        return {
            "success": False,
            "message": f"Lineup generation failed: {str(e)}",
            "error": str(e),
            "traceback": error_trace
        }
