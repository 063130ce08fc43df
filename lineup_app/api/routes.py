"""
API routes for lineup generation and roster tools.
"""

import random
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator
from typing import List, Dict, Union
from datetime import datetime
from celery.result import AsyncResult

from lineup_app.models import RosterTooSmallError, RosterImportError
from lineup_app.services.batting_order import generate_batting_order
from lineup_app.services.roster_import import import_roster, parse_names, roster_status
from lineup_app.services.formatting import (
    players_from_dicts, player_to_dict, generate_lineup_payload
)
from lineup_app.core.config import (
    INFIELD_POSITIONS, OUTFIELD_POSITIONS, ALL_POSITIONS, FIRST_BASE,
    INNINGS, FIELD_SPOTS, BATTING_ORDER_SEED
)
from lineup_app.core.celery_app import celery_app
from lineup_app.core.logging_config import get_logger
from lineup_app.tasks.lineup_tasks import generate_lineup_task

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["lineup"])


class PlayerModel(BaseModel):
    """A roster entry."""
    id: Union[str, int]
    name: str
    can_play_first: bool = False


class RosterRequest(BaseModel):
    """Request model carrying an ordered roster."""
    players: List[PlayerModel]

    @field_validator("players")
    @classmethod
    def unique_ids(cls, players: List[PlayerModel]) -> List[PlayerModel]:
        seen = set()
        for player in players:
            # Ids are keyed as strings in responses, so 1 and "1" collide
            key = str(player.id)
            if key in seen:
                raise ValueError(f"Duplicate player id: {player.id}")
            seen.add(key)
        return players


class ImportRequest(BaseModel):
    """Pasted roster text, one name per line."""
    text: str


class InningResponse(BaseModel):
    inning: int
    assignments: Dict[str, str]


class PlayerSummaryResponse(BaseModel):
    player_id: str
    name: str
    positions: Dict[str, int]
    played: int
    bench: int


class DiagnosticResponse(BaseModel):
    kind: str
    inning: int
    description: str
    player_ids: List[str]


class LineupResponse(BaseModel):
    """Response model for lineup generation."""
    success: bool
    message: str
    innings: List[InningResponse]
    summary: List[PlayerSummaryResponse]
    diagnostics: List[DiagnosticResponse]
    validation: Dict
    generation_time: float


class BattingOrderResponse(BaseModel):
    players: List[PlayerModel]


class ImportResponse(BaseModel):
    players: List[PlayerModel]
    count: int
    ready: bool
    message: str


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@router.get("/config")
async def get_config():
    """Field layout and game rules used by the generator."""
    return {
        "innings": INNINGS,
        "field_spots": FIELD_SPOTS,
        "positions": ALL_POSITIONS,
        "zones": {
            "infield": INFIELD_POSITIONS,
            "outfield": OUTFIELD_POSITIONS
        },
        "restricted_position": FIRST_BASE
    }


@router.post("/lineup", response_model=LineupResponse)
async def generate_lineup(request: RosterRequest):
    """
    Generate a full-game lineup.

    This endpoint:
    1. Generates position assignments for every inning
    2. Validates the lineup
    3. Returns innings, per-player totals and diagnostics
    """
    players = players_from_dicts([p.model_dump() for p in request.players])
    try:
        payload = generate_lineup_payload(players)
    except RosterTooSmallError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Lineup generation failed")
        raise HTTPException(status_code=500, detail=f"Lineup generation failed: {str(e)}")

    return LineupResponse(**payload)


@router.post("/lineup/async")
async def generate_lineup_async(request: RosterRequest):
    """
    Start async lineup generation task.

    Returns:
        dict: Task ID for polling status
    """
    try:
        task = generate_lineup_task.delay([p.model_dump() for p in request.players])

        return {
            "task_id": task.id,
            "status": "PENDING",
            "message": "Lineup generation started"
        }
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to start task: {str(e)}")


@router.get("/lineup/status/{task_id}")
async def get_lineup_status(task_id: str):
    """
    Get status of async lineup generation task.

    Args:
        task_id: Celery task ID

    Returns:
        dict: Task status and result (if complete)
    """
    try:
        task_result = AsyncResult(task_id, app=celery_app)

        if task_result.state == "PENDING":
            response = {
                "task_id": task_id,
                "status": "PENDING",
                "message": "Task is waiting to start..."
            }
        elif task_result.state == "SUCCESS":
            response = {
                "task_id": task_id,
                "status": "SUCCESS",
                "result": task_result.result
            }
        elif task_result.state == "FAILURE":
            response = {
                "task_id": task_id,
                "status": "FAILURE",
                "message": str(task_result.info)
            }
        else:
            response = {
                "task_id": task_id,
                "status": task_result.state,
                "message": f"Task state: {task_result.state}"
            }

        return response
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get task status: {str(e)}")


@router.post("/batting-order", response_model=BattingOrderResponse)
async def batting_order(request: RosterRequest):
    """Return the roster in a random batting order."""
    players = players_from_dicts([p.model_dump() for p in request.players])
    rng = random.Random(BATTING_ORDER_SEED) if BATTING_ORDER_SEED is not None else None
    order = generate_batting_order(players, rng=rng)
    return BattingOrderResponse(players=[PlayerModel(**player_to_dict(p)) for p in order])


@router.post("/roster/import", response_model=ImportResponse)
async def import_names(request: ImportRequest):
    """Turn pasted names (one per line) into a roster."""
    try:
        players = import_roster(request.text)
    except RosterImportError as e:
        raise HTTPException(status_code=400, detail=str(e))

    status = roster_status(parse_names(request.text))
    return ImportResponse(
        players=[PlayerModel(**player_to_dict(p)) for p in players],
        **status
    )
