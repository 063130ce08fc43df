"""
Configuration constants for the Youth Baseball Lineup Generator.
All configurable settings are defined here.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Field Layout (fixed 10-position model)
INFIELD_POSITIONS = ["P", "C", "1B", "2B", "3B", "SS"]
OUTFIELD_POSITIONS = ["LF", "LC", "RC", "RF"]
ALL_POSITIONS = INFIELD_POSITIONS + OUTFIELD_POSITIONS
FIRST_BASE = "1B"

# Game Rules
INNINGS = 6
FIELD_SPOTS = len(ALL_POSITIONS)  # 10
INFIELD_SPOTS = len(INFIELD_POSITIONS)  # 6
OUTFIELD_SPOTS = len(OUTFIELD_POSITIONS)  # 4

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API Server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

# Celery / Redis
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Batting order seed (unset = system randomness)
_seed = os.getenv("BATTING_ORDER_SEED")
BATTING_ORDER_SEED = int(_seed) if _seed else None

# Validation penalties
PENALTY_WEIGHTS = {
    "wrong_inning_count": 5000.0,       # Schedule must have exactly INNINGS innings
    "player_missing": 3000.0,           # Every player needs an entry each inning
    "position_conflict": 3000.0,        # Two players at one position
    "position_unfilled": 3000.0,        # Field position left empty
    "bench_size": 2000.0,               # Wrong number of sitters
    "first_base_eligibility": 1000.0,   # Ineligible player at 1B while an eligible one fielded
    "consecutive_bench": 100.0,         # Same player sat two innings in a row
    "bench_imbalance": 50.0,            # Bench totals differ by more than one
    "zone_repeat": 5.0,                 # Same zone two innings running
}

# Demo roster used when no names are supplied
DEFAULT_ROSTER = [
    {"id": "1", "name": "Alex", "can_play_first": True},
    {"id": "2", "name": "Bailey", "can_play_first": False},
    {"id": "3", "name": "Cameron", "can_play_first": True},
    {"id": "4", "name": "Dakota", "can_play_first": False},
    {"id": "5", "name": "Emery", "can_play_first": False},
    {"id": "6", "name": "Finley", "can_play_first": True},
    {"id": "7", "name": "Gray", "can_play_first": False},
    {"id": "8", "name": "Harper", "can_play_first": False},
    {"id": "9", "name": "Indigo", "can_play_first": False},
    {"id": "10", "name": "Jordan", "can_play_first": True},
    {"id": "11", "name": "Kai", "can_play_first": False},
    {"id": "12", "name": "Lane", "can_play_first": False},
    {"id": "13", "name": "Morgan", "can_play_first": False},
]
