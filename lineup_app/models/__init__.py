"""
Data models for the lineup generator.
"""

from .models import (
    PlayerId,
    Zone,
    Position,
    Player,
    InningAssignment,
    Diagnostic,
    LineupSchedule,
    PlayerTracking,
    TrackingState,
    PlayerSummary,
    LineupConstraint,
    LineupValidationResult,
    RosterTooSmallError,
    RosterImportError
)

__all__ = [
    "PlayerId",
    "Zone",
    "Position",
    "Player",
    "InningAssignment",
    "Diagnostic",
    "LineupSchedule",
    "PlayerTracking",
    "TrackingState",
    "PlayerSummary",
    "LineupConstraint",
    "LineupValidationResult",
    "RosterTooSmallError",
    "RosterImportError"
]
