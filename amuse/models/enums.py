# amuse/models/enums.py
from __future__ import annotations
from enum import Enum

# --- Rating of the current track, as the player reports it ---
class LikeStatus(str, Enum):
    INDIFFERENT = "INDIFFERENT"
    LIKE        = "LIKE"
    DISLIKE     = "DISLIKE"

# --- Repeat mode in widget-protocol terms ---
class RepeatType(str, Enum):
    NONE = "NONE"
    ALL  = "ALL"
    ONE  = "ONE"

__all__ = [
    "LikeStatus",
    "RepeatType",
]
