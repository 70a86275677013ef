# amuse/models/__init__.py

# Keep enums here, safe to import early.
from .enums import LikeStatus, RepeatType
from .enum_utils import normalize_repeat_mode

from .player_models import Album, Artist, PlayingSongData, PlayerState
from .query import PlayerInfo, TrackInfo, Query

__all__ = [
    # enums
    "LikeStatus", "RepeatType", "normalize_repeat_mode",
    # player input
    "Album", "Artist", "PlayingSongData", "PlayerState",
    # wire output
    "PlayerInfo", "TrackInfo", "Query",
]
