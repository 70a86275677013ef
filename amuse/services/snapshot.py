# amuse/services/snapshot.py
"""
Player state → /query snapshot.

Everything here is synchronous and pure: one call per request, nothing kept
between calls. The only input is the state object the provider returned.
"""
from __future__ import annotations

from typing import Any, Mapping, Union

from amuse.config import SONG_URL_TEMPLATE
from amuse.models.enum_utils import normalize_repeat_mode
from amuse.models.player_models import PlayerState
from amuse.models.query import PlayerInfo, Query, TrackInfo
from amuse.services.durations import percent, to_duration_human
from amuse.services.name_format import format_album, format_artists, format_title


def song_url(track_id: int) -> str:
    return SONG_URL_TEMPLATE.format(id=track_id)


def build_player_info(state: PlayerState) -> PlayerInfo:
    progress = state.progress
    return PlayerInfo(
        has_song=state.enabled,
        is_paused=not state.playing,
        volume_percent=state.volume * 100,
        seekbar_current_position=progress,
        seekbar_current_position_human=to_duration_human(progress),
        state_percent=percent(progress, state.current_track_duration),
        like_status=state.is_current_track_liked,
        repeat_type=normalize_repeat_mode(state.repeat_mode),
    )


def build_track_info(state: PlayerState) -> TrackInfo:
    track = state.selected_track
    duration = state.current_track_duration
    return TrackInfo(
        author=format_artists(track.artists),
        title=format_title(track),
        album=format_album(track.album),
        cover=track.album.pic_url,
        duration=duration,
        duration_human=to_duration_human(duration),
        url=song_url(track.id),
        id=str(track.id),
        # not exposed by the player
        is_video=False,
        is_advertisement=False,
        in_library=False,
    )


def build_query(state: Union[PlayerState, Mapping[str, Any]]) -> Query:
    """Assemble the {player, track} snapshot. Raw mappings are validated first."""
    if not isinstance(state, PlayerState):
        state = PlayerState.model_validate(state)
    return Query(
        player=build_player_info(state),
        track=build_track_info(state),
    )
