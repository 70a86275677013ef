# amuse/models/query.py
"""
Wire side: the widget protocol's /query response.

Attributes are snake_case in Python and camelCase on the wire. Dump with
`by_alias=True`; pydantic's JSON mode writes inf/nan as null, which is how a
zero-length track's statePercent goes out.
"""
from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from amuse.models.enums import RepeatType

Number = Union[int, float]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerInfo(_WireModel):
    has_song: bool
    is_paused: bool
    volume_percent: Number
    seekbar_current_position: Number
    seekbar_current_position_human: str
    state_percent: float
    # nominally a LikeStatus, never validated
    like_status: Any
    repeat_type: RepeatType


class TrackInfo(_WireModel):
    author: str
    title: str
    album: str
    cover: str
    duration: Number
    duration_human: str
    url: str
    id: str
    is_video: bool = False
    is_advertisement: bool = False
    in_library: bool = False


class Query(_WireModel):
    player: PlayerInfo
    track: TrackInfo

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
