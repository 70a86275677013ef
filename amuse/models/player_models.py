# amuse/models/player_models.py
"""
Input side: the player object as the host hands it over.

The host serializes its live player, so the private attribute names
(_isPersonalFM, _currentTrack, _personalFMTrack) show up next to the public
ones. Both spellings are accepted; unknown keys are ignored.
"""
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

Seconds = Union[int, float]


class _PlayerRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Album(_PlayerRecord):
    id: Optional[int] = None
    name: str
    pic_url: str = Field(alias="picUrl")
    alias: List[str] = Field(default_factory=list)
    trans_names: Optional[List[str]] = Field(default=None, alias="transNames")
    trans_name: Optional[List[str]] = Field(default=None, alias="transName")


class Artist(_PlayerRecord):
    id: Optional[int] = None
    name: str
    alias: List[str] = Field(default_factory=list)
    tns: Optional[List[str]] = None
    trans: Optional[str] = None


class PlayingSongData(_PlayerRecord):
    id: int
    name: str
    alias: List[str] = Field(default_factory=list)
    trans_names: Optional[List[str]] = Field(default=None, alias="transNames")
    artists: List[Artist] = Field(default_factory=list)
    album: Album


class PlayerState(_PlayerRecord):
    enabled: bool = False
    playing: bool = False
    volume: Seconds = 0
    progress: Seconds = 0
    current_track_duration: Seconds = Field(default=0, alias="currentTrackDuration")

    # passed through untouched, the player is free to send anything here
    is_current_track_liked: Any = Field(default=None, alias="isCurrentTrackLiked")
    repeat_mode: Any = Field(default=None, alias="repeatMode")

    # the host may send null before FM was ever used
    is_personal_fm: Optional[bool] = Field(
        default=False,
        validation_alias=AliasChoices("_isPersonalFM", "isPersonalFM", "is_personal_fm"),
    )
    current_track: Optional[PlayingSongData] = Field(
        default=None,
        validation_alias=AliasChoices("_currentTrack", "currentTrack", "current_track"),
    )
    personal_fm_track: Optional[PlayingSongData] = Field(
        default=None,
        validation_alias=AliasChoices("_personalFMTrack", "personalFMTrack", "personal_fm_track"),
    )

    @model_validator(mode="after")
    def _selected_track_present(self) -> "PlayerState":
        if self.selected_track is None:
            source = "personal FM track" if bool(self.is_personal_fm) else "current track"
            raise ValueError(f"player state has no {source} record")
        return self

    @property
    def selected_track(self) -> Optional[PlayingSongData]:
        """Personal FM on → radio record, otherwise the regular queue record."""
        return self.personal_fm_track if bool(self.is_personal_fm) else self.current_track
