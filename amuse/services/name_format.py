# amuse/services/name_format.py
from __future__ import annotations

from typing import Iterable, List, Optional

from amuse.models.player_models import Album, Artist, PlayingSongData

ARTIST_SEPARATOR = " / "


def format_name(name: str, *alternates: str) -> str:
    """
    Merge a display name with its alternates: "Name（First alternate）".
    Only the first alternate is shown; the rest are dropped.
    """
    if not alternates:
        return name
    return f"{name}（{alternates[0]}）"


def _names(values: Optional[Iterable[str]]) -> List[str]:
    return list(values) if values else []


# Alternate order decides which one wins: translations first, aliases last.
def artist_alternates(artist: Artist) -> List[str]:
    return [
        *_names(artist.tns),
        *([artist.trans] if artist.trans else []),
        *artist.alias,
    ]


def album_alternates(album: Album) -> List[str]:
    return [
        *_names(album.trans_names),
        *_names(album.trans_name),
        *album.alias,
    ]


def title_alternates(track: PlayingSongData) -> List[str]:
    return [
        *_names(track.trans_names),
        *track.alias,
    ]


def format_artists(artists: Iterable[Artist]) -> str:
    return ARTIST_SEPARATOR.join(
        format_name(a.name, *artist_alternates(a)) for a in artists
    )


def format_album(album: Album) -> str:
    return format_name(album.name, *album_alternates(album))


def format_title(track: PlayingSongData) -> str:
    return format_name(track.name, *title_alternates(track))
