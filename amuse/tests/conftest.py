import copy

import pytest


CURRENT_TRACK = {
    "id": 123,
    "name": "Song",
    "transNames": ["Translated"],
    "alias": [],
    "artists": [{"name": "Art", "tns": [], "trans": "ArtTrans", "alias": []}],
    "album": {"name": "Alb", "picUrl": "http://x/y.jpg", "alias": []},
}

FM_TRACK = {
    "id": 456,
    "name": "Radio Song",
    "alias": ["Radio Alias"],
    "artists": [
        {"name": "DJ", "alias": []},
        {"name": "MC", "tns": ["Emcee"], "alias": ["Master"]},
    ],
    "album": {"name": "Radio Alb", "picUrl": "http://x/fm.jpg", "alias": [], "transName": ["Radio Album TN"]},
}

PLAYER_STATE = {
    "enabled": True,
    "playing": True,
    "volume": 0.5,
    "progress": 65,
    "currentTrackDuration": 130,
    "isCurrentTrackLiked": "LIKE",
    "repeatMode": "all",
    "isPersonalFM": False,
    "currentTrack": CURRENT_TRACK,
}

EXPECTED_PLAYER = {
    "hasSong": True,
    "isPaused": False,
    "volumePercent": 50,
    "seekbarCurrentPosition": 65,
    "seekbarCurrentPositionHuman": "1:05",
    "statePercent": 0.5,
    "likeStatus": "LIKE",
    "repeatType": "ALL",
}

EXPECTED_TRACK = {
    "author": "Art（ArtTrans）",
    "title": "Song（Translated）",
    "album": "Alb",
    "cover": "http://x/y.jpg",
    "duration": 130,
    "durationHuman": "2:10",
    "url": "https://music.163.com/song?id=123",
    "id": "123",
    "isVideo": False,
    "isAdvertisement": False,
    "inLibrary": False,
}


@pytest.fixture
def player_state():
    return copy.deepcopy(PLAYER_STATE)


@pytest.fixture
def radio_player_state():
    state = copy.deepcopy(PLAYER_STATE)
    state["personalFMTrack"] = copy.deepcopy(FM_TRACK)
    return state
