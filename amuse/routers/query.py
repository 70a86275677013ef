# amuse/routers/query.py
from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from amuse import config
from amuse.services.snapshot import build_query
from amuse.services.state_provider import RawState, StateProvider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Query"])


def get_state_provider(request: Request) -> StateProvider:
    return request.app.state.state_provider


async def _read_state(provider: StateProvider) -> RawState:
    timeout = config.provider_timeout()
    if timeout is None:
        return await provider.get_snapshot()
    try:
        return await asyncio.wait_for(provider.get_snapshot(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.error("⏱️ Player state read timed out (>%ss)", timeout)
        raise HTTPException(status_code=504, detail="player state read timed out")


@router.get("/query", summary="Snapshot of what is playing right now")
async def get_query(provider: StateProvider = Depends(get_state_provider)):
    """
    Returns the widget-protocol snapshot, recomputed on every call.

    Example:
      {
        "player": {"hasSong": true, "isPaused": false, "volumePercent": 50,
                   "seekbarCurrentPosition": 65, "seekbarCurrentPositionHuman": "1:05",
                   "statePercent": 0.5, "likeStatus": "LIKE", "repeatType": "ALL"},
        "track": {"author": "...", "title": "...", "album": "...", "cover": "...",
                  "duration": 130, "durationHuman": "2:10", "url": "...", "id": "123",
                  "isVideo": false, "isAdvertisement": false, "inLibrary": false}
      }

    statePercent is null when the track length is 0.
    """
    state = await _read_state(provider)
    query = build_query(state)
    logger.debug("🎵 /query: %s - %s", query.track.author, query.track.title)
    return Response(content=query.to_json(), media_type="application/json")
