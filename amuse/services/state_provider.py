# amuse/services/state_provider.py
"""
Where the live player state comes from.

The player is owned by the host process; the server only ever reads it,
once per request, through `get_snapshot()`. Providers return the raw mapping
and leave validation to the snapshot assembler.
"""
from __future__ import annotations

import copy
import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, Union, runtime_checkable

import httpx

from amuse.config import AMUSE_PLAYER_STATE_URL

logger = logging.getLogger(__name__)

RawState = Mapping[str, Any]


class StateProviderError(RuntimeError):
    """The player state could not be read (transport failure or garbage payload)."""


@runtime_checkable
class StateProvider(Protocol):
    async def get_snapshot(self) -> RawState: ...


class StaticStateProvider:
    """In-process state the host pushes in with update(). Each read is a private copy."""

    def __init__(self, state: Optional[RawState] = None):
        self._state: dict = dict(state or {})

    def update(self, state: RawState) -> None:
        self._state = dict(state)

    async def get_snapshot(self) -> RawState:
        return copy.deepcopy(self._state)


class CallableStateProvider:
    """Wraps the host's own reader; sync and async callables both work."""

    def __init__(self, read: Callable[[], Union[RawState, Awaitable[RawState]]]):
        self._read = read

    async def get_snapshot(self) -> RawState:
        result = self._read()
        if inspect.isawaitable(result):
            result = await result
        return result


class HttpStateProvider:
    """
    Reads the player object from the host's local JSON bridge.
    No client-side timeout: a silent host keeps the request waiting, unless
    the route-level provider timeout is configured.
    """

    def __init__(
        self,
        url: str = AMUSE_PLAYER_STATE_URL,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=None, transport=self._transport)
        return self._client

    async def get_snapshot(self) -> RawState:
        try:
            response = await self._get_client().get(self.url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.warning("⚠️ Player state read failed (%s): %s", self.url, e)
            raise StateProviderError(f"player state read failed: {e}") from e
        except ValueError as e:
            logger.warning("⚠️ Player state is not JSON (%s): %s", self.url, e)
            raise StateProviderError("player state is not valid JSON") from e

        if not isinstance(data, dict):
            raise StateProviderError(f"player state must be a JSON object, got {type(data).__name__}")
        return data

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


async def close_provider(provider: StateProvider) -> None:
    """Release whatever the provider holds (HTTP connections); no-op for plain providers."""
    aclose = getattr(provider, "aclose", None)
    if aclose is not None:
        await aclose()


def default_state_provider() -> StateProvider:
    return HttpStateProvider(AMUSE_PLAYER_STATE_URL)
