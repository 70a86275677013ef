# amuse/server.py
"""
Listening socket lifecycle.

The host starts the server once and calls shutdown() from its own
"about to quit" handler. The socket is bound exactly once and released
exactly once; there is no restart.
"""
from __future__ import annotations

import asyncio
import logging
import socket

import uvicorn

from amuse.config import AMUSE_ACCESS_LOG, AMUSE_HOST, AMUSE_PORT
from amuse.main import create_app
from amuse.services.state_provider import StateProvider

logger = logging.getLogger(__name__)


class AmuseServer:
    def __init__(
        self,
        provider: StateProvider | None = None,
        *,
        host: str = AMUSE_HOST,
        port: int = AMUSE_PORT,
    ):
        self.app = create_app(provider)
        self.host = host
        self.port = port
        self._server = uvicorn.Server(
            uvicorn.Config(
                self.app,
                host=host,
                port=port,
                log_config=None,
                access_log=AMUSE_ACCESS_LOG,
                lifespan="on",
            )
        )
        self._sock: socket.socket | None = None
        self._bound_port: int | None = None
        self._task: asyncio.Task | None = None
        self._closed = False

    @property
    def is_serving(self) -> bool:
        return self._task is not None and not self._task.done() and self._server.started

    @property
    def bound_port(self) -> int:
        """Actual port once bound (differs from `port` only when port=0)."""
        return self._bound_port or self.port

    def _bind(self) -> socket.socket:
        # bound here, not inside uvicorn: its bind failure is a sys.exit() from the serve task
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
        except OSError:
            sock.close()
            raise
        return sock

    async def start(self) -> None:
        """
        Bind and start serving; returns once the socket is listening.
        A taken port raises OSError here, with nothing left running.
        """
        if self._task is not None:
            raise RuntimeError("Amuse server already started")

        self._sock = self._bind()
        self._bound_port = self._sock.getsockname()[1]
        self._task = asyncio.create_task(self._server.serve(sockets=[self._sock]))
        while not self._server.started:
            if self._task.done():
                # app lifespan startup failed; uvicorn returns without serving
                self._task.result()
                self._sock.close()
                raise RuntimeError(f"Amuse server failed to start on port {self.bound_port}")
            await asyncio.sleep(0.05)

        logger.info("Amuse server listening at http://localhost:%s", self.bound_port)

    async def shutdown(self) -> None:
        """Host quit hook. Safe to call more than once; only the first call closes the socket."""
        if self._closed:
            return
        self._closed = True
        if self._task is None:
            return

        self._server.should_exit = True
        await self._task
        self._sock.close()
        logger.info("🛑 Amuse server closed")

    async def serve_forever(self) -> None:
        """Standalone mode: serve until uvicorn sees SIGINT/SIGTERM."""
        await self.start()
        try:
            await self._task
        finally:
            await self.shutdown()
