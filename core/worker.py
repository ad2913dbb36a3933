"""
I/O worker - a background thread running the asyncio loop that network
requests execute on, so callers on a UI thread never block.
"""

import asyncio
import threading
from concurrent.futures import Future
from typing import Any, Coroutine, Optional, TypeVar

from core.logger import logger
from core.messages import LogMessages

T = TypeVar("T")


class IOWorker:
    """Owns one event loop in a daemon thread."""

    def __init__(self, name: str = "sightguide-io"):
        self.name = name
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    @property
    def loop(self) -> Optional[asyncio.AbstractEventLoop]:
        return self._loop

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the loop thread. No-op if already running."""
        if self.is_running():
            return

        self._ready.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        self._ready.wait()
        logger.info(LogMessages.INIT_WORKER.format(name=self.name))

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._ready.set()
        try:
            loop.run_forever()
        finally:
            loop.close()

    def submit(self, coro: Coroutine[Any, Any, T]) -> "Future[T]":
        """Schedule coro on the worker loop, starting the worker if needed."""
        if not self.is_running():
            self.start()
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    async def _cancel_pending(self) -> None:
        tasks = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def stop(self, timeout: float = 5.0) -> None:
        """Cancel in-flight operations, stop the loop and join the thread."""
        if not self.is_running():
            return
        asyncio.run_coroutine_threadsafe(self._cancel_pending(), self._loop).result(timeout)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        self._thread = None
        self._loop = None
        logger.info(LogMessages.STOP_WORKER.format(name=self.name))


# Global singleton instance
_io_worker: Optional[IOWorker] = None


def get_io_worker() -> IOWorker:
    """Get or create the shared IOWorker (started lazily on first submit)."""
    global _io_worker
    if _io_worker is None:
        _io_worker = IOWorker()
    return _io_worker
