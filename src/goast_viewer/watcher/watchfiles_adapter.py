from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import awatch

logger = logging.getLogger(__name__)


class WatchfilesWatcher:
    """Watch one input file and trigger a callback whenever it changes.

    Implements the ``SourceWatcherPort`` protocol.
    """

    def __init__(
        self,
        path: str | Path,
        on_change: Callable[[Path], Coroutine[Any, Any, None]],
    ) -> None:
        self._path = Path(path).resolve()
        self._on_change = on_change
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._path)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._path)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    def _is_watched(self, changed: str) -> bool:
        return Path(changed).resolve() == self._path

    async def _watch(self) -> None:
        async for changes in awatch(self._path.parent):
            if not any(self._is_watched(p) for _, p in changes):
                continue
            logger.info("Detected change in %s", self._path)
            try:
                await self._on_change(self._path)
            except Exception:
                logger.exception("Error in watcher callback")
