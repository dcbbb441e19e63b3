"""
Debounced route reload.

Saving a site changes which hosts the application answers for, so the
route table has to be rebuilt. Rebuilding is expensive and idempotent:
requests arriving while a reload is pending are folded into it.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from src.app.services.route_reloader import IRouteReloader

logger = logging.getLogger(__name__)


class RouteReloader(IRouteReloader):
    def __init__(self, delay: float = 0.5):
        self.delay = delay
        self.reload_count = 0
        self._listeners: List[Callable[[], None]] = []
        self._pending: Optional[asyncio.Task] = None

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def request_reload(self) -> None:
        if self.pending:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.reload()
            return
        self._pending = loop.create_task(self._reload_later())

    async def _reload_later(self) -> None:
        await asyncio.sleep(self.delay)
        self.reload()

    def reload(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception(f"Route reload listener {listener!r} failed")
        self.reload_count += 1
        logger.info(f"Routes reloaded ({self.reload_count})")
