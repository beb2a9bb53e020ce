"""Time-limited record tooltips.

Each tooltip owns one timer handle; the handle is its cancellation token.
New tooltips coexist with pending ones. Without a running event loop the
expiry is enforced lazily when the board is read.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Tooltip:
    id: str
    index: int
    lines: list[str]
    x: float
    y: float
    expires_at: float
    handle: asyncio.TimerHandle | None = field(default=None, repr=False, compare=False)

    def remaining(self, now: float | None = None) -> float:
        now = time.monotonic() if now is None else now
        return max(0.0, self.expires_at - now)


class TooltipBoard:
    def __init__(self, lifetime: float = 3.0, offset: float = 8.0) -> None:
        if lifetime <= 0:
            raise ValueError("tooltip lifetime must be positive")
        self.lifetime = lifetime
        self.offset = offset
        self._tooltips: dict[str, Tooltip] = {}

    def __len__(self) -> int:
        return len(self.active())

    def show(self, index: int, lines: list[str], px: float, py: float) -> Tooltip:
        """Place a tooltip next to the pointer and schedule its removal."""
        tip = Tooltip(
            id=uuid.uuid4().hex[:12],
            index=index,
            lines=list(lines),
            x=px + self.offset,
            y=py + self.offset,
            expires_at=time.monotonic() + self.lifetime,
        )
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is not None:
            tip.handle = loop.call_later(self.lifetime, self._expire, tip.id)
        self._tooltips[tip.id] = tip
        logger.debug("Tooltip %s for row %d (%.1fs)", tip.id, index, self.lifetime)
        return tip

    def _expire(self, tooltip_id: str) -> None:
        if self._tooltips.pop(tooltip_id, None) is not None:
            logger.debug("Tooltip %s expired", tooltip_id)

    def dismiss(self, tooltip_id: str) -> bool:
        tip = self._tooltips.pop(tooltip_id, None)
        if tip is None:
            return False
        if tip.handle is not None:
            tip.handle.cancel()
        return True

    def active(self) -> list[Tooltip]:
        now = time.monotonic()
        for tid in [t.id for t in self._tooltips.values() if t.expires_at <= now]:
            self.dismiss(tid)
        return list(self._tooltips.values())

    def clear(self) -> None:
        for tid in list(self._tooltips):
            self.dismiss(tid)
