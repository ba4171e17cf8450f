"""Headless frame scheduler driven explicitly by the caller."""

from __future__ import annotations

import logging
from collections import deque

from canvasrt.api.surface import FrameCallback

_LOG = logging.getLogger("canvasrt.scheduler")


class ManualFrameScheduler:
    """Frame pacer for headless runs and tests.

    Callbacks scheduled while a frame is running are deferred to the
    following frame, mirroring how a host's animation-frame facility behaves.
    """

    def __init__(self) -> None:
        self._queue: deque[FrameCallback] = deque()
        self._frame_index = 0

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def pending_count(self) -> int:
        """Return count of callbacks queued for the next frame."""
        return len(self._queue)

    def schedule_next_frame(self, callback: FrameCallback) -> None:
        """Queue `callback` for the next frame."""
        self._queue.append(callback)

    def cancel_all(self) -> None:
        """Drop every queued callback."""
        self._queue.clear()

    def run_frame(self) -> int:
        """Run callbacks queued before this call and return how many ran."""
        due = tuple(self._queue)
        self._queue.clear()
        self._frame_index += 1
        for callback in due:
            callback()
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug(
                "frame_done",
                extra={"frame": self._frame_index, "executed": len(due), "pending": len(self._queue)},
            )
        return len(due)

    def run_frames(self, count: int) -> int:
        """Run `count` frames and return total callbacks executed."""
        if count < 0:
            raise ValueError("count must be >= 0")
        executed = 0
        for _ in range(count):
            executed += self.run_frame()
        return executed


__all__ = ["ManualFrameScheduler"]
