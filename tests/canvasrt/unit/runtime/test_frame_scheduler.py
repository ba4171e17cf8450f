from __future__ import annotations

import pytest

from canvasrt.runtime.scheduler import ManualFrameScheduler


def test_scheduler_runs_queued_callback_on_next_frame() -> None:
    scheduler = ManualFrameScheduler()
    calls: list[str] = []
    scheduler.schedule_next_frame(lambda: calls.append("once"))

    assert scheduler.pending_count == 1
    assert calls == []
    assert scheduler.run_frame() == 1
    assert calls == ["once"]
    assert scheduler.run_frame() == 0
    assert scheduler.frame_index == 2


def test_scheduler_defers_callbacks_scheduled_during_a_frame() -> None:
    scheduler = ManualFrameScheduler()
    calls: list[int] = []

    def tick() -> None:
        calls.append(scheduler.frame_index)
        scheduler.schedule_next_frame(tick)

    scheduler.schedule_next_frame(tick)
    assert scheduler.run_frame() == 1
    assert scheduler.pending_count == 1
    assert scheduler.run_frames(3) == 3
    assert calls == [1, 2, 3, 4]


def test_scheduler_cancel_all_drops_pending() -> None:
    scheduler = ManualFrameScheduler()
    calls: list[str] = []
    scheduler.schedule_next_frame(lambda: calls.append("never"))
    scheduler.cancel_all()

    assert scheduler.pending_count == 0
    assert scheduler.run_frame() == 0
    assert calls == []


def test_scheduler_validates_frame_count() -> None:
    with pytest.raises(ValueError):
        ManualFrameScheduler().run_frames(-1)
