"""Tests for the repeating-task scheduler."""

from __future__ import annotations

import asyncio
import logging

import pytest

from querywatch.streams.scheduler import Scheduler


@pytest.mark.unit
class TestScheduler:
    """Tests for Scheduler start/stop semantics."""

    def test_rejects_non_positive_interval(self) -> None:
        async def task() -> None:
            return None

        with pytest.raises(ValueError, match="positive"):
            Scheduler().start(0, task)

    @pytest.mark.asyncio
    async def test_first_tick_is_eager(self) -> None:
        scheduler = Scheduler()
        calls: list[int] = []

        async def task() -> None:
            calls.append(1)

        handle = scheduler.start(60, task, name="eager")
        assert handle.ticks == 1
        await scheduler.wait_idle()
        assert calls == [1]
        scheduler.stop(handle)

    @pytest.mark.asyncio
    async def test_repeats_on_interval(self) -> None:
        scheduler = Scheduler()
        calls: list[int] = []

        async def task() -> None:
            calls.append(1)

        handle = scheduler.start(0.01, task)
        await asyncio.sleep(0.08)
        scheduler.stop(handle)
        await scheduler.wait_idle()
        assert len(calls) >= 3

    @pytest.mark.asyncio
    async def test_stop_prevents_further_ticks(self) -> None:
        scheduler = Scheduler()
        calls: list[int] = []

        async def task() -> None:
            calls.append(1)

        handle = scheduler.start(0.01, task)
        scheduler.stop(handle)
        await asyncio.sleep(0.05)
        assert handle.ticks == 1
        assert handle.active is False
        assert scheduler.active_handles == 0

    @pytest.mark.asyncio
    async def test_stop_is_idempotent(self) -> None:
        scheduler = Scheduler()

        async def task() -> None:
            return None

        handle = scheduler.start(60, task)
        scheduler.stop(handle)
        scheduler.stop(handle)
        assert handle.active is False

    @pytest.mark.asyncio
    async def test_stop_does_not_cancel_in_flight_tick(self) -> None:
        scheduler = Scheduler()
        gate = asyncio.Event()
        finished: list[bool] = []

        async def task() -> None:
            await gate.wait()
            finished.append(True)

        handle = scheduler.start(60, task)
        await asyncio.sleep(0)
        scheduler.stop(handle)
        assert handle.in_flight == 1

        gate.set()
        assert await scheduler.wait_idle(timeout=1) is True
        assert finished == [True]

    @pytest.mark.asyncio
    async def test_ticks_may_overlap(self) -> None:
        scheduler = Scheduler()
        gate = asyncio.Event()

        async def task() -> None:
            await gate.wait()

        handle = scheduler.start(0.01, task)
        await asyncio.sleep(0.05)
        assert handle.in_flight >= 2

        scheduler.stop(handle)
        gate.set()
        await scheduler.wait_idle(timeout=1)
        assert handle.in_flight == 0

    @pytest.mark.asyncio
    async def test_handles_are_independent(self) -> None:
        scheduler = Scheduler()
        first: list[int] = []
        second: list[int] = []

        async def tick_first() -> None:
            first.append(1)

        async def tick_second() -> None:
            second.append(1)

        handle_first = scheduler.start(0.01, tick_first)
        handle_second = scheduler.start(0.01, tick_second)
        scheduler.stop(handle_first)
        await asyncio.sleep(0.05)
        scheduler.stop(handle_second)

        assert len(first) == 1
        assert len(second) >= 2

    @pytest.mark.asyncio
    async def test_tick_exception_is_logged_and_cadence_continues(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        scheduler = Scheduler()
        calls: list[int] = []

        async def task() -> None:
            calls.append(1)
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR, logger="querywatch.streams.scheduler"):
            handle = scheduler.start(0.01, task, name="broken")
            await asyncio.sleep(0.05)
            scheduler.stop(handle)
            await scheduler.wait_idle()

        assert len(calls) >= 2
        assert "Tick of schedule broken raised" in caplog.text

    @pytest.mark.asyncio
    async def test_stop_all_and_cancel_in_flight(self) -> None:
        scheduler = Scheduler()

        async def hang() -> None:
            await asyncio.Event().wait()

        scheduler.start(60, hang)
        scheduler.start(60, hang)
        await asyncio.sleep(0)
        scheduler.stop_all()
        assert scheduler.active_handles == 0

        assert await scheduler.wait_idle(timeout=0.01) is False
        assert scheduler.cancel_in_flight() == 2
        assert await scheduler.wait_idle(timeout=1) is True
