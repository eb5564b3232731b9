# ABOUTME: Tests for the asyncio-based Debouncer.
# ABOUTME: Verifies reschedule cancels the timer only, and wait_idle drains fired calls.

import asyncio

import pytest

from weather_lookup.debounce import Debouncer


class TestDebouncer:
    @pytest.mark.asyncio
    async def test_burst_runs_last_call_once(self):
        """A burst of schedule() calls runs only the last one, once.

        Implementation: Schedules five calls back to back with a short delay.
        Passing implies: Earlier timers are cancelled on every reschedule.
        """
        calls = []

        async def record(value):
            calls.append(value)

        debouncer = Debouncer(0.05)
        for value in range(5):
            debouncer.schedule(record, value)
        assert debouncer.pending

        await debouncer.wait_idle()

        assert calls == [4]
        assert not debouncer.pending

    @pytest.mark.asyncio
    async def test_waits_for_quiet_period(self):
        """The call does not fire before the delay has elapsed.

        Implementation: Checks the call list before and after the delay.
        Passing implies: The call is deferred by the configured delay.
        """
        calls = []

        async def record():
            calls.append(True)

        debouncer = Debouncer(0.1)
        debouncer.schedule(record)
        await asyncio.sleep(0.02)
        assert calls == []

        await debouncer.wait_idle()
        assert calls == [True]

    @pytest.mark.asyncio
    async def test_reschedule_does_not_cancel_fired_call(self):
        """A call that already fired keeps running after a new schedule().

        Implementation: Fires a call that blocks on an event, then schedules another.
        Passing implies: Cancellation is timer-level only.
        """
        release = asyncio.Event()
        finished = []

        async def slow(value):
            await release.wait()
            finished.append(value)

        debouncer = Debouncer(0.01)
        debouncer.schedule(slow, "first")
        await asyncio.sleep(0.05)
        debouncer.schedule(slow, "second")
        release.set()

        await debouncer.wait_idle()

        assert sorted(finished) == ["first", "second"]

    @pytest.mark.asyncio
    async def test_cancel_drops_pending_call(self):
        calls = []

        async def record():
            calls.append(True)

        debouncer = Debouncer(0.02)
        debouncer.schedule(record)
        debouncer.cancel()
        await asyncio.sleep(0.05)

        assert calls == []
        assert not debouncer.pending
