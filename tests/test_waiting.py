"""Tests for the wait-until poller."""

import asyncio
import time

import pytest

from src.synctubequeue.errors import WaitTimeoutError
from src.synctubequeue.waiting import wait_until


@pytest.mark.asyncio
async def test_returns_immediately_when_true():
    calls = []

    def predicate():
        calls.append(1)
        return True

    await wait_until(predicate, timeout_ms=1000)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_returns_once_condition_flips():
    state = {"ready": False}

    async def flip():
        await asyncio.sleep(0.05)
        state["ready"] = True

    task = asyncio.create_task(flip())
    start = time.monotonic()
    await wait_until(lambda: state["ready"], timeout_ms=2000, interval_ms=5)
    elapsed = time.monotonic() - start
    await task

    assert state["ready"]
    assert elapsed < 1.0


@pytest.mark.asyncio
async def test_times_out():
    start = time.monotonic()
    with pytest.raises(WaitTimeoutError) as exc_info:
        await wait_until(lambda: False, timeout_ms=60, interval_ms=10)
    elapsed_ms = (time.monotonic() - start) * 1000

    assert elapsed_ms >= 60
    assert exc_info.value.timeout_ms == 60
    assert isinstance(exc_info.value, TimeoutError)


@pytest.mark.asyncio
async def test_polls_on_interval():
    calls = []

    def predicate():
        calls.append(time.monotonic())
        return len(calls) == 4

    await wait_until(predicate, timeout_ms=2000, interval_ms=10)
    assert len(calls) == 4
    assert all(b - a >= 0.009 for a, b in zip(calls, calls[1:]))
