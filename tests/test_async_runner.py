from __future__ import annotations

import asyncio
import threading

from textfield_trans.async_runner import AsyncRunner


def test_submit_runs_off_the_calling_thread(runner):
    async def whoami():
        await asyncio.sleep(0)
        return threading.current_thread().name

    assert runner.submit(whoami()).result(timeout=5) == "translation-loop"


def test_run_returns_result(runner):
    async def add(a, b):
        return a + b

    assert runner.run(add(2, 3), timeout=5) == 5


def test_tasks_overlap(runner):
    order = []

    async def job(name, delay):
        await asyncio.sleep(delay)
        order.append(name)

    slow = runner.submit(job("slow", 0.2))
    fast = runner.submit(job("fast", 0.01))
    slow.result(timeout=5)
    fast.result(timeout=5)

    assert order == ["fast", "slow"]


def test_stop_joins_thread():
    runner = AsyncRunner()
    runner.start()
    thread = runner.thread

    runner.stop()

    assert not thread.is_alive()
    assert runner.thread is None
    assert runner.loop.is_closed()
