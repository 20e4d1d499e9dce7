import asyncio
from unittest.mock import AsyncMock

from devnetrequester.utils.periodic_timer import run_periodically


async def _run_for(callback, seconds: float, run_immediately: bool, interval: float):
    task = asyncio.create_task(
        run_periodically(
            callback, "test", interval, "arg", run_immediately=run_immediately
        )
    )
    await asyncio.sleep(seconds)
    task.cancel()
    await asyncio.gather(task, return_exceptions=True)


async def test_runs_immediately():
    callback = AsyncMock()
    await _run_for(callback, 0.05, run_immediately=True, interval=10)
    callback.assert_called_once_with("arg")


async def test_waits_for_interval():
    callback = AsyncMock()
    await _run_for(callback, 0.05, run_immediately=False, interval=10)
    callback.assert_not_called()


async def test_keeps_running_after_failure():
    callback = AsyncMock(side_effect=Exception("boom"))
    await _run_for(callback, 0.1, run_immediately=True, interval=0.01)
    assert callback.call_count > 1
