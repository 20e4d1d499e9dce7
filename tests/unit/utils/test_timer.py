from datetime import UTC
from unittest.mock import MagicMock

from devnetrequester.utils.timer import Timer
from devnetrequester.utils.timer import async_timer


async def test_timer_measures_in_utc():
    async with Timer() as timer:
        pass

    assert timer.started_at.tzinfo == UTC
    assert timer.ended_at.tzinfo == UTC
    assert timer.elapsed >= 0


async def test_async_timer_logs_duration():
    logger = MagicMock()

    @async_timer("test.call", logger=logger)
    async def call(value):
        return value * 2

    assert await call(21) == 42
    logger.info.assert_called_once()
    assert logger.info.call_args.args[1] == "test.call"
