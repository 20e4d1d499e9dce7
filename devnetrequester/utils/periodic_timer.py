import asyncio
from typing import Awaitable
from typing import Callable

from devnetrequester.api_logger import api_logger

logger = api_logger.get()


async def run_periodically(
    job_callback: Callable[..., Awaitable[None]],
    job_name: str,
    interval_seconds: float,
    *args,
    run_immediately: bool = False,
) -> None:
    """
    Runs job_callback forever, sleeping interval_seconds between runs.

    A failing run is logged and the timer keeps going. Cancel the awaiting
    task to stop it.
    """
    if not run_immediately:
        await asyncio.sleep(interval_seconds)
    while True:
        try:
            logger.debug(f"Started {job_name} job")
            await job_callback(*args)
            logger.debug(
                f"Finished {job_name} job, next run in {interval_seconds} seconds"
            )
        except Exception:
            logger.error(f"{job_name} job failed, will retry on next run", exc_info=True)
        await asyncio.sleep(interval_seconds)
