import asyncio
import signal
import sys
from decimal import Decimal
from typing import List

import settings
from devnetrequester import dependencies
from devnetrequester import startup
from devnetrequester.api_logger import api_logger
from devnetrequester.crons import request_funds_job
from devnetrequester.crons import reset_session_job
from devnetrequester.utils.periodic_timer import run_periodically

logger = api_logger.get()

SHUTDOWN_SIGNALS = {
    signal.SIGINT: "interrupted",
    signal.SIGTERM: "terminated",
}


async def start_cron_jobs() -> None:
    """Scheduled mode: request now, then every REQUEST_INTERVAL_SECONDS."""
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for shutdown_signal, reason in SHUTDOWN_SIGNALS.items():
        loop.add_signal_handler(shutdown_signal, _on_shutdown_signal, stop_event, reason)

    dependencies.init_globals()
    startup.log_banner("scheduled")
    await startup.log_initial_balance(dependencies.get_solana_rpc_repository())
    if stop_event.is_set():
        await _shutdown(loop, [])
        return

    tasks = [
        asyncio.create_task(
            run_periodically(
                _run_request_funds_job,
                "SOL request",
                settings.REQUEST_INTERVAL_SECONDS,
                run_immediately=True,
            )
        ),
        asyncio.create_task(
            run_periodically(
                _run_reset_session_job,
                "Session reset",
                settings.SESSION_RESET_INTERVAL_SECONDS,
            )
        ),
    ]
    logger.info(
        f"Requesting SOL every {settings.REQUEST_INTERVAL_SECONDS} seconds, "
        f"resetting the session every {settings.SESSION_RESET_INTERVAL_SECONDS} seconds"
    )

    try:
        await stop_event.wait()
    finally:
        await _shutdown(loop, tasks)


async def _shutdown(loop: asyncio.AbstractEventLoop, tasks: List[asyncio.Task]) -> None:
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
    await dependencies.get_solana_rpc_repository().close()
    for shutdown_signal in SHUTDOWN_SIGNALS:
        loop.remove_signal_handler(shutdown_signal)
    logger.info("Cron jobs done")


def _on_shutdown_signal(stop_event: asyncio.Event, reason: str) -> None:
    logger.info(f"Program {reason}. Shutting down gracefully...")
    stop_event.set()


async def _run_request_funds_job():
    await request_funds_job.execute(
        settings.TARGET_ADDRESS,
        Decimal(settings.SOL_AMOUNT),
        dependencies.get_funding_state(),
        dependencies.get_solana_rpc_repository(),
        dependencies.get_funding_strategies(),
        settings.BALANCE_RECHECK_DELAY_SECONDS,
    )


async def _run_reset_session_job():
    await reset_session_job.execute(dependencies.get_funding_state())


def main() -> int:
    startup.validate_target_address_or_exit()
    try:
        asyncio.run(start_cron_jobs())
    except Exception:
        logger.error("Fatal error in scheduled mode", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
