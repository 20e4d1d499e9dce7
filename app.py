import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

import settings
from devnetrequester import dependencies
from devnetrequester import startup
from devnetrequester.api_logger import api_logger
from devnetrequester.crons import reset_session_job
from devnetrequester.domain.funding import validate_address
from devnetrequester.routers import main_router
from devnetrequester.service.exception_handlers.exception_handlers import (
    custom_exception_handler,
)
from devnetrequester.service.exception_handlers.exception_handlers import (
    http_exception_handler,
)
from devnetrequester.service.middleware.main_middleware import MainMiddleware
from devnetrequester.utils.periodic_timer import run_periodically

logger = api_logger.get()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if not validate_address.execute(settings.TARGET_ADDRESS):
        raise RuntimeError(f"Invalid target address: {settings.TARGET_ADDRESS}")
    dependencies.init_globals()
    startup.log_banner("HTTP service")
    await startup.log_initial_balance(dependencies.get_solana_rpc_repository())

    reset_task = asyncio.create_task(
        run_periodically(
            reset_session_job.execute,
            "Session reset",
            settings.SESSION_RESET_INTERVAL_SECONDS,
            dependencies.get_funding_state(),
        )
    )
    logger.info(f"HTTP server running on port {settings.API_PORT}")
    logger.info("Ready to receive cron job requests on POST /request")
    yield

    logger.info("Shutdown Signal received. Cleaning up...")
    reset_task.cancel()
    await asyncio.gather(reset_task, return_exceptions=True)
    await dependencies.get_solana_rpc_repository().close()
    logger.info("Cleanup complete.")


app = FastAPI(
    title=settings.PROGRAM_NAME,
    description="Requests devnet SOL for a fixed address, triggered by external schedulers.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(main_router.router)

# order of middleware matters! first middleware called is the last one added
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MainMiddleware)

# exception handlers run AFTER the middlewares!
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, custom_exception_handler)


if __name__ == "__main__":
    startup.validate_target_address_or_exit()
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
