"""
Timer decorator to log how long remote calls take.

Usage:
```python
from devnetrequester.utils.timer import async_timer

logger = api_logger.get()

@async_timer("faucet_api_repository.request_funds", logger=logger)
async def request_funds(address, amount):
    ...
```

In the logs you will see:
{
  "asctime": "2025-06-02 08:00:03,112",
  "name": "DEVNET_REQUESTER",
  "levelname": "INFO",
  "message": "Timer: faucet_api_repository.request_funds took 1.204511 s"
}
"""

import functools
import logging
from datetime import UTC
from datetime import datetime
from typing import Optional


class Timer:
    """Measure elapsed time of an async block"""

    started_at: datetime
    ended_at: Optional[datetime] = None

    def __init__(self, text: Optional[str] = None, logger: Optional[logging.Logger] = None):
        self.text = text
        self.logger = logging.getLogger(__name__) if logger is None else logger

    @property
    def elapsed(self) -> float:
        """Elapsed time in seconds"""
        if self.ended_at is None:
            return (datetime.now(UTC) - self.started_at).total_seconds()
        return (self.ended_at - self.started_at).total_seconds()

    async def __aenter__(self):
        self.started_at = datetime.now(UTC)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.ended_at = datetime.now(UTC)
        if self.text is not None:
            self.logger.info("Timer: %s took %f s", self.text, self.elapsed)


def async_timer(name: str, logger: logging.Logger):
    def decorator(function):
        @functools.wraps(function)
        async def wrapper(*args, **kwargs):
            async with Timer(name, logger=logger):
                return await function(*args, **kwargs)

        return wrapper

    return decorator
