class SessionLimiter:
    """Caps orchestrated attempts between two resets.

    Attempts are counted, not successes: a cycle where every method failed
    still consumes a slot.
    """

    def __init__(self, limit: int):
        if limit < 0:
            raise ValueError("Session limit can not be negative")
        self._limit = limit
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def limit(self) -> int:
        return self._limit

    def can_request(self) -> bool:
        return self._count < self._limit

    def record_attempt(self) -> None:
        self._count += 1

    def reset(self) -> None:
        self._count = 0
