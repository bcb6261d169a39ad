import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordament")


class StageTimer:
    """Milliseconds spent in each phase of a solve: parse, search, rank.

    A stage entered more than once accumulates. Stages are reported in the
    order they first ran.
    """

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._created = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            ms = (time.perf_counter() - t0) * 1000
            self.timings[name] = round(self.timings.get(name, 0.0) + ms, 3)
            logger.debug("stage=%s elapsed=%.3fms", name, ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._created) * 1000, 3)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}
