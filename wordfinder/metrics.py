import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordfinder")


class StageTimer:
    """Per-stage wall-clock timings (ms) for one driver run."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = round((time.perf_counter() - t0) * 1000, 2)
            # Repeated stage names accumulate
            self.timings[name] = round(self.timings.get(name, 0.0) + elapsed_ms, 2)
            logger.info("stage=%s elapsed=%.2fms", name, elapsed_ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 2)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
