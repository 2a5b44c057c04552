import asyncio
from collections.abc import Callable

PROGRESS_CAP = 98
PROGRESS_STEP = 2
PROGRESS_INTERVAL_SECONDS = 0.05


def advance(value: int, step: int = PROGRESS_STEP, cap: int = PROGRESS_CAP) -> int:
    """Next progress value: one step forward, never past the cap."""
    if value >= cap:
        return cap
    return min(value + step, cap)


class ProgressTicker:
    """Cancellable periodic task that advances cosmetic progress toward a cap.

    The owner must call stop() when the analysis leaves the analyzing state.
    """

    def __init__(
        self,
        on_tick: Callable[[int], None],
        *,
        interval_seconds: float = PROGRESS_INTERVAL_SECONDS,
        step: int = PROGRESS_STEP,
        cap: int = PROGRESS_CAP,
    ) -> None:
        self._on_tick = on_tick
        self._interval_seconds = interval_seconds
        self._step = step
        self._cap = cap
        self._value = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def value(self) -> int:
        return self._value

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking from 0 on the running event loop."""
        if self.running:
            return
        self._value = 0
        self._task = asyncio.get_running_loop().create_task(self._tick())

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _tick(self) -> None:
        while self._value < self._cap:
            await asyncio.sleep(self._interval_seconds)
            self._value = advance(self._value, self._step, self._cap)
            self._on_tick(self._value)
