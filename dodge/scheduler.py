# frame pacing: a request-next-frame primitive the host pumps once per frame,
# plus a manual clock so tests and tools can drive it without a window

import itertools


class FrameScheduler:
    """callbacks requested now run on the next pump, once, in request order."""

    def __init__(self):
        self._pending = {}
        self._ids = itertools.count(1)

    @property
    def pending(self):
        return len(self._pending)

    def request(self, callback):
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle=None):
        # unknown / already-run handles are fine; None drops everything
        if handle is None:
            self._pending.clear()
        else:
            self._pending.pop(handle, None)

    def pump(self, now):
        """run what was pending before this call; returns how many ran."""
        batch, self._pending = self._pending, {}
        for callback in batch.values():
            callback(now)
        return len(batch)


class ManualClock:
    def __init__(self, start=0.0):
        self.now = float(start)

    def __call__(self):
        return self.now

    def advance(self, dt):
        self.now += dt
        return self.now


def run_headless(scheduler, clock, frames, dt):
    """fixed-timestep driver: advance the clock and pump until idle or out of frames."""
    ran = 0
    for _ in range(frames):
        if not scheduler.pending:
            break
        scheduler.pump(clock.advance(dt))
        ran += 1
    return ran
