# difficulty curve: time survived -> seconds between spawns

from dodge import settings


def spawn_interval(elapsed,
                   start=settings.SPAWN_INTERVAL_START,
                   floor=settings.SPAWN_INTERVAL_FLOOR,
                   ramp=settings.SPAWN_INTERVAL_RAMP):
    """linear drop from `start`, one second per `ramp` seconds, never below `floor`."""
    elapsed = max(0.0, elapsed)
    return max(floor, start - elapsed / ramp)
