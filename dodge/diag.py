# bracket-tagged diagnostic lines, same shape as the game's asset warnings

from dodge import settings


def warn(msg):
    print(f"[warn] {msg}")


def info(msg):
    """only printed when settings.VERBOSE is on."""
    if settings.VERBOSE:
        print(f"[info] {msg}")
