import os
import random

# headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from dodge.entities import RUNNING  # noqa: E402
from dodge.scheduler import FrameScheduler, ManualClock  # noqa: E402
from dodge.simulation import new_session  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return ManualClock(100.0)


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def running_state():
    def make(width=400, height=300):
        state = new_session(width, height)
        state.phase = RUNNING
        return state

    return make
