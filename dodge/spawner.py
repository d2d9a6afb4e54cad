import random

from dodge import settings
from dodge.entities import Obstacle


def spawn_obstacle(area_width, elapsed, rng=random):
    """create a square obstacle just above the area, faster the longer the run has gone."""
    size = settings.OBSTACLE_SIZE_MIN + rng.random() * settings.OBSTACLE_SIZE_RANGE
    x = rng.random() * max(0.0, area_width - size)
    speed = (settings.OBSTACLE_SPEED_BASE
             + rng.random() * settings.OBSTACLE_SPEED_RANGE
             + max(0.0, elapsed) * settings.OBSTACLE_SPEED_PER_SEC)
    return Obstacle(x=x, y=-size, width=size, height=size, speed=speed)
