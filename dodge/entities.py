from dataclasses import dataclass, field
from typing import List

from dodge import settings

# session phases
IDLE, RUNNING, ENDED = "idle", "running", "ended"


@dataclass
class Player:
    x: float = 0.0
    y: float = 0.0
    width: float = settings.PLAYER_WIDTH
    height: float = settings.PLAYER_HEIGHT
    speed: float = settings.PLAYER_SPEED  # px/s


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float
    speed: float  # px/s, fixed at spawn


@dataclass
class HeldKeys:
    left: bool = False
    right: bool = False

    def clear(self):
        self.left = self.right = False


@dataclass
class SessionState:
    area_width: float = 0.0
    area_height: float = 0.0
    phase: str = IDLE
    elapsed: float = 0.0  # seconds survived this run
    spawn_timer: float = 0.0
    spawn_interval: float = settings.SPAWN_INTERVAL_START
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
