# one frame of the dodge game: input, spawning, falling, pruning, collision

import random

from dodge import settings
from dodge.difficulty import spawn_interval
from dodge.entities import ENDED, IDLE, RUNNING, SessionState
from dodge.geometry import clamp, overlaps
from dodge.spawner import spawn_obstacle


# --- session setup ---


def resting_y(state):
    p = state.player
    return max(0.0, state.area_height - p.height - settings.PLAYER_FLOOR_GAP)


def place_player(state):
    """move the player onto its resting row for the current area height."""
    state.player.y = resting_y(state)


def reset_session(state):
    """back to a fresh idle run, keeping the area size."""
    state.phase = IDLE
    state.elapsed = 0.0
    state.spawn_timer = 0.0
    state.spawn_interval = spawn_interval(0.0)
    state.obstacles = []
    p = state.player
    p.x = max(settings.PLAYER_START_MARGIN, (state.area_width - p.width) / 2)
    place_player(state)
    return state


def new_session(area_width=0.0, area_height=0.0):
    return reset_session(SessionState(area_width=max(0.0, area_width),
                                      area_height=max(0.0, area_height)))


# --- step ---


def step(state, keys, dt, rng=random):
    """advance a running session by dt seconds; anything else is left alone."""
    if state.phase != RUNNING:
        return state
    # non-monotonic clocks (and nan) become a zero-length step
    if not dt > 0:
        dt = 0.0

    state.elapsed += dt

    p = state.player
    if keys.left:
        p.x -= p.speed * dt
    if keys.right:
        p.x += p.speed * dt
    margin = settings.PLAYER_CLAMP_MARGIN
    p.x = clamp(p.x, margin, state.area_width - p.width - margin)

    # at most one spawn per step, big frame gaps do not catch up
    state.spawn_timer += dt
    state.spawn_interval = spawn_interval(state.elapsed)
    if state.spawn_timer >= state.spawn_interval:
        state.spawn_timer = 0.0
        state.obstacles.append(spawn_obstacle(state.area_width, state.elapsed, rng))

    for o in state.obstacles:
        o.y += o.speed * dt

    limit = state.area_height + settings.PRUNE_MARGIN
    state.obstacles = [o for o in state.obstacles if o.y <= limit]

    for o in state.obstacles:
        if overlaps(p, o):
            state.phase = ENDED
            break

    return state
