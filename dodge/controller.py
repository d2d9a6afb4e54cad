"""
lifecycle of one dodge play area: idle -> running -> ended -> (reset) -> idle.

the controller owns the session, the held keys, the drawing surface and the
score readout. it never loops by itself; it asks the scheduler for the next
frame and does one step + render per frame callback.
"""

import random
import time

import pygame

from dodge import settings
from dodge.diag import info
from dodge.entities import ENDED, RUNNING, HeldKeys
from dodge.render import render, score_text
from dodge.simulation import new_session, place_player, reset_session, step

DIRECTIONS = ("left", "right")


class DodgeController:
    def __init__(self, scheduler, clock=time.perf_counter, rng=random,
                 pixel_ratio=settings.PIXEL_RATIO, font=None, on_readout=None):
        self.scheduler = scheduler
        self.clock = clock
        self.rng = rng
        self.font = font
        self.on_readout = on_readout
        self.pixel_ratio = pixel_ratio if pixel_ratio > 0 else 1.0

        self.state = new_session()
        self.keys = HeldKeys()
        self.surface = pygame.Surface((0, 0))
        self.readout = score_text(self.state)

        self.run_started_at = 0.0
        self.paused = False
        self._last_ts = 0.0
        self._frame = None

    @property
    def phase(self):
        return self.state.phase

    # --- transitions ---

    def start(self):
        if self.state.phase == RUNNING:
            return
        reset_session(self.state)
        self.keys.clear()
        self.state.phase = RUNNING
        self.paused = False
        self.run_started_at = self._last_ts = self.clock()
        info(f"run started ({self.state.area_width:.0f}x{self.state.area_height:.0f})")
        self._request_frame()

    def reset(self):
        self._cancel_frame()
        self.paused = False
        reset_session(self.state)
        self.keys.clear()
        self.draw()
        self._set_readout(score_text(self.state))
        info("reset")

    def resize(self, width, height, pixel_ratio=None):
        """new layout size in layout pixels; obstacles and elapsed are kept."""
        if pixel_ratio is not None and pixel_ratio > 0:
            self.pixel_ratio = pixel_ratio
        self.state.area_width = max(0.0, float(width))
        self.state.area_height = max(0.0, float(height))
        self.surface = pygame.Surface((int(self.state.area_width * self.pixel_ratio),
                                       int(self.state.area_height * self.pixel_ratio)))
        place_player(self.state)
        self.draw()

    # --- pause (host focus loss, P key) ---

    def pause(self):
        if self.paused or self.state.phase != RUNNING:
            return
        self.paused = True
        self._cancel_frame()

    def resume(self):
        if not self.paused:
            return
        self.paused = False
        if self.state.phase == RUNNING:
            # the gap spent paused is not part of the run
            self._last_ts = self.clock()
            self._request_frame()

    # --- input ---

    def key_down(self, direction):
        self._set_key(direction, True)

    def key_up(self, direction):
        self._set_key(direction, False)

    def _set_key(self, direction, held):
        if self.state.phase != RUNNING or direction not in DIRECTIONS:
            return
        setattr(self.keys, direction, held)

    # --- frames ---

    def tick(self, ts):
        """frame callback: one step and one render, then maybe another frame."""
        # already popped by the scheduler when it calls us; direct calls drop it here
        self._cancel_frame()
        if self.state.phase != RUNNING or self.paused:
            return
        dt = max(0.0, ts - self._last_ts)
        self._last_ts = max(self._last_ts, ts)

        step(self.state, self.keys, dt, self.rng)
        self.draw()

        if self.state.phase == ENDED:
            info(f"run ended at {self.state.elapsed:.2f}s")
            return
        self._set_readout(score_text(self.state))
        self._request_frame()

    def advance(self, dt):
        """one tick of dt seconds without waiting on the scheduler."""
        self.tick(self._last_ts + max(0.0, dt))

    def draw(self):
        render(self.surface, self.state, self.pixel_ratio, self.font)

    def _set_readout(self, text):
        self.readout = text
        if self.on_readout is not None:
            self.on_readout(text)

    def _request_frame(self):
        if self._frame is None:
            self._frame = self.scheduler.request(self.tick)

    def _cancel_frame(self):
        if self._frame is not None:
            self.scheduler.cancel(self._frame)
            self._frame = None


def build_controller(area, start_control, reset_control, readout, scheduler, **kwargs):
    """wire a controller to its controls; None (nothing wired) if any is missing.

    `area` is a rect-like with width/height, the controls take an `on_click`
    callable and the readout gets its `text` set on every update.
    """
    if area is None or start_control is None or reset_control is None or readout is None:
        return None

    def show(text):
        readout.text = text

    controller = DodgeController(scheduler, on_readout=show, **kwargs)

    def start_clicked():
        controller.reset()
        controller.start()

    start_control.on_click = start_clicked
    reset_control.on_click = controller.reset
    controller.resize(area.width, area.height)
    controller.reset()
    return controller
