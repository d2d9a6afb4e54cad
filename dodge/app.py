# dodge — pygame host: window, toolbar controls, event pump and frame loop

import time

import pygame

from dodge import settings
from dodge.controller import build_controller
from dodge.diag import warn
from dodge.render import load_font
from dodge.scheduler import FrameScheduler

KEY_DIRECTIONS = {pygame.K_LEFT: "left", pygame.K_RIGHT: "right"}


class Button:
    def __init__(self, label, rect):
        self.label = label
        self.rect = pygame.Rect(rect)
        self.on_click = None

    def click(self, pos):
        if self.on_click is not None and self.rect.collidepoint(pos):
            self.on_click()
            return True
        return False

    def draw(self, surface, font):
        pygame.draw.rect(surface, settings.BUTTON_COLOR, self.rect, border_radius=6)
        text = font.render(self.label, True, settings.BUTTON_TEXT_COLOR)
        surface.blit(text, text.get_rect(center=self.rect.center))


class Readout:
    def __init__(self, pos, prefix="Time: "):
        self.pos = pos
        self.prefix = prefix
        self.text = ""

    def draw(self, surface, font):
        surface.blit(font.render(self.prefix + self.text, True, settings.READOUT_COLOR), self.pos)


def play_area(window_size):
    """everything under the toolbar; never negative."""
    w, h = window_size
    return pygame.Rect(0, settings.TOOLBAR_HEIGHT, max(0, w), max(0, h - settings.TOOLBAR_HEIGHT))


class DodgeApp:
    def __init__(self, window, clock=time.perf_counter, rng=None):
        self.window = window
        self.clock = clock
        self.scheduler = FrameScheduler()
        self.font = load_font(settings.TOOLBAR_FONT_SIZE)

        pad = (settings.TOOLBAR_HEIGHT - 32) // 2
        self.start_button = Button("Start", (pad, pad, 90, 32))
        self.reset_button = Button("Reset", (pad + 100, pad, 90, 32))
        self.readout = Readout((pad + 210, pad + 8))
        self.area = play_area(window.get_size())

        kwargs = {"clock": clock, "pixel_ratio": settings.PIXEL_RATIO}
        if rng is not None:
            kwargs["rng"] = rng
        self.controller = build_controller(self.area, self.start_button, self.reset_button,
                                           self.readout, self.scheduler, **kwargs)
        self._focus_paused = False

    # --- events ---

    def handle_event(self, event):
        """apply one pygame event; false means quit."""
        c = self.controller
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_p:
                if c.paused:
                    c.resume()
                else:
                    c.pause()
            elif event.key in KEY_DIRECTIONS:
                c.key_down(KEY_DIRECTIONS[event.key])

        elif event.type == pygame.KEYUP and event.key in KEY_DIRECTIONS:
            c.key_up(KEY_DIRECTIONS[event.key])

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button in (self.start_button, self.reset_button):
                if button.click(event.pos):
                    break

        elif event.type == pygame.VIDEORESIZE:
            size = (max(settings.MIN_WINDOW_W, event.w), max(settings.MIN_WINDOW_H, event.h))
            self.window = pygame.display.set_mode(size, pygame.RESIZABLE)
            self.relayout()

        elif event.type == pygame.WINDOWFOCUSLOST:
            if not c.paused:
                self._focus_paused = True
                c.pause()

        elif event.type == pygame.WINDOWFOCUSGAINED:
            # only undo a pause that focus loss caused
            if self._focus_paused:
                self._focus_paused = False
                c.resume()

        return True

    def relayout(self):
        self.area = play_area(self.window.get_size())
        self.controller.resize(self.area.width, self.area.height)

    # --- drawing ---

    def draw(self):
        w = self.window.get_width()
        self.window.fill(settings.TOOLBAR_COLOR, (0, 0, w, settings.TOOLBAR_HEIGHT))
        self.start_button.draw(self.window, self.font)
        self.reset_button.draw(self.window, self.font)
        self.readout.draw(self.window, self.font)
        if self.controller.paused:
            label = self.font.render("PAUSED", True, settings.READOUT_COLOR)
            self.window.blit(label, label.get_rect(midright=(w - 12, settings.TOOLBAR_HEIGHT // 2)))

        if self.area.width <= 0 or self.area.height <= 0:
            return
        canvas = self.controller.surface
        if canvas.get_size() != self.area.size:
            # device pixels -> layout pixels
            canvas = pygame.transform.scale(canvas, self.area.size)
        self.window.blit(canvas, self.area.topleft)

    # --- loop ---

    def run(self):
        frame_clock = pygame.time.Clock()
        while True:
            frame_clock.tick(settings.FPS)
            for event in pygame.event.get():
                if not self.handle_event(event):
                    self.scheduler.cancel()
                    return 0
            self.scheduler.pump(self.clock())
            self.draw()
            pygame.display.flip()


def main():
    pygame.init()
    try:
        window = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT), pygame.RESIZABLE)
    except pygame.error as e:
        warn(f"could not open a window: {e}")
        pygame.quit()
        return 1
    pygame.display.set_caption("Dodge")

    app = DodgeApp(window)
    if app.controller is None:
        warn("dodge controls missing; nothing to run")
        pygame.quit()
        return 1
    try:
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())
