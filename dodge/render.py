# draws a session onto a pygame surface; never touches the state

import pygame

from dodge import settings
from dodge.diag import warn
from dodge.entities import ENDED

_fonts = {}


def load_font(size):
    """configured font if it loads, otherwise pygame's default one."""
    # fonts cached before a pygame.quit() are dead; start over
    if not pygame.font.get_init():
        _fonts.clear()
        pygame.font.init()
    key = (settings.FONT_PATH, size)
    if key not in _fonts:
        font = None
        if settings.FONT_PATH:
            try:
                font = pygame.font.Font(settings.FONT_PATH, size)
            except (OSError, pygame.error) as e:
                warn(f"could not load font {settings.FONT_PATH}: {e}")
        _fonts[key] = font or pygame.font.Font(None, size)
    return _fonts[key]


def score_text(state):
    return f"{state.elapsed:.2f}"


def game_over_text(state):
    return f"Game Over - Time: {state.elapsed:.2f}s"


def _scaled_rect(box, scale):
    return pygame.Rect(round(box.x * scale), round(box.y * scale),
                       round(box.width * scale), round(box.height * scale))


def draw_game_over_overlay(surface, state, scale=1.0, font=None):
    """translucent scrim over everything plus the final time, centred."""
    w, h = surface.get_size()
    scrim = pygame.Surface((w, h), pygame.SRCALPHA)
    scrim.fill((*settings.SCRIM_COLOR, settings.SCRIM_ALPHA))
    surface.blit(scrim, (0, 0))

    font = font or load_font(max(1, round(settings.OVERLAY_FONT_SIZE * scale)))
    label = font.render(game_over_text(state), True, settings.OVERLAY_TEXT_COLOR)
    surface.blit(label, label.get_rect(center=(w // 2, h // 2)))


def render(surface, state, scale=1.0, font=None):
    surface.fill(settings.BG_COLOR)
    pygame.draw.rect(surface, settings.PLAYER_COLOR, _scaled_rect(state.player, scale))
    for o in state.obstacles:
        pygame.draw.rect(surface, settings.OBSTACLE_COLOR, _scaled_rect(o, scale))
    if state.phase == ENDED:
        draw_game_over_overlay(surface, state, scale, font)
