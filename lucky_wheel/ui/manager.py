"""
UI Manager
==========
Option list panel, input line, status bar and the result overlay.
"""

import pygame
from typing import Optional, Sequence

from lucky_wheel.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, MIN_ITEMS, MAX_ITEMS,
    WHITE, LIGHT_GRAY, GRAY, GOLD, ACCENT, UI_PANEL, UI_BORDER,
    WheelState,
)
from lucky_wheel.core.options import Option
from lucky_wheel.ui.text_box import TextBox, InputBox


PANEL_X = 800
PANEL_Y = 60
PANEL_WIDTH = 420
PANEL_HEIGHT = 600


class UIManager:
    """
    Draws everything that is not the wheel.
    """

    def __init__(self):
        self.title_font = pygame.font.Font(None, 40)
        self.item_font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)
        self.winner_font = pygame.font.Font(None, 72)

        self.input_box = InputBox(PANEL_X + 20, PANEL_Y + 60, PANEL_WIDTH - 40)
        self.message_box = TextBox(SCREEN_WIDTH // 2 - 260, SCREEN_HEIGHT // 2 + 40,
                                   520, 90, font_size=28)
        self.status_text = ""

    def set_status(self, text: str):
        self.status_text = text

    def render(self, surface: pygame.Surface, state: WheelState,
               options: Sequence[Option], muted: bool,
               winner: Optional[Option] = None, message: str = ""):
        self._render_panel(surface, options)
        self._render_status(surface, state, len(options), muted)

        if state == WheelState.CELEBRATING and winner is not None:
            self._render_result(surface, winner, message)

    def _render_panel(self, surface: pygame.Surface, options: Sequence[Option]):
        panel = pygame.Rect(PANEL_X, PANEL_Y, PANEL_WIDTH, PANEL_HEIGHT)
        pygame.draw.rect(surface, UI_PANEL, panel, border_radius=14)
        pygame.draw.rect(surface, UI_BORDER, panel, 1, border_radius=14)

        title = self.title_font.render("Options", True, WHITE)
        surface.blit(title, (PANEL_X + 20, PANEL_Y + 18))

        self.input_box.render(surface, len(options))

        y = PANEL_Y + 120
        for option in options:
            row = pygame.Rect(PANEL_X + 20, y, PANEL_WIDTH - 40, 36)
            pygame.draw.rect(surface, (10, 10, 20), row, border_radius=6)
            pygame.draw.rect(surface, option.color, (row.x, row.y, 6, row.height))
            label = self.item_font.render(option.label, True, LIGHT_GRAY)
            surface.blit(label, (row.x + 16, row.centery - label.get_height() // 2))
            y += 42

        full = len(options) >= MAX_ITEMS
        count = self.small_font.render(
            f"Min {MIN_ITEMS}, max {MAX_ITEMS}   Added: {len(options)} / {MAX_ITEMS}",
            True, ACCENT if full else GRAY
        )
        surface.blit(count, (PANEL_X + 20, PANEL_Y + PANEL_HEIGHT - 32))

    def _render_status(self, surface: pygame.Surface, state: WheelState,
                       count: int, muted: bool):
        if state == WheelState.SPINNING:
            hint = "Spinning..."
        elif count < MIN_ITEMS:
            hint = f"Add at least {MIN_ITEMS} options"
        else:
            hint = "TAB / click wheel: spin   ENTER: add   DEL: remove last   F3: suggest"

        sound = "Sound: off (F2)" if muted else "Sound: on (F2)"
        lines = [hint, sound]
        if self.status_text:
            lines.append(self.status_text)

        y = SCREEN_HEIGHT - 24 * len(lines) - 8
        for line in lines:
            text = self.small_font.render(line, True, LIGHT_GRAY)
            surface.blit(text, (20, y))
            y += 24

    def _render_result(self, surface: pygame.Surface, winner: Option, message: str):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 200))
        surface.blit(overlay, (0, 0))

        heading = self.title_font.render("YOU GOT", True, GOLD)
        surface.blit(heading, heading.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 110)))

        name = self.winner_font.render(winner.label, True, winner.color)
        surface.blit(name, name.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 40)))

        self.message_box.set_text(message or "...")
        self.message_box.render(surface)

        close = self.small_font.render("ENTER / ESC to close", True, LIGHT_GRAY)
        surface.blit(close, close.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 160)))
