"""
Text Box System
===============
Wrapped text panels and the single-line option input.
"""

import pygame
from typing import List, Optional, Tuple

from lucky_wheel.config import WHITE, GRAY, LIGHT_GRAY, ACCENT, MAX_ITEMS


def wrap_text(font: pygame.font.Font, text: str, max_width: int) -> List[str]:
    """Greedy word wrap"""
    words = text.split(' ')
    lines = []
    current_line = []

    for word in words:
        test_line = ' '.join(current_line + [word])
        if font.size(test_line)[0] <= max_width:
            current_line.append(word)
        else:
            if current_line:
                lines.append(' '.join(current_line))
            current_line = [word]

    if current_line:
        lines.append(' '.join(current_line))
    return lines


class TextBox:
    """
    Simple text box for a single message.
    """

    def __init__(self, x: int, y: int, width: int, height: int, font_size: int = 24):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

        self.text = ""
        self.font_size = font_size
        self.font = None
        self.bg_color = (20, 20, 30, 200)
        self.text_color = WHITE
        self.border_color = GRAY

        self._init_font()

    def _init_font(self):
        self.font = pygame.font.Font(None, self.font_size)

    def set_text(self, text: str, color: Tuple[int, int, int] = WHITE):
        self.text = text
        self.text_color = color

    def render(self, surface: pygame.Surface):
        if not self.text:
            return

        if self.font is None:
            self._init_font()

        bg_surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        bg_surface.fill(self.bg_color)
        surface.blit(bg_surface, (self.x, self.y))

        pygame.draw.rect(surface, self.border_color,
                         (self.x, self.y, self.width, self.height), 2)

        y_offset = 10
        line_height = self.font.get_linesize()
        for line in wrap_text(self.font, self.text, self.width - 20)[:3]:  # Max 3 lines
            text_surface = self.font.render(line, True, self.text_color)
            surface.blit(text_surface, (self.x + 10, self.y + y_offset))
            y_offset += line_height


class InputBox:
    """
    Single-line text input for new options and suggestion topics.
    """

    def __init__(self, x: int, y: int, width: int, height: int = 40, max_length: int = 40):
        self.rect = pygame.Rect(x, y, width, height)
        self.max_length = max_length
        self.text = ""
        self.font = pygame.font.Font(None, 30)

    def feed(self, typed: str):
        if typed:
            self.text = (self.text + typed)[:self.max_length]

    def backspace(self):
        self.text = self.text[:-1]

    def take(self) -> str:
        """Return the current text and clear the box"""
        text, self.text = self.text, ""
        return text

    def render(self, surface: pygame.Surface, count: int, placeholder: Optional[str] = None):
        full = count >= MAX_ITEMS
        pygame.draw.rect(surface, (10, 10, 20), self.rect, border_radius=6)
        pygame.draw.rect(surface, ACCENT if not full else GRAY, self.rect, 2, border_radius=6)

        if self.text:
            label = self.font.render(self.text, True, WHITE)
        else:
            hint = placeholder or ("List is full" if full else "Type a new option...")
            label = self.font.render(hint, True, LIGHT_GRAY)
        surface.blit(label, (self.rect.x + 10, self.rect.centery - label.get_height() // 2))
