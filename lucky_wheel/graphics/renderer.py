"""
Wheel Renderer
==============
Draws the wheel from the option list and the current rotation angle.
"""

import math
import pygame
from typing import List, Sequence, Tuple

from lucky_wheel.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    WHEEL_CENTER_X, WHEEL_CENTER_Y, WHEEL_RADIUS, HUB_RADIUS, POINTER_SIZE,
    BLACK, WHITE, GRAY, UI_BG, UI_PANEL, ACCENT,
)
from lucky_wheel.core.options import Option
from lucky_wheel.core.trajectory import slice_angle


def polar(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    """Screen point at `angle` degrees clockwise from the top"""
    rad = math.radians(angle)
    return cx + radius * math.sin(rad), cy - radius * math.cos(rad)


class WheelRenderer:
    """
    Renders the wheel, the pointer and the hub.
    Slice `i` is centred on `i * 360 / n + angle` degrees clockwise from the top.
    """

    def __init__(self, center: Tuple[int, int] = (WHEEL_CENTER_X, WHEEL_CENTER_Y),
                 radius: int = WHEEL_RADIUS):
        self.center = center
        self.radius = radius

        self._background = None
        self._label_font = None
        self._create_static_surfaces()

    def _create_static_surfaces(self):
        """Create cached background"""
        self._background = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        top, bottom = UI_BG, BLACK
        for y in range(SCREEN_HEIGHT):
            t = y / SCREEN_HEIGHT
            color = tuple(int(top[i] + (bottom[i] - top[i]) * t) for i in range(3))
            pygame.draw.line(self._background, color, (0, y), (SCREEN_WIDTH, y))

        self._label_font = pygame.font.Font(None, 30)

    def render(self, surface: pygame.Surface, options: Sequence[Option], angle: float):
        surface.blit(self._background, (0, 0))

        cx, cy = self.center
        # Rim
        pygame.draw.circle(surface, UI_PANEL, (cx, cy), self.radius + 14)

        if len(options) == 0:
            pygame.draw.circle(surface, GRAY, (cx, cy), self.radius)
        elif len(options) == 1:
            pygame.draw.circle(surface, options[0].color, (cx, cy), self.radius)
        else:
            self._render_slices(surface, options, angle)

        self._render_labels(surface, options, angle)
        self._render_hub(surface)
        self._render_pointer(surface)

    def _render_slices(self, surface: pygame.Surface, options: Sequence[Option], angle: float):
        cx, cy = self.center
        width = slice_angle(len(options))

        for index, option in enumerate(options):
            mid = index * width + angle
            points = [(cx, cy)] + self._arc_points(mid - width / 2, mid + width / 2)
            pygame.draw.polygon(surface, option.color, points)
            pygame.draw.line(surface, WHITE, (cx, cy),
                             polar(cx, cy, self.radius, mid - width / 2), 2)

    def _arc_points(self, start: float, end: float) -> List[Tuple[float, float]]:
        cx, cy = self.center
        steps = max(2, int(abs(end - start) / 3) + 1)
        return [
            polar(cx, cy, self.radius, start + (end - start) * i / steps)
            for i in range(steps + 1)
        ]

    def _render_labels(self, surface: pygame.Surface, options: Sequence[Option], angle: float):
        if not options:
            return

        cx, cy = self.center
        width = slice_angle(len(options))
        for index, option in enumerate(options):
            mid = index * width + angle
            text = self._label_font.render(option.label, True, WHITE)
            shadow = self._label_font.render(option.label, True, BLACK)

            # Read outward along the slice's radius
            rotation = 90 - mid
            text = pygame.transform.rotate(text, rotation)
            shadow = pygame.transform.rotate(shadow, rotation)

            x, y = polar(cx, cy, self.radius * 0.62, mid)
            surface.blit(shadow, shadow.get_rect(center=(x + 1, y + 1)))
            surface.blit(text, text.get_rect(center=(x, y)))

    def _render_hub(self, surface: pygame.Surface):
        pygame.draw.circle(surface, WHITE, self.center, HUB_RADIUS)
        pygame.draw.circle(surface, ACCENT, self.center, HUB_RADIUS, 5)

    def _render_pointer(self, surface: pygame.Surface):
        cx, cy = self.center
        tip_y = cy - self.radius + POINTER_SIZE // 2
        base_y = cy - self.radius - POINTER_SIZE
        points = [
            (cx, tip_y),
            (cx - POINTER_SIZE // 2, base_y),
            (cx + POINTER_SIZE // 2, base_y),
        ]
        pygame.draw.polygon(surface, ACCENT, points)
        pygame.draw.polygon(surface, WHITE, points, 2)

    def contains(self, pos: Tuple[int, int]) -> bool:
        """True if `pos` is on the wheel face"""
        cx, cy = self.center
        return math.hypot(pos[0] - cx, pos[1] - cy) <= self.radius
