"""A grid of dots displaced by a travelling sine wave."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Protocol

from physim.constants import WHITE, WINDOW_HEIGHT, WINDOW_WIDTH
from physim.vector import Vec2

RADIUS = 2
SEGMENTS = 100
K = 0.0
W = 0.0
AMPLITUDE = 10.0


class Window(Protocol):
    def draw_circle(self, center: Vec2, radius: float, color: tuple) -> None: ...


@dataclass
class Dot:
    """A small white marker at a fixed grid position."""

    position: Vec2
    radius: float = RADIUS
    color: tuple = field(default=WHITE)


class WaveManager:
    """Draws a dot grid shifted horizontally by a sine wave each frame."""

    def __init__(self, window: Optional[Window] = None) -> None:
        self.window = window
        self.dots: list[list[Dot]] = []
        self.frame = 0

    def generate_grid(self) -> None:
        """Lay out SEGMENTS x SEGMENTS dots evenly across the window."""
        x_step = WINDOW_WIDTH // SEGMENTS
        y_step = WINDOW_HEIGHT // SEGMENTS
        self.dots = [
            [Dot(Vec2(i, j)) for j in range(0, WINDOW_HEIGHT, y_step)]
            for i in range(0, WINDOW_WIDTH, x_step)
        ]

    def update(self) -> None:
        """Advance the frame counter and draw every dot at its displaced position."""
        self.frame += 1
        for column in self.dots:
            for dot in column:
                x = dot.position.x + AMPLITUDE * math.sin(K * dot.position.x - W * self.frame)
                if self.window is not None:
                    self.window.draw_circle(Vec2(x, dot.position.y), dot.radius, dot.color)