"""A scalar field over the window, defined by a pair of functions of (x, y)."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from physim.vector import Vec2

FieldFunction = Callable[[float, float], float]
LineSegment = tuple[Vec2, Vec2, tuple, float]


class Window(Protocol):
    def draw_line(self, start: Vec2, end: Vec2, color: tuple, thickness: float) -> None: ...


class Field:
    """Holds the field functions and the line segments that depict the field."""

    def __init__(self, window: Optional[Window] = None, segments: int = 0) -> None:
        self.window = window
        self.frame = 0
        self.segments = segments
        self.function: Optional[FieldFunction] = None
        self.function2: Optional[FieldFunction] = None
        self.lines: list[list[LineSegment]] = []

    def calculate(self, x: float, y: float, function: FieldFunction) -> float:
        """Evaluate a field function at the point (x, y)."""
        return float(function(x, y))

    def define_functions(self, function: FieldFunction, function2: FieldFunction) -> None:
        """Set the two functions that define the field."""
        self.function = function
        self.function2 = function2

    def generate_grid(self) -> None:
        """Reset the field's line segments."""
        self.lines = []

    def update(self) -> None:
        """Draw the field's line segments."""
        if self.window is None:
            return
        for row in self.lines:
            for start, end, color, thickness in row:
                self.window.draw_line(start, end, color, thickness)