"""Interactive window running the particle simulation."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from physim.constants import BLACK, FRAMES_PER_SECOND, WINDOW_HEIGHT, WINDOW_WIDTH
from physim.particle_manager import ParticleManager
from physim.vector import Vec2


class _PygameWindow:
    """Adapts a pygame display surface to the drawing calls the simulation makes."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    def draw_circle(self, center: Vec2, radius: float, color: tuple) -> None:
        pygame.draw.circle(self._surface, color, (center.x, center.y), radius)

    def draw_line(self, start: Vec2, end: Vec2, color: tuple, thickness: float) -> None:
        pygame.draw.line(
            self._surface, color, (start.x, start.y), (end.x, end.y), max(1, round(thickness))
        )


def run(max_frames: Optional[int] = None) -> int:
    """Run the simulation until the window closes or max_frames have been drawn.

    Returns the number of frames drawn.
    """
    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Physim")
        clock = pygame.time.Clock()
        manager = ParticleManager(_PygameWindow(surface), gravity=True, friction=True)

        frames = 0
        while max_frames is None or frames < max_frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            manager.generate_particles(1)
            surface.fill(BLACK)
            manager.update()
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
            frames += 1
        return frames
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="physim", description="Particle physics simulation.")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames (default: run until the window is closed)",
    )
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    run(args.frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())