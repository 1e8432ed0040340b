"""Owns the particles, spawns new ones and resolves their collisions each frame."""

from __future__ import annotations

import random
from typing import Optional, Protocol

from physim.constants import GRAVITY, WHITE, WINDOW_HEIGHT, WINDOW_WIDTH
from physim.particle import Particle
from physim.vector import Vec2

MAX_RADIUS = 5


class Window(Protocol):
    def set_title(self, title: str) -> None: ...

    def draw_circle(self, center: Vec2, radius: float, color: tuple) -> None: ...


class ParticleManager:
    """Spawns particles and runs a grid-accelerated collision pass each frame."""

    def __init__(
        self,
        window: Optional[Window] = None,
        gravity: bool = True,
        friction: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.window = window
        self.gravity = gravity
        self.friction = friction
        self.particles: list[Particle] = []
        self.grid: list[list[list[Particle]]] = []
        self._rng = rng if rng is not None else random.Random()

    def grid_search(self) -> None:
        """Rebuild the spatial grid, bucketing and advancing every particle."""
        columns = len(range(0, WINDOW_WIDTH, MAX_RADIUS))
        rows = len(range(0, WINDOW_HEIGHT, MAX_RADIUS))
        self.grid = [[[] for _ in range(rows)] for _ in range(columns)]

        max_x = WINDOW_WIDTH // MAX_RADIUS - 1
        max_y = WINDOW_HEIGHT // MAX_RADIUS - 1
        for particle in self.particles:
            x = min(max(int(particle.position.x / MAX_RADIUS), 0), max_x)
            y = min(max(int(particle.position.y / MAX_RADIUS), 0), max_y)
            self.grid[x][y].append(particle)
            particle.update()

    def generate_particles(self, number: int) -> None:
        """Spawn particles at the left edge, half-way down, moving right."""
        for _ in range(number):
            particle = Particle(Vec2(0, WINDOW_HEIGHT // 2), float(MAX_RADIUS), WHITE)
            particle.velocity = Vec2(5, float(self._rng.randint(1, 5)))
            if self.gravity:
                particle.acceleration = Vec2(0, GRAVITY)
            if self.friction:
                particle.friction = True
            self.particles.append(particle)

    def update(self) -> None:
        """Run one frame: collide neighbours, advance and draw every particle."""
        if self.window is not None:
            self.window.set_title(f"Physim - {len(self.particles)} particles")

        self.grid_search()

        columns = len(self.grid)
        for i, column in enumerate(self.grid):
            rows = len(column)
            for j, cell in enumerate(column):
                if not cell:
                    continue
                for dx in (-1, 0, 1):
                    for dy in (-1, 0, 1):
                        ni, nj = i + dx, j + dy
                        if not (0 <= ni < columns and 0 <= nj < rows):
                            continue
                        neighbour = self.grid[ni][nj]
                        for particle in cell:
                            for other in neighbour:
                                if particle is not other:
                                    particle.check_collision_with_particle(other)

        for particle in self.particles:
            particle.update()
            if self.window is not None:
                self.window.draw_circle(particle.position, particle.radius, particle.color)