"""A circular particle with simple Newtonian motion and elastic collisions."""

from __future__ import annotations

import math
from typing import Callable, Optional

from physim.constants import FRICTION, WHITE, WINDOW_HEIGHT, WINDOW_WIDTH
from physim.vector import Vec2, dot, magnitude

Interaction = Callable[["Particle", "Particle"], None]


class Particle:
    """A disc that moves, bounces off the window edges and collides elastically."""

    def __init__(self, position: Vec2, radius: float, color: tuple = WHITE) -> None:
        self.position = position
        self.velocity = Vec2()
        self.acceleration = Vec2()
        self.momentum = Vec2()
        self.radius = radius
        self.mass = radius * radius * math.pi
        self.charge = 0.0
        self.color = color
        self.friction = False
        self.interaction: Optional[Interaction] = None

    def __repr__(self) -> str:
        return (
            f"Particle(position={self.position!r}, velocity={self.velocity!r}, "
            f"radius={self.radius!r})"
        )

    def update(self) -> None:
        """Advance one frame and keep the particle inside the window."""
        self.velocity = self.velocity + self.acceleration
        self.position = self.position + self.velocity
        self.momentum = self.velocity * self.mass
        self.check_collision_with_window()

    def check_collision_with_window(self) -> None:
        """Reflect the particle off any window edge it has reached."""
        if self.velocity.x == 0 and self.acceleration.y == 0:
            return

        x, y = self.position
        vx, vy = self.velocity
        r = self.radius
        damping = FRICTION if self.friction else 1.0

        if x + r >= WINDOW_WIDTH:
            x = WINDOW_WIDTH - r
            vx = -vx * damping
        elif x - r <= 0:
            x = r
            vx = -vx * damping

        if y + r >= WINDOW_HEIGHT:
            y = WINDOW_HEIGHT - r
            vy = -vy * damping
            vx *= damping
        elif y - r <= 0:
            y = r
            vy = -vy * damping

        self.position = Vec2(x, y)
        self.velocity = Vec2(vx, vy)

    def check_collision_with_particle(self, other: Particle) -> None:
        """Resolve an elastic collision with another particle if they overlap."""
        offset = other.position - self.position
        distance = magnitude(offset)
        if distance >= self.radius + other.radius or distance == 0.0:
            return

        normal = offset / distance
        v1_n = dot(self.velocity, normal)
        v2_n = dot(other.velocity, normal)
        total = self.mass + other.mass
        v1_f = ((self.mass - other.mass) * v1_n + 2.0 * other.mass * v2_n) / total
        v2_f = ((other.mass - self.mass) * v2_n + 2.0 * self.mass * v1_n) / total

        self.velocity = self.velocity + (v1_f - v1_n) * normal
        other.velocity = other.velocity + (v2_f - v2_n) * normal

        self.manage_overlap(other)

    def manage_overlap(self, other: Particle) -> None:
        """Push both particles apart equally until they just touch."""
        delta = other.position - self.position
        distance = magnitude(delta)
        if distance == 0.0:
            return

        overlap = self.radius + other.radius - distance
        move = (overlap / distance) * delta
        self.position = self.position - move / 2.0
        other.position = other.position + move / 2.0

    def interact(self, other: Particle) -> None:
        """Apply the particle's interaction callback to the pair, if one is set."""
        if self.interaction is not None:
            self.interaction(self, other)