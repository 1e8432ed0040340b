import math

import pytest

from physim.constants import FRICTION, WINDOW_HEIGHT, WINDOW_WIDTH
from physim.particle import Particle
from physim.vector import Vec2, magnitude


def test_new_particle_is_at_rest():
    p = Particle(Vec2(10, 20), 3.0)
    assert p.velocity == Vec2(0, 0)
    assert p.acceleration == Vec2(0, 0)
    assert p.charge == 0
    assert p.friction is False
    assert p.interaction is None


def test_mass_scales_with_area():
    small = Particle(Vec2(0, 0), 1.0)
    big = Particle(Vec2(0, 0), 2.0)
    assert small.mass == pytest.approx(math.pi)
    assert big.mass == pytest.approx(4 * small.mass)


def test_update_integrates_acceleration_then_velocity():
    p = Particle(Vec2(100, 100), 5.0)
    p.velocity = Vec2(2, 1)
    p.acceleration = Vec2(0, 0.5)
    p.update()
    assert p.velocity == Vec2(2, 1.5)
    assert p.position == Vec2(102, 101.5)
    assert p.momentum == p.velocity * p.mass


def test_right_wall_reflects_velocity():
    p = Particle(Vec2(WINDOW_WIDTH - 1, 300), 5.0)
    p.velocity = Vec2(5, 0)
    p.check_collision_with_window()
    assert p.position.x == WINDOW_WIDTH - 5.0
    assert p.velocity.x == -5


def test_left_wall_with_friction_damps_velocity():
    p = Particle(Vec2(1, 300), 5.0)
    p.friction = True
    p.velocity = Vec2(-4, 0)
    p.check_collision_with_window()
    assert p.position.x == 5.0
    assert p.velocity.x == pytest.approx(4 * FRICTION)


def test_floor_with_friction_damps_both_axes():
    p = Particle(Vec2(300, WINDOW_HEIGHT + 3), 5.0)
    p.friction = True
    p.velocity = Vec2(2, 6)
    p.check_collision_with_window()
    assert p.position.y == WINDOW_HEIGHT - 5.0
    assert p.velocity.y == pytest.approx(-6 * FRICTION)
    assert p.velocity.x == pytest.approx(2 * FRICTION)


def test_ceiling_reflects_without_friction():
    p = Particle(Vec2(300, 2), 5.0)
    p.velocity = Vec2(1, -3)
    p.check_collision_with_window()
    assert p.position.y == 5.0
    assert p.velocity == Vec2(1, 3)


def test_window_check_skipped_without_horizontal_motion_or_gravity():
    p = Particle(Vec2(-50, -50), 5.0)
    p.velocity = Vec2(0, -3)
    p.check_collision_with_window()
    assert p.position == Vec2(-50, -50)
    assert p.velocity == Vec2(0, -3)


def test_head_on_collision_of_equal_masses_swaps_velocities():
    a = Particle(Vec2(100, 100), 5.0)
    b = Particle(Vec2(108, 100), 5.0)
    a.velocity = Vec2(1, 0)
    b.velocity = Vec2(-1, 0)
    a.check_collision_with_particle(b)
    assert a.velocity.x == pytest.approx(-1)
    assert b.velocity.x == pytest.approx(1)
    assert magnitude(b.position - a.position) == pytest.approx(a.radius + b.radius)


def test_collision_conserves_momentum():
    a = Particle(Vec2(200, 200), 5.0)
    b = Particle(Vec2(206, 203), 3.0)
    a.velocity = Vec2(2, 0.5)
    b.velocity = Vec2(-1, -2)
    before = a.velocity * a.mass + b.velocity * b.mass
    a.check_collision_with_particle(b)
    after = a.velocity * a.mass + b.velocity * b.mass
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_distant_particles_are_untouched():
    a = Particle(Vec2(100, 100), 5.0)
    b = Particle(Vec2(200, 100), 5.0)
    a.velocity = Vec2(1, 0)
    a.check_collision_with_particle(b)
    assert a.velocity == Vec2(1, 0)
    assert b.position == Vec2(200, 100)


def test_coincident_particles_are_untouched():
    a = Particle(Vec2(50, 50), 5.0)
    b = Particle(Vec2(50, 50), 5.0)
    a.velocity = Vec2(3, 3)
    a.check_collision_with_particle(b)
    a.manage_overlap(b)
    assert a.velocity == Vec2(3, 3)
    assert a.position == b.position == Vec2(50, 50)


def test_manage_overlap_moves_both_equally():
    a = Particle(Vec2(0, 0), 4.0)
    b = Particle(Vec2(0, 6), 4.0)
    a.manage_overlap(b)
    assert a.position.y == pytest.approx(-(b.position.y - 6))
    assert magnitude(b.position - a.position) == pytest.approx(8.0)


def test_interact_invokes_callback_with_pair():
    seen = []
    a = Particle(Vec2(0, 0), 1.0)
    b = Particle(Vec2(5, 5), 1.0)
    a.interaction = lambda p1, p2: seen.append((p1, p2))
    a.interact(b)
    assert seen == [(a, b)]


def test_interact_without_callback_leaves_state():
    a = Particle(Vec2(0, 0), 1.0)
    b = Particle(Vec2(5, 5), 1.0)
    a.interact(b)
    assert a.position == Vec2(0, 0)
    assert b.position == Vec2(5, 5)