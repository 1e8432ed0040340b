"""Simulation-wide constants: timing, window size and damping factors."""

FRAMES_PER_SECOND = 60
GRAVITY = 9.8 / FRAMES_PER_SECOND
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
AIR_RESISTANCE = 0.99
FRICTION = 0.9

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)