"""Two-dimensional particle simulation with gravity, friction and elastic collisions."""

__version__ = "0.1.0"