"""Framework-free 2D game logic: platformer physics, particle emitters, small game simulations and camera helpers."""

__version__ = "0.1.0"