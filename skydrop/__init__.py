"""
Skydrop - a small cooperative game engine on pygame.

Modules:
- logging: per-module loggers and structured record sinks
- scheduling: frame scheduler, interval timer and periodic tasks
- assets: asset catalog with an asynchronous readiness barrier
- graphics: layered render surfaces and display acquisition
- games: game state and input abstractions
"""

__version__ = "1.0.0"
