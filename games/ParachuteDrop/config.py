"""
Configuration for Parachute Drop.

Loads settings from .env files in the game directory, with sensible defaults.
Create a .env.local file to override settings without modifying .env.
Real environment variables always win over both files.
"""
import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Find the game directory (where this config.py lives)
GAME_DIR = Path(__file__).parent

# load_dotenv never overrides variables that are already set, so the local
# file is loaded first to take precedence over the shared defaults.
load_dotenv(GAME_DIR / '.env.local')
load_dotenv(GAME_DIR / '.env')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


def _get_optional_float(key: str) -> Optional[float]:
    """Get float from environment, or None when unset."""
    val = os.getenv(key)
    return float(val) if val else None


def _get_path(key: str, default: Path) -> Path:
    """Get filesystem path from environment."""
    return Path(os.getenv(key, str(default))).expanduser()


# Display settings
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 400)
FPS: int = _get_int('FPS', 60)
VSYNC: bool = _get_bool('VSYNC', True)

# Assets (procedural artwork is drawn for any missing file)
ASSETS_DIR: Path = _get_path('ASSETS_DIR', GAME_DIR / 'assets')

# Scenery
OCEAN_HEIGHT: int = _get_int('OCEAN_HEIGHT', 150)
# Falling entities below this are lost; unset means the top of the drawn ocean
OCEAN_LEVEL: Optional[float] = _get_optional_float('OCEAN_LEVEL')

# Game rules
INITIAL_LIVES: int = _get_int('INITIAL_LIVES', 3)

# Catcher (boat)
CATCHER_STEP: float = _get_float('CATCHER_STEP', 30)  # Pixels per key press
CATCH_ZONE_OFFSET: float = _get_float('CATCH_ZONE_OFFSET', 70)  # Below the boat's top edge
CATCH_ZONE_BAND: float = _get_float('CATCH_ZONE_BAND', 3)

# Falling entities (parachutists)
FALL_SPEED: float = _get_float('FALL_SPEED', 1.5)  # Pixels per frame

# Spawner (airplane)
SWEEP_SPEED: float = _get_float('SWEEP_SPEED', 3)  # Pixels per frame, leftward
SPAWN_DELAY_MIN_MS: int = _get_int('SPAWN_DELAY_MIN_MS', 500)
SPAWN_DELAY_MAX_MS: int = _get_int('SPAWN_DELAY_MAX_MS', 2500)

# Input polling
INPUT_POLL_MS: int = _get_int('INPUT_POLL_MS', 10)

# Procedural artwork sizes (width, height), used when image files are absent
BACKGROUND_SIZE: Tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)
OCEAN_SIZE: Tuple[int, int] = (SCREEN_WIDTH, OCEAN_HEIGHT)
BOAT_SIZE: Tuple[int, int] = (65, 90)
AIRPLANE_SIZE: Tuple[int, int] = (120, 50)
PARACHUTIST_SIZE: Tuple[int, int] = (30, 30)

# Stats overlay
STATS_FONT_SIZE: int = _get_int('STATS_FONT_SIZE', 20)
STATS_PANEL: Tuple[int, int, int, int] = (5, 5, 145, 80)
STATS_SCORE_POS: Tuple[int, int] = (30, 30)
STATS_LIVES_POS: Tuple[int, int] = (30, 55)
PANEL_ALPHA: int = 102  # ~40% opacity

# Colors (not configurable via .env for simplicity)
PANEL_COLOR: Tuple[int, int, int] = (255, 255, 255)
TEXT_COLOR: Tuple[int, int, int] = (165, 42, 42)  # Brown
SKY_TOP_COLOR: Tuple[int, int, int] = (90, 160, 230)
SKY_BOTTOM_COLOR: Tuple[int, int, int] = (190, 225, 250)
OCEAN_COLOR: Tuple[int, int, int] = (20, 90, 160)
WAVE_COLOR: Tuple[int, int, int] = (120, 180, 230)
HULL_COLOR: Tuple[int, int, int] = (120, 70, 30)
SAIL_COLOR: Tuple[int, int, int] = (245, 245, 235)
PLANE_COLOR: Tuple[int, int, int] = (200, 40, 40)
CANOPY_COLOR: Tuple[int, int, int] = (250, 140, 20)
JUMPER_COLOR: Tuple[int, int, int] = (40, 40, 40)

# Game-over overlay (offsets from screen centre)
GAME_OVER_PANEL: Tuple[int, int, int, int] = (-170, -40, 350, 80)
GAME_OVER_TITLE_POS: Tuple[int, int] = (-75, -10)
GAME_OVER_HINT_POS: Tuple[int, int] = (-95, 30)
GAME_OVER_TITLE: str = "GAME OVER!"
GAME_OVER_HINT: str = "(press R to replay)"
