#!/usr/bin/env python3
"""
Parachute Drop - Standalone entry point.

Catch the parachutists with the boat before they hit the ocean.

Usage:
    python main.py
    python main.py --width 1024 --height 480
    python main.py --no-vsync --log-level DEBUG
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from skydrop.graphics import RenderSurfaceUnavailable
from skydrop.logging import configure_logging, get_logger
from games.ParachuteDrop.session import GameSession
from games.ParachuteDrop.config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    INITIAL_LIVES,
    VSYNC,
    ASSETS_DIR,
)

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parachute Drop Game")
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--lives', type=int, default=INITIAL_LIVES, help='Lives per round')
    parser.add_argument('--no-vsync', action='store_true', help='Pace frames with a timer instead of vsync')
    parser.add_argument('--assets-dir', type=Path, default=ASSETS_DIR, help='Directory with image files')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'OFF'],
                        help='Default log level')
    return parser


def main(argv=None) -> int:
    """Run Parachute Drop."""
    args = build_parser().parse_args(argv)
    if args.lives <= 0:
        build_parser().error('--lives must be positive')

    if args.log_level:
        configure_logging(level=args.log_level)

    session = GameSession(
        width=args.width,
        height=args.height,
        lives=args.lives,
        vsync=VSYNC and not args.no_vsync,
        assets_dir=args.assets_dir,
    )

    print("=" * 50)
    print("PARACHUTE DROP")
    print("=" * 50)
    print("\nCatch the parachutists before they hit the water!")
    print("\nControls:")
    print("  - LEFT/RIGHT or A/D to move the boat")
    print("  - R to restart after game over")
    print("  - ESC to quit")
    print("=" * 50)

    try:
        return asyncio.run(session.run())
    except RenderSurfaceUnavailable as exc:
        log.error("Cannot start game: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
