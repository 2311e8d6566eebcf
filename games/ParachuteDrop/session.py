"""
Parachute Drop session lifecycle.

A GameSession owns the window, the layers and the asset catalog for the
whole run. Each play-through is a GameRound: a fresh score, catcher,
pool, spawner and frame loop wired together over the shared layers.
Pressing R after game over throws the round away and builds a new one.
"""
import asyncio
import random
from pathlib import Path
from typing import List, Optional, Tuple

import pygame

from models import CatchZone
from skydrop.assets import AssetCatalog
from skydrop.games import GameState
from skydrop.games.input import InputManager
from skydrop.games.input.sources import KeyboardInputSource
from skydrop.graphics import LayerStack, open_display
from skydrop.logging import get_logger, create_sink, register_sink, close_all_sinks
from skydrop.scheduling import (
    AsyncioFrameScheduler,
    AsyncioIntervalTimer,
    FrameScheduler,
    IntervalTimer,
    PeriodicTask,
)
from games.ParachuteDrop import artwork
from games.ParachuteDrop.catcher import Catcher
from games.ParachuteDrop.context import SessionContext
from games.ParachuteDrop.entity import Backdrop, Body, Renderable, SpriteView
from games.ParachuteDrop.falling import FallingEntity
from games.ParachuteDrop.game_loop import GameLoop
from games.ParachuteDrop.pool import EntityPool
from games.ParachuteDrop.scenery import GameOverOverlay
from games.ParachuteDrop.score import ScoreState, StatsOverlay
from games.ParachuteDrop.spawner import Spawner
from games.ParachuteDrop.config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FPS,
    VSYNC,
    ASSETS_DIR,
    OCEAN_HEIGHT,
    OCEAN_LEVEL,
    INITIAL_LIVES,
    CATCHER_STEP,
    CATCH_ZONE_OFFSET,
    CATCH_ZONE_BAND,
    FALL_SPEED,
    SWEEP_SPEED,
    INPUT_POLL_MS,
    STATS_FONT_SIZE,
)

log = get_logger('session')

# Back to front
BACKGROUND_LAYER = 'background'
OCEAN_LAYER = 'ocean'
SPAWNER_LAYER = 'spawner'
CATCHER_LAYER = 'catcher'
FALLING_LAYER = 'falling'
STATS_LAYER = 'stats'
LAYER_NAMES = (
    BACKGROUND_LAYER,
    OCEAN_LAYER,
    SPAWNER_LAYER,
    CATCHER_LAYER,
    FALLING_LAYER,
    STATS_LAYER,
)
ROUND_LAYERS = (SPAWNER_LAYER, CATCHER_LAYER, FALLING_LAYER, STATS_LAYER)

CAPTION = "Parachute Drop"


def resolve_ocean_level(screen_height: float, ocean_level: Optional[float] = OCEAN_LEVEL) -> float:
    """Miss boundary: the configured level, or the top of the drawn ocean."""
    if ocean_level is not None:
        return ocean_level
    return screen_height - OCEAN_HEIGHT


class GameRound:
    """
    One play-through, from full lives to game over.

    Args:
        layers: Layers to draw on (round layers should be clear)
        catalog: Loaded asset catalog
        frames: Frame scheduler for the game loop
        timer: Timer for the spawner
        lives: Starting lives
        ocean_level: Miss boundary for falling entities (default: top of
            the ocean for the layer height)
        rng: Random source for spawn delays
    """

    def __init__(
        self,
        layers: LayerStack,
        catalog: AssetCatalog,
        frames: FrameScheduler,
        timer: IntervalTimer,
        lives: int = INITIAL_LIVES,
        ocean_level: Optional[float] = OCEAN_LEVEL,
        rng: Optional[random.Random] = None,
    ):
        width, height = layers.size
        ocean_level = resolve_ocean_level(height, ocean_level)
        self.ocean_level = ocean_level
        self.score = ScoreState(lives)

        boat_size = catalog.size(artwork.BOAT)
        zone = CatchZone(offset=CATCH_ZONE_OFFSET, band=CATCH_ZONE_BAND)
        self.catcher = Catcher(
            Body((width - boat_size.width) / 2, ocean_level - zone.offset, boat_size),
            SpriteView(layers[CATCHER_LAYER], catalog.image(artwork.BOAT)),
            canvas_width=width,
            step=CATCHER_STEP,
            catch_zone=zone,
            score=self.score,
        )
        self.context = SessionContext(score=self.score, catcher=self.catcher)

        parachutist_size = catalog.size(artwork.PARACHUTIST)
        parachutist_view = SpriteView(layers[FALLING_LAYER], catalog.image(artwork.PARACHUTIST))

        def make_entity(x: float, y: float, speed: float) -> FallingEntity:
            return FallingEntity(
                x, y, speed, parachutist_size, parachutist_view, self.context, ocean_level,
            )

        self.pool = EntityPool(make_entity, layers[FALLING_LAYER])
        self.spawner = Spawner(
            Body(width, 0, catalog.size(artwork.AIRPLANE)),
            SpriteView(layers[SPAWNER_LAYER], catalog.image(artwork.AIRPLANE)),
            canvas_width=width,
            falling_width=parachutist_size.width,
            pool=self.pool,
            score=self.score,
            timer=timer,
            sweep_speed=SWEEP_SPEED,
            fall_speed=FALL_SPEED,
            rng=rng,
        )
        self.stats = StatsOverlay(layers[STATS_LAYER], self.score)
        self.game_over = GameOverOverlay(layers[STATS_LAYER])
        self.loop = GameLoop(frames, self.pool, self.spawner, self.score, self.game_over.render)

    @property
    def state(self) -> GameState:
        return self.loop.state

    def start(self) -> None:
        self.catcher.render()
        self.stats.render()
        self.spawner.start()
        self.loop.start()

    def cancel(self) -> None:
        self.spawner.stop()
        self.loop.cancel()


class GameSession:
    """
    Window, assets and input for a run of Parachute Drop.

    Args:
        width: Screen width in pixels
        height: Screen height in pixels
        lives: Starting lives per round
        vsync: Try a vsync-paced display
        assets_dir: Directory with image files (missing ones are drawn)
        fps: Frame rate when vsync is unavailable
        rng: Random source for spawn delays
    """

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        lives: int = INITIAL_LIVES,
        vsync: bool = VSYNC,
        assets_dir: Path = ASSETS_DIR,
        fps: int = FPS,
        rng: Optional[random.Random] = None,
    ):
        self.size: Tuple[int, int] = (width, height)
        self.ocean_level = resolve_ocean_level(height)
        self.lives = lives
        self.vsync = vsync
        self.assets_dir = assets_dir
        self.fps = fps
        self.rng = rng or random.Random()

        self.screen: Optional[pygame.Surface] = None
        self.layers: Optional[LayerStack] = None
        self.catalog: Optional[AssetCatalog] = None
        self.round: Optional[GameRound] = None
        self.rounds_played = 0

        self._frames: Optional[FrameScheduler] = None
        self._timer: Optional[IntervalTimer] = None
        self._input = InputManager(KeyboardInputSource())
        self._input_task: Optional[PeriodicTask] = None
        self._done: Optional[asyncio.Future] = None

    async def run(self) -> int:
        """
        Play until the window is closed.

        Returns:
            Process exit status

        Raises:
            RenderSurfaceUnavailable: If no window can be opened
        """
        self.screen, vsync = open_display(self.size, CAPTION, self.vsync)
        try:
            register_sink('session', create_sink('session'))
            pygame.font.init()
            font = pygame.font.Font(None, STATS_FONT_SIZE)
            self.layers = LayerStack(self.size, LAYER_NAMES, font)

            self.catalog = artwork.create_catalog(self.assets_dir, self.size)
            await self.catalog.load_all()

            self._draw_scenery()

            self._frames = AsyncioFrameScheduler(self._present, vsync=vsync, fps=self.fps)
            self._timer = AsyncioIntervalTimer()
            self._done = asyncio.get_running_loop().create_future()

            self._new_round()
            self._input_task = PeriodicTask(
                'input',
                body=self._pump_input,
                arm=lambda run: self._timer.after(INPUT_POLL_MS, run),
                keep_running=lambda: not self._done.done(),
            )
            self._input_task.start()

            await self._done
        finally:
            self._shutdown()
        return 0

    def quit(self) -> None:
        if self._done is not None and not self._done.done():
            self._done.set_result(None)

    def _draw_scenery(self) -> None:
        scenery: List[Renderable] = [
            Backdrop(
                Body(0, 0, self.catalog.size(artwork.BACKGROUND)),
                SpriteView(self.layers[BACKGROUND_LAYER], self.catalog.image(artwork.BACKGROUND)),
            ),
            Backdrop(
                Body(0, self.ocean_level, self.catalog.size(artwork.OCEAN)),
                SpriteView(self.layers[OCEAN_LAYER], self.catalog.image(artwork.OCEAN)),
            ),
        ]
        for item in scenery:
            item.render()

    def _new_round(self) -> None:
        if self.round is not None:
            self.round.cancel()
        for name in ROUND_LAYERS:
            self.layers[name].clear()

        self.round = GameRound(
            self.layers,
            self.catalog,
            self._frames,
            self._timer,
            lives=self.lives,
            ocean_level=self.ocean_level,
            rng=self.rng,
        )
        self.rounds_played += 1
        log.info("Starting round %d with %d lives", self.rounds_played, self.lives)
        self.round.start()
        self._present()

    def _present(self) -> None:
        self.layers.composite(self.screen)
        pygame.display.flip()

    def _pump_input(self) -> None:
        self._input.update(INPUT_POLL_MS / 1000.0)
        for event in self._input.get_events():
            self.round.catcher.handle_directional_input(event.direction)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.quit()
                elif event.key == pygame.K_r and self.round.state is GameState.GAME_OVER:
                    self._new_round()

    def _shutdown(self) -> None:
        if self._input_task is not None:
            self._input_task.cancel()
        if self.round is not None:
            self.round.cancel()
        close_all_sinks()
        pygame.quit()
