"""
game_engine.py: The authoritative single-player world simulation.
"""

import logging
import random
from dataclasses import dataclass, field, InitVar
from typing import List

from .data_models import (
    GameState, Player, Pipe, Fireball, Powerup, SceneView
)
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    The engine owning the entire game state.
    Inherits core physics and collision from PhysicsCore.

    Time is never read from a global clock: every call that needs "now"
    receives it in milliseconds from the caller.
    """
    rng: random.Random = field(default_factory=random.Random)
    now_ms: InitVar[int] = 0

    state: GameState = field(default=GameState.NOT_STARTED, init=False)
    score: int = field(default=0, init=False)
    player: Player = field(init=False)
    pipes: List[Pipe] = field(default_factory=list, init=False)
    fireballs: List[Fireball] = field(default_factory=list, init=False)
    powerups: List[Powerup] = field(default_factory=list, init=False)

    last_pipe_ms: int = field(default=0, init=False)
    last_fireball_ms: int = field(default=0, init=False)
    last_powerup_ms: int = field(default=0, init=False)

    def __post_init__(self, now_ms: int):
        super().__post_init__()
        self.player = self._new_player()
        self._reset_spawn_timers(now_ms)

    # ---------- Lifecycle ----------

    def _new_player(self) -> Player:
        return Player(
            x=self.config.field_width / 3,
            y=self.config.field_height / 2,
            width=self.config.player_width,
            height=self.config.player_height,
        )

    def _reset_spawn_timers(self, now_ms: int):
        self.last_pipe_ms = now_ms
        self.last_fireball_ms = now_ms
        self.last_powerup_ms = now_ms

    def reset(self, now_ms: int):
        """Starts a fresh round: empty world, centred player, score 0, Playing."""
        self.player = self._new_player()
        self.pipes = []
        self.fireballs = []
        self.powerups = []
        self.score = 0
        self._reset_spawn_timers(now_ms)
        self.state = GameState.PLAYING

    def _game_over(self, reason: str):
        if self.state is GameState.GAME_OVER:
            return
        self.state = GameState.GAME_OVER
        logger.info("Game over (%s). Final score: %d", reason, self.score)

    # ---------- Spawning ----------

    @staticmethod
    def _due(now_ms: int, last_ms: int, interval_ms: int) -> bool:
        # A clock running backwards counts as no time elapsed
        return max(0, now_ms - last_ms) > interval_ms

    def _spawn_pipe(self):
        """Generates a new pipe at the right edge of the field."""
        cfg = self.config
        band = cfg.field_height - cfg.pipe_gap - 2 * cfg.pipe_margin
        gap_y = self.rng.random() * band + cfg.pipe_margin
        self.pipes.append(Pipe(x=float(cfg.field_width), gap_y=gap_y))
        logger.debug("Spawned pipe with gap at %.1f", gap_y)

    def _spawn_fireball(self):
        cfg = self.config
        y = self.rng.random() * (cfg.field_height - cfg.fireball_size)
        self.fireballs.append(Fireball(
            x=float(cfg.field_width), y=y,
            width=cfg.fireball_size, height=cfg.fireball_size))
        logger.debug("Spawned fireball at y=%.1f", y)

    def _spawn_powerup(self):
        cfg = self.config
        y = self.rng.random() * (cfg.field_height - cfg.powerup_size)
        self.powerups.append(Powerup(
            x=float(cfg.field_width), y=y,
            width=cfg.powerup_size, height=cfg.powerup_size))
        logger.debug("Spawned powerup at y=%.1f", y)

    def _spawn_entities(self, now_ms: int):
        cfg = self.config
        if self._due(now_ms, self.last_pipe_ms, cfg.pipe_spawn_interval_ms):
            self._spawn_pipe()
            self.last_pipe_ms = now_ms

        if self._due(now_ms, self.last_fireball_ms, cfg.fireball_spawn_interval_ms):
            self._spawn_fireball()
            self.last_fireball_ms = now_ms

        if self._due(now_ms, self.last_powerup_ms, cfg.powerup_spawn_interval_ms):
            self._spawn_powerup()
            self.last_powerup_ms = now_ms

    # ---------- Per-kind updates ----------

    def _step_pipes(self):
        player = self.player
        for pipe in self.pipes:
            pipe.x -= self.config.pipe_speed

            # Scores on the pipe's leading edge, once per pipe
            if not pipe.passed and player.x >= pipe.x:
                pipe.passed = True
                self.score += 1

            if not player.invincible and self.hits_pipe(player, pipe):
                self._game_over("pipe")

        self.pipes = [p for p in self.pipes if p.x >= -self.config.pipe_width]

    def _step_fireballs(self):
        for fireball in self.fireballs:
            fireball.x -= self.config.fireball_speed

            if not self.player.invincible and self.overlaps(self.player, fireball):
                self._game_over("fireball")

        self.fireballs = [f for f in self.fireballs if f.x >= -f.width]

    def _step_powerups(self, now_ms: int):
        remaining = []
        for powerup in self.powerups:
            powerup.x -= self.config.powerup_speed

            if powerup.x < -powerup.width:
                continue

            if not powerup.collected and self.overlaps(self.player, powerup):
                powerup.collected = True
                self._activate_invincibility(now_ms)
                continue

            remaining.append(powerup)
        self.powerups = remaining

    def _activate_invincibility(self, now_ms: int):
        # Overwrites any running expiry with now + duration
        self.player.invincible = True
        self.player.invincible_until = now_ms + self.config.invincibility_duration_ms
        logger.debug("Powerup collected, invincible until %d", self.player.invincible_until)

    def _expire_invincibility(self, now_ms: int):
        if self.player.invincible and now_ms >= self.player.invincible_until:
            self.player.invincible = False
            logger.debug("Invincibility expired at %d", now_ms)

    # ---------- Public API ----------

    def tick(self, flap: bool, now_ms: int):
        """
        Advances the game by one rendered frame.

        NOT_STARTED: a flap starts the round and counts as its first flap.
        GAME_OVER: a flap restarts the round; nothing else happens this tick.
        PLAYING: physics, spawning, collisions, scoring and the boundary check.
        """
        if self.state is GameState.NOT_STARTED:
            if not flap:
                return
            self.state = GameState.PLAYING
            logger.info("Game started")

        elif self.state is GameState.GAME_OVER:
            if flap:
                self.reset(now_ms)
                logger.info("Game restarted")
            return

        # 1. Timed effects
        self._expire_invincibility(now_ms)

        # 2. Player kinematics
        self.step_player(self.player, flap)

        # 3. Spawn and move the world
        self._spawn_entities(now_ms)
        self._step_pipes()
        self._step_fireballs()
        self._step_powerups(now_ms)

        # 4. Leaving the field always ends the round
        if self.out_of_bounds(self.player):
            self._game_over("out of bounds")

    def snapshot(self) -> SceneView:
        """Returns an immutable view of the current frame."""
        return SceneView(
            player=self.player.to_view(),
            pipes=tuple(p.to_view() for p in self.pipes),
            fireballs=tuple(f.to_view() for f in self.fireballs),
            powerups=tuple(p.to_view() for p in self.powerups),
            score=self.score,
            state=self.state,
            field_width=self.config.field_width,
            field_height=self.config.field_height,
            pipe_width=self.config.pipe_width,
            pipe_gap=self.config.pipe_gap,
        )
