"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class GameState(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ---------- Mutable entities (owned by the engine) ----------

@dataclass
class Player:
    """The herring. Exactly one per engine."""
    x: float
    y: float
    width: int
    height: int
    velocity: float = 0.0
    rotation: float = 0.0
    invincible: bool = False
    invincible_until: int = 0          # Expiry timestamp (ms), only meaningful while invincible

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_view(self) -> "PlayerView":
        return PlayerView(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            velocity=self.velocity,
            rotation=self.rotation,
            invincible=self.invincible,
        )


@dataclass
class Pipe:
    """A pipe pair. Only the gap centre is stored; width and gap come from config."""
    x: float
    gap_y: float
    passed: bool = False

    def to_view(self) -> "PipeView":
        return PipeView(x=self.x, gap_y=self.gap_y, passed=self.passed)


@dataclass
class Fireball:
    x: float
    y: float
    width: int
    height: int

    def to_view(self) -> "EntityView":
        return EntityView(x=self.x, y=self.y, width=self.width, height=self.height)


@dataclass
class Powerup:
    x: float
    y: float
    width: int
    height: int
    collected: bool = False

    def to_view(self) -> "EntityView":
        return EntityView(x=self.x, y=self.y, width=self.width, height=self.height)


# ---------- Read-only views (handed to renderers) ----------

@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: int
    height: int
    velocity: float
    rotation: float
    invincible: bool


@dataclass(frozen=True)
class PipeView:
    x: float
    gap_y: float
    passed: bool


@dataclass(frozen=True)
class EntityView:
    x: float
    y: float
    width: int
    height: int


@dataclass(frozen=True)
class SceneView:
    """Everything a renderer needs to draw one frame without touching the engine."""
    player: PlayerView
    pipes: Tuple[PipeView, ...]
    fireballs: Tuple[EntityView, ...]
    powerups: Tuple[EntityView, ...]
    score: int
    state: GameState
    field_width: int
    field_height: int
    pipe_width: int
    pipe_gap: int

    def pipe_openings(self, pipe: PipeView) -> Tuple[float, float]:
        """Returns (top, bottom) of the pipe's gap."""
        half_gap = self.pipe_gap / 2
        return pipe.gap_y - half_gap, pipe.gap_y + half_gap
