"""
physics_core.py: The deterministic per-tick kinematics and collision logic.
"""

from dataclasses import dataclass, field
from typing import Union

from .constants import GameConfig
from .data_models import Player, Pipe, Fireball, Powerup


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class PhysicsCore:
    """
    Shared deterministic physics core used by the game engine.
    Integration is fixed per tick: the caller owns the frame cadence.
    """
    config: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self):
        self.config.validate()

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Calculates new position and velocity after one tick without input."""
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity immediately after a flap."""
        return self.config.flap_strength

    def rotation_for(self, velocity: float) -> float:
        limit = self.config.max_rotation
        return clamp(velocity * self.config.rotation_factor, -limit, limit)

    def step_player(self, player: Player, flap: bool):
        """
        Advances the player by one tick. A flap replaces the gravity
        increment for that tick; it sets the velocity, it never adds to it.
        """
        if flap:
            player.velocity = self.flap()
            player.y += player.velocity
        else:
            player.y, player.velocity = self.apply_gravity_and_movement(
                player.y, player.velocity)

        player.rotation = self.rotation_for(player.velocity)

    # ---------- Collision ----------

    @staticmethod
    def overlaps(player: Player, entity: Union[Fireball, Powerup]) -> bool:
        """Axis-aligned bounding box overlap. Touching edges do not overlap."""
        return (player.x + player.width > entity.x and
                player.x < entity.x + entity.width and
                player.y + player.height > entity.y and
                player.y < entity.y + entity.height)

    def hits_pipe(self, player: Player, pipe: Pipe) -> bool:
        """True when the player shares the pipe's columns but is not inside the gap."""
        if not (player.x + player.width > pipe.x and
                player.x < pipe.x + self.config.pipe_width):
            return False

        half_gap = self.config.pipe_gap / 2
        return player.top < pipe.gap_y - half_gap or player.bottom > pipe.gap_y + half_gap

    def out_of_bounds(self, player: Player) -> bool:
        """Checks the player's vertical extent against the playfield."""
        return player.top < 0 or player.bottom > self.config.field_height
