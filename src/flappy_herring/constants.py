"""
constants.py: Centralized configuration for game settings.
"""

from dataclasses import dataclass, fields

# -------- Game World Config --------
FIELD_WIDTH = 400
FIELD_HEIGHT = 600
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 30

# -------- Physics Config (pixels / tick) --------
# Applied once per frame, not scaled by delta time
GRAVITY = 0.23
FLAP_STRENGTH = -7.0            # Velocity is set to this on flap
ROTATION_FACTOR = 2.0           # Degrees of tilt per unit of velocity
MAX_ROTATION = 25.0             # Degrees

# -------- Pipe Config --------
PIPE_SPEED = 2.0
PIPE_GAP = 150
PIPE_WIDTH = 50
PIPE_MARGIN = 50                # Keeps the gap centre away from the edges
PIPE_SPAWN_INTERVAL_MS = 1500

# -------- Fireball Config --------
FIREBALL_SPEED = 4.0
FIREBALL_SIZE = 30
FIREBALL_SPAWN_INTERVAL_MS = 2000

# -------- Powerup Config --------
POWERUP_SPEED = 2.0
POWERUP_SIZE = 30
POWERUP_SPAWN_INTERVAL_MS = 8000
INVINCIBILITY_DURATION_MS = 5000

# -------- Client Config --------
RENDER_FPS = 60


@dataclass(frozen=True)
class GameConfig:
    """Every tunable option of the simulation. Defaults match the module constants."""
    field_width: int = FIELD_WIDTH
    field_height: int = FIELD_HEIGHT
    player_width: int = PLAYER_WIDTH
    player_height: int = PLAYER_HEIGHT

    gravity: float = GRAVITY
    flap_strength: float = FLAP_STRENGTH
    rotation_factor: float = ROTATION_FACTOR
    max_rotation: float = MAX_ROTATION

    pipe_speed: float = PIPE_SPEED
    pipe_gap: int = PIPE_GAP
    pipe_width: int = PIPE_WIDTH
    pipe_margin: int = PIPE_MARGIN
    pipe_spawn_interval_ms: int = PIPE_SPAWN_INTERVAL_MS

    fireball_speed: float = FIREBALL_SPEED
    fireball_size: int = FIREBALL_SIZE
    fireball_spawn_interval_ms: int = FIREBALL_SPAWN_INTERVAL_MS

    powerup_speed: float = POWERUP_SPEED
    powerup_size: int = POWERUP_SIZE
    powerup_spawn_interval_ms: int = POWERUP_SPAWN_INTERVAL_MS
    invincibility_duration_ms: int = INVINCIBILITY_DURATION_MS

    def validate(self) -> "GameConfig":
        """
        Raises ValueError for a configuration the engine cannot run with.
        Returns self so it can be chained.
        """
        positive = (
            "field_width", "field_height", "player_width", "player_height",
            "pipe_width", "fireball_size", "powerup_size",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")

        non_negative = (
            "gravity", "rotation_factor", "max_rotation", "pipe_gap", "pipe_margin",
            "pipe_speed", "fireball_speed", "powerup_speed",
            "pipe_spawn_interval_ms", "fireball_spawn_interval_ms",
            "powerup_spawn_interval_ms", "invincibility_duration_ms",
        )
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)!r}")

        if self.flap_strength >= 0:
            raise ValueError(f"flap_strength must be negative (upward), got {self.flap_strength!r}")

        # Spawn ranges must never be empty
        if self.field_height - self.pipe_gap - 2 * self.pipe_margin < 0:
            raise ValueError("pipe_gap plus both pipe margins do not fit in field_height")
        if self.fireball_size > self.field_height:
            raise ValueError("fireball_size does not fit in field_height")
        if self.powerup_size > self.field_height:
            raise ValueError("powerup_size does not fit in field_height")
        if self.player_height > self.field_height:
            raise ValueError("player_height does not fit in field_height")

        return self

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
