import os
import random
from dataclasses import replace

# Must be set before pygame creates a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_herring.constants import GameConfig
from flappy_herring.game_engine import GameEngine

NEVER = 10 ** 9


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def still_config():
    """No gravity and no spawning, for hand-placed scenarios."""
    return replace(
        GameConfig(),
        gravity=0.0,
        pipe_spawn_interval_ms=NEVER,
        fireball_spawn_interval_ms=NEVER,
        powerup_spawn_interval_ms=NEVER,
    )


@pytest.fixture
def engine(config):
    eng = GameEngine(config=config, rng=random.Random(1234))
    eng.reset(0)
    return eng


@pytest.fixture
def still_engine(still_config):
    eng = GameEngine(config=still_config, rng=random.Random(1234))
    eng.reset(0)
    return eng
