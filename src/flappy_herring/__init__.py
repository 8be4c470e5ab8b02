"""
Flappy Herring: a frame-driven arcade simulation with a pygame front end.
"""

from .constants import GameConfig
from .data_models import GameState, SceneView
from .game_engine import GameEngine

__all__ = ["GameConfig", "GameEngine", "GameState", "SceneView"]
