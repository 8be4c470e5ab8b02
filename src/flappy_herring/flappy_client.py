#!/usr/bin/env python3
"""
flappy_client.py

Pygame front end: clock, input and rendering around the GameEngine.
The engine never touches pygame; this module only feeds it flaps and
timestamps and draws the SceneView it hands back.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional

import pygame

from .constants import GameConfig, RENDER_FPS
from .data_models import GameState, SceneView
from .game_engine import GameEngine

logger = logging.getLogger(__name__)

SKY_COLOR = (74, 144, 226)
PIPE_COLOR = (46, 204, 113)
FIREBALL_COLOR = (255, 120, 0)
FIREBALL_CORE_COLOR = (255, 220, 80)
POWERUP_COLOR = (255, 215, 0)
HERRING_COLOR = (170, 190, 210)
HERRING_FIN_COLOR = (90, 110, 140)
GLOW_COLOR = (255, 255, 0)
WHITE = (255, 255, 255)

INVINCIBLE_ALPHA = 178          # ~0.7 opacity


# ----------------- Input (events -> one flap per frame) -----------------

@dataclass(frozen=True)
class FrameInput:
    flap: bool = False
    quit: bool = False


class InputCollector:
    """
    Collapses every keyboard, mouse and touch event of a frame into a
    single flap request. Escape and window close request quit instead.
    """

    FLAP_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)

    def collect(self, events: Iterable[pygame.event.Event]) -> FrameInput:
        flap = False
        quit_requested = False
        for event in events:
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    quit_requested = True
                else:
                    flap = True
            elif event.type in self.FLAP_EVENTS:
                flap = True
        return FrameInput(flap=flap, quit=quit_requested)


# ----------------- Rendering (SceneView -> surface) -----------------

class SceneRenderer:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 28)

    def draw(self, scene: SceneView):
        """Renders one frame. Does not flip the display."""
        self.surface.fill(SKY_COLOR)
        self._draw_pipes(scene)
        self._draw_fireballs(scene)
        self._draw_powerups(scene)
        self._draw_player(scene)
        self._draw_hud(scene)

    def _draw_pipes(self, scene: SceneView):
        for pipe in scene.pipes:
            top, bottom = scene.pipe_openings(pipe)
            if top > 0:
                pygame.draw.rect(self.surface, PIPE_COLOR, (pipe.x, 0, scene.pipe_width, top))
            if bottom < scene.field_height:
                pygame.draw.rect(self.surface, PIPE_COLOR,
                                 (pipe.x, bottom, scene.pipe_width, scene.field_height - bottom))

    def _draw_fireballs(self, scene: SceneView):
        for fireball in scene.fireballs:
            center = (int(fireball.x + fireball.width / 2), int(fireball.y + fireball.height / 2))
            radius = fireball.width // 2
            pygame.draw.circle(self.surface, FIREBALL_COLOR, center, radius)
            pygame.draw.circle(self.surface, FIREBALL_CORE_COLOR, center, max(1, radius // 2))

    def _draw_powerups(self, scene: SceneView):
        for powerup in scene.powerups:
            rect = pygame.Rect(int(powerup.x), int(powerup.y), powerup.width, powerup.height)
            pygame.draw.ellipse(self.surface, POWERUP_COLOR, rect)
            pygame.draw.ellipse(self.surface, WHITE, rect, 2)

    def _draw_player(self, scene: SceneView):
        player = scene.player
        body = pygame.Surface((player.width, player.height), pygame.SRCALPHA)
        # Facing right: tail on the left edge
        pygame.draw.polygon(body, HERRING_FIN_COLOR, [
            (player.width // 3, player.height // 2),
            (0, 0),
            (0, player.height - 1),
        ])
        pygame.draw.ellipse(body, HERRING_COLOR,
                            (player.width // 4, 0, player.width - player.width // 4, player.height))
        pygame.draw.circle(body, (20, 20, 20), (player.width * 4 // 5, player.height // 3), 2)

        # Positive rotation tilts the nose down; pygame rotates counter-clockwise
        rotated = pygame.transform.rotate(body, -player.rotation)
        center = (player.x + player.width / 2, player.y + player.height / 2)

        if player.invincible:
            glow_radius = max(player.width, player.height) // 2 + 8
            glow = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(glow, GLOW_COLOR + (90,), (glow_radius, glow_radius), glow_radius)
            self.surface.blit(glow, glow.get_rect(center=center))
            rotated.set_alpha(INVINCIBLE_ALPHA)

        self.surface.blit(rotated, rotated.get_rect(center=center))

    def _draw_centered(self, text: str, font: pygame.font.Font, y: float, color=WHITE):
        surf = font.render(text, True, color)
        self.surface.blit(surf, (self.surface.get_width() // 2 - surf.get_width() // 2, y))

    def _draw_hud(self, scene: SceneView):
        score_text = self.large_font.render(f"Score: {scene.score}", True, WHITE)
        self.surface.blit(score_text, (10, 10))

        middle = scene.field_height // 2
        if scene.state is GameState.NOT_STARTED:
            self._draw_centered("Press SPACE or Click to Start", self.large_font, middle - 20)
        elif scene.state is GameState.GAME_OVER:
            self._draw_centered("Game Over!", self.large_font, middle - 20)
            self._draw_centered("Click or press SPACE to restart", self.font, middle + 20)


# ----------------- Game Client (clock / loop) -----------------

class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = (config or GameConfig()).validate()
        pygame.init()
        self.screen = pygame.display.set_mode((self.config.field_width, self.config.field_height))
        pygame.display.set_caption("Flappy Herring")

        self.clock = pygame.time.Clock()
        self.inputs = InputCollector()
        self.renderer = SceneRenderer(self.screen)
        self.engine = GameEngine(
            config=self.config,
            rng=random.Random(seed),
            now_ms=pygame.time.get_ticks(),
        )

    def run(self):
        """The main client execution loop."""
        running = True
        try:
            while running:
                self.clock.tick(RENDER_FPS)

                frame = self.inputs.collect(pygame.event.get())
                if frame.quit:
                    running = False
                    continue

                self.engine.tick(frame.flap, pygame.time.get_ticks())
                self.renderer.draw(self.engine.snapshot())
                pygame.display.flip()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            logger.info("Exiting with score %d", self.engine.score)
            pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig()
    logger.debug("Config: %s", config.as_dict())
    print("Flappy Herring: SPACE / Click / Tap = Flap | Esc = Quit")

    client = FlappyClient(config)
    client.run()


if __name__ == "__main__":
    main()
