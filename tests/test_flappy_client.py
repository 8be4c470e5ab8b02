import pygame
import pytest

from flappy_herring.constants import GameConfig
from flappy_herring.data_models import GameState, PipeView, EntityView
from flappy_herring.flappy_client import (
    FlappyClient, InputCollector, SceneRenderer, FrameInput,
    SKY_COLOR, PIPE_COLOR,
)
from flappy_herring.game_engine import GameEngine


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click():
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))


def touch():
    return pygame.event.Event(pygame.FINGERDOWN, touch_id=0, finger_id=0, x=0.5, y=0.5)


# ---------- Input ----------

def test_no_events_means_no_flap():
    assert InputCollector().collect([]) == FrameInput(flap=False, quit=False)


@pytest.mark.parametrize("event", [key(pygame.K_SPACE), key(pygame.K_a), click(), touch()])
def test_any_input_source_requests_flap(event):
    assert InputCollector().collect([event]).flap


def test_simultaneous_inputs_collapse_to_one_flap():
    frame = InputCollector().collect([key(pygame.K_SPACE), click(), touch(), key(pygame.K_SPACE)])
    assert frame == FrameInput(flap=True, quit=False)


def test_escape_and_close_request_quit():
    collector = InputCollector()
    assert collector.collect([key(pygame.K_ESCAPE)]) == FrameInput(flap=False, quit=True)
    assert collector.collect([pygame.event.Event(pygame.QUIT)]).quit


def test_collapsed_input_gives_single_impulse():
    engine = GameEngine()
    engine.reset(0)
    frame = InputCollector().collect([key(pygame.K_SPACE), click(), touch()])

    engine.tick(frame.flap, 0)

    assert engine.player.velocity == engine.config.flap_strength


# ---------- Rendering ----------

@pytest.fixture
def surface():
    pygame.font.init()
    config = GameConfig()
    return pygame.Surface((config.field_width, config.field_height))


@pytest.mark.parametrize("state", list(GameState))
def test_renderer_draws_every_state(surface, state):
    engine = GameEngine()
    engine.reset(0)
    engine.state = state
    SceneRenderer(surface).draw(engine.snapshot())

    corner = surface.get_at((surface.get_width() - 1, surface.get_height() - 1))
    assert tuple(corner)[:3] == SKY_COLOR


def test_renderer_draws_pipes_and_entities(surface):
    engine = GameEngine()
    engine.reset(0)
    scene = engine.snapshot()
    scene = type(scene)(
        player=scene.player,
        pipes=(PipeView(x=250.0, gap_y=300.0, passed=False),),
        fireballs=(EntityView(x=20.0, y=500.0, width=30, height=30),),
        powerups=(EntityView(x=320.0, y=20.0, width=30, height=30),),
        score=4,
        state=GameState.PLAYING,
        field_width=scene.field_width,
        field_height=scene.field_height,
        pipe_width=scene.pipe_width,
        pipe_gap=scene.pipe_gap,
    )

    SceneRenderer(surface).draw(scene)

    assert tuple(surface.get_at((260, 100)))[:3] == PIPE_COLOR
    assert tuple(surface.get_at((260, 550)))[:3] == PIPE_COLOR
    assert tuple(surface.get_at((260, 300)))[:3] == SKY_COLOR


def test_renderer_draws_invincible_player(surface):
    engine = GameEngine()
    engine.reset(0)
    engine.player.invincible = True
    engine.player.rotation = 20.0

    SceneRenderer(surface).draw(engine.snapshot())

    center = (int(engine.player.x + engine.player.width / 2),
              int(engine.player.y + engine.player.height / 2))
    assert tuple(surface.get_at(center))[:3] != SKY_COLOR


# ---------- Client loop ----------

def test_client_rejects_invalid_config_before_starting_pygame():
    pygame.quit()

    with pytest.raises(ValueError):
        FlappyClient(GameConfig(pipe_gap=600))

    assert not pygame.get_init()


def test_client_exits_on_quit_event():
    client = FlappyClient(seed=5)
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    client.run()

    assert client.engine.state is GameState.NOT_STARTED
    assert not pygame.get_init()
