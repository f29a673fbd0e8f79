import pygame
import pytest

from terminal_snake import play
from terminal_snake.errors import TerminalSetupError
from terminal_snake.game import GameConfig


def test_run_stops_when_the_window_is_closed(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])

    score = play.run(GameConfig(scanlines=False))

    assert score == 0


def test_main_exits_on_setup_failure(monkeypatch):
    def failing_run(config):
        raise TerminalSetupError("no display")

    monkeypatch.setattr(play, "run", failing_run)

    with pytest.raises(SystemExit) as excinfo:
        play.main()
    assert excinfo.value.code == 1


def test_main_passes_env_config_to_run(monkeypatch):
    seen = {}

    def fake_run(config):
        seen["config"] = config
        return 0

    monkeypatch.setenv("SNAKE_SLITHERS_PER_SECOND", "9")
    monkeypatch.setattr(play, "run", fake_run)

    play.main()
    assert seen["config"].slithers_per_second == 9


def test_run_closes_the_window_when_setup_fails(monkeypatch):
    closed = []

    def broken_game(*args, **kwargs):
        raise RuntimeError("broken game")

    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(play, "SnakeGame", broken_game)
    monkeypatch.setattr(play.GlyphTerminal, "close", lambda terminal: closed.append(terminal))

    try:
        with pytest.raises(RuntimeError, match="broken game"):
            play.run(GameConfig(scanlines=False))
        assert len(closed) == 1
    finally:
        pygame.quit()


def test_main_exits_on_invalid_env_config(monkeypatch):
    def unexpected_run(config):
        pytest.fail("run should not be reached")

    monkeypatch.setenv("SNAKE_SLITHERS_PER_SECOND", "fast")
    monkeypatch.setattr(play, "run", unexpected_run)

    with pytest.raises(SystemExit) as excinfo:
        play.main()
    assert excinfo.value.code == 1
