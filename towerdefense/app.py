"""Window, event loop and frame timing for the game."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Optional

import pygame

from towerdefense.game import Game, InputState
from towerdefense.geometry import Vec2
from towerdefense.render import Renderer

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
TARGET_FPS = 60
WINDOW_TITLE = "Tower Defense"

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3


def input_from_events(
    events: Iterable[pygame.event.Event],
    mouse_pos: Sequence[float],
    left_down: bool,
) -> InputState:
    """Collect one frame's key and mouse presses into an :class:`InputState`."""
    left_pressed = right_pressed = space_pressed = escape_pressed = False
    for event in events:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                space_pressed = True
            elif event.key == pygame.K_ESCAPE:
                escape_pressed = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == _LEFT_BUTTON:
                left_pressed = True
            elif event.button == _RIGHT_BUTTON:
                right_pressed = True
    return InputState(
        mouse_pos=Vec2(float(mouse_pos[0]), float(mouse_pos[1])),
        left_pressed=left_pressed,
        left_down=left_down,
        right_pressed=right_pressed,
        space_pressed=space_pressed,
        escape_pressed=escape_pressed,
    )


def _should_close(events: Iterable[pygame.event.Event]) -> bool:
    return any(
        event.type == pygame.QUIT
        or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
        for event in events
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="towerdefense", description="Play tower defense.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        game = Game(SCREEN_WIDTH, SCREEN_HEIGHT)
        renderer = Renderer(screen)

        while True:
            delta_time = clock.tick(TARGET_FPS) / 1000.0
            events = pygame.event.get()
            if _should_close(events):
                break
            inp = input_from_events(
                events, pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0]
            )
            game.process_input(inp)
            game.update(delta_time, inp)
            renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0