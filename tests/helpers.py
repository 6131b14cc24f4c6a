from __future__ import annotations

import pygame

from suckabunch.config import Config


def quit_event() -> pygame.event.Event:
    return pygame.event.Event(pygame.QUIT)


def key_down(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYUP, key=key)


class FakeDisplay:
    """Display surface stand-in drawing into an off-screen 32-bit surface."""

    def __init__(self, config: Config, fail_open: Exception | None = None) -> None:
        self.surface = pygame.Surface(config.window_size, 0, 32)
        self.fail_open = fail_open
        self.log: list[str] = []
        self.open_calls = 0
        self.close_calls = 0
        self.frames: list[pygame.Surface] = []

    def open(self) -> pygame.Surface:
        self.open_calls += 1
        self.log.append("open")
        if self.fail_open is not None:
            raise self.fail_open
        return self.surface

    def get_surface(self) -> pygame.Surface:
        return self.surface

    def present(self) -> None:
        self.log.append("present")
        self.frames.append(self.surface.copy())

    def close(self) -> None:
        self.close_calls += 1
        self.log.append("close")


class ScriptedEvents:
    """Event source yielding one scripted list per tick."""

    def __init__(self, ticks: list[list[pygame.event.Event]]) -> None:
        self._ticks = list(ticks)
        self.polls = 0

    def __call__(self) -> list[pygame.event.Event]:
        self.polls += 1
        if not self._ticks:
            raise AssertionError("event script exhausted without a quit request")
        return self._ticks.pop(0)
