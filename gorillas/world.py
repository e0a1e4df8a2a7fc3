"""The city skyline, the wind and the two gorillas."""

from __future__ import annotations

import random
from dataclasses import dataclass

from gorillas.framebuffer import HEIGHT, WIDTH, Screen

SPRITE_SIZE = 8
GORILLA_SPRITE = (0x3C, 0x7E, 0xFF, 0x7E, 0x3C, 0x3C, 0x24, 0x42)
WIND_BAR_X = 100
WIND_BAR_Y = 2
EROSION_DEPTH = 5


@dataclass
class Position:
    """Top-left corner of a sprite."""

    x: int
    y: int


class World:
    """Building heights per column, wind strength and gorilla positions."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.skyline = [0] * WIDTH
        self.wind = 0
        self.gorilla1 = Position(0, 0)
        self.gorilla2 = Position(WIDTH // 2, 0)

    def randomize_skyline(self) -> None:
        """Fill the skyline with buildings 6-9 columns wide and 15-44 pixels tall."""
        x = 0
        while x < WIDTH:
            height = 15 + self.rng.randrange(30)
            width = 6 + self.rng.randrange(4)
            end = min(x + width, WIDTH)
            self.skyline[x:end] = [height] * (end - x)
            x = end

    def randomize_wind(self) -> None:
        """Pick a wind strength from -4 to 4."""
        self.wind = self.rng.randrange(9) - 4

    def place_gorillas(self) -> None:
        """Stand each gorilla on the tallest building of its half of the city."""
        half = WIDTH // 2
        self.gorilla1 = self._on_tallest(0, half)
        self.gorilla2 = self._on_tallest(half, WIDTH)

    def _on_tallest(self, start: int, stop: int) -> Position:
        best_x, best_h = start, 0
        for x in range(start, stop):
            if self.skyline[x] > best_h:
                best_x, best_h = x, self.skyline[x]
        return Position(best_x, HEIGHT - best_h - SPRITE_SIZE)

    def erode(self, x: int, y: int) -> bool:
        """Half the time, lower the roofs around an impact at or below them.

        Returns True if erosion was attempted.
        """
        if self.rng.randrange(2) != 0:
            return False
        for column in range(max(x - 2, 0), min(x + 3, WIDTH)):
            if y >= HEIGHT - self.skyline[column]:
                self.skyline[column] = max(self.skyline[column] - EROSION_DEPTH, 0)
        return True

    def draw_scene(self, screen: Screen) -> None:
        """Clear the screen and draw the buildings and both gorillas."""
        screen.clear()
        for x, height in enumerate(self.skyline):
            for y in range(HEIGHT - height, HEIGHT):
                screen.set_pixel(x, y)
        screen.draw_sprite(self.gorilla1.x, self.gorilla1.y, GORILLA_SPRITE)
        screen.draw_sprite(self.gorilla2.x, self.gorilla2.y, GORILLA_SPRITE)

    def draw_wind(self, screen: Screen) -> None:
        """Draw the wind bar, one pixel per unit, pointing the way the wind blows."""
        step = 1 if self.wind > 0 else -1
        for offset in range(0, self.wind, step):
            screen.set_pixel(WIND_BAR_X + offset, WIND_BAR_Y)