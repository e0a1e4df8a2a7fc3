"""Monochrome 128x64 frame buffer laid out in 8-pixel pages, as on the game's LCD."""

from __future__ import annotations

from collections.abc import Sequence

WIDTH = 128
HEIGHT = 64
PAGE_HEIGHT = 8
BUFFER_SIZE = WIDTH * HEIGHT // PAGE_HEIGHT

# Columns of the banana glyph; the least significant bit is the top row.
BANANA = (0x6, 0xF, 0x9, 0x0)
BANANA_WIDTH = 3


def format_number(value: int) -> str:
    """Format an integer keeping at most its five lowest digits, with a leading '-'."""
    digits = str(abs(value))[-5:]
    return f"-{digits}" if value < 0 else digits


class Screen:
    """Shadow memory of the display.

    Byte ``page * WIDTH + x`` holds the eight pixels of column ``x`` in that
    page; the least significant bit is the top pixel row of the page.
    """

    def __init__(self) -> None:
        self.buffer = bytearray(BUFFER_SIZE)

    def clear(self) -> None:
        """Blank every pixel."""
        self.buffer[:] = bytes(BUFFER_SIZE)

    @staticmethod
    def _in_bounds(x: int, y: int) -> bool:
        return 0 <= x < WIDTH and 0 <= y < HEIGHT

    def set_pixel(self, x: int, y: int) -> None:
        """Light one pixel; coordinates off the screen are ignored."""
        if self._in_bounds(x, y):
            self.buffer[(y // PAGE_HEIGHT) * WIDTH + x] |= 1 << (y % PAGE_HEIGHT)

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit; pixels off the screen are unlit."""
        if not self._in_bounds(x, y):
            return False
        byte = self.buffer[(y // PAGE_HEIGHT) * WIDTH + x]
        return bool((byte >> (y % PAGE_HEIGHT)) & 1)

    def draw_sprite(self, x: int, y: int, sprite: Sequence[int]) -> None:
        """Draw an 8-pixel-wide sprite given as rows, most significant bit leftmost."""
        for row, bits in enumerate(sprite):
            for col in range(8):
                if bits & (0x80 >> col):
                    self.set_pixel(x + col, y + row)

    def draw_explosion(self, x: int, y: int) -> None:
        """Fill the 5x5 square centred on (x, y), clipped to the screen."""
        for dx in range(-2, 3):
            for dy in range(-2, 3):
                self.set_pixel(x + dx, y + dy)

    def draw_banana(self, x: int, y: int) -> bool:
        """Draw the banana with its top-left corner at (x, y).

        Returns True if it overlaps lit pixels, in which case nothing is drawn.
        """
        if x < -4 or x > WIDTH + 3 or y < -4 or y > HEIGHT + 3:
            return False
        page, shift = y >> 3, y & 7
        base = page * WIDTH + x
        cells: list[tuple[int, int]] = []
        for k, column in enumerate(BANANA[:BANANA_WIDTH]):
            if not 0 <= x + k < WIDTH:
                continue
            mask = column << shift
            if 0 <= y < HEIGHT:
                cells.append((base + k, mask & 0xFF))
            if -PAGE_HEIGHT < y < HEIGHT - PAGE_HEIGHT:
                cells.append((base + k + WIDTH, mask >> 8))
        if any(self.buffer[index] & mask for index, mask in cells):
            return True
        for index, mask in cells:
            self.buffer[index] |= mask
        return False

    def blank_area(self, x: int, y: int, width: int) -> None:
        """Zero ``width`` bytes starting at column ``x`` of the page holding row ``y``."""
        start = (y // PAGE_HEIGHT) * WIDTH + x
        end = min(start + width, BUFFER_SIZE)
        if start < end:
            self.buffer[start:end] = bytes(end - start)

    def render(self) -> str:
        """Return the screen as text: one line per row, '#' lit and '.' dark."""
        return "\n".join(
            "".join("#" if self.get_pixel(x, y) else "." for x in range(WIDTH))
            for y in range(HEIGHT)
        )