"""Banana flight: launch velocity, trajectory and collision with the city."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from gorillas.framebuffer import HEIGHT, WIDTH, Screen
from gorillas.world import SPRITE_SIZE, Position, World

GRAVITY = 9.8
WIND_FACTOR = 0.01
TIME_STEP = 0.15
FALL_LIMIT = HEIGHT + 32

# Sine and cosine of whole degrees, scaled by 1000.
SIN_TABLE = (
    0, 17, 35, 52, 70, 87, 105, 122, 139, 156,
    174, 191, 208, 225, 242, 259, 276, 292, 309, 326,
    342, 358, 375, 391, 407, 423, 438, 454, 469, 485,
    500, 515, 530, 545, 559, 574, 588, 602, 616, 629,
    643, 656, 669, 682, 694, 707, 719, 731, 743, 755,
    766, 777, 788, 798, 809, 819, 829, 838, 848, 857,
    866, 874, 883, 891, 899, 906, 914, 921, 927, 934,
    940, 946, 951, 957, 962, 966, 971, 975, 979, 982,
    985, 988, 991, 994, 996, 998, 999, 1000, 1000, 1000,
    1000,
)
COS_TABLE = (
    1000, 1000, 1000, 999, 998, 996, 994, 991, 988, 985,
    982, 979, 975, 971, 966, 962, 957, 951, 946, 940,
    934, 927, 921, 914, 906, 899, 891, 883, 874, 866,
    857, 848, 838, 829, 819, 809, 798, 788, 777, 766,
    755, 743, 731, 719, 707, 694, 682, 669, 656, 643,
    629, 616, 602, 588, 574, 559, 545, 530, 515, 500,
    485, 469, 454, 438, 423, 407, 391, 375, 358, 342,
    326, 309, 292, 276, 259, 242, 225, 208, 191, 174,
    156, 139, 122, 105, 87, 70, 52, 35, 17, 0,
    0,
)


class Outcome(enum.Enum):
    """How a shot ended."""

    MISS = "miss"
    BUILDING = "building"
    GORILLA = "gorilla"


@dataclass(frozen=True)
class ShotResult:
    """The outcome of a shot, where it landed, and how many frames were shown."""

    outcome: Outcome
    point: tuple[int, int] | None = None
    frames: int = 0


def _check_player(player: int) -> None:
    if player not in (1, 2):
        raise ValueError(f"player must be 1 or 2, got {player}")


def launch_velocity(angle: int, speed: int, player: int) -> tuple[float, float]:
    """Return (vx, vy) for a throw; player 2 throws to the left."""
    if not 0 <= angle < len(SIN_TABLE):
        raise ValueError(f"angle must be between 0 and 90, got {angle}")
    _check_player(player)
    vx = speed * COS_TABLE[angle] / 1000.0
    vy = speed * SIN_TABLE[angle] / 1000.0
    return (-vx if player == 2 else vx), vy


def trajectory(
    start: Position, angle: int, speed: int, player: int, wind: int
) -> Iterator[tuple[int, int]]:
    """Yield the banana's pixel position per frame until it leaves the sides or falls far below."""
    vx, vy = launch_velocity(angle, speed, player)
    t = 0.0
    while True:
        t += TIME_STEP
        pos_x = start.x + SPRITE_SIZE / 2 + vx * t + 0.5 * wind * WIND_FACTOR * t * t
        pos_y = start.y - vy * t + 0.5 * GRAVITY * t * t
        x, y = int(pos_x), int(pos_y)
        if not 0 <= x < WIDTH:
            return
        yield x, y
        if y > FALL_LIMIT:
            return


def _inside(gorilla: Position, x: int, y: int) -> bool:
    return gorilla.x <= x < gorilla.x + SPRITE_SIZE and gorilla.y <= y < gorilla.y + SPRITE_SIZE


def simulate_shot(
    world: World,
    screen: Screen,
    player: int,
    angle: int,
    speed: int,
    on_frame: Callable[[Screen], None] | None = None,
) -> ShotResult:
    """Fly a banana through the world, drawing each frame, until it hits or is lost."""
    _check_player(player)
    shooter, target = (
        (world.gorilla1, world.gorilla2) if player == 1 else (world.gorilla2, world.gorilla1)
    )
    frames = 0
    for x, y in trajectory(shooter, angle, speed, player, world.wind):
        world.draw_scene(screen)
        world.draw_wind(screen)
        frames += 1
        if 0 <= y < HEIGHT:
            hit = screen.draw_banana(x, y)
            if on_frame is not None:
                on_frame(screen)
            if hit and _inside(target, x, y):
                return ShotResult(Outcome.GORILLA, (x, y), frames)
            if y >= HEIGHT - world.skyline[x]:
                return ShotResult(Outcome.BUILDING, (x, y), frames)
        elif on_frame is not None:
            on_frame(screen)
    return ShotResult(Outcome.MISS, None, frames)