"""Turn-based play: two gorillas take turns throwing bananas until one is hit."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from gorillas.framebuffer import Screen
from gorillas.physics import Outcome, ShotResult, simulate_shot
from gorillas.sound import Tone, explosion_tone, launch_tone
from gorillas.world import World

MAX_RAW = 255
MAX_SPEED = 100
MAX_ANGLE = 90


def _check_raw(raw: int) -> None:
    if not 0 <= raw <= MAX_RAW:
        raise ValueError(f"raw reading must be between 0 and {MAX_RAW}, got {raw}")


def scale_speed(raw: int) -> int:
    """Scale an 8-bit potentiometer reading to a throw speed of 0-100."""
    _check_raw(raw)
    return raw * MAX_SPEED // MAX_RAW


def scale_angle(raw: int) -> int:
    """Scale an 8-bit potentiometer reading to a throw angle of 0-90 degrees."""
    _check_raw(raw)
    return raw * MAX_ANGLE // MAX_RAW


class Game:
    """One match: a world, a screen, whose turn it is and whether someone has won."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.world = World(rng)
        self.screen = Screen()
        self.current_player = 1
        self.game_over = False
        self.winner: int | None = None
        self.sounds: list[Tone] = []
        self.new_round()

    def new_round(self) -> None:
        """Build a new city, pick a wind and give the first throw to player 1."""
        self.game_over = False
        self.winner = None
        self.current_player = 1
        self.sounds = []
        self.world.randomize_skyline()
        self.world.randomize_wind()
        self.world.place_gorillas()
        self.world.draw_scene(self.screen)
        self.world.draw_wind(self.screen)

    def play_turn(self, angle: int, speed: int) -> ShotResult:
        """Throw a banana for the current player and advance the match."""
        if self.game_over:
            raise RuntimeError("the round is over; start a new one")
        if not 0 <= speed <= MAX_SPEED:
            raise ValueError(f"speed must be between 0 and {MAX_SPEED}, got {speed}")
        if not 0 <= angle <= MAX_ANGLE:
            raise ValueError(f"angle must be between 0 and {MAX_ANGLE}, got {angle}")

        player = self.current_player
        self.sounds = [launch_tone(), launch_tone()]
        result = simulate_shot(self.world, self.screen, player, angle, speed)
        self.sounds.append(explosion_tone())

        if result.point is not None:
            x, y = result.point
            self.screen.draw_explosion(x, y)
            self.world.erode(x, y)

        if result.outcome is Outcome.GORILLA:
            self.game_over = True
            self.winner = player
        else:
            self.current_player = 2 if player == 1 else 1
        return result


def _ask_int(prompt: str, low: int, high: int) -> int | None:
    """Prompt until an integer in range is given; None means the player quit."""
    while True:
        try:
            answer = input(prompt).strip()
        except EOFError:
            return None
        if answer.lower() in ("q", "quit"):
            return None
        try:
            value = int(answer)
        except ValueError:
            print(f"Please enter a whole number from {low} to {high}.")
            continue
        if low <= value <= high:
            return value
        print(f"Please enter a whole number from {low} to {high}.")


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game on the console."""
    parser = argparse.ArgumentParser(prog="gorillas", description="Throw bananas at a gorilla.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the city and wind")
    parser.add_argument("--no-screen", action="store_true", help="do not print the screen")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    print("Ready")
    game = Game(rng)
    while True:
        while not game.game_over:
            if not args.no_screen:
                print(game.screen.render())
            print(f"P{game.current_player}  wind {game.world.wind}")
            angle = _ask_int(f"Angle (0-{MAX_ANGLE}): ", 0, MAX_ANGLE)
            if angle is None:
                return 0
            speed = _ask_int(f"Speed (0-{MAX_SPEED}): ", 0, MAX_SPEED)
            if speed is None:
                return 0
            print("Firing...")
            result = game.play_turn(angle, speed)
            if result.outcome is Outcome.MISS:
                print("Missed.")
            elif result.outcome is Outcome.BUILDING:
                print(f"Hit a building at {result.point}.")
        if not args.no_screen:
            print(game.screen.render())
        print(f"Player {game.winner} Wins!")
        print("Game Over!")
        try:
            again = input("Play again? [y/N]: ").strip().lower()
        except EOFError:
            return 0
        if again not in ("y", "yes"):
            return 0
        game.new_round()