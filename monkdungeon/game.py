"""The game loop: create the monk, build the dungeon and walk it."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .actions import Console, _parse_int
from .characters import Monk
from .dungeon import Dungeon
from .rooms import RoomType


def _ask_name(console) -> str:
    prompt = "Enter Monk name: "
    while True:
        tokens = console.ask(prompt).split()
        if tokens:
            return tokens[0]
        prompt = ""


def _ask_choice(console, count: int) -> int:
    choice = _parse_int(console.ask(""))
    while choice is None or not 0 <= choice < count:
        choice = _parse_int(console.ask("Invalid choice. Try again: "))
    return choice


def play(console=None, rng: Optional[random.Random] = None) -> bool:
    """Play one game; return True if the monk reaches the treasure."""
    console = console if console is not None else Console()
    rng = rng if rng is not None else random.Random()

    name = _ask_name(console)
    description = console.ask("Enter Monk description: ")
    monk = Monk(name, description)

    dungeon = Dungeon()
    dungeon.generate(rng)
    current = dungeon.start_room()

    while monk.is_alive():
        console.say(f"\nYou are in a {current.name} room")
        current.enter(monk, rng, console)

        if not monk.is_alive() or current.room_type is RoomType.TREASURE:
            break

        console.say("== Dungeon Map ==")
        console.say(dungeon.render_map(current))
        console.say("\nConnected rooms:")
        for index, room in enumerate(current.connections):
            suffix = " (visited)" if room.visited else ""
            console.say(f"{index}. {room.name}{suffix}")

        current = current.connections[_ask_choice(console, len(current.connections))]

    if not monk.is_alive():
        console.say("You died. Game Over.")
    return monk.is_alive()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="monkdungeon", description="Guide a monk through a random dungeon."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dungeon and dice")
    args = parser.parse_args(argv)
    try:
        play(Console(), random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())