"""Random generation of the dungeon's room graph."""

from __future__ import annotations

import random
from typing import List, Optional

from .rooms import Room, RoomType, create_room

_LAYOUT = (
    RoomType.EMPTY,
    RoomType.MONSTER,
    RoomType.MONSTER,
    RoomType.UPGRADE,
    RoomType.MONSTER,
    RoomType.BOSS,
    RoomType.TREASURE,
)
_SHUFFLED = 5
_EXTRA_LINKS = 2


class Dungeon:
    """A set of rooms; the boss and treasure rooms always come last."""

    def __init__(self) -> None:
        self.rooms: List[Room] = []

    def generate(self, rng: Optional[random.Random] = None) -> None:
        """Create a fresh, connected set of rooms."""
        rng = rng if rng is not None else random.Random()
        rooms = [create_room(room_type) for room_type in _LAYOUT]

        head = rooms[:_SHUFFLED]
        rng.shuffle(head)
        rooms[:_SHUFFLED] = head

        if rooms[0].room_type in (RoomType.BOSS, RoomType.TREASURE):
            rooms[0], rooms[1] = rooms[1], rooms[0]

        # A random spanning tree keeps every room reachable.
        reached = [0]
        pending = list(range(1, len(rooms)))
        while pending:
            a = reached[rng.randrange(len(reached))]
            b = pending.pop(rng.randrange(len(pending)))
            rooms[a].connect(rooms[b])
            reached.append(b)

        for _ in range(_EXTRA_LINKS):
            a = rng.randrange(_SHUFFLED)
            b = rng.randrange(_SHUFFLED)
            if a != b:
                rooms[a].connect(rooms[b])

        rooms[-2].connect(rooms[-1])
        self.rooms = rooms

    def start_room(self) -> Room:
        if not self.rooms:
            raise RuntimeError("dungeon has not been generated")
        return self.rooms[0]

    def render_map(self, current: Optional[Room]) -> str:
        """List every room, marking the current and visited ones."""
        lines = ["", "=== DUNGEON MAP ==="]
        for index, room in enumerate(self.rooms):
            line = f"  [{index}] {room.name}"
            if room is current:
                line += "  <-- YOU ARE HERE"
            elif room.visited:
                line += "  (visited)"
            lines.append(line)
        lines.append("===================")
        return "\n".join(lines)