"""Dungeon rooms and what happens when the monk walks into them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import ClassVar, List

from .actions import _parse_int
from .characters import Goblin, Monk
from .combat import fight


class RoomType(enum.Enum):
    EMPTY = "Empty"
    MONSTER = "Monster"
    UPGRADE = "Upgrade"
    BOSS = "Boss"
    TREASURE = "Treasure"


class Room(ABC):
    """A node of the dungeon graph with undirected links to other rooms."""

    room_type: ClassVar[RoomType]

    def __init__(self) -> None:
        self.visited = False
        self.connections: List[Room] = []

    @property
    def name(self) -> str:
        return self.room_type.value

    def connect(self, other: "Room") -> None:
        """Link both ways; an existing link is left as it is."""
        if any(room is other for room in self.connections):
            return
        self.connections.append(other)
        if not any(room is self for room in other.connections):
            other.connections.append(self)

    @abstractmethod
    def enter(self, monk: Monk, rng, console) -> None:
        """Let the monk into the room."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} visited={self.visited}>"


class EmptyRoom(Room):
    room_type = RoomType.EMPTY

    def enter(self, monk: Monk, rng, console) -> None:
        self.visited = True
        console.say("Empty Room. You meditate and heal.")
        monk.full_heal()


class MonsterRoom(Room):
    room_type = RoomType.MONSTER

    def enter(self, monk: Monk, rng, console) -> None:
        self.visited = True
        console.say("Monster Room! A Goblin appears!")
        fight(monk, Goblin(), rng, console)


class UpgradeRoom(Room):
    room_type = RoomType.UPGRADE

    def enter(self, monk: Monk, rng, console) -> None:
        self.visited = True
        choice = _parse_int(console.ask("Upgrade Room! (1) Health (2) Attack: "))
        if choice == 1:
            monk.increase_health()
        else:
            monk.increase_attack()


class BossRoom(Room):
    room_type = RoomType.BOSS

    def enter(self, monk: Monk, rng, console) -> None:
        self.visited = True
        console.say("Boss Room!")
        fight(monk, Goblin.boss(), rng, console)


class TreasureRoom(Room):
    room_type = RoomType.TREASURE

    def enter(self, monk: Monk, rng, console) -> None:
        self.visited = True
        console.say("You found the treasure! You win!")


_ROOM_CLASSES = {
    RoomType.EMPTY: EmptyRoom,
    RoomType.MONSTER: MonsterRoom,
    RoomType.UPGRADE: UpgradeRoom,
    RoomType.BOSS: BossRoom,
    RoomType.TREASURE: TreasureRoom,
}


def create_room(room_type: RoomType) -> Room:
    """Build a fresh room of the given type."""
    try:
        cls = _ROOM_CLASSES[room_type]
    except (KeyError, TypeError):
        raise ValueError(f"unknown room type: {room_type!r}") from None
    return cls()