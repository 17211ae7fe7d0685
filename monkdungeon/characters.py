"""Combatants: the player's monk and the goblins it fights."""

from __future__ import annotations

from dataclasses import dataclass

MONK_HEALTH = 15
MONK_ATTACK = 3
HEALTH_UPGRADE = 5
ATTACK_UPGRADE = 2

GOBLIN_HEALTH = 10
GOBLIN_ATTACK = 2

BOSS_HEALTH = 30
BOSS_ATTACK = 6


@dataclass(eq=False)
class Character:
    """Anything with a name, hit points and an attack value."""

    name: str
    health: int
    attack: int
    max_health: int

    def take_damage(self, dmg: int) -> None:
        """Lose ``dmg`` hit points; health may drop below zero."""
        self.health -= dmg

    def heal(self, amount: int) -> None:
        """Regain hit points, never above the maximum."""
        self.health = min(self.health + amount, self.max_health)

    def is_alive(self) -> bool:
        return self.health > 0


class Monk(Character):
    """The player character."""

    def __init__(self, name: str, description: str = "") -> None:
        super().__init__(name, MONK_HEALTH, MONK_ATTACK, MONK_HEALTH)
        self.description = description

    def increase_health(self) -> None:
        """Raise the maximum health and restore to it."""
        self.max_health += HEALTH_UPGRADE
        self.health = self.max_health

    def increase_attack(self) -> None:
        self.attack += ATTACK_UPGRADE

    def full_heal(self) -> None:
        self.health = self.max_health


class Goblin(Character):
    """The only monster in the dungeon; a stronger one guards the treasure."""

    def __init__(
        self,
        health: int = GOBLIN_HEALTH,
        attack: int = GOBLIN_ATTACK,
        max_health: int = GOBLIN_HEALTH,
    ) -> None:
        super().__init__("Goblin", health, attack, max_health)

    @classmethod
    def boss(cls) -> "Goblin":
        """The goblin that waits in the boss room."""
        return cls(BOSS_HEALTH, BOSS_ATTACK, BOSS_HEALTH)