"""Turn-based fights between the monk and an enemy."""

from __future__ import annotations

from .actions import AttackAction, GuardAction, _parse_int
from .characters import Character, Monk

COMBAT_PROMPT = "\n1. Attack\n2. Guard\nChoose: "

_ATTACK = AttackAction()
_GUARD = GuardAction()


def fight(monk: Monk, enemy: Character, rng, console) -> bool:
    """Fight until one side falls; return True if the monk survives."""
    while monk.is_alive() and enemy.is_alive():
        choice = _parse_int(console.ask(COMBAT_PROMPT))
        if choice == 1:
            _ATTACK.execute(monk, enemy, rng, console)
        elif choice == 2:
            _GUARD.execute(monk, enemy, rng, console)
        else:
            console.say("Invalid input")
            continue

        # The enemy always takes its turn, even after a fatal blow.
        enemy_move = _ATTACK if rng.randrange(2) == 1 else _GUARD
        enemy_move.execute(enemy, monk, rng, console)

        console.say(f"Monk HP: {monk.health} | Enemy HP: {enemy.health}")

    if monk.is_alive():
        console.say("Enemy defeated!")
    else:
        console.say("You died.")
    return monk.is_alive()