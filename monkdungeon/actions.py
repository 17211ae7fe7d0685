"""Console input/output and the two moves available in a fight."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .characters import Character


class Console:
    """Line-based text console; defaults to the process's stdin and stdout."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line; raise EOFError at end of input."""
        out = self._out
        out.write(prompt)
        out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def say(self, text: str) -> None:
        """Write ``text`` as a line."""
        self._out.write(text + "\n")
        self._out.flush()


def _parse_int(text: str) -> Optional[int]:
    """Read a leading integer token, or None if there is none."""
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _coin(rng) -> bool:
    return rng.randrange(2) == 1


class Action(ABC):
    """A move one character makes against another."""

    @abstractmethod
    def execute(self, actor: Character, target: Character, rng, console) -> None:
        """Carry out the move."""


class AttackAction(Action):
    """Hit the target for the actor's attack value, half of the time."""

    def execute(self, actor: Character, target: Character, rng, console) -> None:
        if _coin(rng):
            target.take_damage(actor.attack)
            console.say(f"{actor.name} hits!")
        else:
            console.say(f"{actor.name} missed!")


class GuardAction(Action):
    """Recover one hit point, half of the time."""

    def execute(self, actor: Character, target: Character, rng, console) -> None:
        if _coin(rng):
            actor.heal(1)
            console.say(f"{actor.name} recovers 1 HP")
        else:
            console.say(f"{actor.name} failed to guard")