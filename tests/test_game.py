import io
import sys

from monkdungeon.game import main, play


class TopRng:
    """Always picks the highest value; optionally reverses shuffles."""

    def __init__(self, reverse=False):
        self.reverse = reverse

    def randrange(self, n):
        return n - 1

    def shuffle(self, seq):
        if self.reverse:
            seq.reverse()


class PromptConsole:
    def __init__(self, name="Kai", description="a quiet monk", combat="1", room_choices=("0",)):
        self.name = name
        self.description = description
        self.combat = combat
        self.room_choices = list(room_choices)
        self.prompts = []
        self.said = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if prompt.startswith("Enter Monk name"):
            return self.name
        if prompt.startswith("Enter Monk description"):
            return self.description
        if "Choose:" in prompt:
            return self.combat
        if prompt.startswith("Upgrade"):
            return "1"
        if not self.room_choices:
            raise EOFError
        return self.room_choices.pop(0)

    def say(self, text):
        self.said.append(text)


def test_walk_straight_to_treasure():
    console = PromptConsole()
    assert play(console, TopRng()) is True
    assert console.said[0] == "\nYou are in a Empty room"
    assert "Empty Room. You meditate and heal." in console.said
    assert "0. Treasure" in console.said
    assert any("<-- YOU ARE HERE" in text for text in console.said)
    assert console.said[-2] == "\nYou are in a Treasure room"
    assert console.said[-1] == "You found the treasure! You win!"


def test_invalid_room_choices_are_retried():
    console = PromptConsole(room_choices=["5", "zz", "-1", "0"])
    assert play(console, TopRng()) is True
    assert console.prompts.count("Invalid choice. Try again: ") == 3


def test_monk_dies_in_first_fight():
    console = PromptConsole(name="Kai Lin", combat="2")
    assert play(console, TopRng(reverse=True)) is False
    assert console.said[0] == "\nYou are in a Monster room"
    assert "Kai recovers 1 HP" in console.said
    assert console.said[-2:] == ["You died.", "You died. Game Over."]
    assert not any("DUNGEON MAP" in text for text in console.said)


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--seed", "4"]) == 1
    assert capsys.readouterr().out.startswith("Enter Monk name: ")