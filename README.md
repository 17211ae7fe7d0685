# monkdungeon

A short text adventure for the terminal. You name a monk, give them a
description, and lead them through a freshly generated dungeon of seven
rooms until they either reach the treasure or fall in battle.

## Installing

```
pip install .
```

## Playing

```
monkdungeon
```

To get the same dungeon and the same dice rolls every time, give a seed:

```
monkdungeon --seed 42
```

You are asked for the monk's name (the first word you type is used) and a
description. The game then begins in a starting room that is never the Boss
or Treasure room. After each room you survive, the dungeon map is shown,
with your position marked and visited rooms noted, followed by the rooms
connected to the current one. Pick one of them by its number; anything else
asks you again.

The command exits with status 0 when a game ends, and with status 1 if
input runs out or the game is interrupted with Ctrl-C.

### Rooms

The dungeon always holds one Empty room, three Monster rooms, one Upgrade
room, one Boss room and one Treasure room. Every room is reachable, and the
Boss room is always connected to the Treasure room.

- **Empty**: the monk meditates and heals to full health.
- **Monster**: a goblin (10 HP, 2 attack) attacks.
- **Upgrade**: choose `1` for +5 maximum health and a full heal, or
  anything else for +2 attack.
- **Boss**: a tougher goblin (30 HP, 6 attack) blocks the way.
- **Treasure**: reaching it wins the game.

Rooms can be entered again; a Monster or Boss room brings a fresh goblin
each time.

### Combat

Each turn you choose:

1. **Attack**: a coin flip decides whether you hit for your attack value.
2. **Guard**: a coin flip decides whether you recover 1 HP, up to your
   maximum.

Any other input is rejected and you choose again. After your move the enemy
attacks or guards at random, and both sides' HP is shown. The fight goes on
until one side is at 0 HP or below. The monk starts with 15 HP and 3 attack.

## Using it from Python

`monkdungeon.game.play(console, rng)` runs one game and returns `True` if the
monk reaches the treasure. It takes a console for input and output and a
`random.Random`, so it can be driven by any text stream or a seeded
generator:

```python
import io
import random
from monkdungeon.actions import Console
from monkdungeon.game import play

play(Console(), random.Random(42))                 # the terminal
play(Console(io.StringIO("Ana\nA quiet monk\n1\n"), io.StringIO()))  # scripted
```

`Console(stdin, stdout)` reads lines with `ask(prompt)` (raising `EOFError`
when input ends) and writes lines with `say(text)`; both streams default to
the process's standard streams.

The pieces are available separately too:

- `monkdungeon.characters`: `Character` (`take_damage`, `heal`,
  `is_alive`), `Monk` (`increase_health`, `increase_attack`, `full_heal`)
  and `Goblin`, with `Goblin.boss()` for the boss.
- `monkdungeon.actions`: `AttackAction` and `GuardAction`, each with
  `execute(actor, target, rng, console)`.
- `monkdungeon.combat.fight(monk, enemy, rng, console)` runs a battle and
  returns `True` if the monk survives.
- `monkdungeon.rooms`: `RoomType`, the room classes and
  `create_room(room_type)`; `Room.connect(other)` links two rooms both ways.
- `monkdungeon.dungeon.Dungeon`: `generate(rng)` builds the room graph,
  `start_room()` returns the first room (raising `RuntimeError` before
  generation) and `render_map(current)` returns the map as text.

## What it does not do

There is no saving or loading of games, no score or high-score record, and
no way to change the dungeon's size or its mix of rooms.

## Running the tests

```
pip install .[test]
pytest
```