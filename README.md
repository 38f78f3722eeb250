# dnd-monsters

A small encounter tracker for tabletop role-playing games. Add monsters of a
given type, and each one gets its own rolled hit points and an armour class
that varies by up to one from its type's base. Apply damage and healing to
each monster; a monster that drops to 0 HP is taken off the field. For every
monster type in play you can view a stat block with hit dice, armour class,
ability scores with modifiers, and attack actions.

The built-in monster types are **Goblin** and **Orc**.

## Installation

```
pip install .
```

## Command line

```
dnd-monsters [--seed N]
```

This starts an interactive session that reads one command per line.
`--seed` makes the dice rolls repeatable.

| Command                | What it does                                             |
|------------------------|----------------------------------------------------------|
| `add <type> [count]`   | add 1 to 20 monsters of a type (default 1); the type name is not case-sensitive |
| `list`                 | show the monsters on the field, numbered                 |
| `damage <number> <hp>` | damage the monster with that number by 1 to 999 points   |
| `heal <number> <hp>`   | heal the monster with that number by 1 to 999 points, never above its maximum |
| `stat [type]`          | show the stat block of a type that has been added        |
| `types`                | show the monster types that can be added                 |
| `help`                 | show the list of commands                                |
| `quit` / `exit`        | leave (end of input also ends the session)               |

Monsters are named after their type and numbered on from earlier ones of the
same type, for example `Goblin #1`, `Goblin #2`. The first time a type is
added, its stat block is printed. Bad input is reported as `error: ...` and
the session carries on.

## Library use

```python
import random

from dnd_monsters.monsters import create_monster_type, monster_type_names
from dnd_monsters.instance import MonsterInstance, roll_dice
from dnd_monsters.statblock import render_stat_block
from dnd_monsters.tracker import Encounter

print(monster_type_names())          # ('Goblin', 'Orc')

orc = create_monster_type("Orc")     # UnknownMonsterTypeError for other names
print(render_stat_block(orc))

rng = random.Random(7)
print(roll_dice("2d8 + 6", rng))     # total of two d8 rolls plus 6
instance = MonsterInstance.from_type(orc, rng)

encounter = Encounter(rng)
goblins = encounter.add_monsters("Goblin", 3)   # "Goblin #1" .. "Goblin #3"
goblins[0].damage(4)                 # True if the goblin died and left the field
goblins[0].heal(2)                   # returns the new hit points
print(encounter.used_types())        # ('Goblin',)
print(encounter.stat_block("Goblin"))
```

Dice formulas have the form `NdS`, with an optional `+ M` or `- M` modifier,
for example `2d6` or `2d8 + 6`. A string that does not hold a formula rolls 0.

The `dnd_monsters.statblock` module also offers the pieces of a stat block on
their own: `ability_modifier`, `format_signed`, `format_attribute`,
`format_action` and `format_actions`.

`dnd_monsters.flow.FlowLayout` computes a wrapping left-to-right arrangement
of item sizes (`Size`) within a rectangle (`Rect`): `arrange` gives each
item's geometry, `height_for_width` the height the items need, and
`minimum_size` the largest item plus margins.

## What it does not do

There is no graphical window: the tracker is a text session, and
`FlowLayout` only computes positions without drawing anything. Encounters
are kept in memory only and are not saved between sessions, and the set of
monster types is fixed to the two built in.

## Running the tests

```
pip install .[test]
pytest
```