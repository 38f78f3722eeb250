"""Command-line front end for running an encounter."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .monsters import monster_type_names
from .tracker import Encounter

MAX_COUNT = 20
MAX_AMOUNT = 999

HELP = """\
Commands:
  add <type> [count]      add 1-20 monsters of a type
  list                    show the monsters on the field
  damage <number> <hp>    damage a monster (1-999)
  heal <number> <hp>      heal a monster (1-999)
  stat [type]             show the stat block of an added type
  types                   show the monster types that can be added
  help                    show this text
  quit                    leave"""


def _bounded_int(value: int | str, low: int, high: int, what: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a whole number: {value!r}") from None
    if not low <= number <= high:
        raise ValueError(f"{what} must be between {low} and {high}: {number}")
    return number


def validate_count(value: int | str) -> int:
    """Return the number of monsters to add, which must be 1 to 20."""
    return _bounded_int(value, 1, MAX_COUNT, "count")


def validate_amount(value: int | str) -> int:
    """Return a damage or healing amount, which must be 1 to 999."""
    return _bounded_int(value, 1, MAX_AMOUNT, "amount")


def _resolve_type(name: str) -> str:
    by_lower = {known.lower(): known for known in monster_type_names()}
    return by_lower.get(name.lower(), name)


class MonsterApp:
    """Reads commands line by line and applies them to an encounter."""

    def __init__(
        self,
        encounter: Encounter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = "> ",
    ) -> None:
        self.encounter = encounter if encounter is not None else Encounter()
        self._stdin = stdin
        self._stdout = stdout
        self.prompt = prompt
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "add": self._add,
            "list": self._list,
            "damage": self._damage,
            "heal": self._heal,
            "stat": self._stat,
            "types": self._types,
            "help": self._help,
        }

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def run(self) -> int:
        """Process commands until ``quit`` or end of input; return the exit status."""
        while True:
            self._out.write(self.prompt)
            self._out.flush()
            line = self._in.readline()
            if not line:
                break
            words = line.split()
            if not words:
                continue
            command, *args = words
            command = command.lower()
            if command in ("quit", "exit"):
                break
            handler = self._commands.get(command)
            if handler is None:
                self._say(f"unknown command: {command} (try 'help')")
                continue
            try:
                handler(args)
            except (ValueError, LookupError) as exc:
                self._say(f"error: {exc}")
        return 0

    def _add(self, args: list[str]) -> None:
        if not args or len(args) > 2:
            raise ValueError("usage: add <type> [count]")
        type_name = _resolve_type(args[0])
        count = validate_count(args[1]) if len(args) == 2 else 1
        is_new = type_name not in self.encounter.used_types()
        for monster in self.encounter.add_monsters(type_name, count):
            self._say(f"added {monster}")
        if is_new:
            self._say(self.encounter.stat_block(type_name))

    def _list(self, args: list[str]) -> None:
        monsters = self.encounter.monsters
        if not monsters:
            self._say("No monsters.")
        for number, monster in enumerate(monsters, start=1):
            self._say(f"{number}. {monster}")

    def _pick(self, args: list[str], verb: str):
        if len(args) != 2:
            raise ValueError(f"usage: {verb} <number> <hp>")
        monsters = self.encounter.monsters
        number = _bounded_int(args[0], 1, max(len(monsters), 1), "monster number")
        if not monsters:
            raise LookupError("there are no monsters on the field")
        return monsters[number - 1], validate_amount(args[1])

    def _damage(self, args: list[str]) -> None:
        monster, amount = self._pick(args, "damage")
        if monster.damage(amount):
            self._say(f"{monster.name} dies.")
        else:
            self._say(str(monster))

    def _heal(self, args: list[str]) -> None:
        monster, amount = self._pick(args, "heal")
        monster.heal(amount)
        self._say(str(monster))

    def _stat(self, args: list[str]) -> None:
        used = self.encounter.used_types()
        if not used:
            self._say("No monster types have been added yet.")
            return
        if not args:
            if len(used) == 1:
                self._say(self.encounter.stat_block(used[0]))
            else:
                self._say("Select Monster Type: " + ", ".join(used))
            return
        self._say(self.encounter.stat_block(_resolve_type(args[0])))

    def _types(self, args: list[str]) -> None:
        self._say(", ".join(monster_type_names()))

    def _help(self, args: list[str]) -> None:
        self._say(HELP)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the encounter tracker on standard input and output."""
    parser = argparse.ArgumentParser(description="Track monsters in an encounter.")
    parser.add_argument("--seed", type=int, help="seed for the dice")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    return MonsterApp(Encounter(rng)).run()


if __name__ == "__main__":
    sys.exit(main())