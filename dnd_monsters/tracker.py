"""Tracking the hit points of the monsters in an encounter."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .instance import MonsterInstance
from .monsters import create_monster_type
from .statblock import render_stat_block


class UnknownStatBlockError(KeyError):
    """Raised when a stat block is asked for a type with no monsters added."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"amount must not be negative: {amount}")


@dataclass(eq=False)
class TrackedMonster:
    """A monster on the field whose hit points change as it fights."""

    name: str
    ac: int
    hp: int
    max_hp: int
    type_name: str = ""
    on_death: Callable[[TrackedMonster], None] | None = field(
        default=None, repr=False
    )

    def __post_init__(self) -> None:
        self.hp = self._clamped(self.hp)

    @classmethod
    def from_instance(
        cls,
        instance: MonsterInstance,
        type_name: str = "",
        on_death: Callable[[TrackedMonster], None] | None = None,
    ) -> TrackedMonster:
        """Start tracking a rolled monster."""
        return cls(
            name=instance.name,
            ac=instance.ac,
            hp=instance.hp,
            max_hp=instance.max_hp,
            type_name=type_name,
            on_death=on_death,
        )

    def _clamped(self, hp: int) -> int:
        return min(max(hp, 0), self.max_hp)

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def damage(self, amount: int) -> bool:
        """Take damage; return True, after notifying ``on_death``, if the monster dies."""
        _check_amount(amount)
        self.hp = self._clamped(self.hp - amount)
        if self.hp <= 0:
            if self.on_death is not None:
                self.on_death(self)
            return True
        return False

    def heal(self, amount: int) -> int:
        """Regain hit points, never beyond the maximum; return the new total."""
        _check_amount(amount)
        self.hp = self._clamped(self.hp + amount)
        return self.hp

    def __str__(self) -> str:
        return f"{self.name} | AC: {self.ac} | HP: {self.hp} / {self.max_hp}"


class Encounter:
    """The monsters on the field and the stat blocks of their types."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self._counters: dict[str, int] = {}
        self._monsters: list[TrackedMonster] = []
        self._stat_blocks: dict[str, str] = {}
        self.total_added = 0

    @property
    def monsters(self) -> tuple[TrackedMonster, ...]:
        return tuple(self._monsters)

    def __len__(self) -> int:
        return len(self._monsters)

    def __iter__(self) -> Iterator[TrackedMonster]:
        return iter(tuple(self._monsters))

    def add_monsters(self, type_name: str, count: int = 1) -> list[TrackedMonster]:
        """Roll ``count`` monsters of a type, numbered on from earlier ones."""
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        monster_type = create_monster_type(type_name)
        added = []
        for _ in range(count):
            number = self._counters.get(type_name, 0) + 1
            self._counters[type_name] = number
            instance = MonsterInstance.from_type(monster_type, self._rng)
            instance.name = f"{monster_type.name} #{number}"
            monster = TrackedMonster.from_instance(
                instance, monster_type.name, on_death=self.remove
            )
            self._monsters.append(monster)
            added.append(monster)
            self.total_added += 1
        if monster_type.name not in self._stat_blocks:
            self._stat_blocks[monster_type.name] = render_stat_block(monster_type)
        return added

    def remove(self, monster: TrackedMonster) -> bool:
        """Take a monster off the field; return whether it was there."""
        try:
            self._monsters.remove(monster)
        except ValueError:
            return False
        return True

    def used_types(self) -> tuple[str, ...]:
        """Return the names of the types added so far, in the order first added."""
        return tuple(self._stat_blocks)

    def stat_block(self, type_name: str) -> str:
        """Return the rendered stat block of a type that has been added."""
        try:
            return self._stat_blocks[type_name]
        except KeyError:
            raise UnknownStatBlockError(
                f"no monsters of type {type_name!r} have been added"
            ) from None