"""Individual monsters rolled from a monster type."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

from .monsters import MonsterType

_DICE_PATTERN = re.compile(r"(\d+)[dD](\d+)(?:\s*([+-])\s*(\d+))?")
_default_rng = random.Random()


def roll_dice(dice: str, rng: random.Random | None = None) -> int:
    """Roll a formula such as ``2d8 + 6``; text without a formula rolls 0."""
    rng = rng or _default_rng
    match = _DICE_PATTERN.search(dice.strip())
    if match is None:
        return 0
    rolls, sides, sign, modifier = match.groups()
    bonus = int(modifier) if sign else 0
    if sign == "-":
        bonus = -bonus
    return sum(rng.randint(1, int(sides)) for _ in range(int(rolls))) + bonus


@dataclass
class MonsterInstance:
    """One monster on the field, with its own rolled hit points and armour class."""

    name: str
    hp_dice: str
    hp: int
    max_hp: int
    ac: int

    @classmethod
    def from_type(
        cls, monster_type: MonsterType, rng: random.Random | None = None
    ) -> MonsterInstance:
        """Roll hit points from the type's dice and vary its armour class by one."""
        rng = rng or _default_rng
        hp = roll_dice(monster_type.hp_dice, rng)
        ac = monster_type.base_ac + rng.randint(-1, 1)
        return cls(
            name=monster_type.name,
            hp_dice=monster_type.hp_dice,
            hp=hp,
            max_hp=hp,
            ac=ac,
        )