"""Monster types known to the tracker and the catalogue that creates them."""

from __future__ import annotations

from dataclasses import astuple, dataclass

ABILITIES = ("STR", "DEX", "CON", "INT", "WIS", "CHA")


class UnknownMonsterTypeError(ValueError):
    """Raised when a monster type name is not in the catalogue."""


@dataclass(frozen=True)
class MonsterAction:
    """An attack a monster can make."""

    name: str
    to_hit_modifier: int
    damage_dice: str
    damage_modifier: int
    damage_type: str


@dataclass(frozen=True)
class Attributes:
    """The six ability scores of a creature."""

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    def scores(self) -> dict[str, int]:
        """Return the scores keyed by their short labels, in standard order."""
        return dict(zip(ABILITIES, astuple(self)))


@dataclass(frozen=True)
class MonsterType:
    """The fixed description of a kind of monster."""

    name: str
    hp_dice: str
    base_ac: int
    attributes: Attributes
    actions: tuple[MonsterAction, ...]


GOBLIN = MonsterType(
    name="Goblin",
    hp_dice="2d6",
    base_ac=15,
    attributes=Attributes(8, 14, 10, 10, 8, 8),
    actions=(
        MonsterAction("Scimitar", 4, "1d6", 2, "slashing"),
        MonsterAction("Shortbow", 4, "1d6", 2, "piercing"),
    ),
)

ORC = MonsterType(
    name="Orc",
    hp_dice="2d8 + 6",
    base_ac=13,
    attributes=Attributes(16, 12, 16, 7, 11, 10),
    actions=(
        MonsterAction("Greataxe", 5, "1d12", 3, "slashing"),
        MonsterAction("Javelin", 5, "1d6", 3, "piercing"),
    ),
)

_CATALOGUE: dict[str, MonsterType] = {t.name: t for t in (GOBLIN, ORC)}


def create_monster_type(name: str) -> MonsterType:
    """Return the monster type with the given exact name."""
    try:
        return _CATALOGUE[name]
    except KeyError:
        raise UnknownMonsterTypeError(f"unknown monster type: {name!r}") from None


def monster_type_names() -> tuple[str, ...]:
    """Return the names of all known monster types, in catalogue order."""
    return tuple(_CATALOGUE)