import random

import pytest

from dnd_monsters.monsters import GOBLIN, ORC, UnknownMonsterTypeError
from dnd_monsters.statblock import render_stat_block
from dnd_monsters.tracker import Encounter, TrackedMonster, UnknownStatBlockError


def make_encounter(seed=7):
    return Encounter(random.Random(seed))


def test_damage_reduces_hp():
    monster = TrackedMonster(name="Goblin #1", ac=15, hp=10, max_hp=10)
    assert monster.damage(3) is False
    assert monster.hp == 7
    assert monster.alive


def test_damage_clamps_at_zero_and_reports_death():
    deaths = []
    monster = TrackedMonster(
        name="Orc #1", ac=13, hp=5, max_hp=10, on_death=deaths.append
    )
    assert monster.damage(50) is True
    assert monster.hp == 0
    assert not monster.alive
    assert deaths == [monster]


def test_heal_clamps_at_max():
    monster = TrackedMonster(name="Goblin #1", ac=15, hp=2, max_hp=10)
    assert monster.heal(3) == 5
    assert monster.heal(100) == monster.max_hp


def test_negative_amounts_rejected():
    monster = TrackedMonster(name="Goblin #1", ac=15, hp=2, max_hp=10)
    with pytest.raises(ValueError):
        monster.damage(-1)
    with pytest.raises(ValueError):
        monster.heal(-1)


def test_str_shows_ac_and_hp():
    monster = TrackedMonster(name="Goblin #1", ac=15, hp=4, max_hp=9)
    assert str(monster) == "Goblin #1 | AC: 15 | HP: 4 / 9"


def test_add_monsters_numbers_them_per_type():
    encounter = make_encounter()
    goblins = encounter.add_monsters("Goblin", 2)
    orcs = encounter.add_monsters("Orc", 1)
    assert [m.name for m in goblins] == ["Goblin #1", "Goblin #2"]
    assert [m.name for m in orcs] == ["Orc #1"]
    assert len(encounter) == 3
    assert encounter.total_added == 3


def test_added_monsters_follow_type_ranges():
    encounter = make_encounter()
    for monster in encounter.add_monsters("Goblin", 20):
        assert 2 <= monster.max_hp <= 12
        assert monster.hp == monster.max_hp
        assert GOBLIN.base_ac - 1 <= monster.ac <= GOBLIN.base_ac + 1
    for monster in encounter.add_monsters("Orc", 20):
        assert 8 <= monster.max_hp <= 22
        assert ORC.base_ac - 1 <= monster.ac <= ORC.base_ac + 1


def test_numbering_continues_after_removal():
    encounter = make_encounter()
    (first,) = encounter.add_monsters("Goblin", 1)
    first.damage(first.max_hp)
    assert len(encounter) == 0
    (second,) = encounter.add_monsters("Goblin", 1)
    assert second.name == "Goblin #2"


def test_killed_monster_leaves_encounter():
    encounter = make_encounter()
    monsters = encounter.add_monsters("Orc", 3)
    monsters[1].damage(999)
    assert encounter.monsters == (monsters[0], monsters[2])


def test_remove_unknown_monster_returns_false():
    encounter = make_encounter()
    stranger = TrackedMonster(name="Goblin #1", ac=15, hp=4, max_hp=9)
    assert encounter.remove(stranger) is False


def test_unknown_type_adds_nothing():
    encounter = make_encounter()
    with pytest.raises(UnknownMonsterTypeError):
        encounter.add_monsters("Dragon", 1)
    assert len(encounter) == 0
    assert encounter.used_types() == ()


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        make_encounter().add_monsters("Goblin", -1)


def test_used_types_in_first_added_order():
    encounter = make_encounter()
    encounter.add_monsters("Orc", 1)
    encounter.add_monsters("Goblin", 1)
    encounter.add_monsters("Orc", 1)
    assert encounter.used_types() == ("Orc", "Goblin")


def test_stat_block_matches_rendering():
    encounter = make_encounter()
    encounter.add_monsters("Goblin", 1)
    assert encounter.stat_block("Goblin") == render_stat_block(GOBLIN)


def test_stat_block_for_unused_type_raises():
    encounter = make_encounter()
    encounter.add_monsters("Goblin", 1)
    with pytest.raises(UnknownStatBlockError):
        encounter.stat_block("Orc")


def test_same_seed_gives_same_monsters():
    first = [(m.hp, m.ac) for m in make_encounter(3).add_monsters("Orc", 5)]
    second = [(m.hp, m.ac) for m in make_encounter(3).add_monsters("Orc", 5)]
    assert first == second