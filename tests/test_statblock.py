import pytest

from dnd_monsters.monsters import MonsterAction, create_monster_type
from dnd_monsters.statblock import (
    ability_modifier,
    format_action,
    format_actions,
    format_attribute,
    format_signed,
    render_stat_block,
)


def test_modifier_of_ten_is_zero():
    assert ability_modifier(10) == 0


@pytest.mark.parametrize("score", range(1, 30))
def test_modifier_grows_one_per_two_points(score):
    assert ability_modifier(score + 2) == ability_modifier(score) + 1


def test_modifier_rounds_down_for_odd_low_scores():
    assert ability_modifier(9) == -1


def test_format_signed():
    assert format_signed(4) == "+4"
    assert format_signed(0) == "+0"
    assert format_signed(-3) == "-3"


def test_format_attribute_embeds_modifier():
    for score in (3, 8, 10, 14, 18):
        expected = f"{score} ({format_signed(ability_modifier(score))})"
        assert format_attribute(score) == expected


def test_format_action_from_goblin():
    action = MonsterAction("Scimitar", 4, "1d6", 2, "slashing")
    assert format_action(action) == "Scimitar +4 to hit, 1d6 +2 slashing"


def test_format_action_negative_modifiers():
    action = MonsterAction("Bite", -1, "1d4", -2, "piercing")
    assert format_action(action) == "Bite -1 to hit, 1d4 -2 piercing"


def test_format_actions_one_line_each():
    orc = create_monster_type("Orc")
    lines = format_actions(orc.actions).split("\n")
    assert lines == [format_action(a) for a in orc.actions]


def test_format_actions_empty():
    assert format_actions([]) == ""


def test_render_stat_block_content():
    goblin = create_monster_type("Goblin")
    text = render_stat_block(goblin)
    lines = text.split("\n")
    assert lines[0] == "Goblin Stat Block"
    assert "Name: Goblin" in lines
    assert "HP: 2d6" in lines
    assert "AC: 15 ±1" in lines
    assert f"DEX {format_attribute(14)}" in text
    for action in goblin.actions:
        assert format_action(action) in lines


def test_render_lists_every_ability_once():
    text = render_stat_block(create_monster_type("Orc"))
    for label in ("STR", "DEX", "CON", "INT", "WIS", "CHA"):
        assert text.count(f"{label} ") == 1