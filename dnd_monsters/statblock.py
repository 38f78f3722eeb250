"""Text rendering of a monster type's stat block."""

from __future__ import annotations

from collections.abc import Iterable

from .monsters import MonsterAction, MonsterType


def ability_modifier(score: int) -> int:
    """Return the modifier for an ability score, rounding down."""
    return (score - 10) // 2


def format_signed(value: int) -> str:
    """Format a number with an explicit sign, such as ``+2`` or ``-1``."""
    return f"+{value}" if value >= 0 else str(value)


def format_attribute(score: int) -> str:
    """Format a score with its modifier, such as ``14 (+2)``."""
    return f"{score} ({format_signed(ability_modifier(score))})"


def format_action(action: MonsterAction) -> str:
    """Describe one attack on a single line."""
    return (
        f"{action.name} {format_signed(action.to_hit_modifier)} to hit, "
        f"{action.damage_dice} {format_signed(action.damage_modifier)} "
        f"{action.damage_type}"
    )


def format_actions(actions: Iterable[MonsterAction]) -> str:
    """Describe several attacks, one per line."""
    return "\n".join(format_action(action) for action in actions)


def render_stat_block(monster_type: MonsterType) -> str:
    """Render the whole stat block of a monster type."""
    cells = [
        f"{label} {format_attribute(score)}"
        for label, score in monster_type.attributes.scores().items()
    ]
    lines = [
        f"{monster_type.name} Stat Block",
        f"Name: {monster_type.name}",
        f"HP: {monster_type.hp_dice}",
        f"AC: {monster_type.base_ac} ±1",
        "",
        "Attributes:",
        "  ".join(cells[:3]),
        "  ".join(cells[3:]),
        "",
        "Actions:",
    ]
    actions = format_actions(monster_type.actions)
    if actions:
        lines.append(actions)
    return "\n".join(lines)