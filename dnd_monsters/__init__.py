"""Encounter tracker for tabletop role-playing monsters: types, dice, stat blocks and a text session."""

__version__ = "0.1.0"
__all__ = ["monsters", "instance", "statblock", "flow", "tracker", "app"]