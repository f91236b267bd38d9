"""
Items module for the arena.

Weapons and the inventory that owns them.
"""
