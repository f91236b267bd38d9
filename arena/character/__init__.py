"""
Character module for the arena.

Contains the Combatant entity.
"""
