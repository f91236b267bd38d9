"""
Combat system module for the arena.

Runs battles between two combatants and coordinates the matches built around
them.
"""
