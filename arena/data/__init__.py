"""
Default roster data shipped with the arena.
"""
