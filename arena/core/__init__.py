"""
Core module for the arena.

Contains constants, logging setup, console helpers, random sources and the
roster content loader shared by the rest of the package.
"""
