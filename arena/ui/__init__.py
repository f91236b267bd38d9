"""
User interface module for the arena.

Console rendering of battle events and interactive prompts.
"""
