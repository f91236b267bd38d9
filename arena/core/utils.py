"""
Utilities module for the arena.

Provides console printing helpers with rich formatting.
"""

from typing import Any

from rich.console import Console

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def get_console() -> Console:
    """Returns the shared rich console."""
    return _console


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the console rule method.
        **kwargs: Keyword arguments to pass to the console rule method.

    """
    _console.rule(*args, **kwargs)


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual health bar representation.

    Health has no upper clamp, so the bar saturates when current exceeds
    maximum.

    Args:
        current (int): The current value.
        maximum (int): The reference maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted bar string.

    """
    if maximum <= 0:
        filled = 0
    else:
        filled = min(length, int((current / maximum) * length))
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
