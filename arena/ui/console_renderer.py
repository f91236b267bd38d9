"""
Console rendering of combat events.

Turns the event stream of a battle into colored text lines on a rich console.
"""

from rich.console import Console
from rich.markup import escape

from arena.core.constants import EventType
from arena.core.utils import get_console
from arena.events.event_system import (
    AttackEvent,
    BattleStartEvent,
    CombatEvent,
    DamageEvent,
    DefeatEvent,
    HealEvent,
    ValidationErrorEvent,
)


def format_event(event: CombatEvent) -> str:
    """
    Formats a combat event as a plain text line.

    Args:
        event (CombatEvent): The event to format.

    Returns:
        str: The text describing the event.

    """
    if isinstance(event, BattleStartEvent):
        return f"Game started: {event.fighter1_name} vs {event.fighter2_name}"
    if isinstance(event, ValidationErrorEvent):
        return event.message
    if isinstance(event, AttackEvent):
        return (
            f"{event.attacker_name} attacks {event.target_name} "
            f"with {event.weapon_name}"
        )
    if isinstance(event, DamageEvent):
        return (
            f"{event.target_name} takes damage {event.amount}. "
            f"Health: {event.remaining_health}"
        )
    if isinstance(event, HealEvent):
        return (
            f"{event.target_name} healed by {event.amount} points. "
            f"Health: {event.new_health}"
        )
    if isinstance(event, DefeatEvent):
        return f"{event.loser_name} has been defeated."
    return str(event)


class ConsoleEventSink:
    """
    Sink printing every event on a rich console.

    Attributes:
        console (Console):
            Where the lines are printed.
        colored (bool):
            Whether lines are colored by event type.

    """

    def __init__(self, console: Console | None = None, colored: bool = True) -> None:
        self.console = console if console is not None else get_console()
        self.colored = colored

    def emit(self, event: CombatEvent) -> None:
        # Names come from rosters, so they must not be read as markup.
        line = escape(format_event(event))
        if self.colored:
            line = event.event_type.colorize(line)
        if event.event_type == EventType.BATTLE_START:
            self.console.rule(line, style="bold green")
        else:
            self.console.print(line, highlight=False)
