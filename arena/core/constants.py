"""
Constants and enumerations for the arena.

Defines the heal roll range, the validation message, and the enumerations for
battle states, battle outcomes and combat event types used throughout the
arena.
"""

from enum import Enum, IntEnum

# Inclusive range of the random heal applied to the heal target each round.
HEAL_ROLL_MIN = 1
HEAL_ROLL_MAX = 50

# Message carried by the validation error event.
VALIDATION_ERROR_MESSAGE = "Weapon not equipped. Cannot fight."


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class BattleState(NiceEnum):
    """Defines the states a battle goes through."""

    NOT_STARTED = "NOT_STARTED"
    VALIDATING = "VALIDATING"
    FIGHTING = "FIGHTING"
    FINISHED = "FINISHED"


class BattleOutcome(IntEnum):
    """Terminal result of a battle, valued with its caller-visible code."""

    INVALID = -1
    FIGHTER_TWO_DEFEATED = 0
    FIGHTER_ONE_DEFEATED = 1

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()

    @property
    def color(self) -> str:
        """Returns the color string associated with this outcome."""
        return {
            BattleOutcome.INVALID: "bold yellow",
            BattleOutcome.FIGHTER_TWO_DEFEATED: "bold green",
            BattleOutcome.FIGHTER_ONE_DEFEATED: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return f"[{self.color}]{self.display_name}[/]"


class EventType(NiceEnum):
    """Enumeration of the combat events emitted during a battle."""

    BATTLE_START = "battle_start"  # Before readiness is validated
    VALIDATION_ERROR = "validation_error"  # When a fighter has no weapon
    ATTACK = "attack"  # When a combatant attacks with its weapon
    DAMAGE = "damage"  # When a combatant takes damage
    HEAL = "heal"  # When a living combatant is healed
    DEFEAT = "defeat"  # When the battle ends with a death

    @property
    def color(self) -> str:
        """Returns the color string associated with this event type."""
        return {
            EventType.BATTLE_START: "bold green",
            EventType.VALIDATION_ERROR: "bold yellow",
            EventType.ATTACK: "bold blue",
            EventType.DAMAGE: "bold red",
            EventType.HEAL: "bold green",
            EventType.DEFEAT: "bold magenta",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies event type color formatting to a message."""
        return f"[{self.color}]{message}[/]"
