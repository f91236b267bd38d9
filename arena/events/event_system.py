"""
Event system module for the arena.

Defines the structured combat events emitted during a battle and the sinks
that receive them. The engine and the combatants only produce events; how
they are shown is up to the sink.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from arena.core.constants import VALIDATION_ERROR_MESSAGE, EventType


class CombatEvent(BaseModel):
    """Base class for all combat events."""

    model_config = ConfigDict(frozen=True)

    event_type: EventType = Field(
        description="The type of combat event.",
    )


class BattleStartEvent(CombatEvent):
    """Event data for the start of a battle."""

    event_type: EventType = Field(
        default=EventType.BATTLE_START,
        description="The type of combat event.",
    )
    fighter1_name: str = Field(description="Name of the first fighter.")
    fighter2_name: str = Field(description="Name of the second fighter.")

    def __str__(self) -> str:
        return f"BattleStartEvent({self.fighter1_name} vs {self.fighter2_name})"


class ValidationErrorEvent(CombatEvent):
    """Event data for a battle that cannot start."""

    event_type: EventType = Field(
        default=EventType.VALIDATION_ERROR,
        description="The type of combat event.",
    )
    message: str = Field(
        default=VALIDATION_ERROR_MESSAGE,
        description="Why the battle cannot start.",
    )

    def __str__(self) -> str:
        return f"ValidationErrorEvent({self.message})"


class AttackEvent(CombatEvent):
    """Event data for a successful attack."""

    event_type: EventType = Field(
        default=EventType.ATTACK,
        description="The type of combat event.",
    )
    attacker_name: str = Field(description="Name of the attacking combatant.")
    target_name: str = Field(description="Name of the attacked combatant.")
    weapon_name: str = Field(description="Name of the weapon used.")

    def __str__(self) -> str:
        return (
            f"AttackEvent({self.attacker_name} on {self.target_name}, "
            f"weapon={self.weapon_name})"
        )


class DamageEvent(CombatEvent):
    """Event data for damage taken."""

    event_type: EventType = Field(
        default=EventType.DAMAGE,
        description="The type of combat event.",
    )
    target_name: str = Field(description="Name of the damaged combatant.")
    amount: int = Field(description="Amount of damage dealt.")
    remaining_health: int = Field(description="Health left after the damage.")

    def __str__(self) -> str:
        return (
            f"DamageEvent({self.target_name}, damage={self.amount}, "
            f"health={self.remaining_health})"
        )


class HealEvent(CombatEvent):
    """Event data for a successful heal."""

    event_type: EventType = Field(
        default=EventType.HEAL,
        description="The type of combat event.",
    )
    target_name: str = Field(description="Name of the healed combatant.")
    amount: int = Field(description="Amount of health restored.")
    new_health: int = Field(description="Health after the heal.")

    def __str__(self) -> str:
        return (
            f"HealEvent({self.target_name}, heal={self.amount}, "
            f"health={self.new_health})"
        )


class DefeatEvent(CombatEvent):
    """Event data for the combatant that lost the battle."""

    event_type: EventType = Field(
        default=EventType.DEFEAT,
        description="The type of combat event.",
    )
    loser_name: str = Field(description="Name of the defeated combatant.")

    def __str__(self) -> str:
        return f"DefeatEvent({self.loser_name})"


@runtime_checkable
class EventSink(Protocol):
    """Receives the combat events produced during a battle."""

    def emit(self, event: CombatEvent) -> None: ...


class NullEventSink:
    """Sink that discards every event."""

    def emit(self, event: CombatEvent) -> None:
        pass


class RecordingEventSink:
    """
    Sink that keeps every event it receives, in order.

    Attributes:
        events (list[CombatEvent]):
            The events received so far.

    """

    def __init__(self) -> None:
        self.events: list[CombatEvent] = []

    def emit(self, event: CombatEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[CombatEvent]:
        """
        Returns the recorded events of the given type.

        Args:
            event_type (EventType): The event type to filter on.

        Returns:
            list[CombatEvent]: The matching events, in emission order.

        """
        return [event for event in self.events if event.event_type == event_type]

    @property
    def event_types(self) -> list[EventType]:
        return [event.event_type for event in self.events]

    def clear(self) -> None:
        self.events.clear()


# Shared sink used when an operation is called without one.
NULL_SINK = NullEventSink()
