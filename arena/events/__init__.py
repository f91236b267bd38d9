"""
Events module for the arena.

Structured combat events and the sinks that receive them.
"""

from .event_system import (
    NULL_SINK,
    AttackEvent,
    BattleStartEvent,
    CombatEvent,
    DamageEvent,
    DefeatEvent,
    EventSink,
    HealEvent,
    NullEventSink,
    RecordingEventSink,
    ValidationErrorEvent,
)

__all__ = [
    "NULL_SINK",
    "AttackEvent",
    "BattleStartEvent",
    "CombatEvent",
    "DamageEvent",
    "DefeatEvent",
    "EventSink",
    "HealEvent",
    "NullEventSink",
    "RecordingEventSink",
    "ValidationErrorEvent",
]
