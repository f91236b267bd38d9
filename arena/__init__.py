"""
Duel Arena package.

A deterministic, turn-based duel between two combatants armed from a shared
weapon inventory, with random healing applied to one side every round.
"""

from arena.character.combatant import Combatant
from arena.combat.battle_engine import BattleEngine
from arena.combat.battle_session import BattleSession
from arena.core.constants import BattleOutcome, BattleState, EventType
from arena.core.random_source import RandomSource, SystemRandomSource
from arena.events.event_system import EventSink, RecordingEventSink
from arena.items.weapon import Weapon
from arena.items.weapon_inventory import WeaponInventory

__all__ = [
    "BattleEngine",
    "BattleOutcome",
    "BattleSession",
    "BattleState",
    "Combatant",
    "EventSink",
    "EventType",
    "RandomSource",
    "RecordingEventSink",
    "SystemRandomSource",
    "Weapon",
    "WeaponInventory",
]
