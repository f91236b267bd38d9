"""
Combatant module for the arena.

Defines the Combatant class, the single entity type taking part in a battle.
Players and enemies share the same behavior; the only role a combatant can
carry is being the heal target of its battle.
"""

from rich.markup import escape

from arena.core.logging import log_debug
from arena.events.event_system import (
    NULL_SINK,
    AttackEvent,
    DamageEvent,
    DefeatEvent,
    EventSink,
    HealEvent,
)
from arena.items.weapon import Weapon


class Combatant:
    """
    Represents a combatant, tracking health, strength and equipped weapon.

    Attributes:
        name (str):
            The name of the combatant.
        health (int):
            The current health, never negative.
        starting_health (int):
            The health the combatant was created with.
        strength (int):
            Multiplier applied to the weapon damage.
        weapon (Weapon | None):
            The equipped weapon, shared with the inventory that owns it.
        is_heal_target (bool):
            Whether the combatant is meant to receive the per-round heal.

    """

    name: str
    health: int
    starting_health: int
    strength: int
    weapon: Weapon | None
    is_heal_target: bool

    def __init__(
        self,
        name: str,
        health: int,
        strength: int,
        is_heal_target: bool = False,
    ) -> None:
        if not name:
            raise ValueError("Combatant name must be a non-empty string")
        if health < 0:
            raise ValueError(f"Combatant health must be non-negative, got {health}")
        if strength <= 0:
            raise ValueError(f"Combatant strength must be positive, got {strength}")
        self.name = name
        self.health = health
        self.starting_health = health
        self.strength = strength
        self.weapon = None
        self.is_heal_target = is_heal_target

    @property
    def color(self) -> str:
        return "bold blue" if self.is_heal_target else "bold red"

    @property
    def colored_name(self) -> str:
        return self.colorize(self.name)

    def colorize(self, message: str) -> str:
        """Applies the combatant color to a message, escaping rich markup in it."""
        return f"[{self.color}]{escape(message)}[/]"

    def set_weapon(self, weapon: Weapon | None) -> None:
        """Replaces the equipped weapon, the weapon itself is left untouched."""
        self.weapon = weapon

    def has_weapon(self) -> bool:
        return self.weapon is not None

    def is_alive(self) -> bool:
        return self.health > 0

    def calculate_damage(self) -> int:
        """
        Computes the damage dealt by a single attack.

        Returns:
            int:
                The weapon damage times the strength, 0 if unarmed.

        """
        if self.weapon is None:
            return 0
        return self.weapon.damage * self.strength

    def attack(self, target: "Combatant", sink: EventSink = NULL_SINK) -> bool:
        """
        Attacks the target with the equipped weapon.

        Args:
            target (Combatant):
                The combatant receiving the attack.
            sink (EventSink):
                Receives the attack event and the target's damage event.

        Returns:
            bool:
                True if the attack was performed, False if no weapon is
                equipped, in which case nothing happens.

        """
        if self.weapon is None:
            return False
        total_damage = self.calculate_damage()
        sink.emit(
            AttackEvent(
                attacker_name=self.name,
                target_name=target.name,
                weapon_name=self.weapon.name,
            )
        )
        target.take_damage(total_damage, sink)
        return True

    def take_damage(self, amount: int, sink: EventSink = NULL_SINK) -> None:
        """
        Reduces health by the given amount, clamping at 0.

        The damage event is emitted even when the combatant was already dead.

        Args:
            amount (int):
                The damage to apply.
            sink (EventSink):
                Receives the damage event.

        """
        self.health = max(0, self.health - amount)
        log_debug(f"{self.name} takes {amount} damage (remaining: {self.health})")
        sink.emit(
            DamageEvent(
                target_name=self.name,
                amount=amount,
                remaining_health=self.health,
            )
        )

    def heal(self, amount: int, sink: EventSink = NULL_SINK) -> bool:
        """
        Increases health by the given amount, with no upper bound.

        Dead combatants never heal.

        Args:
            amount (int):
                The health to restore.
            sink (EventSink):
                Receives the heal event.

        Returns:
            bool:
                True if the heal was applied, False if the combatant is dead.

        """
        if not self.is_alive():
            return False
        self.health = max(0, self.health + amount)
        sink.emit(
            HealEvent(
                target_name=self.name,
                amount=amount,
                new_health=self.health,
            )
        )
        return True

    def announce_defeat(self, sink: EventSink = NULL_SINK) -> None:
        sink.emit(DefeatEvent(loser_name=self.name))

    def __repr__(self) -> str:
        weapon = self.weapon.name if self.weapon else None
        return (
            f"Combatant(name={self.name!r}, health={self.health}, "
            f"strength={self.strength}, weapon={weapon!r}, "
            f"is_heal_target={self.is_heal_target})"
        )
