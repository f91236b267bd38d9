"""
Weapon inventory module for the arena.

Owns the weapons available in a battle session and hands them out to
combatants, validating the requested slot.
"""

from collections.abc import Iterator

from arena.character.combatant import Combatant
from arena.core.logging import log_debug
from arena.core.random_source import RandomSource
from arena.items.weapon import Weapon


class WeaponInventory:
    """
    Ordered, append-only collection of the weapons of a battle session.

    Combatants equipped from the inventory share the stored Weapon objects.
    Weapons are never removed, so a reference held by a combatant stays valid
    for as long as the combatant lives.

    Attributes:
        weapons (list[Weapon]):
            The stored weapons, in insertion order.

    """

    def __init__(self, weapons: list[Weapon] | None = None) -> None:
        self._weapons: list[Weapon] = []
        for weapon in weapons or []:
            self.add(weapon)

    @property
    def weapons(self) -> list[Weapon]:
        # Copy, so callers cannot reorder or drop stored weapons.
        return list(self._weapons)

    def add(self, weapon: Weapon) -> None:
        """
        Appends a weapon to the inventory.

        Args:
            weapon (Weapon):
                The weapon to store.

        """
        self._weapons.append(weapon)

    def is_empty(self) -> bool:
        """
        Checks whether the inventory holds any weapon.

        Returns:
            bool:
                True if there are no weapons, False otherwise.

        """
        return not self._weapons

    def is_valid_index(self, index: int) -> bool:
        """
        Checks whether the index addresses a stored weapon.

        Negative indices are never valid.

        Args:
            index (int):
                The slot to check.

        Returns:
            bool:
                True if 0 <= index < len(inventory).

        """
        return 0 <= index < len(self._weapons)

    def equip(self, combatant: Combatant, index: int) -> bool:
        """
        Equips the weapon stored at the given index to the combatant.

        Args:
            combatant (Combatant):
                The combatant to equip.
            index (int):
                The slot of the weapon in the inventory.

        Returns:
            bool:
                True if the weapon was equipped, False if the index is out of
                range, in which case the combatant is left untouched.

        """
        if not self.is_valid_index(index):
            log_debug(
                f"Cannot equip {combatant.name}: no weapon at slot {index}",
                {"combatant": combatant.name, "index": index, "size": len(self)},
            )
            return False
        combatant.set_weapon(self._weapons[index])
        return True

    def equip_random(self, combatant: Combatant, rng: RandomSource) -> bool:
        """
        Equips a uniformly chosen weapon to the combatant.

        Args:
            combatant (Combatant):
                The combatant to equip.
            rng (RandomSource):
                The source used to pick the slot.

        Returns:
            bool:
                True if a weapon was equipped, False if the inventory is empty.

        """
        if self.is_empty():
            log_debug(
                f"Cannot equip {combatant.name}: the inventory is empty",
                {"combatant": combatant.name},
            )
            return False
        index = rng.randint(0, len(self._weapons) - 1)
        return self.equip(combatant, index)

    def __len__(self) -> int:
        return len(self._weapons)

    def __getitem__(self, index: int) -> Weapon:
        return self._weapons[index]

    def __iter__(self) -> Iterator[Weapon]:
        return iter(self._weapons)

    def __repr__(self) -> str:
        return f"WeaponInventory({', '.join(w.name for w in self._weapons)})"
