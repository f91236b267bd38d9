"""
User interface module for the arena.

Provides the interactive weapon selection used when a match is played from
the command line.
"""

from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from arena.character.combatant import Combatant
from arena.core.utils import ccapture
from arena.items.weapon_inventory import WeaponInventory


class WeaponPicker:
    """
    Command-line weapon selection for a combatant.

    Shows the inventory as a rich table and reads the chosen slot with
    prompt_toolkit. Slots are numbered from 1 on screen.
    """

    def __init__(self, session: PromptSession | None = None) -> None:
        self._session = session

    @property
    def session(self) -> PromptSession:
        # Created lazily, a PromptSession needs a terminal.
        if self._session is None:
            self._session = PromptSession(erase_when_done=True)
        return self._session

    @staticmethod
    def build_table(inventory: WeaponInventory, combatant: Combatant) -> Table:
        table = Table(title=f"Weapons for {combatant.name}", pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Name", style="bold")
        table.add_column("Damage", style="red", justify="right")
        table.add_column("Per hit", style="magenta", justify="right")
        for i, weapon in enumerate(inventory, 1):
            table.add_row(
                str(i),
                weapon.name,
                str(weapon.damage),
                str(weapon.damage * combatant.strength),
            )
        table.add_row()
        table.add_row("q", "Keep current weapon", "", "")
        return table

    @staticmethod
    def parse_choice(answer: str, size: int) -> int | None:
        """
        Converts the user's answer into an inventory slot.

        Args:
            answer (str): The raw user input.
            size (int): The number of weapons in the inventory.

        Returns:
            int | None: The zero-based slot, or None if the answer is invalid.

        """
        answer = answer.strip()
        if not answer.isdigit():
            return None
        index = int(answer) - 1
        if 0 <= index < size:
            return index
        return None

    def choose_weapon(self, inventory: WeaponInventory, combatant: Combatant) -> bool:
        """
        Lets the user pick the weapon to equip to the combatant.

        Args:
            inventory (WeaponInventory): The inventory to pick from.
            combatant (Combatant): The combatant to equip.

        Returns:
            bool: True if a weapon was equipped, False if the user kept the
            current one or the inventory is empty.

        """
        if inventory.is_empty():
            return False
        prompt = "\n" + ccapture(self.build_table(inventory, combatant)) + "\nWeapon > "
        while True:
            answer = self.session.prompt(ANSI(prompt))
            if answer.strip().lower() == "q":
                return False
            index = self.parse_choice(answer, len(inventory))
            if index is not None:
                return inventory.equip(combatant, index)
