"""
Roster content module for the arena.

Loads the weapons and combatants of a match from a JSON roster file into
pydantic models, and turns those models into live objects.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any

from catchery import log_critical, log_warning
from pydantic import BaseModel, Field, model_validator

from arena.character.combatant import Combatant
from arena.items.weapon import Weapon
from arena.items.weapon_inventory import WeaponInventory


class WeaponConfig(BaseModel):
    """Roster entry describing a weapon."""

    name: str = Field(min_length=1, description="The name of the weapon.")
    damage: int = Field(ge=0, description="The base damage of the weapon.")


class CombatantConfig(BaseModel):
    """Roster entry describing a combatant."""

    name: str = Field(min_length=1, description="The name of the combatant.")
    health: int = Field(ge=0, description="The starting health.")
    strength: int = Field(gt=0, description="The weapon damage multiplier.")
    weapon: str | None = Field(
        default=None,
        description="Name of the weapon equipped at the start, if any.",
    )


class RosterConfig(BaseModel):
    """
    Full description of a match: weapons, combatants and heal target.

    The first combatant is the player, the second the enemy.
    """

    weapons: list[WeaponConfig] = Field(
        default_factory=list,
        description="The weapons stored in the inventory, in slot order.",
    )
    combatants: list[CombatantConfig] = Field(
        min_length=2,
        max_length=2,
        description="The two fighters: player first, enemy second.",
    )
    heal_target: str | None = Field(
        default=None,
        description="Name of the combatant healed each round. Defaults to the player.",
    )

    @model_validator(mode="after")
    def check_references(self) -> "RosterConfig":
        names = [combatant.name for combatant in self.combatants]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate combatant names: {names}")
        weapon_names = {weapon.name for weapon in self.weapons}
        for combatant in self.combatants:
            if combatant.weapon is not None and combatant.weapon not in weapon_names:
                raise ValueError(
                    f"Combatant '{combatant.name}' uses unknown weapon "
                    f"'{combatant.weapon}'"
                )
        if self.heal_target is not None and self.heal_target not in names:
            raise ValueError(f"Unknown heal target '{self.heal_target}'")
        return self

    @property
    def heal_target_name(self) -> str:
        return self.heal_target or self.combatants[0].name

    def weapon_index(self, name: str) -> int:
        """
        Returns the inventory slot of the named weapon.

        Args:
            name (str):
                The weapon name.

        Returns:
            int:
                The slot of the first weapon with that name, -1 if absent.

        """
        for index, weapon in enumerate(self.weapons):
            if weapon.name == name:
                return index
        return -1

    def build_inventory(self) -> WeaponInventory:
        return WeaponInventory(
            [Weapon(name=w.name, damage=w.damage) for w in self.weapons]
        )

    def build_combatants(self, inventory: WeaponInventory) -> list[Combatant]:
        """
        Creates the combatants and equips their starting weapons.

        Args:
            inventory (WeaponInventory):
                The inventory the starting weapons are taken from.

        Returns:
            list[Combatant]:
                The combatants, in roster order.

        """
        combatants: list[Combatant] = []
        for entry in self.combatants:
            combatant = Combatant(
                name=entry.name,
                health=entry.health,
                strength=entry.strength,
                is_heal_target=entry.name == self.heal_target_name,
            )
            if entry.weapon is not None:
                index = self.weapon_index(entry.weapon)
                if not inventory.equip(combatant, index):
                    log_warning(
                        f"Starting weapon '{entry.weapon}' is not in the inventory",
                        {"combatant": entry.name, "weapon": entry.weapon},
                    )
            combatants.append(combatant)
        return combatants


def roster_from_dict(data: dict[str, Any]) -> RosterConfig:
    """
    Creates a RosterConfig from a dictionary of data.

    Args:
        data (dict[str, Any]):
            The dictionary containing roster data.

    Raises:
        ValueError:
            If the roster is malformed or references unknown names.

    Returns:
        RosterConfig:
            The validated roster.

    """
    return RosterConfig.model_validate(data)


def load_roster(path: Path) -> RosterConfig:
    """
    Loads and validates a roster from a JSON file.

    Args:
        path (Path):
            The roster file.

    Raises:
        ValueError:
            If the file is not valid JSON or the roster is invalid.

    Returns:
        RosterConfig:
            The validated roster.

    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return roster_from_dict(data)
    except (json.JSONDecodeError, ValueError) as e:
        log_critical(
            f"Error loading roster '{path}': {str(e)}",
            {"path": str(path), "error": str(e)},
            e,
            False,
        )
        raise ValueError(f"Invalid roster file '{path}': {e}") from e


def load_default_roster() -> RosterConfig:
    """Loads the roster shipped with the package."""
    source = resources.files("arena.data").joinpath("roster.json")
    return roster_from_dict(json.loads(source.read_text(encoding="utf-8")))
