from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Weapon(BaseModel):
    """
    Represents a named damage source that combatants can wield.

    Weapons are owned by a WeaponInventory; combatants only hold a reference
    to them. The damage is fixed at construction, the only way to change it
    is the explicit set_damage override.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        frozen=True,
        min_length=1,
        description="The name of the weapon.",
    )
    damage: int = Field(
        ge=0,
        description="The base damage dealt by the weapon, before strength.",
    )

    def set_damage(self, new_damage: int) -> None:
        """
        Overrides the base damage of the weapon.

        Args:
            new_damage (int):
                The new base damage, must be non-negative.

        Raises:
            pydantic.ValidationError:
                If the new damage is negative.

        """
        self.damage = new_damage

    def __str__(self) -> str:
        return f"{self.name} ({self.damage})"


def deserialize_weapon(data: dict[str, Any]) -> Weapon:
    """
    Deserialize a weapon from a dictionary.

    Args:
        data (dict[str, Any]):
            The dictionary containing weapon data.

    Raises:
        ValueError:
            If required fields are missing or invalid.

    Returns:
        Weapon:
            The deserialized weapon instance.

    """
    return Weapon.model_validate(data)
