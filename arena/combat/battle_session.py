"""
Battle session module for the arena.

Coordinates a single match: the player, the enemy, the weapon inventory they
draw from and the engine that runs their battle.
"""

from arena.character.combatant import Combatant
from arena.combat.battle_engine import BattleEngine
from arena.core.constants import BattleOutcome
from arena.core.content import RosterConfig
from arena.core.random_source import RandomSource, SystemRandomSource
from arena.events.event_system import NULL_SINK, EventSink
from arena.items.weapon import Weapon
from arena.items.weapon_inventory import WeaponInventory


class BattleSession:
    """
    Manages a match between a player and an enemy.

    The player attacks first and is the one healed every round. The session
    owns the inventory, so every weapon reference held by its combatants
    stays valid for the whole session.

    Attributes:
        player (Combatant):
            The first fighter and heal target.
        enemy (Combatant):
            The second fighter.
        inventory (WeaponInventory):
            The weapons both fighters are equipped from.
        engine (BattleEngine):
            The engine running the battle.

    """

    def __init__(
        self,
        player: Combatant,
        enemy: Combatant,
        rng: RandomSource | None = None,
        sink: EventSink = NULL_SINK,
        inventory: WeaponInventory | None = None,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self.rng = rng if rng is not None else SystemRandomSource()
        self.inventory = inventory if inventory is not None else WeaponInventory()
        self.engine = BattleEngine(self.rng, sink)
        self.player.is_heal_target = True
        self.enemy.is_heal_target = False

    @classmethod
    def from_roster(
        cls,
        roster: RosterConfig,
        rng: RandomSource | None = None,
        sink: EventSink = NULL_SINK,
    ) -> "BattleSession":
        """
        Builds a session from a roster, with starting weapons equipped.

        The combatant named as heal target in the roster becomes the player,
        the other one the enemy.

        Args:
            roster (RosterConfig):
                The validated roster.
            rng (RandomSource | None):
                Source of randomness, a fresh SystemRandomSource if None.
            sink (EventSink):
                Receives the battle events.

        Returns:
            BattleSession:
                The ready-to-start session.

        """
        inventory = roster.build_inventory()
        first, second = roster.build_combatants(inventory)
        if second.name == roster.heal_target_name:
            first, second = second, first
        return cls(first, second, rng=rng, sink=sink, inventory=inventory)

    def add_weapon(self, weapon: Weapon) -> None:
        self.inventory.add(weapon)

    def equip_player_weapon(self, index: int) -> bool:
        return self.inventory.equip(self.player, index)

    def equip_enemy_weapon(self, index: int) -> bool:
        return self.inventory.equip(self.enemy, index)

    def equip_random_weapons(self) -> bool:
        """
        Equips both fighters with a random weapon each.

        Returns:
            bool:
                True if both fighters were equipped.

        """
        player_ok = self.inventory.equip_random(self.player, self.rng)
        enemy_ok = self.inventory.equip_random(self.enemy, self.rng)
        return player_ok and enemy_ok

    def start(self) -> BattleOutcome:
        """
        Runs the battle, player against enemy, healing the player.

        Returns:
            BattleOutcome:
                The outcome of the battle.

        """
        return self.engine.run(self.player, self.enemy, self.player)
