"""
Battle engine module for the arena.

Runs a single encounter between two combatants: validates that both are armed,
alternates their attacks, heals the designated heal target every round and
reports who lost.
"""

from arena.character.combatant import Combatant
from arena.core.constants import (
    HEAL_ROLL_MAX,
    HEAL_ROLL_MIN,
    VALIDATION_ERROR_MESSAGE,
    BattleOutcome,
    BattleState,
)
from arena.core.logging import log_debug, log_warning
from arena.core.random_source import RandomSource
from arena.events.event_system import (
    NULL_SINK,
    BattleStartEvent,
    EventSink,
    ValidationErrorEvent,
)


class BattleEngine:
    """
    Orchestrates a battle between two combatants.

    The engine keeps no combatant state between runs: every call to run is
    independent given its combatants and the random source. The state and
    round counter describe the last (or current) run only.

    Attributes:
        rng (RandomSource):
            Source of the per-round heal amount.
        sink (EventSink):
            Receives every event produced during the battle.
        state (BattleState):
            Where the last run is in the battle state machine.
        rounds (int):
            Number of rounds started during the last run.
        outcome (BattleOutcome | None):
            Result of the last run, None until a run finishes.

    """

    def __init__(self, rng: RandomSource, sink: EventSink = NULL_SINK) -> None:
        self.rng = rng
        self.sink = sink
        self.state = BattleState.NOT_STARTED
        self.rounds = 0
        self.outcome: BattleOutcome | None = None

    def run(
        self,
        fighter1: Combatant,
        fighter2: Combatant,
        heal_target: Combatant,
    ) -> BattleOutcome:
        """
        Runs the battle to completion.

        The round loop only stops when a fighter dies, so a heal target that
        heals faster than it is damaged keeps the battle going forever.

        Args:
            fighter1 (Combatant):
                Attacks first in every round.
            fighter2 (Combatant):
                Attacks second in every round, if still alive.
            heal_target (Combatant):
                Receives the random heal at the end of every full round.

        Returns:
            BattleOutcome:
                FIGHTER_ONE_DEFEATED (1), FIGHTER_TWO_DEFEATED (0) or
                INVALID (-1) if a fighter has no weapon.

        """
        self.state = BattleState.NOT_STARTED
        self.rounds = 0
        self.outcome = None
        self._announce_battle_start(fighter1, fighter2)

        self._transition(BattleState.VALIDATING)
        if not self._validate_battle_readiness(fighter1, fighter2):
            return self._finish(BattleOutcome.INVALID)

        self._transition(BattleState.FIGHTING)
        self._conduct_battle(fighter1, fighter2, heal_target)

        return self._finish(self._announce_battle_result(fighter1, fighter2))

    def _transition(self, state: BattleState) -> None:
        log_debug(f"Battle state {self.state} -> {state}")
        self.state = state

    def _finish(self, outcome: BattleOutcome) -> BattleOutcome:
        self._transition(BattleState.FINISHED)
        self.outcome = outcome
        log_debug(
            f"Battle finished: {outcome}",
            {"code": int(outcome), "rounds": self.rounds},
        )
        return outcome

    def _announce_battle_start(self, fighter1: Combatant, fighter2: Combatant) -> None:
        self.sink.emit(
            BattleStartEvent(fighter1_name=fighter1.name, fighter2_name=fighter2.name)
        )

    def _validate_battle_readiness(
        self, fighter1: Combatant, fighter2: Combatant
    ) -> bool:
        if fighter1.has_weapon() and fighter2.has_weapon():
            return True
        log_warning(
            VALIDATION_ERROR_MESSAGE,
            {
                fighter1.name: fighter1.has_weapon(),
                fighter2.name: fighter2.has_weapon(),
                "context": "battle_validation",
            },
        )
        self.sink.emit(ValidationErrorEvent(message=VALIDATION_ERROR_MESSAGE))
        return False

    def _execute_attack(self, attacker: Combatant, defender: Combatant) -> bool:
        """Performs one attack and tells whether the defender survived it."""
        attacker.attack(defender, self.sink)
        return defender.is_alive()

    def _conduct_battle(
        self,
        fighter1: Combatant,
        fighter2: Combatant,
        heal_target: Combatant,
    ) -> None:
        while fighter1.is_alive() and fighter2.is_alive():
            self.rounds += 1
            log_debug(f"Round {self.rounds} begins")

            if not self._execute_attack(fighter1, fighter2):
                break

            if not self._execute_attack(fighter2, fighter1):
                break

            heal_target.heal(self.rng.randint(HEAL_ROLL_MIN, HEAL_ROLL_MAX), self.sink)

    def _announce_battle_result(
        self, fighter1: Combatant, fighter2: Combatant
    ) -> BattleOutcome:
        if not fighter1.is_alive():
            fighter1.announce_defeat(self.sink)
            return BattleOutcome.FIGHTER_ONE_DEFEATED
        fighter2.announce_defeat(self.sink)
        return BattleOutcome.FIGHTER_TWO_DEFEATED
