"""
Tests for the battle engine state machine.
"""

import logging

import pytest
from conftest import FixedRandomSource, SequenceRandomSource

from arena.character.combatant import Combatant
from arena.combat.battle_engine import BattleEngine
from arena.core.constants import BattleOutcome, BattleState, EventType
from arena.events.event_system import (
    AttackEvent,
    BattleStartEvent,
    DamageEvent,
    DefeatEvent,
    HealEvent,
    RecordingEventSink,
    ValidationErrorEvent,
)
from arena.items.weapon import Weapon
from arena.items.weapon_inventory import WeaponInventory


@pytest.fixture
def inventory():
    return WeaponInventory(
        [
            Weapon(name="Sword", damage=15),
            Weapon(name="Axe", damage=20),
        ]
    )


@pytest.fixture
def hero(inventory):
    hero = Combatant(name="Hero", health=300, strength=2, is_heal_target=True)
    inventory.equip(hero, 0)
    return hero


@pytest.fixture
def goblin(inventory):
    goblin = Combatant(name="Goblin", health=150, strength=4)
    inventory.equip(goblin, 1)
    return goblin


def _health_trajectory(events):
    return [
        (event.target_name, event.remaining_health)
        for event in events
        if event.event_type == EventType.DAMAGE
    ]


def test_hero_versus_goblin_trajectory(hero, goblin, fixed_heal, sink):
    engine = BattleEngine(fixed_heal, sink)

    outcome = engine.run(hero, goblin, hero)

    assert outcome == BattleOutcome.FIGHTER_TWO_DEFEATED
    assert outcome == 0
    assert engine.rounds == 5
    assert engine.state == BattleState.FINISHED
    assert hero.health == 180
    assert goblin.health == 0
    assert _health_trajectory(sink.events) == [
        ("Goblin", 120),
        ("Hero", 220),
        ("Goblin", 90),
        ("Hero", 190),
        ("Goblin", 60),
        ("Hero", 160),
        ("Goblin", 30),
        ("Hero", 130),
        ("Goblin", 0),
    ]
    assert [e.new_health for e in sink.of_type(EventType.HEAL)] == [270, 240, 210, 180]
    assert fixed_heal.calls == [(1, 50)] * 4


def test_full_event_sequence_of_first_round(hero, goblin, fixed_heal, sink):
    BattleEngine(fixed_heal, sink).run(hero, goblin, hero)

    assert sink.events[:6] == [
        BattleStartEvent(fighter1_name="Hero", fighter2_name="Goblin"),
        AttackEvent(attacker_name="Hero", target_name="Goblin", weapon_name="Sword"),
        DamageEvent(target_name="Goblin", amount=30, remaining_health=120),
        AttackEvent(attacker_name="Goblin", target_name="Hero", weapon_name="Axe"),
        DamageEvent(target_name="Hero", amount=80, remaining_health=220),
        HealEvent(target_name="Hero", amount=50, new_health=270),
    ]


def test_last_round_skips_second_attack_and_heal(hero, goblin, fixed_heal, sink):
    BattleEngine(fixed_heal, sink).run(hero, goblin, hero)

    assert sink.events[-3:] == [
        AttackEvent(attacker_name="Hero", target_name="Goblin", weapon_name="Sword"),
        DamageEvent(target_name="Goblin", amount=30, remaining_health=0),
        DefeatEvent(loser_name="Goblin"),
    ]
    assert len(sink.of_type(EventType.DEFEAT)) == 1


def test_fighter_one_defeated_with_enemy_as_heal_target(sink):
    hero = Combatant(name="Hero", health=100, strength=1)
    hero.set_weapon(Weapon(name="Sword", damage=15))
    goblin = Combatant(name="Goblin", health=150, strength=4)
    goblin.set_weapon(Weapon(name="Axe", damage=20))
    rng = SequenceRandomSource([10])

    outcome = BattleEngine(rng, sink).run(hero, goblin, goblin)

    assert outcome == BattleOutcome.FIGHTER_ONE_DEFEATED
    assert outcome == 1
    assert hero.health == 0
    assert goblin.health == 130
    assert sink.of_type(EventType.HEAL) == [
        HealEvent(target_name="Goblin", amount=10, new_health=145)
    ]
    assert sink.events[-1] == DefeatEvent(loser_name="Hero")


@pytest.mark.parametrize("unarmed", ["first", "second", "both"])
def test_unarmed_battle_is_invalid(inventory, sink, unarmed):
    hero = Combatant(name="Hero", health=300, strength=2)
    goblin = Combatant(name="Goblin", health=150, strength=4)
    if unarmed == "second":
        inventory.equip(hero, 0)
    if unarmed == "first":
        inventory.equip(goblin, 1)
    rng = FixedRandomSource(50)
    engine = BattleEngine(rng, sink)

    outcome = engine.run(hero, goblin, hero)

    assert outcome == BattleOutcome.INVALID
    assert outcome == -1
    assert engine.state == BattleState.FINISHED
    assert engine.rounds == 0
    assert sink.events == [
        BattleStartEvent(fighter1_name="Hero", fighter2_name="Goblin"),
        ValidationErrorEvent(message="Weapon not equipped. Cannot fight."),
    ]
    assert hero.health == 300
    assert goblin.health == 150
    assert rng.calls == []


def test_repeated_runs_are_reproducible(inventory):
    def play():
        sink = RecordingEventSink()
        hero = Combatant(name="Hero", health=300, strength=2, is_heal_target=True)
        goblin = Combatant(name="Goblin", health=150, strength=4)
        inventory.equip(hero, 0)
        inventory.equip(goblin, 1)
        outcome = BattleEngine(FixedRandomSource(17), sink).run(hero, goblin, hero)
        return outcome, [event.model_dump_json() for event in sink.events]

    assert play() == play()


def test_fighter_dead_at_start_loses_without_a_round(hero, sink):
    corpse = Combatant(name="Corpse", health=0, strength=1)
    corpse.set_weapon(Weapon(name="Rusty Knife", damage=1))
    rng = FixedRandomSource(50)
    engine = BattleEngine(rng, sink)

    outcome = engine.run(hero, corpse, hero)

    assert outcome == BattleOutcome.FIGHTER_TWO_DEFEATED
    assert engine.rounds == 0
    assert sink.event_types == [EventType.BATTLE_START, EventType.DEFEAT]
    assert hero.health == 300


def test_dead_heal_target_is_not_healed(sink):
    # The heal target is a bystander already at 0 health.
    bystander = Combatant(name="Bystander", health=0, strength=1)
    hero = Combatant(name="Hero", health=100, strength=1)
    hero.set_weapon(Weapon(name="Sword", damage=40))
    goblin = Combatant(name="Goblin", health=100, strength=1)
    goblin.set_weapon(Weapon(name="Axe", damage=10))

    outcome = BattleEngine(FixedRandomSource(50), sink).run(hero, goblin, bystander)

    assert outcome == BattleOutcome.FIGHTER_TWO_DEFEATED
    assert bystander.health == 0
    assert sink.of_type(EventType.HEAL) == []


def test_engine_can_run_again(inventory, fixed_heal):
    engine = BattleEngine(fixed_heal)
    hero = Combatant(name="Hero", health=300, strength=2)
    goblin = Combatant(name="Goblin", health=150, strength=4)
    assert engine.run(hero, goblin, hero) == BattleOutcome.INVALID

    inventory.equip(hero, 0)
    inventory.equip(goblin, 1)
    assert engine.run(hero, goblin, hero) == BattleOutcome.FIGHTER_TWO_DEFEATED
    assert engine.rounds == 5
    assert engine.outcome == BattleOutcome.FIGHTER_TWO_DEFEATED


def test_state_transitions_are_logged_at_debug(hero, goblin, fixed_heal, caplog):
    caplog.set_level(logging.DEBUG, logger="arena")

    BattleEngine(fixed_heal).run(hero, goblin, hero)

    transitions = [
        record.getMessage()
        for record in caplog.records
        if record.getMessage().startswith("Battle state")
    ]
    assert transitions == [
        "Battle state NOT_STARTED -> VALIDATING",
        "Battle state VALIDATING -> FIGHTING",
        "Battle state FIGHTING -> FINISHED",
    ]
    assert all(
        record.levelno == logging.DEBUG
        for record in caplog.records
        if record.getMessage().startswith("Battle state")
    )


def test_second_run_starts_from_not_started(hero, goblin, fixed_heal, caplog):
    engine = BattleEngine(fixed_heal)
    engine.run(hero, goblin, hero)
    caplog.set_level(logging.DEBUG, logger="arena")
    caplog.clear()

    engine.run(hero, goblin, hero)

    messages = [record.getMessage() for record in caplog.records]
    assert "Battle state NOT_STARTED -> VALIDATING" in messages
    assert "Battle state FINISHED -> VALIDATING" not in messages


def test_invalid_battle_logs_a_warning(fixed_heal, caplog):
    caplog.set_level(logging.DEBUG, logger="arena")
    hero = Combatant(name="Hero", health=300, strength=2)
    goblin = Combatant(name="Goblin", health=150, strength=4)

    BattleEngine(fixed_heal).run(hero, goblin, hero)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage().startswith("Weapon not equipped. Cannot fight.")
