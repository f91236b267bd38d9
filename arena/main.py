"""
Main entry point for the Duel Arena.

Loads a roster, equips the fighters, runs the battle between the player and
the enemy and prints every step of it. The process exit status is the battle
outcome code: 0 when the enemy is defeated, 1 when the player is defeated and
255 (-1) when the battle could not start.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.markup import escape

from arena.combat.battle_session import BattleSession
from arena.core.content import RosterConfig, load_default_roster, load_roster
from arena.core.logging import log_error, setup_logging
from arena.core.random_source import SystemRandomSource
from arena.core.utils import cprint, crule, make_bar
from arena.ui.console_renderer import ConsoleEventSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duel-arena",
        description="Run a turn-based duel between two armed combatants.",
    )
    parser.add_argument(
        "--roster",
        type=Path,
        default=None,
        help="JSON roster file (defaults to the bundled Hero vs Goblin match).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the heal rolls and random weapon picks.",
    )
    parser.add_argument(
        "--random-weapons",
        action="store_true",
        help="Ignore the roster's starting weapons and pick them at random.",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Choose each fighter's weapon from the inventory before the battle.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    return parser


def print_status(session: BattleSession) -> None:
    """Prints the health of both fighters."""
    for combatant in (session.player, session.enemy):
        bar = make_bar(
            combatant.health,
            combatant.starting_health,
            color="blue" if combatant.is_heal_target else "red",
        )
        weapon = combatant.weapon.name if combatant.weapon else "unarmed"
        name = combatant.colorize(f"{combatant.name:<20}")
        cprint(
            f"    {name} {bar} {combatant.health:4} HP  ({escape(weapon)})",
            highlight=False,
        )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        roster: RosterConfig = (
            load_roster(args.roster) if args.roster else load_default_roster()
        )
    except (OSError, ValueError) as e:
        log_error("Unable to load roster", {"error": str(e)})
        return 2

    rng = SystemRandomSource(args.seed)
    session = BattleSession.from_roster(roster, rng=rng, sink=ConsoleEventSink())

    if args.random_weapons:
        session.equip_random_weapons()
    if args.interactive:
        from arena.ui.cli_interface import WeaponPicker

        picker = WeaponPicker()
        picker.choose_weapon(session.inventory, session.player)
        picker.choose_weapon(session.inventory, session.enemy)

    crule("Fighters", style="bold blue")
    print_status(session)

    outcome = session.start()

    crule("Result", style="bold blue")
    print_status(session)
    cprint(f"Outcome: {outcome.colored_name} ({int(outcome)})")

    return int(outcome)


if __name__ == "__main__":
    sys.exit(main())
