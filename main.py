# main.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from debug import COMPONENTS, Debug
from enigma import Enigma
from errors import EnigmaError
from settings import MachineSettings, build_machine, load_settings, save_settings
from utilities import (
    REFLECTOR_NAMES,
    ROTOR_NAMES,
    get_machine_settings,
    normalise_message,
    to_blocks,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="An implementation of the M3 Enigma machine.")
    p.add_argument("-R", "--reflector", metavar="REFLECTOR", help=f"Reflector type, one of: {', '.join(REFLECTOR_NAMES)}")
    p.add_argument("-r", "--rotors", nargs="+", metavar="ROTOR", help=f"Rotor order (Walzenlage), leftmost first. Choices: {' '.join(ROTOR_NAMES)}")
    p.add_argument("-s", "--ring", nargs="+", type=int, metavar="SETTING", help="Ring settings (Ringstellung), one number in 1-26 per rotor.")
    p.add_argument("-k", "--key", nargs="+", metavar="KEY", help="Start positions (Grundstellung), one letter per rotor, e.g. 'A B C' or 'ABC'.")
    p.add_argument("-p", "--plugs", nargs="*", metavar="PAIR", help="Plugboard connections (Steckerverbindungen), e.g. AL BY.")

    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON; flags above override its fields.")
    p.add_argument("--save-config", metavar="FILE", help="Write the assembled settings to JSON.")
    p.add_argument("--interactive", action="store_true", help="Answer a prompt chain instead of using flags or a config file.")

    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encrypt. If omitted, an interactive console starts.")
    p.add_argument("--rewind", action="store_true", help="Reset rotors to the start key before every console line.")
    p.add_argument("--block", type=int, default=0, metavar="N", help="Print output in blocks of N letters (0 = as typed).")

    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="COMPONENT", help=f"Log one or more components: {', '.join(COMPONENTS)}")
    p.add_argument("--log-file", metavar="FILE", help="Also write log records to FILE.")
    return p.parse_args(argv)


def assemble_settings(args: argparse.Namespace) -> MachineSettings:
    """Interactive answers, else JSON file, else defaults; flags override."""
    if args.interactive:
        return get_machine_settings()

    settings = load_settings(args.config) if args.config else MachineSettings()

    if args.reflector is not None:
        settings.reflector = args.reflector
    if args.rotors is not None:
        settings.rotors = args.rotors
    if args.ring is not None:
        settings.rings = args.ring
    if args.key is not None:
        settings.key = "".join(args.key).upper()
    if args.plugs is not None:
        settings.plugs = [p.upper() for p in args.plugs]
    return settings


# ────────────────────────────────────────────────────────────────────────
#  2. Console loop
# ────────────────────────────────────────────────────────────────────────


def run_console(settings: MachineSettings, machine: Enigma, *, rewind: bool, block: int) -> None:
    print("Type 'exit' or a blank line to quit.")
    while True:
        try:
            line = input(">").strip()
        except EOFError:
            break
        if not line or line.lower() == "exit":
            break

        if rewind:
            machine = build_machine(settings)

        try:
            print(to_blocks(machine.encrypt(normalise_message(line)), block))
        except EnigmaError as err:
            print(f"[ERROR]: {err}", file=sys.stderr)


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)

    if args.log_file:
        debug.add_file(args.log_file)
    if args.debug:
        debug.enable(*args.debug)

    try:
        settings = assemble_settings(args)
        machine = build_machine(settings)
    except (ValueError, OSError) as err:
        print(f"Failed to set up the machine: {err}", file=sys.stderr)
        return 2

    if args.save_config:
        try:
            save_settings(settings, Path(args.save_config))
        except OSError as err:
            print(f"Failed to save settings: {err}", file=sys.stderr)
            return 2

    print(f"Reflector: {settings.reflector}")
    print(f"Rotors: {' '.join(settings.rotors)}")
    print(f"Ring Settings: {' '.join(str(r) for r in settings.rings)}")
    print(f"Key: {settings.key}")
    print(f"Plugs: {' '.join(settings.plugs) or '-'}")

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        try:
            print(to_blocks(machine.encrypt(normalise_message(args.message)), args.block))
        except EnigmaError as err:
            print(f"[ERROR]: {err}", file=sys.stderr)
            return 1
        return 0

    # interactive console ------------------------------------------------
    run_console(settings, machine, rewind=args.rewind, block=args.block)
    return 0


if __name__ == "__main__":
    sys.exit(main())
