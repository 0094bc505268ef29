# utilities.py
from __future__ import annotations

from typing import List

from errors import EnigmaError
from keyboard_and_plugboard import ALPHABET, MAX_PAIRS, Plugboard
from rotor_and_reflector import ReflectorType, RotorType
from settings import MachineSettings

ROTOR_NAMES = [t.value for t in RotorType]
REFLECTOR_NAMES = [t.value for t in ReflectorType]


def ask(prompt: str) -> str:
    """Read & normalise an operator's response (uppercase, trimmed)."""
    return input(prompt).strip().upper()


# ────────────────────────────────────────────────────────────────────────
#  1. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def get_rotor_selection(max_label: int) -> List[str]:
    print("\nAvailable Rotors:", " ".join(ROTOR_NAMES))
    while True:
        sel = ask(f"{'Rotor order (left to right):':<{max_label}} ").split()
        if not sel:
            print("❌  Need at least one rotor.")
            continue
        try:
            for name in sel:
                RotorType.from_name(name)
        except EnigmaError as err:
            print(f"❌  {err}")
            continue
        return sel


def get_reflector_selection(max_label: int) -> str:
    print("\nAvailable Reflectors:", ", ".join(REFLECTOR_NAMES))
    while True:
        ref = ask(f"{'Select reflector:':<{max_label}} ")
        try:
            return ReflectorType.from_name(ref).value
        except EnigmaError as err:
            print(f"❌  {err}")


def get_plugboard(max_label: int) -> List[str]:
    """Return a list of *validated* plugboard pairs (e.g. ["AB", "CD"])."""
    print(f"\nPlugboard pairs (≤{MAX_PAIRS}, e.g. AB CD EF):")
    while True:
        raw = ask(f"{'Pairs (Enter for none):':<{max_label}} ")
        if not raw:
            return []
        pairs = raw.split()
        try:
            Plugboard(pairs)
        except EnigmaError as err:
            print(f"❌  {err}")
            continue
        return pairs


def get_ring_settings(count: int, max_label: int) -> List[int]:
    hi = len(ALPHABET)
    prompt = f"{count} ring settings 1-{hi}:"
    while True:
        raw = ask(f"{prompt:<{max_label}} ").split()
        if len(raw) == count and all(item.isascii() and item.isdecimal() and 1 <= int(item) <= hi for item in raw):
            return [int(item) for item in raw]
        print(f"❌  Need exactly {count} numbers in 1–{hi}.")


def get_start_key(count: int, max_label: int) -> str:
    prompt = f"Start key ({count} letters):"
    while True:
        key = "".join(ask(f"{prompt:<{max_label}} ").split())
        if len(key) == count and all(ch in ALPHABET for ch in key):
            return key
        print(f"❌  Must be exactly {count} letters A–Z.")


# ––– orchestration –––––––––––––––––––––––––––––––––––––––––––––––

def label_width(count: int) -> int:
    """Column width that fits every prompt label for a *count*-rotor machine."""
    return max(
        len("Rotor order (left to right):"),
        len("Pairs (Enter for none):"),
        len(f"{count} ring settings 1-{len(ALPHABET)}:"),
        len(f"Start key ({count} letters):"),
    )


def get_machine_settings() -> MachineSettings:
    """Collect settings from the operator, one prompt per machine part."""
    ml = label_width(1)
    rotors = get_rotor_selection(ml)
    reflector = get_reflector_selection(ml)
    plugs = get_plugboard(ml)

    # count-dependent prompts only known once the rotor order is in
    ml = label_width(len(rotors))
    rings = get_ring_settings(len(rotors), ml)
    key = get_start_key(len(rotors), ml)
    return MachineSettings(reflector=reflector, rotors=rotors, rings=rings, key=key, plugs=plugs)


# ────────────────────────────────────────────────────────────────────────
#  2. Text helpers
# ────────────────────────────────────────────────────────────────────────


def normalise_message(msg: str) -> str:
    """Upper-case ASCII letters only; anything else is left for the machine to judge."""
    return "".join(ch.upper() if ch.isascii() else ch for ch in msg)


def to_blocks(text: str, block: int) -> str:
    """Regroup *text* into space-separated blocks; ``block=0`` leaves it alone."""
    if block <= 0:
        return text
    flat = "".join(text.split())
    return " ".join(flat[i : i + block] for i in range(0, len(flat), block))


__all__ = [
    "get_machine_settings",
    "label_width",
    "normalise_message",
    "to_blocks",
]
