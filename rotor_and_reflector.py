# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from debug import Debug
from errors import ReflectorError, RotorError
from keyboard_and_plugboard import ALPHABET, KEYBOARD

debug = Debug()

SIZE = len(ALPHABET)


class RotorType(Enum):
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"
    VII = "VII"
    VIII = "VIII"

    @classmethod
    def from_name(cls, name: str) -> "RotorType":
        """Case-insensitive lookup: ``"iii"`` → ``RotorType.III``."""
        try:
            return cls(str(name).upper())
        except ValueError:
            raise RotorError(
                f"Invalid rotor type {name!r}. Expected one of {[t.value for t in cls]}",
                value=name,
                constraint="rotor type must be I–VIII",
            ) from None


class ReflectorType(Enum):
    BETA = "Beta"
    GAMMA = "Gamma"
    A = "A"
    B = "B"
    C = "C"
    THIN_B = "ThinB"
    THIN_C = "ThinC"
    ETW = "ETW"

    @classmethod
    def from_name(cls, name: str) -> "ReflectorType":
        """Case-insensitive lookup: ``"thinb"`` → ``ReflectorType.THIN_B``."""
        wanted = str(name).lower()
        for t in cls:
            if t.value.lower() == wanted:
                return t
        raise ReflectorError(
            f"Invalid reflector type {name!r}. Expected one of {[t.value for t in cls]}",
            value=name,
            constraint="reflector type must be a known reflector",
        )


class Direction(Enum):
    LEFT = "left"       # towards the reflector
    RIGHT = "right"     # coming back from it


# ────────────────────────────────────────────────────────────────────────
#  Wheel database: wiring + turnover (window letter *after* the carry step)
# ────────────────────────────────────────────────────────────────────────

ROTOR_WIRINGS: Dict[RotorType, Tuple[str, str]] = {
    RotorType.I:    ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "R"),
    RotorType.II:   ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "F"),
    RotorType.III:  ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "W"),
    RotorType.IV:   ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "K"),
    RotorType.V:    ("VZBRGITYUPSDNHLXAWMJQOFECK", "A"),
    RotorType.VI:   ("JPGVOUMFYQBENHZRDKASXLICTW", "AN"),
    RotorType.VII:  ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "AN"),
    RotorType.VIII: ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "AN"),
}

REFLECTOR_WIRINGS: Dict[ReflectorType, str] = {
    ReflectorType.BETA:   "LEYJVCNIXWPBQMDRTAKZGFUHOS",
    ReflectorType.GAMMA:  "FSOKANUERHMBTIYCWLQPZXVGJD",
    ReflectorType.A:      "EJMZALYXVBWFCRQUONTSPIKHGD",
    ReflectorType.B:      "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    ReflectorType.C:      "FVPJIAOYEDRZXWGCTKUQSBNMHL",
    ReflectorType.THIN_B: "ENKQAUYWJICOPBLMDXZVFTHRGS",
    ReflectorType.THIN_C: "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
    ReflectorType.ETW:    ALPHABET,
}

# M4 Greek wheels kept under their reflector names; plain permutations, not involutions
GREEK_WHEELS = frozenset({ReflectorType.BETA, ReflectorType.GAMMA})


class Rotor:
    def __init__(self, rotor_type: RotorType, key: str, ring_setting: int) -> None:
        wiring, notches = ROTOR_WIRINGS[rotor_type]

        if isinstance(ring_setting, bool) or not isinstance(ring_setting, int) \
                or not (1 <= ring_setting <= SIZE):
            raise RotorError(
                f"Invalid ring setting {ring_setting!r}. Must be in the range 1 to {SIZE} (inclusive).",
                value=ring_setting,
                constraint=f"ring setting must be in 1–{SIZE}",
            )

        self.rotor_type = rotor_type

        # integer lookup tables
        self._fwd: Tuple[int, ...] = tuple(ALPHABET.index(c) for c in wiring)
        rev = [0] * SIZE
        for i, out in enumerate(self._fwd):
            rev[out] = i
        self._rev: Tuple[int, ...] = tuple(rev)

        self.turnover: frozenset[int] = frozenset(ALPHABET.index(c) for c in notches)
        self.ring_setting = ring_setting - 1
        self.position = KEYBOARD.forward(key)

    @property
    def window(self) -> str:
        """Letter currently showing in the rotor window."""
        return ALPHABET[self.position]

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True when the carry reaches the next rotor."""
        self.position = (self.position + 1) % SIZE
        hit = self.position in self.turnover
        debug.log("stepping", f"Rotor {self.rotor_type.value} -> {self.window}, turnover={hit}")
        return hit

    # ── signal paths ---------------------------------------------
    def scramble(self, sig: int, direction: Direction) -> int:
        offset = (self.position - self.ring_setting) % SIZE
        shift = (sig + offset) % SIZE
        table = self._fwd if direction is Direction.LEFT else self._rev
        out = (table[shift] - offset) % SIZE
        debug.log("rotor", f"{self.rotor_type.value} {direction.value}: {ALPHABET[sig]}->{ALPHABET[out]}")
        return out

    def scramble_left(self, sig: int) -> int:
        return self.scramble(sig, Direction.LEFT)

    def scramble_right(self, sig: int) -> int:
        return self.scramble(sig, Direction.RIGHT)

    def __repr__(self) -> str:
        return f"<Rotor {self.rotor_type.value} pos={self.window} ring={self.ring_setting + 1}>"


class Reflector:
    def __init__(self, reflector_type: ReflectorType) -> None:
        self.reflector_type = reflector_type
        self._map: Tuple[int, ...] = tuple(
            ALPHABET.index(c) for c in REFLECTOR_WIRINGS[reflector_type]
        )

    def scramble(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{ALPHABET[sig]}->{ALPHABET[mapped]}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.reflector_type.value}>"
