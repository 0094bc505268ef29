# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import InputError, RotorError
from keyboard_and_plugboard import KEYBOARD, Plugboard
from rotor_and_reflector import Reflector, ReflectorType, Rotor

debug = Debug()

# keys that print as-is without moving the rotors
WHITESPACE = frozenset(" \t\n\r\f")


class Enigma:
    """Rotor machine: plugboard → rotors → reflector → rotors → plugboard.

    ``rotors`` is ordered leftmost first, as read off the machine; the
    rightmost rotor is the fast one. Rotor positions are the only state
    that changes, so one instance must not be shared between callers
    without external locking.
    """

    def __init__(
        self,
        reflector_type: ReflectorType,
        rotors: Sequence[Rotor],
        plugboard: Plugboard,
    ) -> None:
        if not rotors:
            raise RotorError(
                "At least one rotor is required",
                value=len(rotors),
                constraint="rotor stack must not be empty",
            )
        self.rotors: list[Rotor] = list(rotors)
        self.reflector = Reflector(reflector_type)
        self.plugboard = plugboard

    @property
    def positions(self) -> str:
        """Window letters, leftmost rotor first."""
        return "".join(r.window for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Rightmost rotor always moves; carry leftwards while notches hit."""
        for rotor in reversed(self.rotors):
            if not rotor.step():
                break
        debug.log("stepping", f"Rotor windows {self.positions}")

    # ── signal path  ────────────────────────────────────────────

    def _rotor_scramble(self, signal: int) -> int:
        for rotor in reversed(self.rotors):
            signal = rotor.scramble_left(signal)

        signal = self.reflector.scramble(signal)

        for rotor in self.rotors:
            signal = rotor.scramble_right(signal)
        return signal

    def encypher(self, letter: str) -> str:
        """Press one key: step, then run the signal through the machine."""
        self._step_rotors()

        signal = KEYBOARD.forward(letter)
        signal = self.plugboard.forward(signal)
        signal = self._rotor_scramble(signal)
        signal = self.plugboard.backward(signal)
        out_ch = KEYBOARD.backward(signal)

        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    # ── public API  ─────────────────────────────────────────────

    def encrypt(self, text: str) -> str:
        """Encipher *text*; the same call with a fresh machine deciphers.

        The whole string is checked before any key is pressed, so an
        invalid character raises InputError with the rotors untouched.
        """
        self._validate(text)
        return "".join(
            ch if ch in WHITESPACE else self.encypher(ch)
            for ch in text
        )

    decrypt = encrypt

    @staticmethod
    def _validate(text: str) -> None:
        if not text.isascii():
            bad = next(ch for ch in text if not ch.isascii())
            raise InputError(
                f"Input is not ASCII: {bad!r}",
                value=bad,
                constraint="input must be ASCII",
            )
        for ch in text:
            if ch not in WHITESPACE:
                KEYBOARD.forward(ch)

    def __repr__(self) -> str:
        order = " ".join(r.rotor_type.value for r in self.rotors)
        return (
            f"<Enigma {self.reflector.reflector_type.value} [{order}] "
            f"pos={self.positions} {self.plugboard!r}>"
        )
