# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Sequence

from debug import Debug
from errors import InputError, PlugboardError

debug = Debug()

ALPHABET = string.ascii_uppercase
MAX_PAIRS = len(ALPHABET) // 2


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Letter ↔ position codec over A–Z."""

    def __init__(self) -> None:
        self.alphabet: str = ALPHABET
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(ALPHABET)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        if not isinstance(letter, str) or letter not in self.alpha_to_index:
            raise InputError(
                f"Expected an uppercase letter A–Z, got {letter!r}",
                value=letter,
                constraint="letter must be one of A–Z",
            )
        signal = self.alpha_to_index[letter]
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if isinstance(signal, bool) or not isinstance(signal, int) or not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise InputError(
                f"Expected a position in 0–{hi}, got {signal!r}",
                value=signal,
                constraint=f"position must be in 0–{hi}",
            )
        return self.alphabet[signal]


KEYBOARD = Keyboard()


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[str | tuple[str, str]] = ()) -> None:
        if len(pairs) > MAX_PAIRS:
            raise PlugboardError(
                f"Too many plug pairs: {len(pairs)} (max {MAX_PAIRS})",
                value=len(pairs),
                constraint=f"at most {MAX_PAIRS} pairs",
            )

        self._map: list[int] = list(range(len(ALPHABET)))
        accepted: list[tuple[int, int]] = []

        for raw in pairs:
            # normalise to (a, b)
            if len(raw) != 2:
                raise PlugboardError(
                    f"Pair {raw!r} must be exactly 2 letters",
                    value=raw,
                    constraint="a pair joins two letters",
                )
            a, b = raw

            if a == b:
                raise PlugboardError(
                    f"Cannot connect plug {a} to {b}!",
                    value=a,
                    constraint="a letter cannot be paired with itself",
                )

            pa, pb = KEYBOARD.forward(a), KEYBOARD.forward(b)

            # walk earlier pairs in order; within one, the first letter is checked first
            for prev in accepted:
                for letter, pos in ((a, pa), (b, pb)):
                    if pos in prev:
                        raise PlugboardError(
                            f"Cannot connect plug {letter}, already in use!",
                            value=letter,
                            constraint="each letter may appear in one pair only",
                        )

            # passed validation → commit swap
            accepted.append((pa, pb))
            self._map[pa], self._map[pb] = pb, pa

        self._pairs: tuple[tuple[int, int], ...] = tuple(accepted)

    @property
    def pairs(self) -> tuple[str, ...]:
        return tuple(ALPHABET[a] + ALPHABET[b] for a, b in self._pairs)

    def scramble(self, signal: int) -> int:
        mapped = self._map[signal]
        debug.log("plugboard", f"{ALPHABET[signal]}->{ALPHABET[mapped]}")
        return mapped

    forward = scramble        # alias: signal in
    backward = scramble       # alias: signal out

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs) or '(empty)'}>"
