"""Shared pytest fixtures for the Enigma tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

import pytest

from debug import Debug
from enigma import Enigma
from keyboard_and_plugboard import Plugboard
from rotor_and_reflector import ReflectorType, Rotor, RotorType


@pytest.fixture(autouse=True)
def _reset_debug() -> Iterator[None]:
    """Component toggles are shared; keep tests from leaking them."""
    yield
    Debug().reset()


@pytest.fixture
def make_machine() -> Callable[..., Enigma]:
    """Factory for machines; defaults are reflector B, I-II-III, rings 1, key AAA."""

    def _make(
        rotors: Sequence[str] = ("I", "II", "III"),
        key: str = "AAA",
        rings: Sequence[int] = (1, 1, 1),
        plugs: Sequence[str] = (),
        reflector: ReflectorType = ReflectorType.B,
    ) -> Enigma:
        stack = [
            Rotor(RotorType(name), letter, ring)
            for name, letter, ring in zip(rotors, key, rings)
        ]
        return Enigma(reflector, stack, Plugboard(plugs))

    return _make


@pytest.fixture
def scripted_input(monkeypatch: pytest.MonkeyPatch) -> Callable[[Sequence[str]], None]:
    """Feed ``input()`` from a list; EOFError once it runs dry."""

    def _feed(lines: Sequence[str]) -> None:
        it = iter(lines)

        def _input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", _input)

    return _feed
