"""Tests for the interactive prompt chain and text helpers."""

from collections.abc import Callable, Sequence

import pytest

from settings import MachineSettings
from utilities import get_machine_settings, label_width, normalise_message, to_blocks

Feed = Callable[[Sequence[str]], None]


class TestPromptChain:
    def test_happy_path(self, scripted_input: Feed) -> None:
        scripted_input(["i ii iii", "b", "", "1 1 1", "aaa"])
        assert get_machine_settings() == MachineSettings()

    def test_reprompts_until_valid(self, scripted_input: Feed, capsys: pytest.CaptureFixture[str]) -> None:
        scripted_input([
            "",              # no rotors
            "I II IX",       # unknown rotor
            "III I",
            "Q",             # unknown reflector
            "thinc",
            "AA",            # self pair
            "AB BC",         # reused letter
            "ab cd",
            "1 1 1",         # wrong count
            "1 27",          # out of range
            "2 26",
            "ABC",           # wrong length
            "A1",            # not a letter
            "q e",
        ])
        settings = get_machine_settings()
        assert settings == MachineSettings(
            reflector="ThinC", rotors=["III", "I"], rings=[2, 26], key="QE", plugs=["AB", "CD"]
        )
        out = capsys.readouterr().out
        assert out.count("❌") == 9
        assert "already in use" in out

    def test_ring_settings_need_ascii_digits(self, scripted_input: Feed, capsys: pytest.CaptureFixture[str]) -> None:
        scripted_input(["I II III", "B", "", "² 1 1", "１ 1 1", "2 1 1", "AAA"])
        assert get_machine_settings().rings == [2, 1, 1]
        assert capsys.readouterr().out.count("❌") == 2

    def test_prompts_padded_for_actual_rotor_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        answers = iter(["I II III IV", "B", "", "1 1 1 1", "ABCD"])
        prompts: list[str] = []

        def _input(prompt: str = "") -> str:
            prompts.append(prompt)
            return next(answers)

        monkeypatch.setattr("builtins.input", _input)
        assert get_machine_settings().key == "ABCD"
        width = label_width(4)
        assert prompts[-2] == f"{'4 ring settings 1-26:':<{width}} "
        assert prompts[-1] == f"{'Start key (4 letters):':<{width}} "

    @pytest.mark.parametrize("count", [1, 3, 12, 1_000_000_000])
    def test_label_width_fits_count_dependent_labels(self, count: int) -> None:
        width = label_width(count)
        assert width >= len("Rotor order (left to right):")
        assert width >= len(f"Start key ({count} letters):")
        assert width >= len(f"{count} ring settings 1-26:")


class TestTextHelpers:
    def test_normalise_uppercases_ascii(self) -> None:
        assert normalise_message("Hello World") == "HELLO WORLD"

    def test_normalise_keeps_non_ascii(self) -> None:
        assert normalise_message("straße") == "STRAßE"

    @pytest.mark.parametrize(
        ("text", "block", "expected"),
        [
            ("BDZGO", 0, "BDZGO"),
            ("BDZGO", 2, "BD ZG O"),
            ("BD ZGO", 5, "BDZGO"),
            ("", 5, ""),
        ],
    )
    def test_to_blocks(self, text: str, block: int, expected: str) -> None:
        assert to_blocks(text, block) == expected
