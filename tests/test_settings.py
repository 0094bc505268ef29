"""Tests for machine settings: JSON files and building machines."""

import json
from pathlib import Path

import pytest

from errors import PlugboardError, ReflectorError, RotorError
from settings import MachineSettings, build_machine, load_settings, save_settings


class TestMachineSettings:
    def test_defaults_build_the_reference_machine(self) -> None:
        assert build_machine(MachineSettings()).encrypt("AAAAA") == "BDZGO"

    def test_from_dict(self) -> None:
        settings = MachineSettings.from_dict(
            {"reflector": "c", "rotors": ["V", "I"], "rings": [3, 4], "key": ["Q", "E"], "plugs": ["AB"]}
        )
        assert settings == MachineSettings(reflector="c", rotors=["V", "I"], rings=[3, 4], key="QE", plugs=["AB"])

    def test_plugs_optional(self) -> None:
        settings = MachineSettings.from_dict({"reflector": "B", "rotors": ["I"], "rings": [1], "key": "A"})
        assert settings.plugs == []

    def test_missing_keys_listed(self) -> None:
        with pytest.raises(ValueError, match="key, rings"):
            MachineSettings.from_dict({"reflector": "B", "rotors": ["I"]})

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "B I II III",
            {"reflector": "B", "rotors": "I", "rings": [1], "key": "A"},
            {"reflector": "B", "rotors": ["I"], "rings": 1, "key": "A"},
            {"reflector": "B", "rotors": ["I"], "rings": [1], "key": 5},
            {"reflector": "B", "rotors": ["I"], "rings": [1], "key": [1]},
            {"reflector": "B", "rotors": ["I"], "rings": [1], "key": "A", "plugs": "AB"},
            {"reflector": "B", "rotors": ["I"], "rings": [1], "key": "A", "plugs": [12]},
        ],
    )
    def test_wrong_shapes_are_value_errors(self, data: object) -> None:
        with pytest.raises(ValueError, match="Config"):
            MachineSettings.from_dict(data)  # type: ignore[arg-type]

    def test_defaults_are_not_shared(self) -> None:
        first, second = MachineSettings(), MachineSettings()
        first.rotors.append("IV")
        assert second.rotors == ["I", "II", "III"]


class TestSettingsFiles:
    def test_save_then_load(self, tmp_path: Path) -> None:
        path = tmp_path / "enigma.json"
        original = MachineSettings(reflector="ThinB", rotors=["VI", "II"], rings=[2, 26], key="ZA", plugs=["QW"])
        save_settings(original, path)
        assert json.loads(path.read_text(encoding="utf-8"))["reflector"] == "ThinB"
        assert load_settings(path) == original

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)


class TestBuildMachine:
    def test_names_are_case_insensitive(self) -> None:
        machine = build_machine(MachineSettings(reflector="b", rotors=["i", "ii", "iii"]))
        assert machine.encrypt("AAAAA") == "BDZGO"

    def test_ring_count_mismatch(self) -> None:
        with pytest.raises(ValueError, match="ring settings"):
            build_machine(MachineSettings(rings=[1, 1]))

    def test_key_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="key length"):
            build_machine(MachineSettings(key="AAAA"))

    def test_unknown_rotor(self) -> None:
        with pytest.raises(RotorError):
            build_machine(MachineSettings(rotors=["I", "II", "IX"]))

    def test_unknown_reflector(self) -> None:
        with pytest.raises(ReflectorError):
            build_machine(MachineSettings(reflector="D"))

    def test_bad_ring(self) -> None:
        with pytest.raises(RotorError):
            build_machine(MachineSettings(rings=[1, 27, 1]))

    def test_bad_plugs(self) -> None:
        with pytest.raises(PlugboardError):
            build_machine(MachineSettings(plugs=["AB", "BC"]))

    def test_no_rotors(self) -> None:
        with pytest.raises(RotorError):
            build_machine(MachineSettings(rotors=[], rings=[], key=""))
