# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from enigma import Enigma
from keyboard_and_plugboard import Plugboard
from rotor_and_reflector import ReflectorType, Rotor, RotorType

REQUIRED = {"reflector", "rotors", "rings", "key"}


@dataclass(slots=True)
class MachineSettings:
    """Everything an operator sets before the first key press."""

    reflector: str = "B"
    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])
    rings: List[int] = field(default_factory=lambda: [1, 1, 1])
    key: str = "AAA"                 # one start letter per rotor
    plugs: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
        missing = REQUIRED - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")

        for name in ("rotors", "rings", "plugs"):
            if not isinstance(data.get(name, []), list):
                raise ValueError(f"Config key {name!r} must be a list, got {type(data[name]).__name__}")
        if not all(isinstance(p, str) for p in data.get("plugs", [])):
            raise ValueError("Config key 'plugs' must list two-letter strings")
        if not isinstance(data["key"], (str, list)) or \
                not all(isinstance(ch, str) for ch in data["key"]):
            raise ValueError(f"Config key 'key' must be a string or a list of letters, got {data['key']!r}")
        return cls(
            reflector=data["reflector"],
            rotors=list(data["rotors"]),
            rings=list(data["rings"]),
            key="".join(data["key"]),
            plugs=list(data.get("plugs", [])),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def load_settings(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> None:
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")


def build_machine(settings: MachineSettings) -> Enigma:
    """Resolve names and build a fresh machine; core errors propagate."""
    n = len(settings.rotors)
    if len(settings.rings) != n:
        raise ValueError(f"ring settings length mismatch: {len(settings.rings)} for {n} rotors")
    if len(settings.key) != n:
        raise ValueError(f"key length mismatch: {len(settings.key)} letters for {n} rotors")

    reflector = ReflectorType.from_name(settings.reflector)
    rotors = [
        Rotor(RotorType.from_name(name), letter, ring)
        for name, letter, ring in zip(settings.rotors, settings.key, settings.rings)
    ]
    return Enigma(reflector, rotors, Plugboard(settings.plugs))
