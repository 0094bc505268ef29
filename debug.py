# debug.py
from __future__ import annotations

import logging
from typing import Dict

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")


class Debug:
    """Per-component switchboard over the ``ENIGMA`` logger.

    Every module keeps its own ``Debug()`` handle, but the component map is
    shared, so ``Debug().enable("stepping")`` in the CLI reaches the rotors.
    """

    _root_configured: bool = False          # class-level guard
    _components: Dict[str, bool] = {c: False for c in COMPONENTS}
    _enabled: bool = True

    def __init__(self, *, log_to: str | None = None) -> None:
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True
        elif log_to:
            self.add_file(log_to)

        self.logger = logging.getLogger("ENIGMA")
        self.logger.setLevel(logging.DEBUG)     # components do the gating

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug._enabled and Debug._components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def add_file(self, path: str) -> None:
        """Also stream records to *path* (root already configured)."""
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logging.getLogger().addHandler(handler)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._components[component] = not Debug._components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def reset(self) -> None:
        """Back to the import-time state: all components off, global on."""
        Debug._components = {c: False for c in COMPONENTS}
        Debug._enabled = True

    @property
    def enabled(self) -> bool:
        return Debug._enabled

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
