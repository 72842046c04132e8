"""
Keyboard-to-control-state mapping

Axis keys add/subtract from an accumulator on press/release, so holding two
opposite keys cancels out. The action key sets a boolean flag.

Several physical keys may share one name (A and LEFT both mean "left"). Each
press carries a ``source``; the name takes effect on its first held source and
is released with its last.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Optional, Set, Tuple

from .entities import ControlState

logger = logging.getLogger(__name__)

AXIS_BINDINGS: Dict[str, Tuple[str, int]] = {
    "right": ("move_x", 1),
    "left": ("move_x", -1),
    "up": ("move_y", -1),
    "down": ("move_y", 1),
}

BUTTON_BINDINGS: Dict[str, str] = {
    "space": "action_1",
}


class InputHandler:
    """Writes key edges into a ControlState"""

    def __init__(self, controls: ControlState,
                 axis_bindings: Optional[Dict[str, Tuple[str, int]]] = None,
                 button_bindings: Optional[Dict[str, str]] = None):
        self.controls = controls
        self.axis_bindings = AXIS_BINDINGS if axis_bindings is None else axis_bindings
        self.button_bindings = BUTTON_BINDINGS if button_bindings is None else button_bindings
        self._held: Dict[str, Set[Hashable]] = {}

    def press(self, key: str, source: Optional[Hashable] = None) -> bool:
        """Handle a key-down edge. Returns False for unmapped or already-held keys."""
        if not self._is_mapped(key):
            return False
        source = key if source is None else source
        sources = self._held.setdefault(key, set())
        if source in sources:
            return False
        sources.add(source)
        if len(sources) > 1:
            return True

        if key in self.axis_bindings:
            state, mod = self.axis_bindings[key]
            setattr(self.controls, state, getattr(self.controls, state) + mod)
        if key in self.button_bindings:
            setattr(self.controls, self.button_bindings[key], True)

        logger.debug("press %s -> %s", key, self.controls)
        return True

    def release(self, key: str, source: Optional[Hashable] = None) -> bool:
        """Handle a key-up edge. Releasing a key that is not held is a no-op."""
        source = key if source is None else source
        sources = self._held.get(key)
        if not sources or source not in sources:
            return False
        sources.discard(source)
        if sources:
            return True
        del self._held[key]

        if key in self.axis_bindings:
            state, mod = self.axis_bindings[key]
            setattr(self.controls, state, getattr(self.controls, state) - mod)
        if key in self.button_bindings:
            setattr(self.controls, self.button_bindings[key], False)

        logger.debug("release %s -> %s", key, self.controls)
        return True

    def release_all(self):
        for key, sources in list(self._held.items()):
            for source in list(sources):
                self.release(key, source)

    def is_held(self, key: str) -> bool:
        return key in self._held

    def _is_mapped(self, key: str) -> bool:
        return key in self.axis_bindings or key in self.button_bindings
