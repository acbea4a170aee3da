"""MIDI learn: mapping controller CC messages onto DAW parameters."""

from __future__ import annotations

import threading
from dataclasses import dataclass

__all__ = ["ParameterId", "MidiCcKey", "MidiMappingRegistry"]

_CC_MAX = 127.0


@dataclass(frozen=True)
class ParameterId:
    """Identifier of a DAW parameter."""

    value: int


@dataclass(frozen=True)
class MidiCcKey:
    """A controller number on a MIDI channel."""

    channel: int
    cc_number: int


class MidiMappingRegistry:
    """Thread-safe CC-to-parameter mappings and the parameters' current values."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cc_to_parameter: dict[MidiCcKey, ParameterId] = {}
        self._parameter_values: dict[ParameterId, float] = {}

    def learn_mapping(self, key: MidiCcKey, param_id: ParameterId) -> None:
        """Bind a CC to a parameter, replacing any earlier binding of that CC."""
        with self._lock:
            self._cc_to_parameter[key] = param_id

    def unlearn_mapping(self, key: MidiCcKey) -> None:
        """Remove the binding of a CC, if it has one."""
        with self._lock:
            self._cc_to_parameter.pop(key, None)

    def handle_cc_input(self, key: MidiCcKey, value: int) -> tuple[ParameterId, float] | None:
        """Apply a CC value (0..127) to its mapped parameter, normalised to 0..1.

        Returns the parameter and its new value, or None if the CC is unmapped.
        """
        with self._lock:
            param_id = self._cc_to_parameter.get(key)
            if param_id is None:
                return None
            normalized = value / _CC_MAX
            self._parameter_values[param_id] = normalized
            return param_id, normalized

    def get_parameter_value(self, param_id: ParameterId) -> float | None:
        with self._lock:
            return self._parameter_values.get(param_id)