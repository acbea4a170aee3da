"""Saving and loading of whole projects."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from opendaw.state.daw import DawState

__all__ = ["ProjectState"]


@dataclass
class ProjectState:
    """On-disk project format wrapping the DAW state."""

    daw_state: DawState = field(default_factory=DawState)

    def to_bytes(self) -> bytes:
        """Encode the persistent part of the project."""
        document = {"daw_state": self.daw_state.to_dict()}
        return json.dumps(document, ensure_ascii=False).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> ProjectState:
        """Decode a project; raise ValueError if the data is malformed."""
        try:
            document = json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ValueError(f"invalid project data: {exc}") from exc
        if not isinstance(document, dict) or "daw_state" not in document:
            raise ValueError("project data has no 'daw_state'")
        try:
            daw_state = DawState.from_dict(document["daw_state"])
        except (TypeError, KeyError) as exc:
            raise ValueError(f"invalid project data: {exc}") from exc
        return cls(daw_state)

    def save_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write the project to ``path``."""
        Path(path).write_bytes(self.to_bytes())

    @classmethod
    def load_from_file(cls, path: str | os.PathLike[str]) -> ProjectState:
        """Read a project from ``path``."""
        return cls.from_bytes(Path(path).read_bytes())