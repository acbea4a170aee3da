"""Track freeze state: a rendered audio cache that bypasses live processing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["FreezeState"]


@dataclass
class FreezeState:
    """Whether a track is frozen, where its render lives and which version it is of."""

    is_frozen: bool = False
    cached_wav_path: Path | None = None
    source_version: int = 0

    def freeze(self, cache_path: str | os.PathLike[str], version: int) -> None:
        """Mark the track frozen with the rendered file at ``cache_path``."""
        self.is_frozen = True
        self.cached_wav_path = Path(cache_path)
        self.source_version = version

    def unfreeze(self) -> None:
        """Unfreeze, keeping the cached file for possible reuse."""
        self.is_frozen = False

    def clear_cache(self) -> None:
        """Forget the cached file and unfreeze."""
        self.cached_wav_path = None
        self.is_frozen = False

    @property
    def is_active(self) -> bool:
        """True when frozen and a cached render is available."""
        return self.is_frozen and self.cached_wav_path is not None