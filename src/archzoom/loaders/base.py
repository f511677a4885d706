"""Loader protocol — all analysis dump loaders conform to this interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from archzoom.model import AnalysisDump


class Loader(Protocol):
    """Protocol for analysis dump loaders."""

    def can_handle(self, path: Path) -> bool:
        """Return True if this loader understands the file at *path*."""
        ...

    def load(self, path: Path) -> AnalysisDump:
        """Read *path* and return the classes and rule results it holds."""
        ...
