"""Pick the loader for an analysis dump file."""

from __future__ import annotations

from pathlib import Path

from archzoom.loaders import JsonDumpLoader, YamlDumpLoader
from archzoom.loaders.base import Loader


def detect_loader(path: Path) -> Loader | None:
    """Return the first loader that can read *path*, or None."""
    loaders: list[Loader] = [JsonDumpLoader(), YamlDumpLoader()]
    for loader in loaders:
        if loader.can_handle(path):
            return loader
    return None
