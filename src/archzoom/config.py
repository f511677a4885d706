"""Read archzoom settings from .archzoom.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Export settings."""

    # Drop packages that end up without classes and subpackages.  Off by
    # default so every registered package stays visible.
    prune_empty_packages: bool = False
    indent: int | None = None


def read_config(directory: Path) -> Config:
    """Return the settings found in *directory*, falling back to defaults."""
    table = _read_table(directory)
    if table is None:
        return Config()

    config = Config()
    prune = table.get("prune_empty_packages")
    if isinstance(prune, bool):
        config.prune_empty_packages = prune
    elif prune is not None:
        logger.warning("Ignoring non-boolean prune_empty_packages=%r", prune)
    indent = table.get("indent")
    if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
        config.indent = indent
    elif indent is not None:
        logger.warning("Ignoring invalid indent=%r", indent)
    return config


def _read_table(directory: Path) -> dict | None:
    # Try .archzoom.toml first
    archzoom_toml = directory / ".archzoom.toml"
    if archzoom_toml.exists():
        try:
            with open(archzoom_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("archzoom", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Could not read %s: %s", archzoom_toml, e)

    # Fall back to [tool.archzoom] in pyproject.toml
    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("archzoom")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Could not read %s: %s", pyproject, e)

    return None
