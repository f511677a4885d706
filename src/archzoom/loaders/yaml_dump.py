"""Load analysis dumps written as YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from archzoom.loaders.dump import DumpFormatError, parse_dump
from archzoom.model import AnalysisDump

logger = logging.getLogger(__name__)

_SUFFIXES = {".yaml", ".yml"}


class YamlDumpLoader:
    def can_handle(self, path: Path) -> bool:
        return path.suffix.lower() in _SUFFIXES

    def load(self, path: Path) -> AnalysisDump:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DumpFormatError(f"{path}: invalid YAML: {e}") from e
        logger.debug("Loaded YAML dump %s", path)
        return parse_dump(data)
