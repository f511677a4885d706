"""Load analysis dumps written as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from archzoom.loaders.dump import DumpFormatError, parse_dump
from archzoom.model import AnalysisDump

logger = logging.getLogger(__name__)


class JsonDumpLoader:
    def can_handle(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def load(self, path: Path) -> AnalysisDump:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DumpFormatError(f"{path}: invalid JSON: {e}") from e
        logger.debug("Loaded JSON dump %s", path)
        return parse_dump(data)
