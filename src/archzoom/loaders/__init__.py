"""Loaders for analysis dumps (JSON and YAML)."""

from __future__ import annotations

from archzoom.loaders.dump import DumpFormatError, parse_dump, split_class_name
from archzoom.loaders.json_dump import JsonDumpLoader
from archzoom.loaders.yaml_dump import YamlDumpLoader

__all__ = [
    "DumpFormatError",
    "JsonDumpLoader",
    "YamlDumpLoader",
    "parse_dump",
    "split_class_name",
]
