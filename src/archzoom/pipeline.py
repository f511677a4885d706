"""Orchestrator: detect → load → export → write."""

from __future__ import annotations

import logging
from pathlib import Path

from archzoom.config import Config, read_config
from archzoom.detect import detect_loader
from archzoom.exporter import export_to_json
from archzoom.renderer.report import write_report
from archzoom.violations import export_violations_to_json

logger = logging.getLogger(__name__)

DEFAULT_REPORT_DIR = "archzoom-report"


def run(
    input_path: Path,
    *,
    output_dir: Path | None = None,
    config: Config | None = None,
) -> Path:
    """Run the full archzoom pipeline and return the report directory."""
    input_path = input_path.resolve()
    loader = detect_loader(input_path)
    if loader is None:
        raise ValueError(f"No loader for {input_path.name!r} (expected .json, .yaml or .yml)")
    logger.debug("Loader: %s", type(loader).__name__)

    config = config or read_config(input_path.parent)
    dump = loader.load(input_path)

    classes_json = export_to_json(
        dump.classes,
        prune_empty=config.prune_empty_packages,
        indent=config.indent,
    )
    violations_json = (
        export_violations_to_json(dump.results, indent=config.indent)
        if dump.results
        else None
    )

    out_dir = output_dir or (input_path.parent / DEFAULT_REPORT_DIR)
    for path in write_report(out_dir, classes_json, violations_json):
        logger.info("Generated %s", path)
    return out_dir
