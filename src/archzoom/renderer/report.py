"""Write exported documents into a report directory."""

from __future__ import annotations

from pathlib import Path

CLASSES_FILE = "classes.json"
VIOLATIONS_FILE = "violations.json"


def write_report(
    output_dir: Path, classes_json: str, violations_json: str | None = None
) -> list[Path]:
    """Write the structure (and optional violations) JSON into *output_dir*."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = [output_dir / CLASSES_FILE]
    written[0].write_text(classes_json, encoding="utf-8")
    violations_path = output_dir / VIOLATIONS_FILE
    if violations_json is None:
        # Violations from an earlier run into this directory are stale.
        violations_path.unlink(missing_ok=True)
    else:
        violations_path.write_text(violations_json, encoding="utf-8")
        written.append(violations_path)
    return written
