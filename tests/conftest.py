"""
Pytest configuration and fixtures for archzoom tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

SAMPLE_DUMP = {
    "classes": [
        {
            "name": "com.x.A",
            "superclass": "java.lang.Object",
            "interfaces": ["com.x.api.Service"],
            "fields": ["b"],
            "methods": ["run"],
            "dependencies": [
                {"target": "com.x.B", "type": "FIELD_TYPE", "line": 7},
                {"target": "java.lang.Object", "type": "EXTENDS", "line": 3},
                {"target": "com.x.api.Service", "type": "IMPLEMENTS", "line": 3},
            ],
        },
        {
            "name": "com.x.api.Service",
            "interface": True,
            "methods": ["run"],
        },
    ],
    "results": [
        {
            "rule": "no classes should depend on com.x.B",
            "violations": [
                {
                    "message": "Rule violated",
                    "dependencies": [
                        {
                            "origin": "com.x.A",
                            "target": "com.x.B",
                            "type": "FIELD_TYPE",
                            "line": 7,
                            "description": "Field <com.x.A.b> has type <com.x.B> in (A.java:7)",
                        }
                    ],
                }
            ],
        }
    ],
}


@pytest.fixture
def sample_dump() -> dict:
    """A small analysis dump as decoded data."""
    return yaml.safe_load(yaml.safe_dump(SAMPLE_DUMP))


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    """Write the sample dump as YAML."""
    path = tmp_path / "analysis.yaml"
    path.write_text(yaml.safe_dump(SAMPLE_DUMP), encoding="utf-8")
    return path
