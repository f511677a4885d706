"""archzoom — export architecture analyses for interactive dependency graphs."""

from archzoom.exporter import export_graph, export_to_json
from archzoom.tree import StructuralError
from archzoom.violations import export_violations_to_json, group_violations

__all__ = [
    "StructuralError",
    "export_graph",
    "export_to_json",
    "export_violations_to_json",
    "group_violations",
]
