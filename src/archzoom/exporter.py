"""Export analyzed classes as the package tree + dependency graph JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from archzoom.classify import parse_java_element
from archzoom.filters import is_dependency_relevant
from archzoom.model import (
    CodeElement,
    Dependency,
    DependencyEdge,
    JavaClass,
    PackageNode,
)
from archzoom.tree import build_tree, insert, normalize

logger = logging.getLogger(__name__)

PACKAGE_TYPE = "package"


@dataclass
class ClassesToVisualize:
    """The analyzed classes plus every class they only reference."""

    classes: list[JavaClass]
    dependency_classes: list[JavaClass]

    @classmethod
    def from_classes(cls, classes: Iterable[JavaClass]) -> ClassesToVisualize:
        primary = list(dict.fromkeys(classes))
        seen = set(primary)
        dependency_classes: list[JavaClass] = []
        for java_class in primary:
            for dependency in java_class.dependencies:
                if dependency.target not in seen:
                    seen.add(dependency.target)
                    dependency_classes.append(dependency.target)
        return cls(primary, dependency_classes)

    @property
    def packages(self) -> set[str]:
        return {c.package_name for c in self.classes} | {
            c.package_name for c in self.dependency_classes
        }


def create_package_class_tree(
    to_visualize: ClassesToVisualize, *, prune_empty: bool = False
) -> PackageNode:
    root = build_tree(to_visualize.packages)
    for java_class in [*to_visualize.classes, *to_visualize.dependency_classes]:
        insert(parse_java_element(java_class), root)
    normalize(root, prune_empty=prune_empty)
    return root


def dependency_edge(dependency: Dependency) -> DependencyEdge:
    return DependencyEdge(
        origin=dependency.origin.name,
        target=dependency.target.name,
        description=dependency.type.label,
        type=dependency.type.name,
    )


def extract_dependencies(classes: Iterable[JavaClass]) -> set[DependencyEdge]:
    """Return the relevant direct dependencies of *classes*, deduplicated."""
    edges: set[DependencyEdge] = set()
    dropped = 0
    for java_class in classes:
        for dependency in java_class.dependencies:
            if is_dependency_relevant(dependency):
                edges.add(dependency_edge(dependency))
            else:
                dropped += 1
    logger.debug("dependencies: %d edges kept, %d filtered out", len(edges), dropped)
    return edges


def export_graph(
    classes: Iterable[JavaClass], *, prune_empty: bool = False
) -> dict:
    """Build the structure document for *classes* as plain JSON data."""
    to_visualize = ClassesToVisualize.from_classes(classes)
    logger.debug(
        "export: %d classes, %d referenced classes, %d packages",
        len(to_visualize.classes),
        len(to_visualize.dependency_classes),
        len(to_visualize.packages),
    )
    root = create_package_class_tree(to_visualize, prune_empty=prune_empty)
    edges = extract_dependencies(to_visualize.classes)
    return {
        "root": _package_to_dict(root),
        "dependencies": [
            _edge_to_dict(e)
            for e in sorted(edges, key=lambda e: (e.origin, e.target, e.description))
        ],
    }


def export_to_json(
    classes: Iterable[JavaClass],
    *,
    prune_empty: bool = False,
    indent: int | None = None,
) -> str:
    return json.dumps(export_graph(classes, prune_empty=prune_empty), indent=indent)


def _element_to_dict(element: CodeElement) -> dict:
    d: dict = {
        "name": element.name,
        "fullName": element.full_name,
        "type": element.kind,
    }
    if element.superclass is not None:
        d["superclass"] = element.superclass
    d["interfaces"] = list(element.interfaces)
    d["fields"] = list(element.fields)
    d["methods"] = list(element.methods)
    return d


def _package_to_dict(node: PackageNode) -> dict:
    return {
        "name": node.name,
        "fullName": node.full_name,
        "type": PACKAGE_TYPE,
        "subpackages": [
            _package_to_dict(node.subpackages[k]) for k in sorted(node.subpackages)
        ],
        "classes": [_element_to_dict(node.classes[k]) for k in sorted(node.classes)],
    }


def _edge_to_dict(edge: DependencyEdge) -> dict:
    return {
        "origin": edge.origin,
        "target": edge.target,
        "type": edge.type,
        "description": edge.description,
    }
