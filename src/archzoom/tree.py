"""Build the package tree that holds the exported code elements."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from archzoom.model import CodeElement, PackageNode

logger = logging.getLogger(__name__)

PACKAGE_SEPARATOR = "."


class StructuralError(LookupError):
    """An element belongs to a package that was never registered in the tree."""


def build_tree(package_paths: Iterable[str]) -> PackageNode:
    """Return a root node with one node per package path and all its ancestors."""
    root = PackageNode(name="", full_name="")
    for path in package_paths:
        if not path:
            continue
        node = root
        parts = path.split(PACKAGE_SEPARATOR)
        for i, segment in enumerate(parts):
            child = node.subpackages.get(segment)
            if child is None:
                child = PackageNode(
                    name=segment,
                    full_name=PACKAGE_SEPARATOR.join(parts[: i + 1]),
                )
                node.subpackages[segment] = child
            node = child
    return root


def find_package(root: PackageNode, path: str) -> PackageNode | None:
    """Resolve *path* segment by segment, or return None if it is missing."""
    if not path:
        return root
    node = root
    for segment in path.split(PACKAGE_SEPARATOR):
        node = node.subpackages.get(segment)
        if node is None:
            return None
    return node


def insert(element: CodeElement, root: PackageNode) -> None:
    """Add *element* to the node of its package; re-inserting is a no-op."""
    node = find_package(root, element.package_name)
    if node is None:
        raise StructuralError(
            f"package {element.package_name!r} of {element.full_name!r} "
            "is not part of the package tree"
        )
    node.classes.setdefault(element.full_name, element)


def normalize(root: PackageNode, *, prune_empty: bool = False) -> None:
    """Collapse chains of packages that hold nothing but a single subpackage.

    ``com`` -> ``example`` -> ``Foo`` becomes ``com.example`` -> ``Foo`` when
    ``com`` has no classes and no other subpackage.  The root itself is
    never merged.  With *prune_empty*, packages left without classes and
    subpackages are dropped as well.
    """
    # Post-order so that pruning can cascade up through emptied parents.
    order: list[PackageNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(node.subpackages.values())

    collapsed = 0
    for node in reversed(order):
        if prune_empty:
            node.subpackages = {
                key: child
                for key, child in node.subpackages.items()
                if child.subpackages or child.classes
            }
        if node.is_root:
            continue
        while len(node.subpackages) == 1 and not node.classes:
            (child,) = node.subpackages.values()
            node.name = f"{node.name}{PACKAGE_SEPARATOR}{child.name}"
            node.full_name = child.full_name
            node.subpackages = child.subpackages
            node.classes = child.classes
            collapsed += 1

    # Children are keyed by their (possibly merged) name.
    for node in order:
        node.subpackages = {child.name: child for child in node.subpackages.values()}

    if collapsed:
        logger.debug("normalize: collapsed %d single-child packages", collapsed)
