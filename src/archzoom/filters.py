"""Decide which class dependencies are worth drawing."""

from __future__ import annotations

from archzoom.model import Dependency, DependencyType

# Every class implicitly depends on it.
ROOT_TYPE_NAME = "java.lang.Object"

# JVM type descriptors: "[I" is int[], "[Lcom.x.Foo;" is Foo[].
ARRAY_MARKER = "["
OBJECT_MARKER = "L"

_DEFAULT_INNER_CLASS_TYPES = {
    DependencyType.CONSTRUCTOR_PARAMETER_TYPE,
    DependencyType.FIELD_TYPE,
}


def is_dependency_relevant(dependency: Dependency) -> bool:
    """Return False for synthetic or universally-true edges."""
    return not (
        dependency.target.name == ROOT_TYPE_NAME
        or is_default_dependency_from_inner_to_enclosing_class(dependency)
        or is_dependency_to_primitive_array(dependency)
    )


def is_default_dependency_from_inner_to_enclosing_class(dependency: Dependency) -> bool:
    """Match the ``this$0`` field and constructor parameter javac adds to inner classes."""
    origin = dependency.origin
    from_inner_to_enclosing = (
        origin.is_nested and origin.enclosing_class == dependency.target.name
    )
    is_default = (
        dependency.line == 0 and dependency.type in _DEFAULT_INNER_CLASS_TYPES
    )
    return from_inner_to_enclosing and is_default


def is_dependency_to_primitive_array(dependency: Dependency) -> bool:
    name = dependency.target.name
    return name.startswith(ARRAY_MARKER) and not name.startswith(
        ARRAY_MARKER + OBJECT_MARKER
    )
