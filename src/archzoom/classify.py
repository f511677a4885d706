"""Turn analyzed classes into exportable code elements."""

from __future__ import annotations

from archzoom.model import CodeElement, JavaClass

CLASS_KIND = "class"
INTERFACE_KIND = "interface"


def classify(java_class: JavaClass) -> str:
    """Return the element kind of *java_class*."""
    return INTERFACE_KIND if java_class.is_interface else CLASS_KIND


def parse_java_element(java_class: JavaClass) -> CodeElement:
    return CodeElement(
        name=java_class.simple_name,
        full_name=java_class.name,
        package_name=java_class.package_name,
        kind=classify(java_class),
        superclass=java_class.superclass,
        interfaces=tuple(java_class.interfaces),
        fields=tuple(java_class.fields),
        methods=tuple(java_class.methods),
    )
