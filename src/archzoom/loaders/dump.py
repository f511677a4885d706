"""Convert a decoded analysis dump into the archzoom input model."""

from __future__ import annotations

import logging

from archzoom.model import (
    AnalysisDump,
    Dependency,
    DependencyType,
    EvaluationResult,
    JavaClass,
    Violation,
)

logger = logging.getLogger(__name__)


class DumpFormatError(ValueError):
    """The analysis dump does not have the expected shape."""


def split_class_name(name: str) -> tuple[str, str]:
    """Return ``(package_name, simple_name)`` for a fully qualified class name.

    Array descriptors (``[I``, ``[Lcom.x.Foo;``) live in the unnamed package.
    Nested classes keep their ``Outer$Inner`` simple name.
    """
    if name.startswith("["):
        return "", name
    package, _, simple = name.rpartition(".")
    return package, simple


def parse_dump(data: object) -> AnalysisDump:
    """Build an :class:`AnalysisDump` from decoded JSON/YAML data."""
    if data is None:
        return AnalysisDump()
    if not isinstance(data, dict):
        raise DumpFormatError(
            f"analysis dump must be a mapping, got {type(data).__name__}"
        )

    raw_classes = _require_list(data.get("classes"), "classes")
    raw_results = _require_list(data.get("results"), "results")

    raw_by_name: dict[str, dict] = {}
    for i, raw in enumerate(raw_classes):
        raw = _require_mapping(raw, f"classes[{i}]")
        raw_by_name.setdefault(_require_name(raw, "name", f"classes[{i}]"), raw)

    registry = _ClassRegistry()
    for i, raw in enumerate(raw_classes):
        registry.declare(
            raw, f"classes[{i}]", _owning_package(raw["name"], raw_by_name)
        )

    for i, raw in enumerate(raw_classes):
        origin = registry.get(raw["name"])
        for j, raw_dep in enumerate(
            _require_list(raw.get("dependencies"), f"classes[{i}].dependencies")
        ):
            where = f"classes[{i}].dependencies[{j}]"
            dep = _require_mapping(raw_dep, where)
            origin.dependencies.append(
                _parse_dependency(dep, origin, registry, where)
            )

    results: list[EvaluationResult] = []
    for i, raw in enumerate(raw_results):
        where = f"results[{i}]"
        raw = _require_mapping(raw, where)
        rule = raw.get("rule")
        if not isinstance(rule, str):
            raise DumpFormatError(f"{where}: 'rule' must be a string")
        violations: list[Violation] = []
        for j, raw_violation in enumerate(
            _require_list(raw.get("violations"), f"{where}.violations")
        ):
            vwhere = f"{where}.violations[{j}]"
            raw_violation = _require_mapping(raw_violation, vwhere)
            dependencies = []
            for k, raw_dep in enumerate(
                _require_list(
                    raw_violation.get("dependencies"), f"{vwhere}.dependencies"
                )
            ):
                dwhere = f"{vwhere}.dependencies[{k}]"
                dep = _require_mapping(raw_dep, dwhere)
                origin = registry.resolve(_require_name(dep, "origin", dwhere))
                dependencies.append(_parse_dependency(dep, origin, registry, dwhere))
            violations.append(
                Violation(
                    message=str(raw_violation.get("message", "")),
                    dependencies=dependencies,
                )
            )
        results.append(EvaluationResult(rule_text=rule, violations=violations))

    logger.debug(
        "dump: %d classes, %d referenced only, %d rule results",
        len(registry.declared),
        len(registry.referenced),
        len(results),
    )
    return AnalysisDump(classes=registry.declared, results=results)


class _ClassRegistry:
    """One :class:`JavaClass` per name across the whole dump."""

    def __init__(self) -> None:
        self._by_name: dict[str, JavaClass] = {}
        self.declared: list[JavaClass] = []
        self.referenced: list[JavaClass] = []

    def declare(self, raw: dict, where: str, package: str) -> JavaClass:
        name = raw["name"]
        if name in self._by_name:
            raise DumpFormatError(f"{where}: class {name!r} is declared twice")
        _, simple = split_class_name(name)
        java_class = JavaClass(
            name=name,
            simple_name=raw.get("simple_name") or simple,
            package_name=package,
            is_interface=bool(raw.get("interface", False)),
            superclass=raw.get("superclass"),
            interfaces=list(_require_list(raw.get("interfaces"), f"{where}.interfaces")),
            fields=list(_require_list(raw.get("fields"), f"{where}.fields")),
            methods=list(_require_list(raw.get("methods"), f"{where}.methods")),
            enclosing_class=raw.get("enclosing_class"),
        )
        self._by_name[name] = java_class
        self.declared.append(java_class)
        return java_class

    def get(self, name: str) -> JavaClass:
        return self._by_name[name]

    def resolve(self, name: str) -> JavaClass:
        """Return the class called *name*, creating a target-only one if needed."""
        java_class = self._by_name.get(name)
        if java_class is None:
            package, simple = split_class_name(name)
            java_class = JavaClass(name=name, simple_name=simple, package_name=package)
            self._by_name[name] = java_class
            self.referenced.append(java_class)
        return java_class


def _parse_dependency(
    raw: dict, origin: JavaClass, registry: _ClassRegistry, where: str
) -> Dependency:
    target = registry.resolve(_require_name(raw, "target", where))
    type_name = raw.get("type")
    try:
        dep_type = DependencyType[type_name]
    except (KeyError, TypeError):
        raise DumpFormatError(
            f"{where}: unknown dependency type {type_name!r}"
        ) from None
    line = raw.get("line", 0)
    if not isinstance(line, int):
        raise DumpFormatError(f"{where}: 'line' must be an integer")
    return Dependency(
        origin=origin,
        target=target,
        type=dep_type,
        line=line,
        description=str(
            raw.get("description")
            or f"{origin.name} {dep_type.label} {target.name}"
        ),
    )


def _require_name(raw: dict, key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value:
        raise DumpFormatError(f"{where}: {key!r} must be a non-empty string")
    return value


def _require_mapping(value: object, where: str) -> dict:
    if not isinstance(value, dict):
        raise DumpFormatError(f"{where}: expected a mapping")
    return value


def _require_list(value: object, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DumpFormatError(f"{where}: expected a list")
    return value


def _owning_package(name: str, raw_by_name: dict[str, dict]) -> str:
    """Return the package of the declared class *name*.

    Nested classes (``com.x.Outer.Inner``) live in the package of their
    outermost enclosing class, not in a package named after the outer class.
    """
    seen: set[str] = set()
    while name not in seen:
        seen.add(name)
        raw = raw_by_name.get(name)
        if raw is None:
            return split_class_name(name)[0]
        if raw.get("package_name"):
            return raw["package_name"]
        enclosing = raw.get("enclosing_class")
        if not enclosing:
            return split_class_name(name)[0]
        name = enclosing
    raise DumpFormatError(f"class {name!r} encloses itself")
