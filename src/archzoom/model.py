"""Data model for analyzed classes, rule results, and the exported graph."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class DependencyType(Enum):
    """Kind of a direct dependency between two classes."""

    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    FIELD_TYPE = "field type"
    CONSTRUCTOR_PARAMETER_TYPE = "constructor parameter type"
    METHOD_PARAMETER_TYPE = "method parameter type"
    METHOD_RETURN_TYPE = "method return type"
    METHOD_THROWS_DECLARATION = "method throws declaration"
    METHOD_CALL = "method call"
    CONSTRUCTOR_CALL = "constructor call"
    FIELD_ACCESS = "field access"
    ANNOTATION_TYPE = "annotation type"
    INSTANCEOF_CHECK = "instanceof check"
    TYPE_PARAMETER = "type parameter"

    @property
    def label(self) -> str:
        return self.value


@dataclass(eq=False)
class JavaClass:
    """A class or interface as reported by the static analysis."""

    name: str
    simple_name: str
    package_name: str
    is_interface: bool = False
    superclass: str | None = None
    interfaces: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
    enclosing_class: str | None = None  # None for top-level types
    dependencies: list[Dependency] = field(default_factory=list)

    @property
    def is_nested(self) -> bool:
        return self.enclosing_class is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavaClass):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"JavaClass({self.name!r})"


@dataclass(frozen=True)
class Dependency:
    """A direct dependency from *origin* to *target*.

    ``line`` is 0 for references the compiler synthesized.
    """

    origin: JavaClass
    target: JavaClass
    type: DependencyType
    line: int = 0
    description: str = ""


@dataclass
class Violation:
    """One violation found by a rule, with the dependencies it concerns."""

    message: str
    dependencies: list[Dependency] = field(default_factory=list)


@dataclass
class EvaluationResult:
    """Outcome of evaluating one architecture rule."""

    rule_text: str
    violations: list[Violation] = field(default_factory=list)

    def iter_violations(self) -> Iterator[tuple[list[Dependency], str]]:
        """Yield ``(dependencies, message)`` for each reported violation."""
        for violation in self.violations:
            yield violation.dependencies, violation.message


@dataclass(frozen=True)
class CodeElement:
    """A class or interface placed in the exported package tree."""

    name: str
    full_name: str
    package_name: str
    kind: str  # "class" or "interface"
    superclass: str | None = None
    interfaces: tuple[str, ...] = ()
    fields: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()


@dataclass
class PackageNode:
    """One segment of a dotted package path.

    After normalization ``name`` may hold several dotted segments.
    """

    name: str
    full_name: str
    subpackages: dict[str, PackageNode] = field(default_factory=dict)
    classes: dict[str, CodeElement] = field(default_factory=dict)

    @property
    def is_root(self) -> bool:
        return self.full_name == ""

    def walk(self) -> Iterator[PackageNode]:
        """Yield this node and all its descendants, parents first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.subpackages.values())

    def iter_elements(self) -> Iterator[CodeElement]:
        for node in self.walk():
            yield from node.classes.values()


@dataclass(frozen=True)
class DependencyEdge:
    """A relevant dependency between two exported elements.

    Equality covers (origin, target, description); ``type`` follows from
    the description and does not take part.
    """

    origin: str
    target: str
    description: str
    type: str = field(default="", compare=False)


@dataclass
class AnalysisDump:
    """Everything a loader read from an analysis dump file."""

    classes: list[JavaClass] = field(default_factory=list)
    results: list[EvaluationResult] = field(default_factory=list)
