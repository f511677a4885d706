from __future__ import annotations

import json

from archzoom.model import (
    Dependency,
    DependencyType,
    EvaluationResult,
    JavaClass,
    Violation,
)
from archzoom.violations import (
    export_violations_to_json,
    group_violations,
    iter_violation_descriptions,
)


def _make_class(name: str) -> JavaClass:
    package, _, simple = name.rpartition(".")
    return JavaClass(name=name, simple_name=simple, package_name=package)


def _make_dependency(origin: str, target: str, description: str) -> Dependency:
    return Dependency(
        origin=_make_class(origin),
        target=_make_class(target),
        type=DependencyType.METHOD_CALL,
        line=3,
        description=description,
    )


def _make_result(rule: str, *descriptions: str) -> EvaluationResult:
    deps = [_make_dependency("com.x.A", "com.x.B", d) for d in descriptions]
    return EvaluationResult(
        rule_text=rule, violations=[Violation(message=f"{rule} violated", dependencies=deps)]
    )


def test_results_sharing_rule_text_are_merged_in_order() -> None:
    first = _make_result("no cycles", "A calls B")
    second = _make_result("no cycles", "B calls A")

    assert group_violations([first, second]) == {"no cycles": ["A calls B", "B calls A"]}


def test_descriptions_are_not_deduplicated() -> None:
    result = _make_result("layers", "A calls B", "A calls B")

    assert group_violations([result]) == {"layers": ["A calls B", "A calls B"]}


def test_every_dependency_of_every_violation_is_reported() -> None:
    result = EvaluationResult(
        rule_text="no access to internals",
        violations=[
            Violation(
                message="first",
                dependencies=[
                    _make_dependency("a.A", "a.internal.X", "A uses X"),
                    _make_dependency("a.A", "a.internal.Y", "A uses Y"),
                ],
            ),
            Violation(
                message="second",
                dependencies=[_make_dependency("b.B", "a.internal.X", "B uses X")],
            ),
        ],
    )

    assert list(iter_violation_descriptions([result])) == [
        ("no access to internals", "A uses X"),
        ("no access to internals", "A uses Y"),
        ("no access to internals", "B uses X"),
    ]


def test_rules_without_violations_are_absent() -> None:
    assert group_violations([EvaluationResult(rule_text="clean")]) == {}


def test_independent_rules_get_their_own_keys() -> None:
    grouped = group_violations(
        [_make_result("rule one", "d1"), _make_result("rule two", "d2")]
    )

    assert grouped == {"rule one": ["d1"], "rule two": ["d2"]}


def test_export_violations_to_json() -> None:
    text = export_violations_to_json([_make_result("no cycles", "A calls B")])

    assert json.loads(text) == {"no cycles": ["A calls B"]}
