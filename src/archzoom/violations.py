"""Export rule evaluation results as violations grouped by rule."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator

from archzoom.model import EvaluationResult

logger = logging.getLogger(__name__)


def iter_violation_descriptions(
    results: Iterable[EvaluationResult],
) -> Iterator[tuple[str, str]]:
    """Yield ``(rule_text, dependency_description)`` for every violating dependency."""
    for result in results:
        for dependencies, _message in result.iter_violations():
            for dependency in dependencies:
                yield result.rule_text, dependency.description


def group_violations(results: Iterable[EvaluationResult]) -> dict[str, list[str]]:
    """Collect descriptions per rule text; results sharing a rule text are merged."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for rule_text, description in iter_violation_descriptions(results):
        grouped[rule_text].append(description)
    logger.debug(
        "violations: %d descriptions across %d rules",
        sum(len(v) for v in grouped.values()),
        len(grouped),
    )
    return dict(grouped)


def export_violations_to_json(
    results: Iterable[EvaluationResult], *, indent: int | None = None
) -> str:
    return json.dumps(group_violations(results), indent=indent)
