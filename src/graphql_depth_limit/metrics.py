"""Prometheus metrics for the depth limit rule."""

from typing import Sequence

from prometheus_client import Counter

from graphql_depth_limit.violation import DepthViolation

# Documents checked by the rule, by outcome
DEPTH_LIMIT_CHECKS = Counter(
    "graphql_depth_limit_checks_total",
    "Total documents checked against the depth limit",
    ["result"],
)

# Violations reported, per operation
DEPTH_LIMIT_VIOLATIONS = Counter(
    "graphql_depth_limit_violations_total",
    "Total depth limit violations reported",
    ["operation_name"],
)


def record_check(violations: Sequence[DepthViolation]) -> None:
    """Count one checked document and each of its violations."""
    DEPTH_LIMIT_CHECKS.labels(result="rejected" if violations else "passed").inc()
    for violation in violations:
        DEPTH_LIMIT_VIOLATIONS.labels(
            operation_name=violation.operation_name or "anonymous"
        ).inc()
