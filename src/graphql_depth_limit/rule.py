"""graphql-core validation rule enforcing a maximum operation depth."""

from __future__ import annotations

import logging
from typing import Any

from graphql import ASTValidationRule, DocumentNode
from graphql.language import SKIP, VisitorAction

from graphql_depth_limit.ignore import NO_IGNORE, IgnoreRule
from graphql_depth_limit.metrics import record_check
from graphql_depth_limit.walker import validate_depth

logger = logging.getLogger(__name__)


def depth_limit(max_depth: int, ignoring: IgnoreRule = NO_IGNORE) -> type[ASTValidationRule]:
    """Build a validation rule rejecting operations nested past ``max_depth``.

    The returned class can be passed to ``graphql.validate(..., rules=[...])``
    or to any host that accepts graphql-core rules. Each violation is reported
    as a ``GraphQLError`` located at the first node past the limit.

    Example:
        errors = validate(schema, parse(query), rules=[depth_limit(5)])
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    class DepthLimitRule(ASTValidationRule):
        def enter_document(self, node: DocumentNode, *_args: Any) -> VisitorAction:
            violations = validate_depth(node, max_depth, ignoring)
            record_check(violations)
            if violations:
                logger.info(
                    "Rejected operations %s: maximum depth is %d",
                    sorted({v.operation_name for v in violations}),
                    max_depth,
                )
            for violation in violations:
                self.report_error(violation.to_graphql_error())
            return SKIP

    return DepthLimitRule
