"""Query depth limiting Strawberry extension."""

from __future__ import annotations

from strawberry.extensions import AddValidationRules

from graphql_depth_limit.config import Settings
from graphql_depth_limit.ignore import NO_IGNORE, IgnoreRule
from graphql_depth_limit.rule import depth_limit


class QueryDepthLimiter(AddValidationRules):
    """Reject operations whose nesting depth exceeds ``max_depth``.

    Violations are reported as validation errors, so no resolver runs for a
    rejected document.

    Example:
        schema = strawberry.Schema(
            query=Query,
            extensions=[lambda: QueryDepthLimiter(max_depth=5, ignoring=ExactMatch("edges"))],
        )
    """

    def __init__(self, max_depth: int = 5, ignoring: IgnoreRule = NO_IGNORE) -> None:
        self.max_depth = max_depth
        self.ignoring = ignoring
        super().__init__([depth_limit(max_depth, ignoring)])

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "QueryDepthLimiter":
        settings = settings or Settings()
        return cls(max_depth=settings.max_depth, ignoring=settings.ignore_rule())
