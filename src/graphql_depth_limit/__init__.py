"""Maximum query depth validation for GraphQL documents."""

from graphql_depth_limit.extensions import QueryDepthLimiter
from graphql_depth_limit.ignore import (
    NO_IGNORE,
    ExactMatch,
    IgnoreRule,
    NoIgnore,
    PatternMatch,
    Predicate,
    is_introspection,
    should_ignore,
)
from graphql_depth_limit.indexer import index_document
from graphql_depth_limit.rule import depth_limit
from graphql_depth_limit.violation import DepthViolation
from graphql_depth_limit.walker import validate_depth

__all__ = [
    "NO_IGNORE",
    "DepthViolation",
    "ExactMatch",
    "IgnoreRule",
    "NoIgnore",
    "PatternMatch",
    "Predicate",
    "QueryDepthLimiter",
    "depth_limit",
    "index_document",
    "is_introspection",
    "should_ignore",
    "validate_depth",
]
