"""Depth violation records."""

from __future__ import annotations

from dataclasses import dataclass

from graphql import GraphQLError, Node


@dataclass(frozen=True)
class DepthViolation:
    """An operation went deeper than ``max_depth`` at ``node``."""

    operation_name: str
    max_depth: int
    node: Node

    @property
    def message(self) -> str:
        return (
            f"Operation '{self.operation_name}' exceeds maximum operation depth "
            f"of {self.max_depth}"
        )

    def to_graphql_error(self) -> GraphQLError:
        return GraphQLError(self.message, self.node)
