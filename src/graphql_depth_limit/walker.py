"""Compute selection depth per operation and collect limit violations."""

from __future__ import annotations

import logging
from typing import Iterator

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    Node,
    OperationDefinitionNode,
)

from graphql_depth_limit.ignore import NO_IGNORE, IgnoreRule, should_ignore
from graphql_depth_limit.indexer import FragmentIndex, index_document
from graphql_depth_limit.violation import DepthViolation

logger = logging.getLogger(__name__)

# (node, depth, fragments entered since the last counted field)
_Frame = tuple[Node, int, frozenset[str]]


def validate_depth(
    document: DocumentNode | None,
    max_depth: int,
    ignoring: IgnoreRule = NO_IGNORE,
) -> list[DepthViolation]:
    """Return one violation per branch that nests deeper than ``max_depth``.

    Depth starts at 0 for the root fields of each operation and grows by one
    for every field that has a selection set. Fragment spreads, inline
    fragments and fragment definitions do not add depth. The first node found
    past the limit is reported and its branch is not walked any further.
    """
    fragments, operations = index_document(document)
    violations: list[DepthViolation] = []
    for name, operation in operations.items():
        violations.extend(_walk(operation, name, fragments, max_depth, ignoring))
    return violations


def _walk(
    operation: OperationDefinitionNode,
    operation_name: str,
    fragments: FragmentIndex,
    max_depth: int,
    ignoring: IgnoreRule,
) -> Iterator[DepthViolation]:
    # Explicit stack: nesting depth is attacker controlled.
    stack: list[_Frame] = [(operation, 0, frozenset())]
    while stack:
        node, depth, entered = stack.pop()
        if depth > max_depth:
            yield DepthViolation(operation_name, max_depth, node)
            continue

        if isinstance(node, FieldNode):
            if should_ignore(node.name.value, ignoring) or node.selection_set is None:
                continue
            selections = node.selection_set.selections
            depth += 1
            entered = frozenset()
        elif isinstance(node, FragmentSpreadNode):
            fragment_name = node.name.value
            fragment = fragments.get(fragment_name)
            if fragment is None:
                logger.debug("Skipping unknown fragment %r in %r", fragment_name, operation_name)
            elif fragment_name in entered:
                logger.debug("Fragment cycle through %r in %r", fragment_name, operation_name)
            else:
                stack.append((fragment, depth, entered | {fragment_name}))
            continue
        elif isinstance(
            node, (InlineFragmentNode, FragmentDefinitionNode, OperationDefinitionNode)
        ):
            selections = node.selection_set.selections
        else:
            continue

        stack.extend((child, depth, entered) for child in reversed(selections))
