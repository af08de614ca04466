"""Index the top-level definitions of a parsed query document."""

from __future__ import annotations

from graphql import DocumentNode, FragmentDefinitionNode, OperationDefinitionNode

FragmentIndex = dict[str, FragmentDefinitionNode]
OperationIndex = dict[str, OperationDefinitionNode]


def index_document(document: DocumentNode | None) -> tuple[FragmentIndex, OperationIndex]:
    """Map fragment names and operation names to their definitions.

    Anonymous operations are keyed by ``""``. A later definition with the
    same name replaces an earlier one. Definitions that are neither
    operations nor fragments are skipped.
    """
    fragments: FragmentIndex = {}
    operations: OperationIndex = {}
    if document is None:
        return fragments, operations

    for definition in document.definitions or ():
        if isinstance(definition, FragmentDefinitionNode):
            fragments[definition.name.value] = definition
        elif isinstance(definition, OperationDefinitionNode):
            name = definition.name.value if definition.name else ""
            operations[name] = definition
    return fragments, operations
