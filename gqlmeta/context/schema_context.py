# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""In-memory schema and resource registry.

Plays the role of the host compiler's context: type definitions are looked up and replaced by name, resources by
logical id. Definitions keep their original document order, new ones are appended.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

from frozendict import frozendict
from graphql import DocumentNode, ObjectTypeDefinitionNode, TypeDefinitionNode, parse, print_ast

from ..schema import ResourceConstants, extend_object_type
from ..util.mixins import LoggableMixin


if TYPE_CHECKING:
    from graphql import DefinitionNode, FieldDefinitionNode, InputObjectTypeDefinitionNode

    from ..schema import Resource


class SchemaContext(LoggableMixin):
    def __init__(self, document: DocumentNode | str, resources: Mapping[str, Resource] | None = None) -> None:
        if isinstance(document, str):
            document = parse(document, no_location=True)

        self._types: dict[str, TypeDefinitionNode] = {}
        self._others: list[DefinitionNode] = []
        for definition in document.definitions:
            if isinstance(definition, TypeDefinitionNode):
                self._types[definition.name.value] = definition
            else:
                self._others.append(definition)

        self._resources: dict[str, Resource] = dict(resources or {})
        self._stack_mapping: dict[str, str] = {}

    # MARK: Types
    def get_type(self, name: str) -> TypeDefinitionNode | None:
        return self._types.get(name)

    def put_type(self, definition: TypeDefinitionNode) -> None:
        self._types[definition.name.value] = definition

    def add_input(self, definition: InputObjectTypeDefinitionNode) -> None:
        name = definition.name.value
        if name in self._types:
            msg = f"Conflicting input type '{name}' found."
            raise ValueError(msg)
        self._types[name] = definition

    def add_mutation_fields(self, fields: Sequence[FieldDefinitionNode]) -> None:
        name = ResourceConstants.MUTATION_TYPE_NAME
        mutation = self.get_type(name)
        if mutation is not None and not isinstance(mutation, ObjectTypeDefinitionNode):
            msg = f"Type '{name}' is not an object type."
            raise TypeError(msg)
        self.put_type(extend_object_type(mutation, name, fields))
        self.log.debug(t"Added mutation fields {[field.name.value for field in fields]}")

    def object_definitions(self) -> Iterator[ObjectTypeDefinitionNode]:
        for definition in list(self._types.values()):
            if isinstance(definition, ObjectTypeDefinitionNode):
                yield definition

    @property
    def types(self) -> Iterable[TypeDefinitionNode]:
        return self._types.values()

    # MARK: Resources
    def get_resource(self, resource_id: str) -> Resource | None:
        return self._resources.get(resource_id)

    def set_resource(self, resource_id: str, resource: Resource) -> None:
        self._resources[resource_id] = resource

    @property
    def resources(self) -> frozendict[str, Resource]:
        return frozendict(self._resources)

    # MARK: Stacks
    def map_resource_to_stack(self, stack_name: str, resource_id: str) -> None:
        self._stack_mapping[resource_id] = stack_name
        self.log.debug(t"Mapped resource {resource_id} to stack {stack_name}")

    @property
    def stack_mapping(self) -> frozendict[str, str]:
        """Resource logical id to the name of the stack it is deployed in."""
        return frozendict(self._stack_mapping)

    # MARK: Output
    @property
    def document(self) -> DocumentNode:
        return DocumentNode(definitions=(*self._others, *self._types.values()))

    def print_schema(self) -> str:
        return print_ast(self.document)
