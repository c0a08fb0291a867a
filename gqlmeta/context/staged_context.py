# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""All-or-nothing view over a :class:`TransformerContext`.

Reads see the staged writes first and fall back to the parent context. Writes are only recorded, and are replayed on
the parent, in the order they were made, when :meth:`StagedContext.commit` is called. A transformer that fails halfway
simply never commits, so the parent never observes a partially transformed type.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Self

from graphql import ObjectTypeDefinitionNode

from ..schema import ResourceConstants, extend_object_type


if TYPE_CHECKING:
    from types import TracebackType

    from graphql import FieldDefinitionNode, InputObjectTypeDefinitionNode, TypeDefinitionNode

    from ..schema import Resource
    from .protocol import TransformerContext


type Operation = Callable[[TransformerContext], None]


class StagedContext:
    def __init__(self, parent: TransformerContext) -> None:
        self.parent = parent
        self._types: dict[str, TypeDefinitionNode] = {}
        self._resources: dict[str, Resource] = {}
        self._operations: list[Operation] = []

    # MARK: Types
    def get_type(self, name: str) -> TypeDefinitionNode | None:
        if name in self._types:
            return self._types[name]
        return self.parent.get_type(name)

    def put_type(self, definition: TypeDefinitionNode) -> None:
        self._types[definition.name.value] = definition
        self._operations.append(lambda ctx: ctx.put_type(definition))

    def add_input(self, definition: InputObjectTypeDefinitionNode) -> None:
        name = definition.name.value
        if self.get_type(name) is not None:
            msg = f"Conflicting input type '{name}' found."
            raise ValueError(msg)
        self._types[name] = definition
        self._operations.append(lambda ctx: ctx.add_input(definition))

    def add_mutation_fields(self, fields: Sequence[FieldDefinitionNode]) -> None:
        name = ResourceConstants.MUTATION_TYPE_NAME
        mutation = self.get_type(name)
        if mutation is not None and not isinstance(mutation, ObjectTypeDefinitionNode):
            msg = f"Type '{name}' is not an object type."
            raise TypeError(msg)
        self._types[name] = extend_object_type(mutation, name, fields)

        staged = tuple(fields)
        self._operations.append(lambda ctx: ctx.add_mutation_fields(staged))

    # MARK: Resources
    def get_resource(self, resource_id: str) -> Resource | None:
        if resource_id in self._resources:
            return self._resources[resource_id]
        return self.parent.get_resource(resource_id)

    def set_resource(self, resource_id: str, resource: Resource) -> None:
        self._resources[resource_id] = resource
        self._operations.append(lambda ctx: ctx.set_resource(resource_id, resource))

    # MARK: Stacks
    def map_resource_to_stack(self, stack_name: str, resource_id: str) -> None:
        self._operations.append(lambda ctx: ctx.map_resource_to_stack(stack_name, resource_id))

    # MARK: Commit
    @property
    def pending(self) -> int:
        return len(self._operations)

    def commit(self) -> None:
        operations, self._operations = self._operations, []
        for operation in operations:
            operation(self.parent)
        self._types.clear()
        self._resources.clear()

    def discard(self) -> None:
        self._operations.clear()
        self._types.clear()
        self._resources.clear()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: TracebackType | None) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.discard()
