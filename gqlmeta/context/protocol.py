# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from graphql import FieldDefinitionNode, InputObjectTypeDefinitionNode, TypeDefinitionNode

    from ..schema import Resource


@runtime_checkable
class TransformerContext(Protocol):
    """Capabilities a transformer needs from the host compiling the schema."""

    def get_type(self, name: str) -> TypeDefinitionNode | None: ...

    def put_type(self, definition: TypeDefinitionNode) -> None: ...

    def add_input(self, definition: InputObjectTypeDefinitionNode) -> None: ...

    def add_mutation_fields(self, fields: Sequence[FieldDefinitionNode]) -> None: ...

    def get_resource(self, resource_id: str) -> Resource | None: ...

    def set_resource(self, resource_id: str, resource: Resource) -> None: ...

    def map_resource_to_stack(self, stack_name: str, resource_id: str) -> None: ...
