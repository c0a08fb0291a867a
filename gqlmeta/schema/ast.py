# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Helpers to build and inspect graphql-core SDL nodes.

Nodes are never modified in place: helpers that "change" a node return a copy.

>>> print_type(make_non_null_type(make_named_type("ID")))
'ID!'
>>> get_base_type(make_non_null_type(make_named_type("Float")))
'Float'
"""

import copy

from collections.abc import Iterable, Sequence

from graphql import (
    DirectiveNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
    print_ast,
)


# MARK: Type references
def make_named_type(name: str) -> NamedTypeNode:
    return NamedTypeNode(name=NameNode(value=name))


def make_non_null_type(type_: NamedTypeNode | ListTypeNode) -> NonNullTypeNode:
    return NonNullTypeNode(type=type_)


def get_base_type(type_: TypeNode) -> str:
    """Return the name of the named type wrapped by any non-null and list modifiers."""
    while isinstance(type_, (NonNullTypeNode, ListTypeNode)):
        type_ = type_.type
    if not isinstance(type_, NamedTypeNode):
        msg = f"Unexpected type node {type(type_).__name__}"
        raise TypeError(msg)
    return type_.name.value


def is_non_null_type(type_: TypeNode) -> bool:
    return isinstance(type_, NonNullTypeNode)


def print_type(type_: TypeNode) -> str:
    return print_ast(type_)


# MARK: Definitions
def make_input_value_definition(name: str, type_: TypeNode) -> InputValueDefinitionNode:
    return InputValueDefinitionNode(name=NameNode(value=name), type=type_, directives=())


def make_field(name: str, arguments: Sequence[InputValueDefinitionNode], type_: TypeNode) -> FieldDefinitionNode:
    return FieldDefinitionNode(name=NameNode(value=name), arguments=tuple(arguments), type=type_, directives=())


def make_input_object_definition(name: str, fields: Sequence[InputValueDefinitionNode]) -> InputObjectTypeDefinitionNode:
    return InputObjectTypeDefinitionNode(name=NameNode(value=name), fields=tuple(fields), directives=())


def make_object_definition(name: str, fields: Sequence[FieldDefinitionNode]) -> ObjectTypeDefinitionNode:
    return ObjectTypeDefinitionNode(name=NameNode(value=name), fields=tuple(fields), interfaces=(), directives=())


# MARK: Inspection
def get_directive(definition: TypeDefinitionNode, name: str) -> DirectiveNode | None:
    for directive in definition.directives or ():
        if directive.name.value == name:
            return directive
    return None


def has_directive(definition: TypeDefinitionNode, name: str) -> bool:
    return get_directive(definition, name) is not None


def find_field[F: FieldDefinitionNode | InputValueDefinitionNode](fields: Iterable[F] | None, name: str) -> F | None:
    for field in fields or ():
        if field.name.value == name:
            return field
    return None


# MARK: Copies
def with_fields[D: ObjectTypeDefinitionNode | InputObjectTypeDefinitionNode](
    definition: D, fields: Iterable[FieldDefinitionNode] | Iterable[InputValueDefinitionNode]
) -> D:
    updated = copy.copy(definition)
    updated.fields = tuple(fields)
    return updated


def extend_object_type(definition: ObjectTypeDefinitionNode | None, name: str, fields: Sequence[FieldDefinitionNode]) -> ObjectTypeDefinitionNode:
    """Append ``fields`` to an object type, creating the type when it does not exist yet."""
    if definition is None:
        return make_object_definition(name, fields)
    return with_fields(definition, (*(definition.fields or ()), *fields))
