# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import dataclasses

from typing import TYPE_CHECKING

from graphql import value_from_ast_untyped
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...errors import InvalidDirectiveError
from ...schema import get_base_type, is_non_null_type, make_named_type, make_non_null_type
from ..transformer import TransformerConfig


if TYPE_CHECKING:
    from graphql import DirectiveNode, NamedTypeNode, NonNullTypeNode, ObjectTypeDefinitionNode, TypeNode


NO_IDENTITY = "-NO-IDENTITY-"


# MARK: Transformer configuration
class ObjectMetaTransformerConfig(TransformerConfig):
    identity_claims: tuple[str, ...] = Field(
        default=("username", "cognito:username"), min_length=1, description="Identity claims holding the actor, in order of preference"
    )
    missing_identity: str = Field(default=NO_IDENTITY, description="Actor recorded when no identity claim is present and identity is optional")
    block_name: str = Field(default="ObjectMeta Fields", description="Name of the block wrapping the generated template snippets")


# MARK: Field requirements
@dataclasses.dataclass(frozen=True, slots=True)
class FieldRequirement:
    """Type a meta field must have on the annotated type."""

    argument: str
    name: str
    base_type: str
    non_null: bool = False
    mandatory: bool = False

    @property
    def type_name(self) -> str:
        return f"{self.base_type}!" if self.non_null else self.base_type

    def type_node(self) -> NamedTypeNode | NonNullTypeNode:
        named = make_named_type(self.base_type)
        return make_non_null_type(named) if self.non_null else named

    def accepts(self, type_: TypeNode) -> bool:
        if get_base_type(type_) != self.base_type:
            return False
        return is_non_null_type(type_) or not self.non_null


# MARK: Directive configuration
class ObjectMetaConfig(BaseModel):
    """Arguments of an ``@objectmeta`` directive, resolved for one annotated type."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type_name: str = Field(alias="typeName")

    created_at_field: str = Field(default="createdAt", alias="createdAtField")
    created_by_field: str = Field(default="createdBy", alias="createdByField")
    updated_at_field: str = Field(default="updatedAt", alias="updatedAtField")
    updated_by_field: str = Field(default="updatedBy", alias="updatedByField")
    deleted_field: str = Field(default="deleted", alias="deletedField")
    deleted_at_field: str = Field(default="deletedAt", alias="deletedAtField")
    deleted_by_field: str = Field(default="deletedBy", alias="deletedByField")
    soft_delete: bool = Field(default=True, alias="softDelete")
    identity_required: bool = Field(default=False, alias="identityRequired")

    @classmethod
    def from_directive(cls, definition: ObjectTypeDefinitionNode, directive: DirectiveNode) -> ObjectMetaConfig:
        type_name = definition.name.value
        arguments = {argument.name.value: value_from_ast_untyped(argument.value) for argument in directive.arguments or ()}
        try:
            return cls.model_validate({**arguments, "typeName": type_name})
        except ValidationError as err:
            msg = f'Invalid @{directive.name.value} arguments on type "{type_name}": {err}'
            raise InvalidDirectiveError(msg) from err

    @property
    def meta_fields(self) -> tuple[str, ...]:
        return (
            self.created_at_field,
            self.created_by_field,
            self.updated_at_field,
            self.updated_by_field,
            self.deleted_field,
            self.deleted_at_field,
            self.deleted_by_field,
        )

    def requirements(self) -> tuple[FieldRequirement, ...]:
        actor_non_null = self.identity_required
        return (
            FieldRequirement("createdAtField", self.created_at_field, "Float"),
            FieldRequirement("createdByField", self.created_by_field, "ID", non_null=actor_non_null),
            FieldRequirement("updatedAtField", self.updated_at_field, "Float"),
            FieldRequirement("updatedByField", self.updated_by_field, "ID", non_null=actor_non_null),
            FieldRequirement("deletedField", self.deleted_field, "Boolean", non_null=True, mandatory=True),
            FieldRequirement("deletedAtField", self.deleted_at_field, "Float"),
            FieldRequirement("deletedByField", self.deleted_by_field, "ID", non_null=actor_non_null),
        )
