# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import TYPE_CHECKING, ClassVar, override

from ...context import StagedContext
from ...errors import InvalidDirectiveError
from ...schema import has_directive
from ..transformer import Transformer
from .config import ObjectMetaConfig, ObjectMetaTransformerConfig
from .steps import (
    add_soft_delete_mutation,
    augment_create_mutation,
    augment_update_mutation,
    enforce_fields_on_type,
    strip_create_input_fields,
    strip_update_input_fields,
)


if TYPE_CHECKING:
    from graphql import DirectiveNode, ObjectTypeDefinitionNode

    from ...context import TransformerContext


MODEL_DIRECTIVE = "model"
AUTH_DIRECTIVE = "auth"


class ObjectMetaTransformer(Transformer[ObjectMetaTransformerConfig]):
    """Stamp creation, update and soft-delete metadata on ``@model`` types.

    The transformation is applied to a staged copy of the context and only committed once every step succeeded.
    """

    package: ClassVar[str] = "objectmeta"
    config_class: ClassVar[type[ObjectMetaTransformerConfig]] = ObjectMetaTransformerConfig
    directive_sdl: ClassVar[str] = """
        directive @objectmeta(
            createdAtField: String = "createdAt"
            createdByField: String = "createdBy"
            updatedAtField: String = "updatedAt"
            updatedByField: String = "updatedBy"
            deletedField: String = "deleted"
            deletedAtField: String = "deletedAt"
            deletedByField: String = "deletedBy"
            softDelete: Boolean = true
            identityRequired: Boolean = false
        ) on OBJECT
    """

    @override
    def object(self, definition: ObjectTypeDefinitionNode, directive: DirectiveNode, ctx: TransformerContext) -> None:
        type_name = definition.name.value
        for required in (MODEL_DIRECTIVE, AUTH_DIRECTIVE):
            if not has_directive(definition, required):
                msg = f'Type "{type_name}" is annotated with @{self.directive_name} and must also be annotated with @{required}.'
                raise InvalidDirectiveError(msg)

        config = ObjectMetaConfig.from_directive(definition, directive)
        self.log.info(t"Applying @{self.directive_name} to {type_name}")

        with StagedContext(ctx) as staged:
            augment_create_mutation(staged, config, self.config)
            augment_update_mutation(staged, config, self.config)
            if config.soft_delete:
                add_soft_delete_mutation(staged, config, self.config)
            strip_create_input_fields(staged, config)
            strip_update_input_fields(staged, config)
            enforce_fields_on_type(staged, config)
