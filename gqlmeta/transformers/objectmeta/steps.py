# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""The individual steps of the ``@objectmeta`` transformation.

Steps run in a fixed order against a staged context: later steps observe the writes of earlier ones (the soft-delete
resolver, for instance, is built from the already augmented update resolver).
"""

from typing import TYPE_CHECKING

from graphql import InputObjectTypeDefinitionNode, ObjectTypeDefinitionNode

from ...errors import InvalidDirectiveError, MissingResourceError, TransformerContractError
from ...mapping import print_block
from ...schema import (
    GetAtt,
    ModelResourceIDs,
    Resource,
    ResolverProperties,
    ResolverResourceIDs,
    ResourceConstants,
    SoftDeleteResourceIDs,
    find_field,
    make_field,
    make_input_object_definition,
    make_input_value_definition,
    make_named_type,
    make_non_null_type,
    with_fields,
)
from ...util.logging import getLogger
from .snippets import create_expressions, soft_delete_expressions, update_expressions


if TYPE_CHECKING:
    from ...context import TransformerContext
    from ...mapping import Expression
    from .config import ObjectMetaConfig, ObjectMetaTransformerConfig


log = getLogger("ObjectMetaTransformer")


# MARK: Resolvers
def _prepend_request_template(ctx: TransformerContext, resolver_id: str, snippet: str) -> None:
    resolver = ctx.get_resource(resolver_id)
    if resolver is None:
        log.debug(t"Resolver {resolver_id} not found, skipping")
        return
    if resolver.properties is None:
        log.warning(t"Resolver {resolver_id} has no properties, skipping")
        return

    template = resolver.properties.request_mapping_template or ""
    ctx.set_resource(resolver_id, resolver.with_request_mapping_template(f"{snippet}\n\n{template}"))
    log.debug(t"Augmented request mapping template of {resolver_id}")


def _render(options: ObjectMetaTransformerConfig, expression: Expression) -> str:
    return print_block(options.block_name, expression)


def augment_create_mutation(ctx: TransformerContext, config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> None:
    resolver_id = ResolverResourceIDs.dynamodb_create_resolver_resource_id(config.type_name)
    _prepend_request_template(ctx, resolver_id, _render(options, create_expressions(config, options)))


def augment_update_mutation(ctx: TransformerContext, config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> None:
    resolver_id = ResolverResourceIDs.dynamodb_update_resolver_resource_id(config.type_name)
    _prepend_request_template(ctx, resolver_id, _render(options, update_expressions(config, options)))


# MARK: Soft delete
def add_soft_delete_mutation(ctx: TransformerContext, config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> None:
    """Add a ``softDelete<Type>(id: ID!)`` mutation resolved like the update mutation."""
    type_name = config.type_name

    update_resolver_id = ResolverResourceIDs.dynamodb_update_resolver_resource_id(type_name)
    update_resolver = ctx.get_resource(update_resolver_id)
    if update_resolver is None or update_resolver.properties is None:
        msg = (
            f'Type "{type_name}" enables softDelete but its update resolver "{update_resolver_id}" was not found. '
            f'Make sure "{type_name}" generates an update mutation, or set softDelete: false.'
        )
        raise MissingResourceError(update_resolver_id, msg)

    field_name = SoftDeleteResourceIDs.mutation_field_name(type_name)
    input_name = SoftDeleteResourceIDs.input_object_name(type_name)
    resolver_id = SoftDeleteResourceIDs.resolver_resource_id(type_name)

    id_argument = make_input_value_definition("id", make_non_null_type(make_named_type("ID")))
    if ctx.get_type(input_name) is None:
        ctx.add_input(make_input_object_definition(input_name, [id_argument]))
    ctx.add_mutation_fields([make_field(field_name, [id_argument], make_named_type(type_name))])

    snippet = _render(options, soft_delete_expressions(config, options))
    update_properties = update_resolver.properties
    resolver = Resource(
        properties=ResolverProperties(
            api_id=GetAtt.of(ResourceConstants.GRAPHQL_API_LOGICAL_ID, "ApiId"),
            data_source_name=GetAtt.of(ModelResourceIDs.model_table_data_source_id(type_name), "Name"),
            field_name=field_name,
            type_name=ResourceConstants.MUTATION_TYPE_NAME,
            request_mapping_template=f"{snippet}\n{update_properties.request_mapping_template or ''}",
            response_mapping_template=update_properties.response_mapping_template,
        )
    )
    ctx.set_resource(resolver_id, resolver)
    ctx.map_resource_to_stack(type_name, resolver_id)
    log.debug(t"Added mutation {field_name} with resolver {resolver_id}")


# MARK: Inputs
def _strip_input_fields(ctx: TransformerContext, config: ObjectMetaConfig, input_name: str, kind: str) -> None:
    definition = ctx.get_type(input_name)
    if not isinstance(definition, InputObjectTypeDefinitionNode) or not definition.fields:
        return

    meta_fields = set(config.meta_fields)
    fields = [field for field in definition.fields if field.name.value not in meta_fields]
    if not fields:
        names = ", ".join(f'"{name}"' for name in config.meta_fields)
        msg = (
            f"After stripping away object meta fields {names} the {kind} input for type "
            f'"{config.type_name}" cannot be created with 0 fields. Add another field to type "{config.type_name}" to continue.'
        )
        raise InvalidDirectiveError(msg)

    if len(fields) != len(definition.fields):
        ctx.put_type(with_fields(definition, fields))
        log.debug(t"Stripped {len(definition.fields) - len(fields)} meta field(s) from {input_name}")


def strip_create_input_fields(ctx: TransformerContext, config: ObjectMetaConfig) -> None:
    _strip_input_fields(ctx, config, ModelResourceIDs.model_create_input_object_name(config.type_name), "create")


def strip_update_input_fields(ctx: TransformerContext, config: ObjectMetaConfig) -> None:
    _strip_input_fields(ctx, config, ModelResourceIDs.model_update_input_object_name(config.type_name), "update")


# MARK: Type
def enforce_fields_on_type(ctx: TransformerContext, config: ObjectMetaConfig) -> None:
    """Check the meta fields declared on the annotated type and add the missing ones."""
    type_name = config.type_name
    definition = ctx.get_type(type_name)
    if not isinstance(definition, ObjectTypeDefinitionNode):
        log.warning(t"Object type {type_name} not found, cannot enforce meta fields")
        return

    added = []
    for requirement in config.requirements():
        field = find_field(definition.fields, requirement.name)
        if field is not None and requirement.accepts(field.type):
            continue
        if field is not None or requirement.mandatory:
            msg = f'Type "{type_name}" requires {requirement.argument} "{requirement.name}" to be of type "{requirement.type_name}".'
            raise TransformerContractError(msg)
        added.append(make_field(requirement.name, [], requirement.type_node()))

    if added:
        ctx.put_type(with_fields(definition, (*(definition.fields or ()), *added)))
        log.debug(t"Added meta fields {[field.name.value for field in added]} to {type_name}")
