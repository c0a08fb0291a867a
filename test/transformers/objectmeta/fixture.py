# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Any

import pytest

from graphql import ObjectTypeDefinitionNode

from gqlmeta.context import SchemaContext
from gqlmeta.schema import Resource, ResolverProperties, get_directive
from gqlmeta.transformers.objectmeta import ObjectMetaTransformer, ObjectMetaTransformerConfig


CREATE_TEMPLATE = '$util.toJson({"version": "2018-05-29", "operation": "PutItem"})'
UPDATE_TEMPLATE = '$util.toJson({"version": "2018-05-29", "operation": "UpdateItem"})'
RESPONSE_TEMPLATE = "$util.toJson($ctx.result)"


def post_sdl(directive: str = "@objectmeta", fields: str = "deleted: Boolean!", type_directives: str = "@model @auth(rules: [{allow: owner}])") -> str:
    return f"""
        type Post {type_directives} {directive} {{
            id: ID!
            title: String!
            {fields}
        }}

        input CreatePostInput {{
            id: ID
            title: String!
            createdAt: Float
            createdBy: ID
            deleted: Boolean
        }}

        input UpdatePostInput {{
            id: ID!
            title: String
            updatedAt: Float
            deleted: Boolean
        }}

        type Mutation {{
            createPost(input: CreatePostInput!): Post
            updatePost(input: UpdatePostInput!): Post
        }}
    """


def resolver(field_name: str, request: str, response: str = RESPONSE_TEMPLATE) -> Resource:
    return Resource(
        properties=ResolverProperties(
            field_name=field_name,
            type_name="Mutation",
            data_source_name="PostDataSource",
            request_mapping_template=request,
            response_mapping_template=response,
        )
    )


def post_resources() -> dict[str, Resource]:
    return {
        "CreatePostResolver": resolver("createPost", CREATE_TEMPLATE),
        "UpdatePostResolver": resolver("updatePost", UPDATE_TEMPLATE),
    }


class SchemaFixture:
    def __init__(self) -> None:
        self.ctx: SchemaContext | None = None

    def create(self, sdl: str | None = None, resources: dict[str, Resource] | None = None) -> SchemaContext:
        self.ctx = SchemaContext(post_sdl() if sdl is None else sdl, post_resources() if resources is None else resources)
        return self.ctx

    def get(self) -> SchemaContext:
        if (ctx := self.ctx) is None:
            msg = "Schema not initialized. Call 'create()' first."
            raise RuntimeError(msg)
        return ctx

    def apply(self, type_name: str = "Post", **options: Any) -> SchemaContext:
        """Apply the @objectmeta directive found on ``type_name``, as the host compiler would."""
        ctx = self.get()

        definition = ctx.get_type(type_name)
        assert isinstance(definition, ObjectTypeDefinitionNode)
        directive = get_directive(definition, "objectmeta")
        assert directive is not None

        config = ObjectMetaTransformerConfig.model_validate({"package": "objectmeta", **options})
        ObjectMetaTransformer(config).object(definition, directive, ctx)
        return ctx


@pytest.fixture
def schema() -> SchemaFixture:
    return SchemaFixture()
