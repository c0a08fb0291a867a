# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from typing import TYPE_CHECKING

import pytest

from graphql import InputObjectTypeDefinitionNode, ObjectTypeDefinitionNode, print_ast

from gqlmeta.errors import InvalidDirectiveError, MissingResourceError, TransformerContractError
from gqlmeta.schema import GetAtt, Resource, find_field, print_type

from .fixture import CREATE_TEMPLATE, RESPONSE_TEMPLATE, UPDATE_TEMPLATE, post_resources, post_sdl, resolver


if TYPE_CHECKING:
    from gqlmeta.context import SchemaContext

    from .fixture import SchemaFixture


def _fields(ctx: SchemaContext, type_name: str) -> dict[str, str]:
    definition = ctx.get_type(type_name)
    assert isinstance(definition, (ObjectTypeDefinitionNode, InputObjectTypeDefinitionNode))
    return {field.name.value: print_type(field.type) for field in definition.fields}


def _request(ctx: SchemaContext, resource_id: str) -> str:
    resource = ctx.get_resource(resource_id)
    assert resource is not None
    assert resource.properties is not None
    assert resource.properties.request_mapping_template is not None
    return resource.properties.request_mapping_template


def _block(body: str) -> str:
    return f"## [Start] ObjectMeta Fields. **\n{body}\n## [End] ObjectMeta Fields. **"


IDENTITY = (
    '#set( $identityValue = $util.defaultIfNull($ctx.identity.claims.get("username"), '
    '$util.defaultIfNull($ctx.identity.claims.get("cognito:username"), "-NO-IDENTITY-")) )'
)

STAMPS = (
    '$util.qr($ctx.args.input.put("createdAt", $util.time.nowEpochMilliSeconds()))\n'
    '$util.qr($ctx.args.input.put("createdBy", $identityValue))\n'
    '$util.qr($ctx.args.input.put("updatedAt", $util.time.nowEpochMilliSeconds()))\n'
    '$util.qr($ctx.args.input.put("updatedBy", $identityValue))'
)

CREATE_SNIPPET = _block(f'{IDENTITY}\n{STAMPS}\n$util.qr($ctx.args.input.put("deleted", false))')

UPDATE_SNIPPET = _block(
    f"{IDENTITY}\n{STAMPS}\n"
    "#if( $ctx.args.input.deleted == true )\n"
    '  $util.qr($ctx.args.input.put("deleted", false))\n'
    '  $util.qr($ctx.args.input.put("deletedAt", $util.time.nowEpochMilliSeconds()))\n'
    '  $util.qr($ctx.args.input.put("deletedBy", $identityValue))\n'
    "#end"
)


# MARK: Type
@pytest.mark.objectmeta
class TestObjectMetaType:
    def test_adds_meta_fields(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        assert _fields(ctx, "Post") == {
            "id": "ID!",
            "title": "String!",
            "deleted": "Boolean!",
            "createdAt": "Float",
            "createdBy": "ID",
            "updatedAt": "Float",
            "updatedBy": "ID",
            "deletedAt": "Float",
            "deletedBy": "ID",
        }
        assert list(_fields(ctx, "Post"))[-6:] == ["createdAt", "createdBy", "updatedAt", "updatedBy", "deletedAt", "deletedBy"]

    def test_keeps_declared_meta_fields(self, schema: SchemaFixture):
        schema.create(post_sdl(fields="deleted: Boolean!\ncreatedAt: Float!\nupdatedBy: ID"))
        ctx = schema.apply()

        fields = _fields(ctx, "Post")
        assert fields["createdAt"] == "Float!"
        assert list(fields).count("createdAt") == 1
        assert list(fields).count("updatedBy") == 1

    def test_keeps_directives(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        post = ctx.get_type("Post")
        assert post is not None
        assert [directive.name.value for directive in post.directives] == ["model", "auth", "objectmeta"]

    def test_custom_field_name(self, schema: SchemaFixture):
        schema.create(post_sdl(directive='@objectmeta(createdAtField: "madeOn")'))
        ctx = schema.apply()

        fields = _fields(ctx, "Post")
        assert fields["madeOn"] == "Float"
        assert "createdAt" not in fields

        request = _request(ctx, "CreatePostResolver")
        assert '$ctx.args.input.put("madeOn", $util.time.nowEpochMilliSeconds())' in request
        assert '"createdAt"' not in request

    def test_custom_field_name_strips_input(self, schema: SchemaFixture):
        schema.create(post_sdl(directive='@objectmeta(createdAtField: "madeOn")'))
        ctx = schema.apply()

        # Only the configured names are meta fields
        assert list(_fields(ctx, "CreatePostInput")) == ["id", "title", "createdAt"]

    def test_nullable_deleted(self, schema: SchemaFixture):
        schema.create(post_sdl(fields="deleted: Boolean"))
        with pytest.raises(TransformerContractError, match=r'Type "Post" requires deletedField "deleted" to be of type "Boolean!".'):
            schema.apply()

    def test_missing_deleted(self, schema: SchemaFixture):
        schema.create(post_sdl(fields=""))
        with pytest.raises(TransformerContractError, match=r'requires deletedField "deleted" to be of type "Boolean!"'):
            schema.apply()

    def test_wrong_type(self, schema: SchemaFixture):
        schema.create(post_sdl(fields="deleted: Boolean!\ncreatedAt: String"))
        with pytest.raises(TransformerContractError, match=r'requires createdAtField "createdAt" to be of type "Float"'):
            schema.apply()

    def test_identity_required_fields(self, schema: SchemaFixture):
        schema.create(post_sdl(directive="@objectmeta(identityRequired: true)"))
        ctx = schema.apply()

        fields = _fields(ctx, "Post")
        assert fields["createdBy"] == "ID!"
        assert fields["updatedBy"] == "ID!"
        assert fields["deletedBy"] == "ID!"

    def test_identity_required_nullable_actor(self, schema: SchemaFixture):
        schema.create(post_sdl(directive="@objectmeta(identityRequired: true)", fields="deleted: Boolean!\ncreatedBy: ID"))
        with pytest.raises(TransformerContractError, match=r'requires createdByField "createdBy" to be of type "ID!"'):
            schema.apply()


# MARK: Directives
@pytest.mark.objectmeta
class TestObjectMetaDirectives:
    @pytest.mark.parametrize(("type_directives", "missing"), [("@auth(rules: [])", "model"), ("@model", "auth"), ("", "model")])
    def test_requires_co_directives(self, schema: SchemaFixture, type_directives: str, missing: str):
        schema.create(post_sdl(type_directives=type_directives))
        with pytest.raises(InvalidDirectiveError, match=rf'Type "Post" is annotated with @objectmeta and must also be annotated with @{missing}.'):
            schema.apply()

    def test_invalid_argument(self, schema: SchemaFixture):
        schema.create(post_sdl(directive="@objectmeta(softDelete: 5)"))
        with pytest.raises(InvalidDirectiveError, match="Invalid @objectmeta arguments"):
            schema.apply()


# MARK: Resolvers
@pytest.mark.objectmeta
class TestObjectMetaResolvers:
    def test_create_resolver(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()
        assert _request(ctx, "CreatePostResolver") == f"{CREATE_SNIPPET}\n\n{CREATE_TEMPLATE}"

    def test_update_resolver(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()
        assert _request(ctx, "UpdatePostResolver") == f"{UPDATE_SNIPPET}\n\n{UPDATE_TEMPLATE}"

    def test_response_templates_untouched(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        for resource_id in ("CreatePostResolver", "UpdatePostResolver"):
            resource = ctx.get_resource(resource_id)
            assert resource is not None
            assert resource.properties is not None
            assert resource.properties.response_mapping_template == RESPONSE_TEMPLATE

    def test_missing_identity_sentinel(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        request = _request(ctx, "CreatePostResolver")
        assert '"-NO-IDENTITY-"' in request
        assert "$util.error" not in request

    def test_identity_required(self, schema: SchemaFixture):
        schema.create(post_sdl(directive="@objectmeta(identityRequired: true)"))
        ctx = schema.apply()

        request = _request(ctx, "CreatePostResolver")
        assert "-NO-IDENTITY-" not in request
        assert '$util.defaultIfNull($ctx.identity.claims.get("cognito:username"), $null)' in request
        assert '#if( $util.isNullOrEmpty($identityValue) )\n  $util.error("Invalid identity.")\n#end' in request

    def test_transformer_options(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply(identity_claims=["sub"], missing_identity="anonymous", block_name="Audit")

        request = _request(ctx, "CreatePostResolver")
        assert request.startswith(
            '## [Start] Audit. **\n#set( $identityValue = $util.defaultIfNull($ctx.identity.claims.get("sub"), "anonymous") )\n'
        )

    def test_missing_resolvers_are_skipped(self, schema: SchemaFixture):
        schema.create(resources={"UpdatePostResolver": resolver("updatePost", UPDATE_TEMPLATE)})
        ctx = schema.apply()

        assert ctx.get_resource("CreatePostResolver") is None
        assert _request(ctx, "UpdatePostResolver") == f"{UPDATE_SNIPPET}\n\n{UPDATE_TEMPLATE}"

    def test_resolver_without_properties(self, schema: SchemaFixture, caplog: pytest.LogCaptureFixture):
        resources = post_resources()
        resources["CreatePostResolver"] = Resource()
        schema.create(resources=resources)

        with caplog.at_level(logging.WARNING):
            ctx = schema.apply()

        assert "Resolver CreatePostResolver has no properties, skipping" in caplog.text
        resource = ctx.get_resource("CreatePostResolver")
        assert resource is not None
        assert resource.properties is None

    def test_applied_once_per_type(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()
        assert _request(ctx, "CreatePostResolver").count("## [Start] ObjectMeta Fields. **") == 1


# MARK: Soft delete
@pytest.mark.objectmeta
class TestObjectMetaSoftDelete:
    def test_mutation(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        mutation = ctx.get_type("Mutation")
        assert isinstance(mutation, ObjectTypeDefinitionNode)
        field = find_field(mutation.fields, "softDeletePost")
        assert field is not None
        assert print_ast(field) == "softDeletePost(id: ID!): Post"

        assert _fields(ctx, "SoftDeletePostInput") == {"id": "ID!"}

    def test_resolver(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        resource = ctx.get_resource("SoftDeletePostResolver")
        assert resource is not None
        assert resource.type == "AWS::AppSync::Resolver"

        properties = resource.properties
        assert properties is not None
        assert properties.api_id == GetAtt.of("GraphQLAPI", "ApiId")
        assert properties.data_source_name == GetAtt.of("PostDataSource", "Name")
        assert properties.field_name == "softDeletePost"
        assert properties.type_name == "Mutation"
        assert properties.response_mapping_template == RESPONSE_TEMPLATE

    def test_resolver_request_wraps_update_request(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        update_request = _request(ctx, "UpdatePostResolver")
        assert _request(ctx, "SoftDeletePostResolver") == f"{CREATE_SNIPPET}\n{update_request}"
        assert _request(ctx, "SoftDeletePostResolver").endswith(UPDATE_TEMPLATE)

    def test_stack_mapping(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()
        assert ctx.stack_mapping == {"SoftDeletePostResolver": "Post"}

    def test_disabled(self, schema: SchemaFixture):
        schema.create(post_sdl(directive="@objectmeta(softDelete: false)"))
        ctx = schema.apply()

        assert "softDeletePost" not in _fields(ctx, "Mutation")
        assert ctx.get_type("SoftDeletePostInput") is None
        assert ctx.get_resource("SoftDeletePostResolver") is None
        assert ctx.stack_mapping == {}

    def test_existing_input_is_reused(self, schema: SchemaFixture):
        schema.create(post_sdl() + "input SoftDeletePostInput { id: ID! }")
        ctx = schema.apply()
        assert _fields(ctx, "SoftDeletePostInput") == {"id": "ID!"}

    def test_missing_mutation_type(self, schema: SchemaFixture):
        sdl = post_sdl().replace("type Mutation", "type Query")
        schema.create(sdl)
        ctx = schema.apply()
        assert list(_fields(ctx, "Mutation")) == ["softDeletePost"]

    def test_missing_update_resolver(self, schema: SchemaFixture):
        schema.create(resources={"CreatePostResolver": resolver("createPost", CREATE_TEMPLATE)})

        with pytest.raises(MissingResourceError, match=r'update resolver "UpdatePostResolver" was not found') as excinfo:
            schema.apply()
        assert excinfo.value.resource_id == "UpdatePostResolver"

    def test_missing_update_resolver_leaves_no_partial_state(self, schema: SchemaFixture):
        ctx = schema.create(resources={"CreatePostResolver": resolver("createPost", CREATE_TEMPLATE)})
        post_before = ctx.get_type("Post")
        input_before = ctx.get_type("CreatePostInput")

        with pytest.raises(MissingResourceError):
            schema.apply()

        assert _request(ctx, "CreatePostResolver") == CREATE_TEMPLATE
        assert ctx.get_type("Post") is post_before
        assert ctx.get_type("CreatePostInput") is input_before
        assert "softDeletePost" not in _fields(ctx, "Mutation")
        assert ctx.stack_mapping == {}


# MARK: Inputs
ONLY_META_CREATE_INPUT = """
    type Post @model @auth(rules: [{allow: owner}]) @objectmeta(identityRequired: true) {
        id: ID!
        deleted: Boolean!
    }

    input CreatePostInput {
        %s
        createdAt: Float
        createdBy: ID
        updatedAt: Float
        updatedBy: ID
        deleted: Boolean
        deletedAt: Float
        deletedBy: ID
    }

    type Mutation {
        createPost(input: CreatePostInput!): Post
    }
"""


@pytest.mark.objectmeta
class TestObjectMetaInputs:
    def test_strips_meta_fields(self, schema: SchemaFixture):
        schema.create()
        ctx = schema.apply()

        assert list(_fields(ctx, "CreatePostInput")) == ["id", "title"]
        assert list(_fields(ctx, "UpdatePostInput")) == ["id", "title"]

    def test_untouched_input_is_kept(self, schema: SchemaFixture):
        sdl = post_sdl().replace("updatedAt: Float\n            deleted: Boolean\n", "")
        ctx = schema.create(sdl)
        before = ctx.get_type("UpdatePostInput")
        assert before is not None
        assert list(_fields(ctx, "UpdatePostInput")) == ["id", "title"]

        schema.apply()
        assert ctx.get_type("UpdatePostInput") is before

    def test_empty_create_input(self, schema: SchemaFixture):
        schema.create(ONLY_META_CREATE_INPUT % "", resources={"UpdatePostResolver": resolver("updatePost", UPDATE_TEMPLATE)})

        with pytest.raises(
            InvalidDirectiveError,
            match=r'After stripping away object meta fields "createdAt", "createdBy", "updatedAt", "updatedBy", "deleted", "deletedAt", "deletedBy" the create input for type "Post" cannot be created with 0 fields.',
        ):
            schema.apply()

    def test_create_input_with_one_field(self, schema: SchemaFixture):
        schema.create(ONLY_META_CREATE_INPUT % "id: ID", resources={"UpdatePostResolver": resolver("updatePost", UPDATE_TEMPLATE)})
        ctx = schema.apply()

        assert list(_fields(ctx, "CreatePostInput")) == ["id"]

    def test_empty_update_input(self, schema: SchemaFixture):
        sdl = post_sdl().replace("id: ID!\n            title: String\n", "")
        schema.create(sdl)

        with pytest.raises(InvalidDirectiveError, match=r'the update input for type "Post" cannot be created with 0 fields'):
            schema.apply()
