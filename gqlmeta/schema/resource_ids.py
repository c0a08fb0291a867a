# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Deterministic names of the schema types and resources generated for a model type."""


class ResourceConstants:
    GRAPHQL_API_LOGICAL_ID = "GraphQLAPI"
    MUTATION_TYPE_NAME = "Mutation"
    RESOLVER_RESOURCE_TYPE = "AWS::AppSync::Resolver"


class ResolverResourceIDs:
    @staticmethod
    def dynamodb_create_resolver_resource_id(type_name: str) -> str:
        return f"Create{type_name}Resolver"

    @staticmethod
    def dynamodb_update_resolver_resource_id(type_name: str) -> str:
        return f"Update{type_name}Resolver"


class ModelResourceIDs:
    @staticmethod
    def model_create_input_object_name(type_name: str) -> str:
        return f"Create{type_name}Input"

    @staticmethod
    def model_update_input_object_name(type_name: str) -> str:
        return f"Update{type_name}Input"

    @staticmethod
    def model_table_data_source_id(type_name: str) -> str:
        return f"{type_name}DataSource"


class SoftDeleteResourceIDs:
    @staticmethod
    def mutation_field_name(type_name: str) -> str:
        return f"softDelete{type_name}"

    @staticmethod
    def input_object_name(type_name: str) -> str:
        return f"SoftDelete{type_name}Input"

    @staticmethod
    def resolver_resource_id(type_name: str) -> str:
        return f"SoftDelete{type_name}Resolver"
