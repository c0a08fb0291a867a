# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .ast import (
    extend_object_type,
    find_field,
    get_base_type,
    get_directive,
    has_directive,
    is_non_null_type,
    make_field,
    make_input_object_definition,
    make_input_value_definition,
    make_named_type,
    make_non_null_type,
    print_type,
    with_fields,
)
from .resource_ids import ModelResourceIDs, ResolverResourceIDs, ResourceConstants, SoftDeleteResourceIDs
from .resources import GetAtt, Resource, ResolverProperties


__all__ = [
    "GetAtt",
    "ModelResourceIDs",
    "ResolverProperties",
    "ResolverResourceIDs",
    "Resource",
    "ResourceConstants",
    "SoftDeleteResourceIDs",
    "extend_object_type",
    "find_field",
    "get_base_type",
    "get_directive",
    "has_directive",
    "is_non_null_type",
    "make_field",
    "make_input_object_definition",
    "make_input_value_definition",
    "make_named_type",
    "make_non_null_type",
    "print_type",
    "with_fields",
]
