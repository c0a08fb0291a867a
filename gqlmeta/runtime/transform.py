# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from collections.abc import Sequence
from typing import TYPE_CHECKING

from graphql import ObjectTypeDefinitionNode

from ..util.mixins import LoggableMixin


if TYPE_CHECKING:
    from ..context import SchemaContext
    from ..transformers import Transformer


class GraphQLTransform(LoggableMixin):
    """Dispatch the directives found on object types to the transformers implementing them.

    Types are visited in document order and each directive is handed the current definition of its type, so a
    transformer sees the changes made by the ones before it. The first error aborts the whole transformation.
    """

    def __init__(self, transformers: Sequence[Transformer]) -> None:
        self.transformers: dict[str, Transformer] = {}
        for transformer in transformers:
            name = transformer.directive_name
            if name in self.transformers:
                msg = f"Multiple transformers registered for directive '@{name}'"
                raise ValueError(msg)
            self.transformers[name] = transformer

    def transform(self, ctx: SchemaContext) -> SchemaContext:
        for definition in list(ctx.object_definitions()):
            type_name = definition.name.value
            for directive in definition.directives or ():
                transformer = self.transformers.get(directive.name.value)
                if transformer is None:
                    continue

                transformer.validate_directive(directive)

                current = ctx.get_type(type_name)
                if not isinstance(current, ObjectTypeDefinitionNode):
                    msg = f"Object type '{type_name}' disappeared while being transformed"
                    raise TypeError(msg)
                transformer.object(current, directive, ctx)

        self.log.info(t"Transformed schema with {len(self.transformers)} transformer(s)")
        return ctx
