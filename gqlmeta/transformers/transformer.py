# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import importlib

from abc import ABCMeta
from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar

from graphql import DirectiveDefinitionNode, parse
from pydantic import Field, ModelWrapValidatorHandler, model_validator

from ..errors import InvalidDirectiveError
from ..util.config import BaseConfigModel
from ..util.mixins import LoggableMixin


if TYPE_CHECKING:
    from graphql import DirectiveNode, ObjectTypeDefinitionNode

    from ..context import TransformerContext


# MARK: Transformer Base Configuration
class TransformerConfig(BaseConfigModel, metaclass=ABCMeta):
    PACKAGE_ROOT: ClassVar[str] = "gqlmeta.transformers"

    package: str = Field(description="Package name of the transformer to load, relative to the transformers package")
    title: str | None = Field(default=None, description="Logical title of the transformer instance, to help identification")

    @model_validator(mode="wrap")
    @classmethod
    def _coerce_to_concrete_class[Child: TransformerConfig](cls: type[Child], data: Any, handler: ModelWrapValidatorHandler) -> Child:
        # Already instantiated
        if isinstance(data, cls):
            return data

        if not isinstance(data, dict):
            msg = f"Expected a dictionary for {cls.__name__} configuration, got {type(data).__name__}."
            raise TypeError(msg)

        package = data.get("package", None)
        if package is None:
            msg = f"Missing 'package' key in {cls.__name__} configuration."
            raise ValueError(msg)

        concrete_cls = cls.get_transformer_class_for_package(package).config_class
        if cls is concrete_cls:
            return handler(data)
        if not issubclass(concrete_cls, cls):
            msg = f"Expected configuration class {cls.__name__}, got {concrete_cls.__name__} instead."
            raise TypeError(msg)

        return concrete_cls.model_validate(data)

    @classmethod
    def get_transformer_class_for_package(cls, package: str) -> type[Transformer]:
        mod = importlib.import_module(f".{package}", cls.PACKAGE_ROOT)

        transformer_cls = getattr(mod, "COMPONENT", None)
        if transformer_cls is None:
            msg = f"Transformer class for {package} not found in '{cls.PACKAGE_ROOT}.{package}'."
            raise ImportError(msg)
        if not isinstance(transformer_cls, type) or not issubclass(transformer_cls, Transformer):
            msg = f"Expected a Transformer class for {package}, got {transformer_cls!r} instead."
            raise TypeError(msg)

        return transformer_cls

    def create_transformer(self) -> Transformer:
        transformer_cls = self.get_transformer_class_for_package(self.package)
        return transformer_cls(self)


# MARK: Transformer Base class
class Transformer[C: TransformerConfig](LoggableMixin, metaclass=ABCMeta):
    """Base class of a directive-driven schema transformer.

    Subclasses declare the SDL of the directive they implement and override the hooks for the locations it applies to.
    """

    package: ClassVar[str]
    config_class: ClassVar[type[TransformerConfig]]
    directive_sdl: ClassVar[str]

    def __init__(self, config: C | None = None) -> None:
        if config is None:
            config = self.config_class.model_validate({"package": self.package})  # pyright: ignore[reportAssignmentType]
        self.config: C = config  # pyright: ignore[reportAttributeAccessIssue]

    @property
    def __log_name__(self) -> str:
        return self.config.title or type(self).__name__

    # MARK: Directive
    @cached_property
    def directive_definition(self) -> DirectiveDefinitionNode:
        definition = parse(self.directive_sdl, no_location=True).definitions[0]
        if not isinstance(definition, DirectiveDefinitionNode):
            msg = f"{type(self).__name__} SDL must start with a directive definition"
            raise TypeError(msg)
        return definition

    @property
    def directive_name(self) -> str:
        return self.directive_definition.name.value

    @cached_property
    def argument_names(self) -> frozenset[str]:
        return frozenset(argument.name.value for argument in self.directive_definition.arguments or ())

    def validate_directive(self, directive: DirectiveNode) -> None:
        for argument in directive.arguments or ():
            if argument.name.value not in self.argument_names:
                msg = f'Unknown argument "{argument.name.value}" on directive "@{self.directive_name}".'
                raise InvalidDirectiveError(msg)

    # MARK: Hooks
    def object(self, definition: ObjectTypeDefinitionNode, directive: DirectiveNode, ctx: TransformerContext) -> None:  # noqa: ARG002
        msg = f"{type(self).__name__} does not support directives on object types."
        raise NotImplementedError(msg)
