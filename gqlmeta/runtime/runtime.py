# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import sys

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import yaml

from ..context import SchemaContext
from ..schema import Resource
from ..util.config.yaml_loader import load_yaml
from ..util.mixins import LoggableMixin
from .transform import GraphQLTransform


if TYPE_CHECKING:
    from pathlib import Path

    from ..config import Config
    from ..transformers import Transformer
    from ..util.config import ConfigManager


RESOURCES_KEY = "Resources"
STACK_MAPPING_KEY = "StackMapping"


class Runtime(LoggableMixin):
    initialized: bool
    config: ConfigManager

    # MARK: Initialization
    def __init__(self, *, config: ConfigManager | None = None) -> None:
        self.initialized = False

        if config is None:
            from ..config import CFG

            config = CFG

        self.config = config

    def initialize(self) -> None:
        if self.initialized:
            return

        # Configuration may have been loaded explicitly already, e.g. by the unit tests
        if self.config.config is None:
            self.config.initialize()

        self.initialized = True

    @property
    def settings(self) -> Config:
        settings = self.config.config
        if settings is None:
            msg = "Configuration not loaded"
            raise RuntimeError(msg)
        return settings

    # MARK: Inputs
    def _resolve(self, path: Path) -> Path:
        return self.settings.app.resolve(path)

    def load_resources(self) -> dict[str, Resource]:
        path = self.settings.input.resources_file
        if path is None:
            return {}

        with self._resolve(path).open(encoding="UTF-8") as f:
            data = load_yaml(f) or {}

        if not isinstance(data, Mapping):
            msg = f"Expected a mapping of resources in '{path}', got {type(data).__name__}"
            raise TypeError(msg)

        # Accept both a bare mapping and a template-style document with a 'Resources' section
        resources = data.get(RESOURCES_KEY, data)
        if not isinstance(resources, Mapping):
            msg = f"Expected '{RESOURCES_KEY}' in '{path}' to be a mapping, got {type(resources).__name__}"
            raise TypeError(msg)

        return {str(resource_id): Resource.model_validate(resource) for resource_id, resource in resources.items()}

    def load_context(self) -> SchemaContext:
        schema_path = self._resolve(self.settings.input.schema_file)
        self.log.info(t"Loading schema {schema_path}")
        sdl = schema_path.read_text(encoding="UTF-8")

        resources = self.load_resources()
        self.log.debug(t"Loaded {len(resources)} resource(s)")

        return SchemaContext(sdl, resources)

    def create_transformers(self) -> list[Transformer]:
        return [transformer.create_transformer() for transformer in self.settings.transformers]

    # MARK: Outputs
    @staticmethod
    def dump_resources(ctx: SchemaContext) -> dict[str, Any]:
        return {
            RESOURCES_KEY: {
                resource_id: resource.model_dump(mode="json", by_alias=True, exclude_none=True) for resource_id, resource in ctx.resources.items()
            },
            STACK_MAPPING_KEY: dict(ctx.stack_mapping),
        }

    def write_outputs(self, ctx: SchemaContext) -> None:
        output = self.settings.output
        schema = ctx.print_schema() + "\n"

        if output.schema_file is None:
            sys.stdout.write(schema)
        else:
            path = self._resolve(output.schema_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(schema, encoding="UTF-8")
            self.log.info(t"Wrote schema to {path}")

        if output.resources_file is not None:
            path = self._resolve(output.resources_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="UTF-8") as f:
                yaml.safe_dump(self.dump_resources(ctx), f, sort_keys=False)
            self.log.info(t"Wrote resources to {path}")

    # MARK: Run
    def run(self) -> SchemaContext:
        if not self.initialized:
            self.initialize()

        ctx = self.load_context()
        GraphQLTransform(self.create_transformers()).transform(ctx)
        self.write_outputs(ctx)
        return ctx
