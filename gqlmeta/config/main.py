# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from pathlib import Path

from pydantic import Field, SerializeAsAny

from ..transformers import TransformerConfig
from ..util.config import BaseConfigModel, ConfigBase


def _default_transformers() -> tuple[TransformerConfig, ...]:
    return (TransformerConfig.model_validate({"package": "objectmeta"}),)


class InputConfig(BaseConfigModel):
    schema_file: Path = Field(description="GraphQL SDL file to transform")
    resources_file: Path | None = Field(default=None, description="YAML file with the resolver resources generated for the schema")


class OutputConfig(BaseConfigModel):
    schema_file: Path | None = Field(default=None, description="Transformed schema destination, standard output when unset")
    resources_file: Path | None = Field(default=None, description="Transformed resources destination, not written when unset")


# MARK: Main Config
class Config(ConfigBase):
    input: InputConfig = Field(description="Schema and resources to transform")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Destinations of the transformed schema and resources")
    transformers: tuple[SerializeAsAny[TransformerConfig], ...] = Field(
        default_factory=_default_transformers, description="Transformers to apply, in order"
    )
