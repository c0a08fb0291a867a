# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ..logging import LoggingConfig
from ..mixins import LoggableMixin


if TYPE_CHECKING:
    import rich.repr


class BaseConfigModel(LoggableMixin, BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def __rich_repr__(self) -> rich.repr.Result:
        for attr, info in type(self).model_fields.items():
            if info.repr is False:
                continue
            yield attr, getattr(self, attr, None)


class AppInfo(BaseConfigModel):
    name: str = Field(description="Executable name, without extension")
    version: str = Field(description="Package version")
    config_dir: Path = Field(default_factory=Path.cwd, description="Directory of the configuration file, relative paths are resolved against it")
    test: bool = Field(default=False, description="Whether running inside the unit test suite")

    def resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.config_dir / path


class ConfigBase(BaseConfigModel):
    app: AppInfo = Field(description="Application information, automatically gathered at startup")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    def debug(self) -> None:
        if not self.log.isEnabledFor(logging.DEBUG):
            return

        if self.logging.rich:
            from rich import pretty

            self.log.debug("Configuration: %s", pretty.pretty_repr(self, expand_all=True))
        else:
            self.log.debug("Configuration: %s", self.model_dump(mode="json"))
