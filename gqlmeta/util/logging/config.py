# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from pathlib import Path

from pydantic import BaseModel, ConfigDict, DirectoryPath, Field

from .levels import LoggingLevel


class LoggingLevels(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    file   : LoggingLevel = Field(default=LoggingLevel("OFF"        ), description="Log level for log file output")
    tty    : LoggingLevel = Field(default=LoggingLevel(logging.INFO ), description="Log level for TTY output")
    root   : LoggingLevel = Field(default=LoggingLevel(logging.DEBUG), description="Log level for the root logger")
    default: LoggingLevel = Field(default=LoggingLevel("NOTSET"     ), description="Level applied to loggers without a custom level")
    custom : dict[str, LoggingLevel] = Field(default_factory=dict, description="Logger name regular expressions mapped to their level")  # fmt: skip


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    dir: DirectoryPath = Field(default_factory=Path.cwd, description="Log file directory")
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
