# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from functools import cached_property
from typing import TYPE_CHECKING, Any

from ..helpers import script_info
from .loader import ConfigFileLoader


if TYPE_CHECKING:
    import argparse

    from pathlib import Path

    from .args import ArgParserBase
    from .base_model import ConfigBase
    from .config_path import ConfigFilePath


class ConfigManager[C: ConfigBase, A: ArgParserBase]:
    """Lazily loaded global configuration.

    Attribute access is forwarded to the loaded configuration object.
    """

    def __init__(self, config_class: type[C], argparser_class: type[A]) -> None:
        self.config_class = config_class
        self.argparser_class = argparser_class
        self.config: C | None = None

    def initialize(self) -> C:
        return self.open(getattr(self.args, "app.paths.config"))

    @cached_property
    def args(self) -> argparse.Namespace:
        return self.argparser_class().parse_args()

    def open(self, path: ConfigFilePath | Path | str) -> C:
        self.config = ConfigFileLoader(self.config_class, self.args).open(path)
        return self.config

    def load(self, config: str | dict[str, Any] | C) -> C:
        if isinstance(config, self.config_class):
            self.config = config
        elif isinstance(config, (str, dict)):
            self.config = ConfigFileLoader(self.config_class, self.args).load(config)
        else:
            msg = f"Expected {self.config_class.__name__}, str or dict, got {type(config).__name__}"
            raise TypeError(msg)
        return self.config

    def reset(self) -> None:
        if not script_info.is_unit_test():
            msg = "Cannot reset configuration outside of unit tests"
            raise RuntimeError(msg)
        self.config = None

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not found on the manager itself
        config = self.__dict__.get("config")
        if config is None:
            msg = f"Configuration not initialized. Call 'initialize()' first. Cannot access '{name}'."
            raise RuntimeError(msg)
        return getattr(config, name)
