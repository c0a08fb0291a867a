# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import sys

from pathlib import Path
from typing import TYPE_CHECKING, Any

from ... import __version__
from ..helpers import script_info
from ..logging import LoggingConfig, LoggingManager
from ..mixins import LoggableMixin
from .config_path import ConfigFilePath
from .yaml_loader import load_yaml


if TYPE_CHECKING:
    import argparse

    from .base_model import ConfigBase


class ConfigFileLoader[C: ConfigBase](LoggableMixin):
    def __init__(self, config_class: type[C], args: argparse.Namespace | None = None) -> None:
        self.config_class = config_class
        self.args = args
        self.config: C | None = None
        self.path: ConfigFilePath | None = None
        self.data: dict[str, Any] = {}

    def _merge_args(self) -> None:
        if self.args is None:
            return

        for name, value in vars(self.args).items():
            if value is None:
                continue

            # Key is in the form 'section.key.subkey', 'app' keys are reserved for the loader itself
            keys = name.split(".")
            if keys[0] == "app":
                continue

            d: dict[str, Any] = self.data
            for key in keys[:-1]:
                child = d.get(key)
                if not isinstance(child, dict):
                    child = d[key] = {}
                d = child

            d[keys[-1]] = value

    def open(self, path: ConfigFilePath | Path | str) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        self.path = path if isinstance(path, ConfigFilePath) else ConfigFilePath(path)

        with self.path.open() as f:
            data = load_yaml(f)

        if not isinstance(data, dict):
            msg = f"Invalid configuration file format. Expected a dictionary, got {type(data).__name__}"
            raise TypeError(msg)

        return self.load(data)

    def load(self, data: dict[str, Any] | str) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        loaded = load_yaml(data) if isinstance(data, str) else data
        if loaded is None:
            msg = "Configuration is empty"
            raise ValueError(msg)
        if not isinstance(loaded, dict):
            msg = f"Invalid configuration format. Expected a dictionary, got {type(loaded).__name__}"
            raise TypeError(msg)
        self.data = loaded

        # Merge the loaded data with the application arguments
        self._merge_args()

        # Use current state of data to initialize logging manager
        self._init_logging_manager()

        # Inject static configuration data
        if "app" in self.data:
            msg = "Configuration file contains 'app' section. This is reserved for internal use."
            raise ValueError(msg)
        self.data["app"] = {
            "name": script_info.get_script_name(),
            "version": __version__,
            "config_dir": self.path.dirname if self.path is not None else Path.cwd(),
            "test": script_info.is_unit_test(),
        }

        if not script_info.is_unit_test():
            self.log.info("****** %s %s ******", self.data["app"]["name"], __version__, extra={"simple": True})
            self.log.debug("Command line: %s", " ".join(sys.argv))

        self.config = self.config_class.model_validate(self.data)

        self.log.info("Configuration loaded successfully")
        self.config.debug()

        return self.config

    def _init_logging_manager(self) -> None:
        # Unit tests initialise logging through a session fixture
        if script_info.is_unit_test():
            return

        config = LoggingConfig.model_validate(self.data.get("logging", {}))
        self.data["logging"] = config

        manager = LoggingManager()
        if not manager.initialized:
            manager.initialize(config)
