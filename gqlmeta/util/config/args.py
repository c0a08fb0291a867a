# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Argument parsing and CLI option definitions.

Every option is stored under its dotted configuration key (e.g. ``logging.levels.tty``) so that it can be merged over
the configuration file. Defaults can also be provided through ``OBJECTMETA_<KEY>`` environment variables.
"""

import argparse
import os
import sys

from abc import ABCMeta, abstractmethod
from collections.abc import Sequence
from typing import Any, override

from ..helpers.script_info import get_exe_name, get_script_name, is_unit_test
from .config_path import ConfigFilePath


ENV_PREFIX = get_script_name().upper()


class ArgParserBase(argparse.ArgumentParser, metaclass=ABCMeta):
    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("prog", get_exe_name())
        kwargs.setdefault("description", "objectmeta GraphQL schema transformer")
        kwargs["formatter_class"] = argparse.ArgumentDefaultsHelpFormatter

        super().__init__(*args, **kwargs)

        self.initialize()

    @override
    def add_argument(self, name: str, *args, default: Any = None, **kwargs) -> argparse.Action:  # pyright: ignore[reportIncompatibleMethodOverride]
        """Add a command-line argument stored under the configuration key ``name``.

        Args:
            name (str): The destination configuration key.
            *args: Argument flags (e.g., '-v', '--verbosity').
            default: Default value if not set elsewhere.
            **kwargs: Additional argparse options.

        """
        env_name = name.upper().replace(".", "_")
        default = os.getenv(f"{ENV_PREFIX}_{env_name}", default)

        # Positional arguments take their destination from the name itself
        if not args:
            return super().add_argument(name, default=default, **kwargs)
        return super().add_argument(*args, dest=name, default=default, **kwargs)

    def add(self, *args, **kwargs) -> argparse.Action:
        return self.add_argument(*args, **kwargs)

    @abstractmethod
    def initialize(self) -> None:
        msg = "Subclasses must implement the 'initialize' method."
        raise NotImplementedError(msg)

    def get_argv(self) -> Sequence[str]:
        # In unit tests, we default to reading the config from stdin
        if is_unit_test():
            return ("-",)
        return sys.argv[1:]

    @override
    def parse_args(self, args: Sequence[str] | None = None, namespace: Any = None) -> argparse.Namespace:  # pyright: ignore[reportIncompatibleMethodOverride]
        self.namespace = super().parse_args(self.get_argv() if args is None else args, namespace)
        return self.namespace


class DefaultArgParser(ArgParserBase):
    @override
    def initialize(self) -> None:
        # Configuration
        self.add("app.paths.config", type=str, nargs="?", default="-", metavar="config", help="Configuration file to load, '-' reads standard input")

        # Logging
        self.add(
            "logging.levels.file",
            "-lv",
            "--logfile-verbosity",
            action="store",
            help="Logfile verbosity. Can be numeric or one of the default logging levels (CRITICAL=50, ERROR=40, WARNING=30, INFO=20, DEBUG=10, OFF)",
        )
        self.add(
            "logging.levels.tty",
            "-cv",
            "--console-verbosity",
            action="store",
            help="Console verbosity. Can be numeric or one of the default logging levels (CRITICAL=50, ERROR=40, WARNING=30, INFO=20, DEBUG=10, OFF)",
        )
        self.add(
            "logging.levels.default",
            "-v",
            "--verbosity",
            action="store",
            help="Default verbosity. Can be numeric or one of the default logging levels (CRITICAL=50, ERROR=40, WARNING=30, INFO=20, DEBUG=10)",
        )
        self.add("logging.rich", "-r", "--rich", action="store_true", help="Use rich for console output")
        self.add("logging.rich", "-nr", "--no-rich", action="store_false", help="Do not use rich for console output")


__all__ = [
    "ArgParserBase",
    "ConfigFilePath",
    "DefaultArgParser",
]
