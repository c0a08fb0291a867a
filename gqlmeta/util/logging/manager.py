# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Logging configuration for objectmeta.

Configures file and TTY logging, log levels and the optional rich console handler.
"""

import logging
import re
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self, cast, override

from ..helpers import script_info
from .config import LoggingConfig


if TYPE_CHECKING:
    from .levels import LoggingLevel


class SimpleFormatter(logging.Formatter):
    """Formatter that prints the bare message for records logged with ``extra={"simple": True}``."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)


class HandlerFilter(logging.Filter):
    """Route records logged with ``extra={"handler": ...}`` to a single handler."""

    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "handler", None)
        return target is None or target == self.handler_name


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    config: LoggingConfig
    fh: logging.Handler | None
    ch: logging.Handler | None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.fh = None
            instance.ch = None
        return cast("Self", instance)

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / f"{script_info.get_script_name()}.log"

        logging.captureWarnings(capture=True)
        logging.root.setLevel(max(config.levels.root.value, logging.NOTSET))

        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def _configure_file_handler(self) -> None:
        self.fh = None
        if not self.config.levels.file.enabled:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w", encoding="UTF-8")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(SimpleFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from rich.console import Console
            from rich.logging import RichHandler

            self.ch = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_time=False, show_path=False)
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(SimpleFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures output through its own handlers
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicitly set levels win
        if logger.level != logging.NOTSET:
            return

        # The longest matching custom pattern wins, otherwise the default level applies
        level: LoggingLevel = self.config.levels.default
        match_len = 0
        for pattern, custom in self.config.levels.custom.items():
            if (match := re.match(pattern, logger.name)) is not None and len(match.group(0)) > match_len:
                level = custom
                match_len = len(match.group(0))

        if level.value <= logging.NOTSET:
            return
        logger.setLevel(level.value)

    def _configure_custom_logger_levels(self) -> None:
        for name in list(logging.root.manager.loggerDict):
            logger = logging.getLogger(name)
            self.apply_logging_level(logger)
