# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

# t-string support for log messages
from . import tstring

from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .logger import getLogger
from .manager import LoggingManager


__all__ = [
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "LoggingManager",
    "getLogger",
    "tstring",
]
