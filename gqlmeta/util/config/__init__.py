# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .args import ArgParserBase, DefaultArgParser
from .base_model import AppInfo, BaseConfigModel, ConfigBase
from .config_path import ConfigFilePath
from .loader import ConfigFileLoader
from .wrapper import ConfigManager


__all__ = [
    "AppInfo",
    "ArgParserBase",
    "BaseConfigModel",
    "ConfigBase",
    "ConfigFileLoader",
    "ConfigFilePath",
    "ConfigManager",
    "DefaultArgParser",
]
