# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Any

import pytest

from gqlmeta.config import CFG, Config
from gqlmeta.util.config import ConfigManager


class ConfigFixture:
    def __init__(self) -> None:
        self.config: ConfigManager = CFG
        self.config.reset()

    def create(self, data: dict[str, Any] | str) -> Config:
        """Reset and load the configuration with the provided data."""
        self.config.reset()
        return self.config.load(data)

    def get(self) -> Config:
        if (config := self.config.config) is None:
            msg = "Configuration not initialized. Call 'create()' first."
            raise RuntimeError(msg)
        return config

    def cleanup(self) -> None:
        self.config.reset()

    def __getattr__(self, name: str) -> Any:
        return getattr(self.config, name)


@pytest.fixture
def config():
    fixture = ConfigFixture()
    yield fixture
    fixture.cleanup()
