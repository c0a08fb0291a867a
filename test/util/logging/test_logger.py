# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

import pytest

from gqlmeta.util.logging import LoggingConfig, LoggingManager, getLogger
from gqlmeta.util.mixins import LoggableMixin


class Loggable(LoggableMixin):
    pass


@pytest.mark.logging
class TestLogger:
    def test_getLogger_returns_logger(self, caplog):
        logger = getLogger("testLogger")
        with caplog.at_level(logging.INFO):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
        assert "debug message" not in caplog.text
        assert "info message" in caplog.text
        assert "warning message" in caplog.text

    def test_getLogger_with_parent(self, caplog):
        parent = getLogger("parentLogger")
        child = getLogger("childLogger", parent=parent)
        assert child.parent is parent
        assert child.name == "parentLogger.childLogger"
        with caplog.at_level(logging.INFO):
            child.info("child info")
        assert "child info" in caplog.text

    def test_getLogger_from_object(self):
        assert getLogger(Loggable()).name == "Loggable"
        assert getLogger(Loggable).name == "Loggable"

    def test_tstring_messages(self, caplog):
        logger = getLogger("tstringLogger")
        name = "Post"
        with caplog.at_level(logging.INFO):
            logger.info(t"Applying to {name!r}")
        assert "Applying to 'Post'" in caplog.text

    def test_mixin(self, caplog):
        obj = Loggable()
        assert obj.log.name == "Loggable"
        with caplog.at_level(logging.INFO):
            obj.log.info("from mixin")
        assert caplog.records[-1].name == "Loggable"


@pytest.mark.logging
class TestLoggingManager:
    def test_singleton(self, logging_manager: LoggingManager):
        assert LoggingManager() is logging_manager
        assert logging_manager.initialized

    def test_initialize_twice(self, logging_manager: LoggingManager):
        with pytest.raises(RuntimeError, match="twice"):
            logging_manager.initialize({})

    def test_custom_levels(self, logging_manager: LoggingManager, monkeypatch: pytest.MonkeyPatch):
        config = LoggingConfig.model_validate({"levels": {"custom": {"custom\\.": "ERROR", "custom\\.verbose": "DEBUG"}}})
        monkeypatch.setattr(logging_manager, "config", config)

        quiet = logging.getLogger("custom.quiet")
        verbose = logging.getLogger("custom.verbose")
        monkeypatch.setattr(quiet, "level", logging.NOTSET)
        monkeypatch.setattr(verbose, "level", logging.NOTSET)

        logging_manager.apply_logging_level(quiet)
        logging_manager.apply_logging_level(verbose)

        assert quiet.level == logging.ERROR
        assert verbose.level == logging.DEBUG
