# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from .logging import getLogger


class LoggableMixin:
    """Mixin that adds a ``log`` property to a class.

    The logger is named after ``__log_name__``, which defaults to the class name. Loggers are cached by the
    :mod:`logging` module itself, so the property is cheap to call repeatedly.
    """

    @property
    def __log_name__(self) -> str:
        return type(self).__name__

    @property
    def log(self) -> logging.Logger:
        return getLogger(self.__log_name__)
