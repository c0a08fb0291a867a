# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from typing import Any


def getLogger(obj: object, parent: logging.Logger | None = None) -> logging.Logger:  # noqa: N802 matches logging.getLogger
    """Obtain a logger named after ``obj``.

    ``obj`` may be a logger name, a class or an instance (in which case the class name is used). When ``parent`` is given
    the logger becomes one of its children.
    """
    name: Any
    if isinstance(obj, str):
        name = obj
    elif isinstance(obj, type):
        name = obj.__name__
    else:
        name = type(obj).__name__

    if not isinstance(name, str) or not name:
        msg = f"Cannot determine logger name from object: {obj!r}"
        raise TypeError(msg)

    logger = parent.getChild(name) if parent is not None else logging.getLogger(name)

    # Apply configured levels if logging was already initialised
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger
