# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Allow t-strings to be passed as log messages.

The template is only rendered when a handler actually formats the record, so
``log.debug(t"...")`` costs nothing when DEBUG is disabled.
"""

import functools
import logging

from string.templatelib import Template

from ..helpers.tstring import tstring_as_fstring


logging_logrecord_getMessage = logging.LogRecord.getMessage  # noqa: N816 matches logging.LogRecord.getMessage


@functools.wraps(logging.LogRecord.getMessage)
def getMessage(self: logging.LogRecord) -> str:  # noqa: N802 matches logging.LogRecord.getMessage
    if isinstance(self.msg, Template):
        return tstring_as_fstring(self.msg)
    return logging_logrecord_getMessage(self)


logging.LogRecord.getMessage = getMessage
