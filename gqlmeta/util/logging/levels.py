# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from typing import Any, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema


OFF = -1

LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR"   : logging.ERROR   ,
    "WARNING" : logging.WARNING ,
    "INFO"    : logging.INFO    ,
    "DEBUG"   : logging.DEBUG   ,
    "NOTSET"  : logging.NOTSET  ,
    "OFF"     : OFF             ,
}  # fmt: skip

REVERSE_LEVELS: dict[int, str] = {v: k for k, v in LEVELS.items()}


class LoggingLevel:
    """A logging level that can be configured by name, number or boolean.

    ``OFF`` (or ``False``) maps to ``-1`` and disables the corresponding handler.

    >>> LoggingLevel("debug").value
    10
    >>> LoggingLevel(False)
    LoggingLevel.OFF
    """

    def __init__(self, value: Any) -> None:
        self.value: int = type(self).coerce(value)

    @classmethod
    def coerce(cls, value: Any) -> int:
        match value:
            case LoggingLevel():
                return value.value
            case bool():
                return logging.INFO if value else OFF
            case int():
                level = value
            case str():
                upper = value.strip().upper()
                if upper in LEVELS:
                    return LEVELS[upper]
                if upper == "FALSE":
                    return OFF
                try:
                    level = int(upper)
                except ValueError as err:
                    msg = f"Unknown logging level string: {value}"
                    raise ValueError(msg) from err
            case _:
                msg = f"Invalid type for logging level: {type(value).__name__}"
                raise TypeError(msg)

        if level < OFF:
            msg = f"Invalid value for logging level: {level}"
            raise ValueError(msg)
        return level

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            function=cls,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @property
    def name(self) -> str:
        return REVERSE_LEVELS.get(self.value, str(self.value))

    @property
    def enabled(self) -> bool:
        return self.value > OFF

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, LoggingLevel):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        if isinstance(other, str):
            return self.name == other.upper()
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self.value)

    @override
    def __repr__(self) -> str:
        if self.value in REVERSE_LEVELS:
            return f"LoggingLevel.{self.name}"
        return f"LoggingLevel({self.value})"

    @override
    def __str__(self) -> str:
        return self.name
