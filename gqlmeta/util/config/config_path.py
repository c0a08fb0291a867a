# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import sys

from pathlib import Path
from typing import TextIO, override


class ConfigFilePath:
    """Location of the configuration file, ``-`` meaning standard input."""

    def __init__(self, path: str | Path) -> None:
        if not isinstance(path, (str, Path)):
            msg = f"Expected a string or path, got {type(path).__name__}"
            raise TypeError(msg)

        self.path: Path | None = None if str(path) == "-" else Path(path)
        if self.path is not None and not self.path.is_file():
            msg = f"Configuration file not found: {path}"
            raise FileNotFoundError(msg)

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    def open(self, encoding: str = "UTF-8") -> TextIO:
        if self.path is None:
            return sys.stdin
        return self.path.open(mode="r", encoding=encoding)

    @property
    def dirname(self) -> Path:
        if self.path is None:
            return Path.cwd()
        return self.path.resolve().parent

    @override
    def __str__(self) -> str:
        return "-" if self.path is None else str(self.path)

    @override
    def __repr__(self) -> str:
        return f"ConfigFilePath({str(self)!r})"
