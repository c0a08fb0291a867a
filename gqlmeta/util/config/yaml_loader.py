# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import os
import pathlib

from typing import IO, Any

import yaml


class IncludeLoader(yaml.SafeLoader):
    """``yaml.SafeLoader`` with an ``!include`` tag, resolved relative to the including file."""

    def __init__(self, stream: IO[str] | str, root: pathlib.Path | None = None) -> None:
        if root is None:
            name = getattr(stream, "name", None)
            root = pathlib.Path(name).resolve().parent if isinstance(name, str) and not name.startswith("<") else pathlib.Path.cwd()

        self._root: pathlib.Path = root

        super().__init__(stream)

    def include(self, node: yaml.Node) -> Any:
        if not isinstance(node, yaml.ScalarNode):
            msg = f"!include expects a file name, got {node.id}"
            raise yaml.constructor.ConstructorError(None, None, msg, node.start_mark)

        filename = pathlib.Path(os.path.expandvars(self._root / self.construct_scalar(node))).expanduser()

        with filename.open(encoding="UTF-8") as f:
            return yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader


IncludeLoader.add_constructor("!include", IncludeLoader.include)


def load_yaml(source: IO[str] | str) -> Any:
    return yaml.load(source, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader
