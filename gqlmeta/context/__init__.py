# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .protocol import TransformerContext
from .schema_context import SchemaContext
from .staged_context import StagedContext


__all__ = [
    "SchemaContext",
    "StagedContext",
    "TransformerContext",
]
