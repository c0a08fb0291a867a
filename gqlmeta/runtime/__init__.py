# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .runtime import Runtime
from .transform import GraphQLTransform


__all__ = [
    "GraphQLTransform",
    "Runtime",
]
