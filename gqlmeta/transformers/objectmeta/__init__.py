# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .config import FieldRequirement, ObjectMetaConfig, ObjectMetaTransformerConfig
from .transformer import ObjectMetaTransformer


COMPONENT = ObjectMetaTransformer


__all__ = [
    "COMPONENT",
    "FieldRequirement",
    "ObjectMetaConfig",
    "ObjectMetaTransformer",
    "ObjectMetaTransformerConfig",
]
