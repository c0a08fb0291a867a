# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


# Base transformer
from .transformer import Transformer, TransformerConfig


__all__ = [
    "Transformer",
    "TransformerConfig",
]
