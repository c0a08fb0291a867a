# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .expressions import Block, Bool, Call, Compound, Equals, Expression, If, Null, QuietRef, Raw, Ref, Set, Statement, Str
from .printer import print_block, print_expression


__all__ = [
    "Block",
    "Bool",
    "Call",
    "Compound",
    "Equals",
    "Expression",
    "If",
    "Null",
    "QuietRef",
    "Raw",
    "Ref",
    "Set",
    "Statement",
    "Str",
    "print_block",
    "print_expression",
]
