# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from . import script_info
from .tstring import tstring_as_fstring


__all__ = [
    "script_info",
    "tstring_as_fstring",
]
