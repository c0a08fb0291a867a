# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Errors raised while transforming a schema.

Every error aborts the compilation of the whole schema; there is no partial-success mode.
"""


class TransformerError(Exception):
    """Base class for every error raised by a schema transformer."""


class InvalidDirectiveError(TransformerError):
    """A directive is used in a way that cannot be compiled.

    Raised for missing co-directives, unknown directive arguments or generated types that would end up empty.
    """


class TransformerContractError(TransformerError):
    """A type declares a field that contradicts the contract imposed by a directive."""


class MissingResourceError(InvalidDirectiveError):
    """A resource another transformer was expected to generate does not exist."""

    def __init__(self, resource_id: str, msg: str) -> None:
        super().__init__(msg)
        self.resource_id = resource_id
