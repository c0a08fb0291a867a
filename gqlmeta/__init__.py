# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""GraphQL schema transformer that stamps audit metadata onto ``@model`` types.

The :mod:`gqlmeta` package implements the ``@objectmeta`` directive: it injects
creation, update and soft-delete bookkeeping fields into annotated types,
rewrites the generated create/update resolver request templates so those fields
are populated server side, strips them from the generated inputs and can
synthesize a ``softDelete<Type>`` mutation.
"""

__version__ = "0.1.0"
