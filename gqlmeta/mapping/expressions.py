# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Immutable expression tree for resolver request-mapping templates.

Templates are built from these nodes and only turned into text by :mod:`.printer`, which keeps the logic they encode
inspectable without matching on strings.
"""

import dataclasses

from abc import ABCMeta, abstractmethod


# MARK: Base classes
class Expression(metaclass=ABCMeta):  # noqa: B024 marker base class
    """Base class for every template expression."""

    __slots__ = ()


class Statement(Expression, metaclass=ABCMeta):
    """A domain-level statement that knows how to express itself with the generic nodes below."""

    __slots__ = ()

    @abstractmethod
    def lower(self) -> Expression:
        raise NotImplementedError


# MARK: Values
@dataclasses.dataclass(frozen=True, slots=True)
class Raw(Expression):
    """Template text emitted verbatim."""

    value: str


@dataclasses.dataclass(frozen=True, slots=True)
class Ref(Expression):
    """A variable reference, ``name`` is given without the leading ``$``."""

    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class Str(Expression):
    value: str


@dataclasses.dataclass(frozen=True, slots=True)
class Bool(Expression):
    value: bool


@dataclasses.dataclass(frozen=True, slots=True)
class Null(Expression):
    pass


@dataclasses.dataclass(frozen=True, slots=True)
class Call(Expression):
    """Method invocation such as ``$util.isNullOrEmpty($identityValue)``."""

    target: str
    args: tuple[Expression, ...] = ()


@dataclasses.dataclass(frozen=True, slots=True)
class Equals(Expression):
    left: Expression
    right: Expression


# MARK: Directives
@dataclasses.dataclass(frozen=True, slots=True)
class Set(Expression):
    ref: Ref
    value: Expression


@dataclasses.dataclass(frozen=True, slots=True)
class QuietRef(Expression):
    """Evaluate an expression for its side effects, discarding its output."""

    value: Expression


@dataclasses.dataclass(frozen=True, slots=True)
class If(Expression):
    predicate: Expression
    body: Expression


@dataclasses.dataclass(frozen=True, slots=True)
class Compound(Expression):
    expressions: tuple[Expression, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class Block(Expression):
    """A named section delimited by start/end marker comments."""

    name: str
    body: Expression
