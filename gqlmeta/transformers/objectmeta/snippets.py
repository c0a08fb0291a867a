# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Request-mapping template snippets populating the meta fields server side.

Each builder returns a :class:`~gqlmeta.mapping.Compound` of the statements below, which keeps the generated logic
inspectable. Rendering happens in :mod:`.steps` when the snippet is prepended to a resolver template.
"""

import dataclasses

from typing import TYPE_CHECKING, override

from ...mapping import Bool, Call, Compound, Equals, Expression, If, Null, QuietRef, Ref, Set, Statement, Str


if TYPE_CHECKING:
    from .config import ObjectMetaConfig, ObjectMetaTransformerConfig


IDENTITY_VARIABLE = "identityValue"
INPUT_VARIABLE = "ctx.args.input"

NOW = Call("$util.time.nowEpochMilliSeconds")


# MARK: Statements
@dataclasses.dataclass(frozen=True, slots=True)
class AssignIdentity(Statement):
    """Resolve the acting identity from the first present claim, else ``fallback`` (``None`` meaning null)."""

    claims: tuple[str, ...]
    fallback: str | None

    @override
    def lower(self) -> Expression:
        value: Expression = Null() if self.fallback is None else Str(self.fallback)
        for claim in reversed(self.claims):
            value = Call("$util.defaultIfNull", (Call("$ctx.identity.claims.get", (Str(claim),)), value))
        return Set(Ref(IDENTITY_VARIABLE), value)


@dataclasses.dataclass(frozen=True, slots=True)
class RequireIdentity(Statement):
    """Fail the request when no identity could be resolved."""

    message: str = "Invalid identity."

    @override
    def lower(self) -> Expression:
        return If(Call("$util.isNullOrEmpty", (Ref(IDENTITY_VARIABLE),)), Call("$util.error", (Str(self.message),)))


@dataclasses.dataclass(frozen=True, slots=True)
class PutInputField(Statement):
    """Overwrite a field of the incoming mutation input."""

    field: str
    value: Expression

    @override
    def lower(self) -> Expression:
        return QuietRef(Call(f"${INPUT_VARIABLE}.put", (Str(self.field), self.value)))


@dataclasses.dataclass(frozen=True, slots=True)
class ConvertDeleteRequest(Statement):
    """Turn ``deleted: true`` in an update input into ``deleted: false`` plus recorded soft-delete metadata."""

    deleted_field: str
    deleted_at_field: str
    deleted_by_field: str

    @property
    def statements(self) -> tuple[PutInputField, ...]:
        return (
            PutInputField(self.deleted_field, Bool(False)),
            PutInputField(self.deleted_at_field, NOW),
            PutInputField(self.deleted_by_field, Ref(IDENTITY_VARIABLE)),
        )

    @override
    def lower(self) -> Expression:
        return If(Equals(Ref(f"{INPUT_VARIABLE}.{self.deleted_field}"), Bool(True)), Compound(self.statements))


# MARK: Builders
def identity_statements(config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> tuple[Statement, ...]:
    if config.identity_required:
        return (AssignIdentity(options.identity_claims, None), RequireIdentity())
    return (AssignIdentity(options.identity_claims, options.missing_identity),)


def _stamp_statements(config: ObjectMetaConfig) -> tuple[PutInputField, ...]:
    return (
        PutInputField(config.created_at_field, NOW),
        PutInputField(config.created_by_field, Ref(IDENTITY_VARIABLE)),
        PutInputField(config.updated_at_field, NOW),
        PutInputField(config.updated_by_field, Ref(IDENTITY_VARIABLE)),
    )


def create_expressions(config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> Compound:
    return Compound(
        (
            *identity_statements(config, options),
            *_stamp_statements(config),
            PutInputField(config.deleted_field, Bool(False)),
        )
    )


def update_expressions(config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> Compound:
    # Creation metadata is stamped on update as well
    return Compound(
        (
            *identity_statements(config, options),
            *_stamp_statements(config),
            ConvertDeleteRequest(config.deleted_field, config.deleted_at_field, config.deleted_by_field),
        )
    )


def soft_delete_expressions(config: ObjectMetaConfig, options: ObjectMetaTransformerConfig) -> Compound:
    return create_expressions(config, options)
