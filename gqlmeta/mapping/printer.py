# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Render template expressions to request-mapping template text.

>>> from gqlmeta.mapping import Call, If, Ref, Set, Str
>>> print(print_expression(Set(Ref("greeting"), Str("hello"))))
#set( $greeting = "hello" )
>>> print(print_expression(If(Call("$util.isNullOrEmpty", (Ref("greeting"),)), Call("$util.error", (Str("Empty"),)))))
#if( $util.isNullOrEmpty($greeting) )
  $util.error("Empty")
#end
"""

import json

from .expressions import Block, Bool, Call, Compound, Equals, Expression, If, Null, QuietRef, Raw, Ref, Set, Statement, Str


INDENT = "  "


def print_expression(expression: Expression) -> str:
    match expression:
        case Statement():
            return print_expression(expression.lower())
        case Raw(value):
            return value
        case Ref(name):
            return f"${name}"
        case Str(value):
            return json.dumps(value)
        case Bool(value):
            return "true" if value else "false"
        case Null():
            return "$null"
        case Call(target, args):
            return f"{target}({', '.join(print_expression(arg) for arg in args)})"
        case Equals(left, right):
            return f"{print_expression(left)} == {print_expression(right)}"
        case Set(ref, value):
            return f"#set( {print_expression(ref)} = {print_expression(value)} )"
        case QuietRef(value):
            return f"$util.qr({print_expression(value)})"
        case If(predicate, body):
            return f"#if( {print_expression(predicate)} )\n{_indent(print_expression(body))}\n#end"
        case Compound(expressions):
            return "\n".join(print_expression(expr) for expr in expressions)
        case Block(name, body):
            return f"## [Start] {name}. **\n{print_expression(body)}\n## [End] {name}. **"
        case _:
            msg = f"Cannot print expression of type {type(expression).__name__}"
            raise TypeError(msg)


def print_block(name: str, expression: Expression) -> str:
    return print_expression(Block(name, expression))


def _indent(text: str) -> str:
    return "\n".join(f"{INDENT}{line}" if line else line for line in text.split("\n"))
