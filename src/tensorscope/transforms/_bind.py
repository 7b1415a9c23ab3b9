__all__ = ["bind_variables"]

from collections.abc import Mapping
from functools import singledispatch
from typing import Any

from returns.result import Failure, Result, Success

from ..expression import ast
from ._exceptions import UnboundVariableError


@singledispatch
def bind(self: ast.Expression, values: Mapping[str, Any]) -> ast.Expression:
    raise NotImplementedError(f"bind not implemented for {type(self)}: {self}")


@bind.register(ast.Terminal)
def bind_terminal(self: ast.Terminal, values: Mapping[str, Any]) -> ast.Expression:
    match self.value:
        case ast.Variable(name) if name in values:
            return ast.Terminal(values[name])
        case ast.Variable(name):
            raise UnboundVariableError(name)
        case _:
            return self


@bind.register(ast.UnaryOperation)
def bind_unary(self: ast.UnaryOperation, values: Mapping[str, Any]) -> ast.Expression:
    return type(self)(bind(self.operand, values))


@bind.register(ast.BinaryOperation)
def bind_binary(self: ast.BinaryOperation, values: Mapping[str, Any]) -> ast.Expression:
    return type(self)(bind(self.left, values), bind(self.right, values))


def bind_variables(
    expression: ast.Expression, values: Mapping[str, Any]
) -> Result[ast.Expression, UnboundVariableError]:
    """Replace every variable in an expression with the value of the same name.

    Values whose names do not appear in the expression are ignored.
    """
    try:
        return Success(bind(expression, values))
    except UnboundVariableError as error:
        return Failure(error)
