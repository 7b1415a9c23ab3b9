__all__ = ["at_index"]

from functools import singledispatch

from ..containers import ContainerKind, container_kind, is_lazy
from ..expression import ast
from ._exceptions import UnboundVariableError


@singledispatch
def at_index(self: ast.Expression, index: int) -> ast.Expression:
    """Replace every container in an expression with its element at a flat index.

    Scalars are left in place. No bounds checking is done here; an index outside a container
    fails however that container's own indexing fails.
    """
    raise NotImplementedError(f"at_index not implemented for {type(self)}: {self}")


@at_index.register(ast.Terminal)
def at_index_terminal(self: ast.Terminal, index: int) -> ast.Expression:
    value = self.value

    if isinstance(value, ast.Variable):
        raise UnboundVariableError(value.name)
    elif is_lazy(value):
        return ast.Terminal(value.evaluate()[index])
    elif container_kind(value) == ContainerKind.scalar:
        return self
    else:
        return ast.Terminal(value[index])


@at_index.register(ast.UnaryOperation)
def at_index_unary(self: ast.UnaryOperation, index: int) -> ast.Expression:
    return type(self)(at_index(self.operand, index))


@at_index.register(ast.BinaryOperation)
def at_index_binary(self: ast.BinaryOperation, index: int) -> ast.Expression:
    return type(self)(at_index(self.left, index), at_index(self.right, index))
