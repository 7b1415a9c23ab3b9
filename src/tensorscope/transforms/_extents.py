__all__ = ["infer_extents", "extents_of", "terminal_extents", "broadcast_extents"]

import logging
from typing import Any

from returns.functions import raise_exception
from returns.result import Failure, Result, Success

from ..containers import ContainerKind, container_kind
from ..expression import ast
from ..extents import Extents
from ._exceptions import ShapeMismatchError, UnboundVariableError

logger = logging.getLogger(__name__)


def terminal_extents(value: Any) -> Extents:
    """Extents of the value held by a terminal.

    A vector of length n has extents `[n,1]` and a matrix has extents `[size1,size2]`. Scalars
    have the free scalar extents `[1]`.
    """
    match container_kind(value):
        case ContainerKind.tensor:
            return value.extents
        case ContainerKind.matrix:
            return Extents((value.size1, value.size2))
        case ContainerKind.vector:
            return Extents((value.size, 1))
        case ContainerKind.scalar:
            return Extents.free_scalar()
        case kind:
            raise NotImplementedError(f"terminal_extents not implemented for {kind}")


def broadcast_extents(operation: ast.BinaryOperation, left: Extents, right: Extents) -> Extents:
    if left.is_free_scalar() and right.is_free_scalar():
        return Extents.free_scalar()
    elif left.is_free_scalar():
        return right
    elif right.is_free_scalar():
        return left
    elif left != right:
        logger.debug("Rejecting %s between extents %s and %s", operation.kind, left, right)
        raise ShapeMismatchError(operation, left, right)
    else:
        return left


def _infer_extents(expression: ast.Expression) -> Extents:
    match expression:
        case ast.Terminal(ast.Variable(name)):
            raise UnboundVariableError(name)
        case ast.Terminal(value):
            return terminal_extents(value)
        case ast.UnaryOperation(operand):
            return _infer_extents(operand)
        case ast.BinaryOperation(left, right):
            return broadcast_extents(expression, _infer_extents(left), _infer_extents(right))
        case _:
            raise NotImplementedError(
                f"infer_extents not implemented for {type(expression)}: {expression}"
            )


def infer_extents(
    expression: ast.Expression,
) -> Result[Extents, ShapeMismatchError | UnboundVariableError]:
    """Determine the extents of the result of an expression without evaluating it.

    At every binary operator, a free scalar operand takes the extents of the other operand.
    Otherwise, both operands must have equal extents.
    """
    try:
        extents = _infer_extents(expression)
    except (ShapeMismatchError, UnboundVariableError) as error:
        return Failure(error)

    logger.debug("Inferred extents %s for %s", extents, expression.kind)
    return Success(extents)


def extents_of(expression: ast.Expression) -> Extents:
    return infer_extents(expression).alt(raise_exception).unwrap()
