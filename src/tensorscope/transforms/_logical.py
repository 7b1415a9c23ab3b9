__all__ = ["has_logical_operator", "check_truth_value"]

from returns.result import Failure, Result, Success

from ..expression import ast
from ._exceptions import ImplicitTruthValueError


def has_logical_operator(expression: ast.Expression) -> bool:
    """Whether a comparison operator appears anywhere in the expression.

    Only an expression containing a comparison may be converted to a truth value.
    """
    match expression:
        case ast.Comparison():
            return True
        case ast.BinaryOperation(left, right):
            return has_logical_operator(left) or has_logical_operator(right)
        case ast.UnaryOperation(operand):
            return has_logical_operator(operand)
        case ast.Terminal():
            return False
        case _:
            raise NotImplementedError(
                f"has_logical_operator not implemented for {type(expression)}: {expression}"
            )


def check_truth_value(
    expression: ast.Expression,
) -> Result[ast.Expression, ImplicitTruthValueError]:
    if has_logical_operator(expression):
        return Success(expression)
    else:
        return Failure(ImplicitTruthValueError(expression))
