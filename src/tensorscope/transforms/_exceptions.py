__all__ = ["ShapeMismatchError", "UnboundVariableError", "ImplicitTruthValueError"]

from dataclasses import dataclass

from ..expression import ast
from ..extents import Extents


@dataclass(frozen=True, slots=True)
class ShapeMismatchError(Exception):
    operation: ast.BinaryOperation
    left: Extents
    right: Extents

    def __str__(self):
        return (
            f"Expected operands of {self.operation.kind} ({self.operation.symbol}) to have equal "
            f"extents or for one of them to be a free scalar, but found extents {self.left} and "
            f"{self.right}"
        )


@dataclass(frozen=True, slots=True)
class UnboundVariableError(Exception):
    name: str

    def __str__(self):
        return (
            f"Expected every variable to be bound to a value before its expression is inspected, "
            f"but variable {self.name} is unbound"
        )


@dataclass(frozen=True, slots=True)
class ImplicitTruthValueError(Exception):
    expression: ast.Expression

    def __str__(self):
        return (
            f"Expected an expression used as a truth value to contain a comparison operator, "
            f"but found none in {self.expression}"
        )
