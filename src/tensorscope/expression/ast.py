from __future__ import annotations

__all__ = [
    "Kind",
    "Expression",
    "Variable",
    "Terminal",
    "UnaryOperation",
    "Negate",
    "UnaryPlus",
    "BinaryOperation",
    "Add",
    "Subtract",
    "Multiply",
    "Divide",
    "Comparison",
    "Equal",
    "NotEqual",
    "Less",
    "LessEqual",
    "Greater",
    "GreaterEqual",
]

from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, ClassVar


class Kind(str, Enum):
    # Python 3.10 does not support StrEnum, so do it manually
    terminal = "terminal"
    plus = "plus"
    minus = "minus"
    multiplies = "multiplies"
    divides = "divides"
    negate = "negate"
    unary_plus = "unary_plus"
    equal_to = "equal_to"
    not_equal_to = "not_equal_to"
    less = "less"
    less_equal = "less_equal"
    greater = "greater"
    greater_equal = "greater_equal"

    def __str__(self) -> str:
        return self.name


class Expression:
    __slots__ = ()

    kind: ClassVar[Kind]
    # Binding strength used to decide where deparse needs parentheses
    precedence: ClassVar[int]

    @abstractmethod
    def variables(self) -> set[str]:
        """Names of all unbound variables referenced in the expression."""
        raise NotImplementedError()

    @abstractmethod
    def deparse(self) -> str:
        """Convert the expression back into a string."""
        raise NotImplementedError()

    def __str__(self):
        return self.deparse()


@dataclass(frozen=True, slots=True)
class Variable:
    """A named operand that has not been bound to a container or scalar yet."""

    name: str


@dataclass(frozen=True, slots=True)
class Terminal(Expression):
    value: Any

    kind = Kind.terminal
    precedence = 5

    def variables(self) -> set[str]:
        if isinstance(self.value, Variable):
            return {self.value.name}
        else:
            return set()

    def deparse(self):
        match self.value:
            case Variable(name):
                return name
            case Number():
                return str(self.value)
            case _:
                return repr(self.value)


@dataclass(frozen=True, slots=True)
class UnaryOperation(Expression):
    operand: Expression

    symbol: ClassVar[str]
    precedence = 4

    def variables(self) -> set[str]:
        return self.operand.variables()

    def deparse(self):
        operand_string = self.operand.deparse()
        if self.operand.precedence < self.precedence:
            operand_string = f"({operand_string})"

        return self.symbol + operand_string


@dataclass(frozen=True, slots=True)
class Negate(UnaryOperation):
    kind = Kind.negate
    symbol = "-"


@dataclass(frozen=True, slots=True)
class UnaryPlus(UnaryOperation):
    kind = Kind.unary_plus
    symbol = "+"


@dataclass(frozen=True, slots=True)
class BinaryOperation(Expression):
    left: Expression
    right: Expression

    symbol: ClassVar[str]

    def variables(self) -> set[str]:
        return self.left.variables() | self.right.variables()

    def deparse(self):
        left_string = self.left.deparse()
        if self.left.precedence < self.precedence:
            left_string = f"({left_string})"

        # Operators are left associative, so preserve the AST when the right operand binds
        # equally tightly.
        right_string = self.right.deparse()
        if self.right.precedence <= self.precedence:
            right_string = f"({right_string})"

        return f"{left_string} {self.symbol} {right_string}"


@dataclass(frozen=True, slots=True)
class Add(BinaryOperation):
    kind = Kind.plus
    symbol = "+"
    precedence = 2


@dataclass(frozen=True, slots=True)
class Subtract(BinaryOperation):
    kind = Kind.minus
    symbol = "-"
    precedence = 2


@dataclass(frozen=True, slots=True)
class Multiply(BinaryOperation):
    kind = Kind.multiplies
    symbol = "*"
    precedence = 3


@dataclass(frozen=True, slots=True)
class Divide(BinaryOperation):
    kind = Kind.divides
    symbol = "/"
    precedence = 3


@dataclass(frozen=True, slots=True)
class Comparison(BinaryOperation):
    """A relational operator; its presence allows an expression to be used as a truth value."""

    precedence = 1


@dataclass(frozen=True, slots=True)
class Equal(Comparison):
    kind = Kind.equal_to
    symbol = "=="


@dataclass(frozen=True, slots=True)
class NotEqual(Comparison):
    kind = Kind.not_equal_to
    symbol = "!="


@dataclass(frozen=True, slots=True)
class Less(Comparison):
    kind = Kind.less
    symbol = "<"


@dataclass(frozen=True, slots=True)
class LessEqual(Comparison):
    kind = Kind.less_equal
    symbol = "<="


@dataclass(frozen=True, slots=True)
class Greater(Comparison):
    kind = Kind.greater
    symbol = ">"


@dataclass(frozen=True, slots=True)
class GreaterEqual(Comparison):
    kind = Kind.greater_equal
    symbol = ">="
