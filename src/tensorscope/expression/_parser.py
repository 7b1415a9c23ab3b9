__all__ = ["parse_expression"]

from parsita import ParseError, ParserContext, lit, reg, rep
from parsita.util import splat
from returns import result

from .ast import (
    Add,
    BinaryOperation,
    Divide,
    Equal,
    Expression,
    Greater,
    GreaterEqual,
    Less,
    LessEqual,
    Multiply,
    Negate,
    NotEqual,
    Subtract,
    Terminal,
    UnaryPlus,
    Variable,
)

binary_operations: dict[str, type[BinaryOperation]] = {
    operation.symbol: operation
    for operation in [
        Add,
        Subtract,
        Multiply,
        Divide,
        Equal,
        NotEqual,
        Less,
        LessEqual,
        Greater,
        GreaterEqual,
    ]
}


def make_binary(first, rest):
    value = first
    for symbol, operand in rest:
        value = binary_operations[symbol](value, operand)
    return value


def make_unary(symbol, operand):
    match symbol:
        case "-":
            return Negate(operand)
        case "+":
            return UnaryPlus(operand)


class ExpressionParsers(ParserContext, whitespace=r"[ ]*"):
    name = reg(r"[A-Za-z_][A-Za-z0-9_]*") > (lambda x: Terminal(Variable(x)))

    floating_point = reg(r"\d+((\.\d+([Ee][+-]?\d+)?)|((\.\d+)?[Ee][+-]?\d+))") > (
        lambda x: Terminal(float(x))
    )
    integer = reg(r"[0-9]+") > (lambda x: Terminal(int(x)))
    number = floating_point | integer

    parentheses = "(" >> expression << ")"  # noqa: F821
    factor = name | number | parentheses

    unary = (lit("-", "+") & unary > splat(make_unary)) | factor  # noqa: F821
    term = unary & rep(lit("*", "/") & unary) > splat(make_binary)
    additive = term & rep(lit("+", "-") & term) > splat(make_binary)

    # Longer operators come first so that "<=" is not read as "<" followed by "="
    comparison_operator = lit("==", "!=", "<=", ">=", "<", ">")
    expression = additive & rep(comparison_operator & additive) > splat(make_binary)


def parse_expression(string: str, /) -> result.Result[Expression, ParseError]:
    return ExpressionParsers.expression.parse(string)
