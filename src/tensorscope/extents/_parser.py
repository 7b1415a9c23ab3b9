__all__ = ["parse_extents", "parse_named_extents"]

from parsita import ParseError, ParserContext, reg, rep1sep
from returns import result

from ._extents import Extents


class ExtentsParsers(ParserContext):
    # Sizes are unsigned and at least one is required, so every match is valid extents
    size = reg(r"[0-9]+") > int
    extents = rep1sep(size, ",") > (lambda sizes: Extents(tuple(sizes)))

    variable = reg(r"[A-Za-z_][A-Za-z0-9_]*")
    named_extents = variable << ":" & extents > tuple


def parse_extents(string: str, /) -> result.Result[Extents, ParseError]:
    return ExtentsParsers.extents.parse(string)


def parse_named_extents(string: str, /) -> result.Result[tuple[str, Extents], ParseError]:
    return ExtentsParsers.named_extents.parse(string)
