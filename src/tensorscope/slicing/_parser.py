__all__ = ["parse_slice"]

from parsita import ParseError, ParserContext, lit, opt, reg
from parsita.util import constant, splat
from returns import result

from ._exceptions import IndexOutOfRangeError
from ._slice import END, Slice, normalize_slice


def make_bounds(first, last, step):
    # Each part is an optional match, so it is an empty list when omitted
    return (
        first[0] if first else 0,
        last[0] if last else END,
        step[0] if step else 1,
    )


class SliceParsers(ParserContext, whitespace=r"[ ]*"):
    integer = reg(r"-?[0-9]+") > int
    end = lit("end") > constant(END)
    bound = integer | end

    stepped = opt(integer) << ":" & opt(bound) & opt(":" >> integer) > splat(make_bounds)
    single = integer > (lambda x: (x, x, 1))

    selection = stepped | single


def parse_slice(string: str, /) -> result.Result[Slice, ParseError | IndexOutOfRangeError]:
    """Parse a slice written as `first:last:step`.

    Both bounds are inclusive. Any part may be omitted: `first` defaults to 0, `last` to the
    end of the dimension (also written `end`), and `step` to 1. A lone integer selects a single
    index. Negative bounds count back from the end of the dimension.
    """
    return SliceParsers.selection.parse(string).bind(splat(normalize_slice))
