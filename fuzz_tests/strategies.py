import hypothesis.strategies as st

from tensorscope.containers import Placeholder
from tensorscope.expression import Variable, ast
from tensorscope.extents import Extents
from tensorscope.slicing import END

names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)
terminals = (
    st.builds(ast.Terminal, st.builds(Variable, names))
    | st.builds(ast.Terminal, st.integers(min_value=0, max_value=2**16))
    | st.builds(ast.Terminal, st.floats(min_value=0, allow_infinity=False, allow_nan=False))
)
unary_operations = st.sampled_from([ast.Negate, ast.UnaryPlus])
binary_operations = st.sampled_from(
    [
        ast.Add,
        ast.Subtract,
        ast.Multiply,
        ast.Divide,
        ast.Equal,
        ast.NotEqual,
        ast.Less,
        ast.LessEqual,
        ast.Greater,
        ast.GreaterEqual,
    ]
)
expressions = st.deferred(
    lambda: terminals
    | st.builds(lambda operation, operand: operation(operand), unary_operations, expressions)
    | st.builds(
        lambda operation, left, right: operation(left, right),
        binary_operations,
        expressions,
        expressions,
    )
)

extents = st.builds(
    Extents, st.builds(tuple, st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=3))
) | st.just(Extents.free_scalar())
placeholders = st.builds(Placeholder, extents)


@st.composite
def slice_bounds(draw, extent: int) -> tuple[int, int, int]:
    """Raw bounds that each land inside a dimension of length `extent`."""
    bound = st.integers(min_value=-extent, max_value=extent - 1)
    first = draw(bound)
    last = draw(bound | st.just(END))
    step = draw(st.integers(min_value=1, max_value=extent + 1))
    return first, last, step
