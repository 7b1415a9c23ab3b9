import hypothesis.strategies as st
from hypothesis import given
from returns.result import Success

from tensorscope.expression import ast
from tensorscope.slicing import (
    END,
    IndexOutOfRangeError,
    ReversedSliceError,
    StaticSlice,
    normalize_slice,
    resolve_slice,
)
from tensorscope.transforms import has_logical_operator, infer_extents

from .strategies import expressions, placeholders, slice_bounds


@st.composite
def extents_and_bounds(draw):
    extent = draw(st.integers(min_value=1, max_value=20))
    return extent, draw(slice_bounds(extent))


@given(extents_and_bounds())
def test_resolved_slice_matches_range(extent_and_bounds):
    extent, (first, last, step) = extent_and_bounds
    positions = list(range(extent))
    start = first + extent if first < 0 else first
    stop = extent - 1 if last == END else last + extent if last < 0 else last

    actual = normalize_slice(first, last, step).bind(lambda s: resolve_slice(s, extent))

    if start > stop:
        assert isinstance(actual.failure(), ReversedSliceError)
    else:
        resolved = actual.unwrap()
        assert list(resolved.indexes()) == positions[start : stop + 1 : step]
        assert resolved.size == len(positions[start : stop + 1 : step])
        assert resolve_slice(resolved, extent).unwrap() == resolved


@given(
    st.integers(min_value=-50, max_value=50),
    st.integers(min_value=-50, max_value=50) | st.just(END),
    st.integers(min_value=-2, max_value=10),
)
def test_static_and_dynamic_slices_agree(first, last, step):
    dynamic = normalize_slice(first, last, step)

    try:
        static = StaticSlice[first, last, step]
    except IndexOutOfRangeError as error:
        assert dynamic.failure() == error
    else:
        assert static.to_slice() == dynamic.unwrap()


@given(placeholders, placeholders)
def test_broadcast_is_commutative(left, right):
    forward = infer_extents(ast.Add(ast.Terminal(left), ast.Terminal(right)))
    backward = infer_extents(ast.Add(ast.Terminal(right), ast.Terminal(left)))

    assert type(forward) is type(backward)
    if isinstance(forward, Success):
        assert forward == backward


@given(expressions)
def test_logical_operator_appears_in_text(expression):
    text = expression.deparse()
    assert has_logical_operator(expression) == any(symbol in text for symbol in "<>=!")
