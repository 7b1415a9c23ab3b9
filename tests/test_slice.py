import pytest
from parsita import ParseError
from returns.result import Failure, Success

from tensorscope.slicing import (
    END,
    IndexBeyondExtentError,
    IndexOutOfRangeError,
    InvalidStepError,
    NegativeIndexError,
    ReversedSliceError,
    Slice,
    SliceSizeError,
    normalize_index,
    normalize_slice,
    parse_slice,
    resolve_slice,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ((0, 4), Slice(0, 4, 1, 5)),
        ((1, 7, 3), Slice(1, 7, 3, 3)),
        ((1, 8, 3), Slice(1, 7, 3, 3)),
        ((2, 2, 5), Slice(2, 2, 5, 1)),
        ((0,), Slice(0, END, 1, 0)),
        ((0, END, 2), Slice(0, END, 2, 0)),
        ((-1, -1, 1), Slice(-1, -1, 1, 1)),
        ((-3, -1, 1), Slice(-3, -1, 1, 0)),
        ((1, -1, 1), Slice(1, -1, 1, 0)),
        ((-2, END, 1), Slice(-2, END, 1, 0)),
    ],
)
def test_normalize_slice(raw, expected):
    assert normalize_slice(*raw) == Success(expected)


@pytest.mark.parametrize(
    ("raw", "error"),
    [
        ((0, 4, 0), InvalidStepError(0)),
        ((0, 4, -1), InvalidStepError(-1)),
        ((3, 3, 0), InvalidStepError(0)),
        ((3, 1, 1), ReversedSliceError(3, 1)),
    ],
)
def test_normalize_bad_slice(raw, error):
    actual = normalize_slice(*raw).failure()

    assert actual == error
    assert isinstance(actual, IndexOutOfRangeError)
    assert isinstance(actual, IndexError)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ((0, END, 1), Slice(0, 4, 1, 5)),
        ((-1, -1, 1), Slice(4, 4, 1, 1)),
        ((-3, -1, 1), Slice(2, 4, 1, 3)),
        ((1, -1, 2), Slice(1, 3, 2, 2)),
        ((0, END, 2), Slice(0, 4, 2, 3)),
        ((2, END, 10), Slice(2, 2, 10, 1)),
        ((-5, 0, 1), Slice(0, 0, 1, 1)),
        ((1, 3, 1), Slice(1, 3, 1, 3)),
    ],
)
def test_resolve_slice(raw, expected):
    actual = normalize_slice(*raw).bind(lambda descriptor: resolve_slice(descriptor, 5))
    assert actual == Success(expected)
    assert actual.unwrap().is_resolved()


@pytest.mark.parametrize(
    ("raw", "extent", "error"),
    [
        ((-6, -1, 1), 5, NegativeIndexError(-6, 5)),
        ((0, -6, 1), 5, NegativeIndexError(-6, 5)),
        ((0, 5, 1), 5, IndexBeyondExtentError(5, 5)),
        ((5, 5, 1), 5, IndexBeyondExtentError(5, 5)),
        ((-1, -3, 1), 5, ReversedSliceError(4, 2)),
        ((0, END, 1), 0, IndexBeyondExtentError(0, 0)),
    ],
)
def test_resolve_bad_slice(raw, extent, error):
    actual = normalize_slice(*raw).bind(lambda descriptor: resolve_slice(descriptor, extent))
    assert actual.failure() == error


def test_resolve_is_idempotent():
    resolved = normalize_slice(-4, END, 2).bind(lambda s: resolve_slice(s, 9)).unwrap()
    assert resolved == Slice(5, 7, 2, 2)
    assert resolve_slice(resolved, 9) == Success(resolved)


def test_resolve_method():
    assert Slice(0, END, 1, 0).resolve(3) == Success(Slice(0, 2, 1, 3))


@pytest.mark.parametrize(
    ("descriptor", "resolved"),
    [
        (Slice(0, 4, 1, 5), True),
        (Slice(0, END, 1, 0), False),
        (Slice(-1, -1, 1, 1), False),
        (Slice(1, -1, 1, 0), False),
    ],
)
def test_is_resolved(descriptor, resolved):
    assert descriptor.is_resolved() == resolved


def test_indexes():
    assert list(Slice(1, 7, 3, 3).indexes()) == [1, 4, 7]


@pytest.mark.parametrize(
    ("extent", "value", "expected"),
    [(5, 3, 3), (5, -1, 4), (5, -5, 0), (5, 0, 0)],
)
def test_normalize_index(extent, value, expected):
    assert normalize_index(extent, value) == Success(expected)


def test_normalize_negative_index_before_start():
    assert normalize_index(5, -6).failure() == NegativeIndexError(-6, 5)


slice_strings = [
    ("1:7:3", Slice(1, 7, 3, 3)),
    ("0:end:2", Slice(0, END, 2, 0)),
    ("-3:-1:1", Slice(-3, -1, 1, 0)),
    ("4", Slice(4, 4, 1, 1)),
    ("-1", Slice(-1, -1, 1, 1)),
]


@pytest.mark.parametrize(("string", "descriptor"), slice_strings)
def test_parse_slice(string, descriptor):
    assert parse_slice(string) == Success(descriptor)


@pytest.mark.parametrize(("string", "descriptor"), slice_strings)
def test_deparse_slice(string, descriptor):
    assert descriptor.deparse() == string
    assert str(descriptor) == string


@pytest.mark.parametrize(
    ("string", "descriptor"),
    [
        (":", Slice(0, END, 1, 0)),
        ("2:", Slice(2, END, 1, 0)),
        (":3", Slice(0, 3, 1, 4)),
        ("::2", Slice(0, END, 2, 0)),
        ("1:8:3", Slice(1, 7, 3, 3)),
        ("1:-1", Slice(1, -1, 1, 0)),
        ("1 : 3", Slice(1, 3, 1, 3)),
    ],
)
def test_parse_abbreviated_slice(string, descriptor):
    assert parse_slice(string) == Success(descriptor)


@pytest.mark.parametrize("string", ["", "a", "end", "1:2:3:4", "1:2:end", "1.5"])
def test_parse_bad_slice(string):
    actual = parse_slice(string)
    assert isinstance(actual, Failure)
    assert isinstance(actual.failure(), ParseError)


@pytest.mark.parametrize(
    ("string", "error"),
    [
        ("3:1", ReversedSliceError(3, 1)),
        ("0:4:0", InvalidStepError(0)),
        ("1:2:-1", InvalidStepError(-1)),
    ],
)
def test_parse_invalid_slice(string, error):
    assert parse_slice(string).failure() == error


@pytest.mark.parametrize(
    ("fields", "error"),
    [
        ((0, 4, 0, 99), InvalidStepError(0)),
        ((0, 4, -1, 5), InvalidStepError(-1)),
        ((0, END, 0, 0), InvalidStepError(0)),
        ((0, 4, 1, 4), SliceSizeError(0, 4, 1, 4)),
        ((1, 7, 3, 2), SliceSizeError(1, 7, 3, 2)),
        ((0, 4, 2, 5), SliceSizeError(0, 4, 2, 5)),
        ((4, 1, 1, 1), ReversedSliceError(4, 1)),
    ],
)
def test_invalid_slice_construction(fields, error):
    with pytest.raises(IndexOutOfRangeError) as exc_info:
        _ = Slice(*fields)
    assert exc_info.value == error


@pytest.mark.parametrize(
    "fields",
    [(0, END, 1, 0), (-3, -1, 1, 0), (1, -1, 2, 0), (-1, -1, 1, 1), (1, 8, 3, 3)],
)
def test_valid_slice_construction(fields):
    assert Slice(*fields).step > 0


def test_slice_size_message():
    assert str(SliceSizeError(0, 4, 1, 4)) == (
        "Expected the size of slice 0:4:1 to be the number of elements it selects, 5, but got 4"
    )
