from __future__ import annotations

__all__ = ["SliceDescriptor", "SliceTuple", "SliceVector", "for_each_slice", "resolve_slices"]

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Union

from returns.functions import raise_exception
from returns.result import Failure, Result, Success

from ..extents import Extents
from ._exceptions import IndexOutOfRangeError, SequenceIndexError, SliceCountError
from ._slice import Slice, _resolve_slice
from ._static import StaticSlice

SliceDescriptor = Union[Slice, type[StaticSlice]]


class SliceTuple(Sequence[SliceDescriptor]):
    """Fixed sequence of slice descriptors, one per dimension.

    The elements may be a mix of `StaticSlice` classes and `Slice` values. The sequence is
    immutable; `push_front`, `pop_front`, and `push_back` return new sequences.
    """

    __slots__ = ("_slices",)

    def __init__(self, *slices: SliceDescriptor):
        self._slices = slices

    def __len__(self) -> int:
        return len(self._slices)

    def get(self, i: int) -> Result[SliceDescriptor, SequenceIndexError]:
        if 0 <= i < len(self._slices):
            return Success(self._slices[i])
        else:
            return Failure(SequenceIndexError(i, len(self._slices)))

    def __getitem__(self, i: int) -> SliceDescriptor:
        return self.get(i).alt(raise_exception).unwrap()

    def __iter__(self) -> Iterator[SliceDescriptor]:
        return iter(self._slices)

    def push_front(self, descriptor: SliceDescriptor) -> SliceTuple:
        return SliceTuple(descriptor, *self._slices)

    def push_back(self, descriptor: SliceDescriptor) -> SliceTuple:
        return SliceTuple(*self._slices, descriptor)

    def pop_front(self) -> SliceTuple:
        _, rest = self.pop_and_get_front()
        return rest

    def pop_and_get_front(self) -> tuple[SliceDescriptor, SliceTuple]:
        match self._slices:
            case (first, *rest):
                return first, SliceTuple(*rest)
            case _:
                raise SequenceIndexError(0, 0)

    def __eq__(self, other):
        if isinstance(other, SliceTuple):
            return self._slices == other._slices
        else:
            return NotImplemented

    def __hash__(self):
        return hash(self._slices)

    def __repr__(self) -> str:
        return f"SliceTuple({', '.join(repr(item) for item in self._slices)})"


class SliceVector(Sequence[Slice]):
    """Sequence of slice values whose length is only known at run time."""

    __slots__ = ("_slices",)

    def __init__(self, slices: Iterable[Slice] = ()):
        self._slices = list(slices)

    def __len__(self) -> int:
        return len(self._slices)

    def get(self, i: int) -> Result[Slice, SequenceIndexError]:
        if 0 <= i < len(self._slices):
            return Success(self._slices[i])
        else:
            return Failure(SequenceIndexError(i, len(self._slices)))

    def __getitem__(self, i: int) -> Slice:
        return self.get(i).alt(raise_exception).unwrap()

    def append(self, descriptor: Slice) -> SliceVector:
        return SliceVector([*self._slices, descriptor])

    def __iter__(self) -> Iterator[Slice]:
        return iter(self._slices)

    def __eq__(self, other):
        if isinstance(other, SliceVector):
            return self._slices == other._slices
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return f"SliceVector([{', '.join(repr(item) for item in self._slices)}])"


def for_each_slice(
    sequence: SliceTuple | SliceVector, callback: Callable[[int, SliceDescriptor], object]
) -> None:
    """Call `callback(index, descriptor)` for every descriptor in order.

    Callers do not need to know which kind of sequence they have.
    """
    for i, descriptor in enumerate(sequence):
        callback(i, descriptor)


def resolve_slices(
    sequence: SliceTuple | SliceVector, extents: Extents
) -> Result[SliceVector, IndexOutOfRangeError]:
    """Resolve each slice against the length of its dimension."""
    if len(sequence) != extents.rank:
        return Failure(SliceCountError(len(sequence), extents.rank))

    resolved = []

    def resolve(i: int, descriptor: SliceDescriptor):
        resolved.append(_resolve_slice(descriptor, extents[i]))

    try:
        for_each_slice(sequence, resolve)
    except IndexOutOfRangeError as error:
        return Failure(error)

    return Success(SliceVector(resolved))
