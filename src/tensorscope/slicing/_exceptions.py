__all__ = [
    "IndexOutOfRangeError",
    "InvalidStepError",
    "NegativeIndexError",
    "IndexBeyondExtentError",
    "ReversedSliceError",
    "SequenceIndexError",
    "SliceCountError",
    "SliceSizeError",
]

from dataclasses import dataclass


class IndexOutOfRangeError(IndexError):
    """An index or slice that cannot be resolved against its extent or sequence."""


@dataclass(frozen=True, slots=True)
class InvalidStepError(IndexOutOfRangeError):
    step: int

    def __str__(self):
        return f"Expected the step of a slice to be a positive integer, but got {self.step}"


@dataclass(frozen=True, slots=True)
class NegativeIndexError(IndexOutOfRangeError):
    value: int
    extent: int

    def __str__(self):
        return (
            f"Expected a negative index to count back from the end of a dimension of length "
            f"{self.extent}, but {self.value} lands before its start"
        )


@dataclass(frozen=True, slots=True)
class IndexBeyondExtentError(IndexOutOfRangeError):
    value: int
    extent: int

    def __str__(self):
        return (
            f"Expected an index to be less than the length of its dimension, {self.extent}, "
            f"but got {self.value}"
        )


@dataclass(frozen=True, slots=True)
class ReversedSliceError(IndexOutOfRangeError):
    first: int
    last: int

    def __str__(self):
        return (
            f"Expected the first index of an ascending slice to not exceed its last index, "
            f"but got first={self.first} and last={self.last}"
        )


@dataclass(frozen=True, slots=True)
class SequenceIndexError(IndexOutOfRangeError):
    index: int
    size: int

    def __str__(self):
        return f"Expected an index in [0, {self.size}) of a slice sequence, but got {self.index}"


@dataclass(frozen=True, slots=True)
class SliceCountError(IndexOutOfRangeError):
    count: int
    rank: int

    def __str__(self):
        return (
            f"Expected one slice per dimension, but got {self.count} slices for extents of "
            f"rank {self.rank}"
        )


@dataclass(frozen=True, slots=True)
class SliceSizeError(IndexOutOfRangeError):
    first: int
    last: int
    step: int
    size: int

    def __str__(self):
        expected = (self.last - self.first) // self.step + 1
        return (
            f"Expected the size of slice {self.first}:{self.last}:{self.step} to be the number "
            f"of elements it selects, {expected}, but got {self.size}"
        )
