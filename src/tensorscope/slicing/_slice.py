from __future__ import annotations

__all__ = ["END", "Slice", "normalize_index", "normalize_slice", "resolve_slice"]

import logging
import sys
from dataclasses import dataclass

from returns.result import Failure, Result, Success

from ._exceptions import (
    IndexBeyondExtentError,
    IndexOutOfRangeError,
    InvalidStepError,
    NegativeIndexError,
    ReversedSliceError,
    SliceSizeError,
)

logger = logging.getLogger(__name__)

# Open end of a slice: up to and including the last index of whatever dimension it is applied to
END = sys.maxsize


@dataclass(frozen=True, slots=True)
class Slice:
    """Canonical ascending selection along one dimension.

    Both `first` and `last` are inclusive, and `last` is always the final selected element.
    Negative bounds count back from the end of the dimension, and `last == END` extends to the
    end of the dimension. Such a slice cannot be resolved without knowing the length of its
    dimension; it is a placeholder with `size == 0` (unless `first == last`) until it is passed
    through `resolve_slice`.
    """

    first: int
    last: int
    step: int
    size: int

    def __post_init__(self):
        if self.step <= 0:
            raise InvalidStepError(self.step)

        if self.is_resolved():
            if self.first > self.last:
                raise ReversedSliceError(self.first, self.last)
            if self.size != (self.last - self.first) // self.step + 1:
                raise SliceSizeError(self.first, self.last, self.step, self.size)

    def is_resolved(self) -> bool:
        return self.first >= 0 and self.last >= 0 and self.last != END

    def indexes(self) -> range:
        return range(self.first, self.last + 1, self.step)

    def resolve(self, extent: int) -> Result[Slice, IndexOutOfRangeError]:
        return resolve_slice(self, extent)

    def deparse(self) -> str:
        last_string = "end" if self.last == END else str(self.last)
        if self.first == self.last and self.step == 1:
            return str(self.first)
        else:
            return f"{self.first}:{last_string}:{self.step}"

    def __str__(self):
        return self.deparse()


def _normalize_index(extent: int, value: int) -> int:
    if value < 0:
        resolved = extent + value
        if resolved < 0:
            raise NegativeIndexError(value, extent)
        return resolved
    else:
        return value


def _normalize_slice(first: int, last: int, step: int) -> Slice:
    if step <= 0:
        raise InvalidStepError(step)

    if first == last:
        return Slice(first, last, step, 1)

    if first < 0 or last < 0 or last == END:
        logger.debug("Deferring slice %s:%s:%s until its extent is known", first, last, step)
        return Slice(first, last, step, 0)

    if first > last:
        raise ReversedSliceError(first, last)

    # Pull last back onto the final element actually reached by stepping from first
    last = last - (last - first) % step
    return Slice(first, last, step, (last - first) // step + 1)


def _resolve_slice(descriptor, extent: int) -> Slice:
    first = _normalize_index(extent, descriptor.first)
    if descriptor.last == END:
        last = extent - 1
    else:
        last = _normalize_index(extent, descriptor.last)

    if first >= extent:
        raise IndexBeyondExtentError(descriptor.first, extent)
    if last >= extent:
        raise IndexBeyondExtentError(descriptor.last, extent)

    return _normalize_slice(first, last, descriptor.step)


def normalize_index(extent: int, value: int) -> Result[int, NegativeIndexError]:
    """Resolve a possibly negative index against the length of its dimension."""
    try:
        return Success(_normalize_index(extent, value))
    except NegativeIndexError as error:
        return Failure(error)


def normalize_slice(
    first: int, last: int = END, step: int = 1
) -> Result[Slice, IndexOutOfRangeError]:
    """Normalize raw slice bounds into a canonical descriptor.

    This does not need the length of the dimension. Slices that do need it come back
    unresolved; see `resolve_slice`.
    """
    try:
        return Success(_normalize_slice(first, last, step))
    except IndexOutOfRangeError as error:
        return Failure(error)


def resolve_slice(descriptor, extent: int) -> Result[Slice, IndexOutOfRangeError]:
    """Resolve a slice against the length of the dimension it selects from.

    Negative bounds and the open end are replaced with concrete indexes and the size is the
    number of selected elements. Resolving an already resolved slice returns an equal slice.
    """
    try:
        return Success(_resolve_slice(descriptor, extent))
    except IndexOutOfRangeError as error:
        return Failure(error)
