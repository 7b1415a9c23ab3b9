from __future__ import annotations

__all__ = [
    "DenseTensor",
    "DenseMatrix",
    "DenseVector",
    "Placeholder",
    "check_lol_dimensions",
    "default_lol_dimensions",
]

from dataclasses import dataclass
from typing import Any

from ..extents import Extents
from ._exceptions import InconsistentDataError, RaggedDataError


@dataclass(frozen=True, slots=True)
class DenseTensor:
    """Row-major tensor storing every element.

    This is a minimal reference container; a flat index addresses `data` directly.
    """

    extents: Extents
    data: tuple[Any, ...]

    def __post_init__(self):
        if len(self.data) != self.extents.product:
            raise InconsistentDataError(self.extents.product, len(self.data))

    @staticmethod
    def from_lol(lol, *, extents: Extents | None = None) -> DenseTensor:
        if extents is None:
            dimensions = default_lol_dimensions(lol)
            check_lol_dimensions(lol, dimensions)
            extents = Extents(dimensions)

        return DenseTensor(extents, tuple(flatten_lol(lol)))

    def __getitem__(self, index: int):
        return self.data[index]


@dataclass(frozen=True, slots=True)
class DenseMatrix:
    size1: int
    size2: int
    data: tuple[Any, ...]

    def __post_init__(self):
        if len(self.data) != self.size1 * self.size2:
            raise InconsistentDataError(self.size1 * self.size2, len(self.data))

    @staticmethod
    def from_lol(lol: list[list[Any]]) -> DenseMatrix:
        size1 = len(lol)
        size2 = len(lol[0]) if size1 > 0 else 0
        check_lol_dimensions(lol, (size1, size2))
        return DenseMatrix(size1, size2, tuple(flatten_lol(lol)))

    def __getitem__(self, index: int | tuple[int, int]):
        match index:
            case (row, column):
                return self.data[row * self.size2 + column]
            case flat:
                return self.data[flat]


@dataclass(frozen=True, slots=True)
class DenseVector:
    data: tuple[Any, ...]

    @property
    def size(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int):
        return self.data[index]


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Tensor with known extents but no data.

    Useful for inferring the extents of an expression before any storage exists.
    """

    extents: Extents


def default_lol_dimensions(lol) -> tuple[int, ...]:
    """Extract dimensions from dense list-of-lists.

    Given nested lists of lists representing a dense tensor in row-major format, discover the
    dimensions of the tensor as implied by the lengths of the lists. The length of the top-level
    list is the size of the first dimension, the length of the first element of that list is the
    size of the second dimension, and so on until a scalar is encountered. For example,
    `default_lol_dimensions([[1,2,3],[4,5,6]])` returns `(2,3)`.
    """
    dimensions = []
    subdata = lol
    while isinstance(subdata, list):
        dimensions.append(len(subdata))
        if len(subdata) > 0:
            subdata = subdata[0]
        else:
            break

    return tuple(dimensions)


def check_lol_dimensions(lol, dimensions: tuple[int, ...], depth: int = 0) -> None:
    """Raise `RaggedDataError` unless the nested lists are rectangular with these dimensions."""
    if depth == len(dimensions):
        if isinstance(lol, list):
            raise RaggedDataError(depth, None, len(lol))
        return

    if not isinstance(lol, list):
        raise RaggedDataError(depth, dimensions[depth], None)
    if len(lol) != dimensions[depth]:
        raise RaggedDataError(depth, dimensions[depth], len(lol))

    for element in lol:
        check_lol_dimensions(element, dimensions, depth + 1)


def flatten_lol(lol):
    if isinstance(lol, list):
        for element in lol:
            yield from flatten_lol(element)
    else:
        yield lol
