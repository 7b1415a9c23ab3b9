__all__ = [
    "ContainerKind",
    "TensorLike",
    "MatrixLike",
    "VectorLike",
    "LazyContainer",
    "container_kind",
    "is_lazy",
]

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ..extents import Extents


class ContainerKind(str, Enum):
    # Python 3.10 does not support StrEnum, so do it manually
    tensor = "tensor"
    matrix = "matrix"
    vector = "vector"
    scalar = "scalar"

    def __str__(self) -> str:
        return self.name


# Element access is by `__getitem__` with a flat index on every kind of container. Only the
# accessors that determine the shape are part of the protocols because those are what
# classification relies on.


@runtime_checkable
class TensorLike(Protocol):
    @property
    def extents(self) -> Extents: ...


@runtime_checkable
class MatrixLike(Protocol):
    @property
    def size1(self) -> int: ...

    @property
    def size2(self) -> int: ...


@runtime_checkable
class VectorLike(Protocol):
    @property
    def size(self) -> int: ...


@runtime_checkable
class LazyContainer(Protocol):
    """A matrix or vector expression that must be evaluated before it can be indexed.

    It exposes the size accessors of the matrix or vector it evaluates to, so its shape is
    known without evaluating it.
    """

    def evaluate(self) -> Any: ...


def container_kind(value: Any) -> ContainerKind:
    """Classify the value held by a terminal.

    Anything that exposes neither extents nor matrix or vector sizes is a scalar.
    """
    if isinstance(value, TensorLike):
        return ContainerKind.tensor
    elif isinstance(value, MatrixLike):
        return ContainerKind.matrix
    elif isinstance(value, VectorLike):
        return ContainerKind.vector
    else:
        return ContainerKind.scalar


def is_lazy(value: Any) -> bool:
    return isinstance(value, LazyContainer) and container_kind(value) in (
        ContainerKind.matrix,
        ContainerKind.vector,
    )
