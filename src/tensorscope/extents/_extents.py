from __future__ import annotations

__all__ = ["Extents"]

from dataclasses import dataclass
from math import prod

from ._exceptions import InvalidExtentsError


@dataclass(frozen=True, slots=True)
class Extents:
    """Sizes of each dimension of a tensor, matrix, or vector.

    The single-dimension extents `Extents((1,))` is the shape of a free scalar. A free scalar
    broadcasts against any other extents.
    """

    sizes: tuple[int, ...]

    def __post_init__(self):
        if len(self.sizes) == 0 or not all(
            type(size) is int and size >= 0 for size in self.sizes
        ):
            raise InvalidExtentsError(self.sizes)

    @staticmethod
    def of(*sizes: int) -> Extents:
        return Extents(tuple(sizes))

    @staticmethod
    def free_scalar() -> Extents:
        return Extents((1,))

    @property
    def rank(self) -> int:
        return len(self.sizes)

    @property
    def product(self) -> int:
        """Number of elements spanned by these extents."""
        return prod(self.sizes)

    def is_free_scalar(self) -> bool:
        return self.sizes == (1,)

    def __len__(self) -> int:
        return len(self.sizes)

    def __getitem__(self, i: int) -> int:
        return self.sizes[i]

    def __iter__(self):
        return iter(self.sizes)

    def deparse(self) -> str:
        return "[" + ",".join(str(size) for size in self.sizes) + "]"

    def __str__(self) -> str:
        return self.deparse()
