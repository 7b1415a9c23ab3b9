__all__ = ["InvalidExtentsError"]

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidExtentsError(Exception):
    sizes: tuple[int, ...]

    def __str__(self):
        return (
            f"Expected extents to have at least one dimension and every size to be a "
            f"non-negative integer, but got {self.sizes}"
        )
