__all__ = ["InconsistentDataError", "RaggedDataError"]

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InconsistentDataError(Exception):
    expected: int
    actual: int

    def __str__(self):
        return (
            f"Expected the number of elements in the data to equal the product of the "
            f"dimensions, {self.expected}, but found {self.actual} elements"
        )


@dataclass(frozen=True, slots=True)
class RaggedDataError(Exception):
    depth: int
    expected: int | None
    actual: int | None

    def __str__(self):
        def describe(length: int | None) -> str:
            return "a scalar" if length is None else f"a list of length {length}"

        return (
            f"Expected every element at depth {self.depth} of the nested lists to be "
            f"{describe(self.expected)}, but found {describe(self.actual)}"
        )
