from __future__ import annotations

__all__ = ["StaticSlice"]

from functools import cache
from typing import ClassVar

from returns.result import Result

from ._exceptions import IndexOutOfRangeError
from ._slice import END, Slice, _normalize_slice, resolve_slice


class StaticSlice:
    """Slice whose bounds are constants fixed when its class is created.

    `StaticSlice[first, last, step]` is a class, not an instance, whose class attributes are
    the normalized descriptor. The bounds are validated as the class is created, so a bad
    constant slice fails where it is written rather than where it is used. `last` defaults to
    `END` and `step` defaults to 1. Identical bounds give the identical class.

    The class exposes the same `first`, `last`, `step`, `size`, `is_resolved`, and `resolve`
    members as a `Slice`, so the two can be used interchangeably.
    """

    __slots__ = ()

    first: ClassVar[int]
    last: ClassVar[int]
    step: ClassVar[int]
    size: ClassVar[int]

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is used as a class and cannot be instantiated")

    def __class_getitem__(cls, parameters) -> type[StaticSlice]:
        if not isinstance(parameters, tuple):
            parameters = (parameters,)

        match parameters:
            case (first,):
                return static_slice_class(first, first, 1)
            case (first, last):
                return static_slice_class(first, last, 1)
            case (first, last, step):
                return static_slice_class(first, last, step)
            case _:
                raise TypeError(
                    f"Expected StaticSlice[first], StaticSlice[first, last], or "
                    f"StaticSlice[first, last, step], but got {len(parameters)} parameters"
                )

    @classmethod
    def is_resolved(cls) -> bool:
        return cls.to_slice().is_resolved()

    @classmethod
    def to_slice(cls) -> Slice:
        return Slice(cls.first, cls.last, cls.step, cls.size)

    @classmethod
    def resolve(cls, extent: int) -> Result[Slice, IndexOutOfRangeError]:
        return resolve_slice(cls, extent)

    @classmethod
    def deparse(cls) -> str:
        return cls.to_slice().deparse()


@cache
def static_slice_class(first: int, last: int, step: int) -> type[StaticSlice]:
    normalized = _normalize_slice(first, last, step)

    last_string = "END" if last == END else str(last)
    name = f"StaticSlice[{first}, {last_string}, {step}]"
    return type(
        name,
        (StaticSlice,),
        {
            "__slots__": (),
            "__module__": StaticSlice.__module__,
            "__qualname__": name,
            "first": normalized.first,
            "last": normalized.last,
            "step": normalized.step,
            "size": normalized.size,
        },
    )
