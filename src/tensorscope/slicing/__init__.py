from ._exceptions import (
    IndexBeyondExtentError,
    IndexOutOfRangeError,
    InvalidStepError,
    NegativeIndexError,
    ReversedSliceError,
    SequenceIndexError,
    SliceCountError,
    SliceSizeError,
)
from ._parser import parse_slice
from ._sequence import SliceDescriptor, SliceTuple, SliceVector, for_each_slice, resolve_slices
from ._slice import END, Slice, normalize_index, normalize_slice, resolve_slice
from ._static import StaticSlice
