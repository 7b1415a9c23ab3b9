from .containers import DenseMatrix, DenseTensor, DenseVector, Placeholder
from .expression import Kind, Variable, ast, parse_expression
from .extents import Extents, parse_extents
from .slicing import (
    END,
    IndexOutOfRangeError,
    Slice,
    SliceTuple,
    SliceVector,
    StaticSlice,
    for_each_slice,
    normalize_slice,
    parse_slice,
    resolve_slice,
    resolve_slices,
)
from .transforms import (
    ShapeMismatchError,
    at_index,
    bind_variables,
    check_truth_value,
    extents_of,
    has_logical_operator,
    infer_extents,
)
