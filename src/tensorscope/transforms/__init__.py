from ._at_index import at_index
from ._bind import bind_variables
from ._exceptions import ImplicitTruthValueError, ShapeMismatchError, UnboundVariableError
from ._extents import broadcast_extents, extents_of, infer_extents, terminal_extents
from ._logical import check_truth_value, has_logical_operator
