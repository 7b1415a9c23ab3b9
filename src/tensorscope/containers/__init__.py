from ._dense import (
    DenseMatrix,
    DenseTensor,
    DenseVector,
    Placeholder,
    check_lol_dimensions,
    default_lol_dimensions,
)
from ._exceptions import InconsistentDataError, RaggedDataError
from ._protocols import (
    ContainerKind,
    LazyContainer,
    MatrixLike,
    TensorLike,
    VectorLike,
    container_kind,
    is_lazy,
)
