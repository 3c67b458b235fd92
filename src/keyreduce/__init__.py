"""
KeyReduce: axis-wise reductions over dense multi-dimensional arrays.

Quick start
-----------
    >>> import numpy as np
    >>> from keyreduce import Tensor, reduce_sum
    >>> x = Tensor.from_numpy(np.array([[1, 2, 3], [4, 5, 6]]))
    >>> reduce_sum(x, axes=(1,)).to_numpy()
    array([ 6., 15.], dtype=float32)
"""

from .domain import (
    ArityError,
    ITensor,
    ReduceOptions,
    Reducer,
    ReductionError,
    ShapeError,
)
from .infrastructure.ops.reduce_cpu import (
    ReduceDescriptor,
    build_reduce_descriptor,
    reduce_cpu,
)
from .infrastructure.ops.squeeze_cpu import squeeze_cpu
from .infrastructure.reduction import (
    REDUCTIONS,
    ReducerRegistry,
    reduce_by_name,
    reduce_l1,
    reduce_l2,
    reduce_log_sum,
    reduce_log_sum_exp,
    reduce_max,
    reduce_mean,
    reduce_min,
    reduce_product,
    reduce_sum,
    reduce_sum_square,
)
from .infrastructure.tensor import Tensor

__version__ = "1.0.0"

__all__ = [
    "ArityError",
    "ITensor",
    "ReduceOptions",
    "Reducer",
    "ReductionError",
    "ShapeError",
    "ReduceDescriptor",
    "build_reduce_descriptor",
    "reduce_cpu",
    "squeeze_cpu",
    "REDUCTIONS",
    "ReducerRegistry",
    "reduce_by_name",
    "reduce_l1",
    "reduce_l2",
    "reduce_log_sum",
    "reduce_log_sum_exp",
    "reduce_max",
    "reduce_mean",
    "reduce_min",
    "reduce_product",
    "reduce_sum",
    "reduce_sum_square",
    "Tensor",
]
