"""
Domain layer of KeyReduce: backend-agnostic contracts.

This package holds the tensor protocol, the reduction error taxonomy, the
`Reducer` / `ReduceOptions` value types and pure shape arithmetic. Nothing
here depends on NumPy.
"""

from ._errors import ArityError, ReductionError, ShapeError
from ._reduction import ReduceOptions, Reducer
from ._tensor import ITensor

__all__ = [
    ArityError.__name__,
    ReductionError.__name__,
    ShapeError.__name__,
    ReduceOptions.__name__,
    Reducer.__name__,
    ITensor.__name__,
]
