"""
Axis-wise reduction library.

Importing this package registers the built-in reducers (``max``, ``min``,
``sum``, ``product``, ``mean``) in `ReducerRegistry` and exposes the
functional reduction API.
"""

from ._reducers import ReducerRegistry
from ._functional import (
    REDUCTIONS,
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

__all__ = [
    ReducerRegistry.__name__,
    "REDUCTIONS",
    reduce_by_name.__name__,
    reduce_l1.__name__,
    reduce_l2.__name__,
    reduce_log_sum.__name__,
    reduce_log_sum_exp.__name__,
    reduce_max.__name__,
    reduce_mean.__name__,
    reduce_min.__name__,
    reduce_product.__name__,
    reduce_sum.__name__,
    reduce_sum_square.__name__,
]
