"""
Reducer registry and the built-in combining functions.

This module defines the concrete `ReducerRegistry` used to look up reducers
by name, and registers the five primitive reducers every other reduction is
built from:

- ``max``     : running maximum (NaN propagates)
- ``min``     : running minimum (NaN propagates)
- ``sum``     : running sum, identity 0
- ``product`` : running product, identity 1
- ``mean``    : running sum, divided by the element count once at the end

Usage example
-------------
Registering a reducer:

    @ReducerRegistry.register_reducer("absmax")
    def absmax(acc, value):
        return max(abs(acc), abs(value))

Applying a reducer:

    ReducerRegistry("sum")(tensor, axes=(0,))

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- ``mean`` is expressed as ``sum`` plus a finalizer instead of a
  position-aware combine, so it does not depend on detecting the last
  element of the fold.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar

import numpy as np

from ...domain._reduction import Reducer
from ...domain._tensor import ITensor
from ...domain.utils._reducer_registry import _ReducerRegistry
from ..ops.reduce_cpu import reduce_cpu

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[[Any, Any], Any])


class ReducerRegistry(_ReducerRegistry):
    """
    Registry-backed reducer dispatcher.

    Usage
    -----
    Register:
        @ReducerRegistry.register_reducer("sum", identity=0)
        def sum_(acc, value): ...

    Dispatch:
        reduce_sum = ReducerRegistry("sum")
        reduce_sum(tensor, axes=(1,))

    Notes
    -----
    - Reducers are stored by string name in a class-level registry.
    """

    REDUCERS: ClassVar[Dict[str, Reducer]] = {}

    def __init__(self, reducer_name: str) -> None:
        self._reducer: Reducer = self.get(reducer_name)

    @property
    def reducer(self) -> Reducer:
        return self._reducer

    @classmethod
    def register_reducer(
        cls,
        name: str,
        *,
        identity: Optional[Any] = None,
        finalize: Optional[Callable[[Any, int], Any]] = None,
        promotes_to_float: bool = False,
        overwrite: bool = False,
    ) -> Callable[[T], T]:
        """
        Decorator to register a combining function under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the reducer later.
        identity:
            Value of an empty fold. None means empty folds are rejected.
        finalize:
            Optional ``(accumulator, count) -> value`` post-processing.
        promotes_to_float:
            Whether integer inputs produce a floating-point result.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Reducer name must be a non-empty string")

        def decorator(func: T) -> T:
            if not overwrite and name in cls.REDUCERS:
                raise ValueError(f"Reducer already registered: {name!r}")
            cls.REDUCERS[name] = Reducer(
                name=name,
                combine=func,
                identity=identity,
                finalize=finalize,
                promotes_to_float=promotes_to_float,
            )
            logger.debug("registered reducer %r", name)
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered reducer names (sorted)."""
        return tuple(sorted(cls.REDUCERS))

    @classmethod
    def get(cls, name: str) -> Reducer:
        """
        Get a registered reducer by name.

        Raises
        ------
        ValueError
            If no reducer is registered under `name`.
        """
        try:
            return cls.REDUCERS[name]
        except KeyError as e:
            available = ", ".join(sorted(cls.REDUCERS)) or "<none>"
            raise ValueError(
                f"Unsupported reducer name: {name!r}. Available: {available}"
            ) from e

    def __call__(self, tensor: ITensor, **options: Any) -> ITensor:
        return reduce_cpu(tensor, self._reducer, **options)


@ReducerRegistry.register_reducer("max")
def _max(acc: Any, value: Any) -> Any:
    return np.maximum(acc, value)


@ReducerRegistry.register_reducer("min")
def _min(acc: Any, value: Any) -> Any:
    return np.minimum(acc, value)


ReducerRegistry.register_reducer("sum", identity=0)(operator.add)
ReducerRegistry.register_reducer("product", identity=1)(operator.mul)


def _divide_by_count(acc: Any, count: int) -> Any:
    return acc / count


ReducerRegistry.register_reducer(
    "mean", finalize=_divide_by_count, promotes_to_float=True
)(operator.add)
