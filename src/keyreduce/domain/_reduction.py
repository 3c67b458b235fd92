"""
Reducer and reduction-option value types.

A `Reducer` bundles the combining function that the reduction engine folds
over each group of gathered values, together with the metadata the engine
needs to handle empty groups and count-aware post-processing.

Count-aware reductions such as ``mean`` are expressed as an ordinary pairwise
combine followed by a `finalize(accumulator, count)` step. This keeps every
combine order-independent; the fold order is still fixed (ascending reduce
index) so that results are deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce as _fold
from typing import Any, Callable, Optional, Sequence

from ._errors import ArityError

CombineFn = Callable[[Any, Any], Any]
FinalizeFn = Callable[[Any, int], Any]


@dataclass(frozen=True)
class Reducer:
    """
    Named combining function used by the reduction engine.

    Attributes
    ----------
    name : str
        Identifier used in error messages and in the reducer registry.
    combine : Callable[[Any, Any], Any]
        Binary function ``(accumulator, value) -> accumulator`` applied
        left-to-right.
    identity : Optional[Any]
        Value an empty fold evaluates to. ``None`` means an empty fold is an
        `ArityError`.
    finalize : Optional[Callable[[Any, int], Any]]
        Optional post-processing ``(accumulator, count) -> value`` applied once
        after the fold, e.g. dividing by the element count for ``mean``.
    promotes_to_float : bool
        Whether the reduction yields floating-point results for integer
        inputs (the engine then allocates a float output).
    """

    name: str
    combine: CombineFn
    identity: Optional[Any] = None
    finalize: Optional[FinalizeFn] = None
    promotes_to_float: bool = False

    @classmethod
    def coerce(cls, reducer: "Reducer | CombineFn") -> "Reducer":
        """
        Return `reducer` unchanged, or wrap a plain binary callable.

        Raises
        ------
        TypeError
            If `reducer` is neither a `Reducer` nor callable.
        """
        if isinstance(reducer, Reducer):
            return reducer
        if not callable(reducer):
            raise TypeError(
                f"reducer must be a Reducer or a binary callable, got {type(reducer)!r}"
            )
        name = getattr(reducer, "__name__", None) or type(reducer).__name__
        return cls(name=name, combine=reducer)

    def fold(self, values: Sequence[Any]) -> Any:
        """
        Fold `values` left-to-right in the order given.

        Parameters
        ----------
        values : Sequence[Any]
            Elements gathered for a single output location, in ascending
            reduce-index order.

        Returns
        -------
        Any
            The combined (and, if configured, finalized) scalar.

        Raises
        ------
        ArityError
            If `values` is empty and the reducer has no identity.
        """
        if len(values) == 0:
            if self.identity is None:
                raise ArityError(self.name, 0)
            acc = self.identity
        else:
            acc = _fold(self.combine, values)

        if self.finalize is not None:
            acc = self.finalize(acc, len(values))
        return acc


@dataclass(frozen=True)
class ReduceOptions:
    """
    Caller-facing options of a reduction.

    Attributes
    ----------
    axes : Optional[tuple[int, ...]]
        Axes to reduce. ``None`` reduces every axis; an empty tuple reduces
        none (each element passes through unchanged).
    keep_dimensions : bool
        Keep reduced axes as size 1 instead of squeezing the result.
    """

    axes: Optional[tuple[int, ...]] = None
    keep_dimensions: bool = False

    def resolve_axes(self, rank: int) -> tuple[int, ...]:
        """Return the explicit axis set, expanding ``None`` to ``0..rank-1``."""
        if self.axes is None:
            return tuple(range(rank))
        return tuple(self.axes)
