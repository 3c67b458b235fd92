"""
Reduction-related exceptions for KeyReduce.

This module defines the error taxonomy raised while validating the parameters
of an axis-wise reduction. Errors are raised synchronously, before any output
tensor is allocated, so callers never observe a partially written result.

Numeric domain problems (e.g., ``log`` of a non-positive value, overflow in
``exp``) are deliberately *not* represented here: they surface as NaN/inf
values following IEEE floating-point semantics.
"""

from typing import Optional, Sequence


class ReductionError(ValueError):
    """
    Base class for errors raised by the reduction engine.

    Subclassing `ValueError` keeps the errors catchable by callers that
    only guard against generic invalid-argument failures.
    """


class ShapeError(ReductionError):
    """
    Raised when the requested axis set is incompatible with the input shape.

    This covers two situations:
    - an axis index outside ``[0, rank)``
    - the same axis listed more than once

    Attributes
    ----------
    axis : int
        The offending axis value.
    rank : int
        Rank of the input tensor being reduced.
    axes : tuple[int, ...]
        The full axis set as supplied by the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        axis: int,
        rank: int,
        axes: Optional[Sequence[int]] = None,
    ) -> None:
        """
        Initialize the ShapeError.

        Parameters
        ----------
        message : str
            Human-readable description of the problem.
        axis : int
            The axis that triggered the error.
        rank : int
            Rank of the input tensor.
        axes : Optional[Sequence[int]], optional
            The axis set as supplied by the caller.
        """
        super().__init__(message)
        self.axis = axis
        self.rank = rank
        self.axes = tuple(axes) if axes is not None else ()


class ArityError(ReductionError):
    """
    Raised when a combining function cannot be applied to the number of
    elements being folded.

    In practice this only happens when a reduced axis has extent 0 and the
    reducer has no identity value to start the fold from (e.g., ``max`` of
    an empty set is undefined).

    Attributes
    ----------
    reducer : str
        Name of the reducer that was asked to fold.
    count : int
        Number of elements available to the fold.
    """

    def __init__(self, reducer: str, count: int) -> None:
        super().__init__(
            f"Reducer {reducer!r} cannot fold {count} element(s); "
            f"it requires at least 1 and defines no identity value."
        )
        self.reducer = reducer
        self.count = count
