"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the properties the reduction engine
relies on: a shape, element access by location or flat index, and host
interop through NumPy arrays.

Notes
-----
The reduction engine constructs output tensors via ``type(x)(shape, dtype=...)``
and therefore also expects concrete implementations to accept that
constructor signature. The constructor is not part of the protocol itself.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Union, runtime_checkable

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` represents a dense, row-major, multi-dimensional numeric
    array. This protocol uses structural typing (duck typing) so that any
    concrete container satisfying the contract can be reduced.

    Notes
    -----
    - Element count always equals the product of the shape entries.
    - A rank-0 tensor (``shape == ()``) holds exactly one scalar.
    """

    # ---------------------------------------------------------------------
    # Core identity
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of axes (0 for a scalar).
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Return the element dtype of the tensor.
        """
        ...

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        ...

    # ---------------------------------------------------------------------
    # Location / index arithmetic
    # ---------------------------------------------------------------------
    def location_from_index(self, index: int) -> tuple[int, ...]:
        """
        Convert a flat row-major index into a location for this tensor.
        """
        ...

    def index_from_location(self, location: Sequence[int]) -> int:
        """
        Convert a location into a flat row-major index for this tensor.
        """
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def get_value_by_location(self, location: Sequence[int]) -> Any:
        """
        Read the element stored at `location`.
        """
        ...

    def get_value_by_index(self, index: int) -> Any:
        """
        Read the element stored at flat index `index`.
        """
        ...

    def set_value_by_index(self, index: int, value: Number) -> None:
        """
        Write `value` at flat index `index`.
        """
        ...

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def to_numpy(self) -> Any:
        """
        Return the tensor contents as a backend-native array (e.g., `np.ndarray`).
        """
        ...

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy data from an array-like object into this tensor.

        Parameters
        ----------
        arr : Any
            Array-like whose shape must match the tensor shape exactly.
        """
        ...
