"""
Concrete Tensor implementation (NumPy backend).

This module provides a concrete `Tensor` implementation that satisfies the
domain-level `ITensor` protocol. Storage is a C-contiguous NumPy ndarray, so
the flat index of an element is its row-major offset and matches the
location arithmetic in ``domain.utils._shape``.

Design notes
------------
- This file sits in the infrastructure layer: it imports NumPy and provides
  a concrete runtime implementation.
- Element-wise, structural and reduction operations are contributed by the
  mixins in ``tensor.mixins``; they construct their outputs via
  ``type(self)`` to avoid circular imports.
- The default element dtype is ``np.float32``.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._tensor import ITensor
from ...domain.utils._shape import (
    index_from_location,
    location_from_index,
    size_of_shape,
)
from .mixins import TensorMixinMemory, TensorMixinReduction, TensorMixinUnary

Number = Union[int, float]


class Tensor(TensorMixinReduction, TensorMixinUnary, TensorMixinMemory, ITensor):
    """
    Concrete tensor implementation (NumPy CPU backend).

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape. ``()`` creates a scalar tensor.
    dtype : np.dtype, optional
        Element dtype for this tensor. Defaults to np.float32.

    Notes
    -----
    - `_data` is a NumPy ndarray of dtype `self._dtype`, zero-initialized.
    - Shape entries must be non-negative integers.
    """

    def __init__(
        self,
        shape: Sequence[int],
        *,
        dtype: np.dtype = np.float32,
    ) -> None:
        """
        Construct a new Tensor with allocated (zeroed) storage.

        Raises
        ------
        ValueError
            If any shape entry is negative.
        """
        shape = tuple(int(d) for d in shape)
        if any(d < 0 for d in shape):
            raise ValueError(f"Tensor shape entries must be non-negative, got {shape}")

        self._shape: tuple[int, ...] = shape
        self._dtype = np.dtype(dtype)
        self._data = np.zeros(self._shape, dtype=self._dtype)

    def __repr__(self) -> str:
        """
        Return a human-readable string representation of the tensor.
        """
        return f"Tensor(shape={self._shape}, dtype={self._dtype})"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def from_numpy(cls, arr: Any, *, dtype: Optional[np.dtype] = None) -> "Tensor":
        """
        Construct a Tensor from a NumPy array (or array-like).

        Parameters
        ----------
        arr : Any
            Source data. Its shape determines the tensor shape.
        dtype : np.dtype, optional
            Element dtype of the new tensor. Defaults to np.float32.

        Returns
        -------
        Tensor
            A newly created tensor whose contents are copied from `arr`;
            later modifications to `arr` do not affect it.
        """
        dt = np.dtype(np.float32 if dtype is None else dtype)
        arr_nd = np.asarray(arr, dtype=dt)
        t = cls(arr_nd.shape, dtype=dt)
        t.copy_from_numpy(arr_nd)
        return t

    @classmethod
    def scalar(cls, value: Number, *, dtype: Optional[np.dtype] = None) -> "Tensor":
        """Construct a rank-0 Tensor holding `value`."""
        return cls.from_numpy(np.asarray(value), dtype=dtype)

    # ------------------------------------------------------------------
    # Core properties
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.
        """
        return self._shape

    @property
    def rank(self) -> int:
        """Number of axes (0 for a scalar)."""
        return len(self._shape)

    @property
    def dtype(self) -> np.dtype:
        """
        Return the element dtype of this tensor.
        """
        return self._dtype

    @property
    def data(self) -> np.ndarray:
        """
        Return the underlying storage for this tensor.

        Notes
        -----
        This is the live buffer, not a copy.
        """
        return self._data

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        return size_of_shape(self._shape)

    # ------------------------------------------------------------------
    # Location / index arithmetic
    # ------------------------------------------------------------------
    def location_from_index(self, index: int) -> tuple[int, ...]:
        """
        Convert a flat row-major index into a location for this tensor.

        Raises
        ------
        IndexError
            If `index` is outside ``[0, numel())``.
        """
        return location_from_index(self._shape, index)

    def index_from_location(self, location: Sequence[int]) -> int:
        """
        Convert a location into a flat row-major index for this tensor.

        Raises
        ------
        IndexError
            If the location rank differs from the tensor rank or a coordinate
            is out of range.
        """
        return index_from_location(self._shape, location)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def get_value_by_location(self, location: Sequence[int]) -> Any:
        """
        Read the element at `location` (a NumPy scalar of `self.dtype`).
        """
        return self._data.flat[self.index_from_location(location)]

    def get_value_by_index(self, index: int) -> Any:
        """
        Read the element at flat index `index`.
        """
        if index < 0 or index >= self.numel():
            raise IndexError(f"index {index} out of range for shape {self._shape}")
        return self._data.flat[index]

    def set_value_by_index(self, index: int, value: Number) -> None:
        """
        Write `value` at flat index `index`, casting to `self.dtype`.
        """
        if index < 0 or index >= self.numel():
            raise IndexError(f"index {index} out of range for shape {self._shape}")
        self._data.flat[index] = value

    def set_value_by_location(self, location: Sequence[int], value: Number) -> None:
        """Write `value` at `location`."""
        self._data.flat[self.index_from_location(location)] = value

    def item(self) -> float:
        """
        Return the value of a scalar (or single-element) tensor as a Python float.

        Raises
        ------
        ValueError
            If the tensor does not contain exactly 1 element.
        """
        if self.numel() != 1:
            raise ValueError(
                f"Tensor.item() requires a scalar/1-element tensor, got shape={self.shape}"
            )
        return float(self._data.reshape(-1)[0])

    # ------------------------------------------------------------------
    # Host interop
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """
        Convert the tensor to a NumPy ndarray.

        Returns
        -------
        np.ndarray
            A copy of the tensor data; mutating it does not affect the tensor.
        """
        return self._data.copy()

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy data from a NumPy array (or array-like / scalar) into this tensor.

        Parameters
        ----------
        arr : Any
            Array-like object accepted by `np.asarray`, including NumPy scalars.
            Values are cast to `self.dtype`.

        Raises
        ------
        ValueError
            If the array shape does not match the tensor shape exactly
            (including scalar shape ``()``).
        """
        arr_nd = np.asarray(arr, dtype=self._dtype)

        if arr_nd.shape != self._shape:
            raise ValueError(
                f"Shape mismatch: tensor {self._shape} vs array {arr_nd.shape}"
            )

        self._data[...] = arr_nd
