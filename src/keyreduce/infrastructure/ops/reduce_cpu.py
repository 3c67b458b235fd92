"""
CPU reference implementation of generic axis-wise reduction.

This module provides a **naive, readable, and correct** reduction kernel over
an arbitrary subset of axes of a dense row-major tensor. It serves as:

- The single engine behind every named reduction (max, min, sum, product,
  mean, and the norms/log reductions derived from them)
- The numerical ground truth for unit tests

Algorithm
---------
For an input of shape ``S`` and a sorted axis set ``A``:

1. The output shape is ``S`` with every axis in ``A`` set to 1.
2. ``reduce_dims[i] = S[A[i]]`` spans the reduced-axis subspace, which holds
   ``prod(reduce_dims)`` elements per output location.
3. ``reduce_strides`` is the row-major stride table over ``reduce_dims``. It
   decomposes a flat *reduce index* into one coordinate per reduced axis
   (mixed-radix decomposition restricted to the reduced axes).
4. For every output location, each reduce index in ascending order is
   decomposed, written over the reduced axes of the output location, and the
   input value at that location is gathered. The gathered values are folded
   left-to-right by the reducer.

The work is ``O(numel(x) * rank)`` regardless of how many axes are reduced,
without a nested loop per reduced axis.

Design notes
------------
- `ReduceDescriptor` is immutable and `input_location` builds a fresh tuple
  per call; no location buffer is shared across iterations.
- Outputs are constructed via ``type(x)`` and never alias the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

import numpy as np

from ...domain._reduction import ReduceOptions, Reducer
from ...domain._tensor import ITensor
from ...domain.utils._shape import size_of_shape, strides_of_shape
from ._validation import validate_reduce_params
from .squeeze_cpu import squeeze_cpu

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReduceDescriptor:
    """
    Per-call description of the reduced-axis subspace.

    Attributes
    ----------
    axes : tuple[int, ...]
        Reduced axes, sorted ascending.
    reduce_dims : tuple[int, ...]
        Extent of the input along each reduced axis.
    reduce_strides : tuple[int, ...]
        Mixed-radix strides over `reduce_dims` (last entry 1).
    output_shape : tuple[int, ...]
        Input shape with every reduced axis set to 1.
    """

    axes: tuple[int, ...]
    reduce_dims: tuple[int, ...]
    reduce_strides: tuple[int, ...]
    output_shape: tuple[int, ...]

    @property
    def reduce_elements(self) -> int:
        """Number of input elements folded into each output element."""
        return size_of_shape(self.reduce_dims)

    def reduce_offsets(self, reduce_index: int) -> tuple[int, ...]:
        """
        Decompose a flat reduce index into one coordinate per reduced axis.
        """
        offsets = []
        remaining = reduce_index
        for stride in self.reduce_strides:
            offset, remaining = divmod(remaining, stride)
            offsets.append(offset)
        return tuple(offsets)

    def input_location(
        self, output_location: Sequence[int], reduce_index: int
    ) -> tuple[int, ...]:
        """
        Return the input location contributing to `output_location` at
        position `reduce_index` of the fold.

        Non-reduced axes keep the output coordinate; reduced axes take the
        decomposed offsets.
        """
        location = list(output_location)
        for axis, offset in zip(self.axes, self.reduce_offsets(reduce_index)):
            location[axis] = offset
        return tuple(location)


def build_reduce_descriptor(
    shape: Sequence[int], axes: Sequence[int]
) -> ReduceDescriptor:
    """
    Build the `ReduceDescriptor` for reducing `shape` over `axes`.

    Parameters
    ----------
    shape : Sequence[int]
        Input shape.
    axes : Sequence[int]
        Validated axes. They are sorted here, so callers may pass any order.

    Returns
    -------
    ReduceDescriptor
        Descriptor whose `reduce_strides` satisfy
        ``reduce_strides[-1] == 1`` and
        ``reduce_strides[i] == reduce_strides[i + 1] * reduce_dims[i + 1]``.
    """
    sorted_axes = tuple(sorted(int(a) for a in axes))

    output_shape = [int(d) for d in shape]
    for axis in sorted_axes:
        output_shape[axis] = 1

    reduce_dims = tuple(int(shape[axis]) for axis in sorted_axes)

    return ReduceDescriptor(
        axes=sorted_axes,
        reduce_dims=reduce_dims,
        reduce_strides=strides_of_shape(reduce_dims),
        output_shape=tuple(output_shape),
    )


def _output_dtype(x: ITensor, reducer: Reducer) -> np.dtype:
    """
    Pick the dtype of the reduction output.

    Reducers that divide (``mean``) produce float64 for non-floating inputs;
    every other reduction keeps the input dtype.
    """
    dtype = np.dtype(x.dtype)
    if reducer.promotes_to_float and not np.issubdtype(dtype, np.inexact):
        return np.dtype(np.float64)
    return dtype


def reduce_cpu(
    x: ITensor,
    reducer: Union[Reducer, Callable[[Any, Any], Any]],
    *,
    axes: Optional[Sequence[int]] = None,
    keep_dimensions: bool = False,
) -> ITensor:
    """
    Reduce `x` over `axes` with `reducer`.

    Parameters
    ----------
    x : ITensor
        Input tensor (any rank, including 0). Never modified.
    reducer : Reducer or Callable[[Any, Any], Any]
        The combining function. Plain binary callables are wrapped into an
        anonymous `Reducer` without identity or finalizer.
    axes : Optional[Sequence[int]], optional
        Distinct axes in ``[0, rank)``. ``None`` (default) reduces every
        axis; an empty sequence reduces none.
    keep_dimensions : bool, optional
        If True, reduced axes are kept with size 1. If False (default), the
        result is squeezed, which removes *every* size-1 axis, including
        size-1 axes of the input that were not reduced.

    Returns
    -------
    ITensor
        A new tensor holding the reduced values.

    Raises
    ------
    TypeError
        If an axis is not an integer or `reducer` is not callable.
    ShapeError
        If an axis is out of range or duplicated.
    ArityError
        If a reduced axis is empty and the reducer has no identity.

    Notes
    -----
    Values are folded in ascending reduce-index order, i.e. row-major order
    over the reduced axes.
    """
    options = ReduceOptions(
        axes=None if axes is None else tuple(axes),
        keep_dimensions=bool(keep_dimensions),
    )
    sorted_axes = validate_reduce_params(x, reducer, options)
    reducer = Reducer.coerce(reducer)

    descriptor = build_reduce_descriptor(x.shape, sorted_axes)
    logger.debug(
        "reduce %s: shape=%s axes=%s reduce_dims=%s reduce_strides=%s keep_dimensions=%s",
        reducer.name,
        x.shape,
        descriptor.axes,
        descriptor.reduce_dims,
        descriptor.reduce_strides,
        options.keep_dimensions,
    )

    Tensor = type(x)
    out = Tensor(descriptor.output_shape, dtype=_output_dtype(x, reducer))

    reduce_elements = descriptor.reduce_elements
    for output_index in range(size_of_shape(descriptor.output_shape)):
        output_location = out.location_from_index(output_index)
        values = [
            x.get_value_by_location(
                descriptor.input_location(output_location, reduce_index)
            )
            for reduce_index in range(reduce_elements)
        ]
        out.set_value_by_index(output_index, reducer.fold(values))

    if not options.keep_dimensions:
        out = squeeze_cpu(out)
    return out
