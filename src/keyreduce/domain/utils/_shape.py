"""
Shape and flat-index arithmetic for row-major (C-order) layouts.

These helpers operate on plain tuples of integers and never touch array
storage. They are shared by the concrete `Tensor` (location/index helpers)
and by the reduction engine, which reuses `strides_of_shape` to derive the
mixed-radix stride table over the reduced-axis subspace.
"""

from typing import Sequence


def size_of_shape(shape: Sequence[int]) -> int:
    """
    Return the number of elements described by `shape`.

    The empty shape ``()`` describes a scalar and therefore has size 1.
    """
    n = 1
    for d in shape:
        n *= int(d)
    return n


def strides_of_shape(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major element strides for `shape`.

    The last axis is the fastest varying one:

        strides[-1] == 1
        strides[i] == strides[i + 1] * shape[i + 1]

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes. May be empty.

    Returns
    -------
    tuple[int, ...]
        One stride per axis (``()`` for the empty shape).
    """
    strides = [1] * len(shape)
    for i in range(len(shape) - 2, -1, -1):
        strides[i] = strides[i + 1] * int(shape[i + 1])
    return tuple(strides)


def location_from_index(shape: Sequence[int], index: int) -> tuple[int, ...]:
    """
    Convert a flat row-major index into a per-axis location.

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes.
    index : int
        Flat index in ``[0, size_of_shape(shape))``.

    Returns
    -------
    tuple[int, ...]
        Coordinates, one per axis of `shape`.

    Raises
    ------
    IndexError
        If `index` is out of range for `shape`.
    """
    size = size_of_shape(shape)
    if index < 0 or index >= size:
        raise IndexError(f"index {index} out of range for shape {tuple(shape)}")

    location = []
    remaining = int(index)
    for stride in strides_of_shape(shape):
        coord, remaining = divmod(remaining, stride)
        location.append(coord)
    return tuple(location)


def index_from_location(shape: Sequence[int], location: Sequence[int]) -> int:
    """
    Convert a per-axis location into a flat row-major index.

    Raises
    ------
    IndexError
        If the location rank does not match the shape rank, or if any
        coordinate lies outside ``[0, shape[axis])``.
    """
    if len(location) != len(shape):
        raise IndexError(
            f"location {tuple(location)} has rank {len(location)}, "
            f"expected rank {len(shape)}"
        )

    index = 0
    for axis, (coord, dim, stride) in enumerate(
        zip(location, shape, strides_of_shape(shape))
    ):
        if coord < 0 or coord >= dim:
            raise IndexError(
                f"coordinate {coord} out of range for axis {axis} with size {dim}"
            )
        index += int(coord) * stride
    return index


def squeeze_shape(shape: Sequence[int]) -> tuple[int, ...]:
    """Drop every size-1 entry from `shape` (the result may be ``()``)."""
    return tuple(int(d) for d in shape if int(d) != 1)
