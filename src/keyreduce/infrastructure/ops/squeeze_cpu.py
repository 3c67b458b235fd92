"""
CPU implementation of squeeze (removal of all size-1 axes).

Squeeze is shape-wide rather than reduction-aware: it drops *every* size-1
axis, including axes that already had size 1 in the reduction input.
"""

from ...domain._tensor import ITensor
from ...domain.utils._shape import squeeze_shape


def squeeze_cpu(x: ITensor) -> ITensor:
    """
    Return a new tensor equal to `x` with every size-1 axis removed.

    Parameters
    ----------
    x : ITensor
        Input tensor. Never modified.

    Returns
    -------
    ITensor
        Tensor of shape ``tuple(d for d in x.shape if d != 1)``; rank 0 if
        every axis had size 1. The data is copied, so the result does not
        alias `x`.
    """
    new_shape = squeeze_shape(x.shape)

    Tensor = type(x)
    out = Tensor(new_shape, dtype=x.dtype)
    out.copy_from_numpy(x.to_numpy().reshape(new_shape))
    return out
