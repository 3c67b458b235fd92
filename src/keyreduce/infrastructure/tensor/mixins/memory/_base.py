"""
Memory/structural operation mixin for Tensor.

Declares :class:`TensorMixinMemory`, which exposes shape-only operations
(`squeeze`, `reshape`) and deep copies (`clone`). Each returns a tensor with
its own storage; no operation here produces a view of ``self``.
"""

from typing import Sequence

from .....domain._tensor import ITensor
from .....domain.utils._shape import size_of_shape


class TensorMixinMemory:
    """
    Mixin providing copy and shape-only tensor operations.
    """

    def squeeze(self: ITensor) -> "ITensor":
        """
        Remove every size-1 axis.

        Returns
        -------
        ITensor
            A new tensor whose shape is ``self.shape`` without its size-1
            entries. The rank may drop to 0.
        """
        from ....ops.squeeze_cpu import squeeze_cpu

        return squeeze_cpu(self)

    def reshape(self: ITensor, new_shape: Sequence[int]) -> "ITensor":
        """
        Return a copy of this tensor with a different shape.

        Raises
        ------
        ValueError
            If `new_shape` does not describe the same number of elements.
        """
        new_shape = tuple(int(d) for d in new_shape)
        if size_of_shape(new_shape) != self.numel():
            raise ValueError(f"Invalid reshape from {self.shape} to {new_shape}")

        out = type(self)(new_shape, dtype=self.dtype)
        out.copy_from_numpy(self.to_numpy().reshape(new_shape))
        return out

    def clone(self: ITensor) -> "ITensor":
        """
        Deep copy of tensor data into a new Tensor.
        """
        out = type(self)(self.shape, dtype=self.dtype)
        out.copy_from_numpy(self.to_numpy().copy())
        return out
