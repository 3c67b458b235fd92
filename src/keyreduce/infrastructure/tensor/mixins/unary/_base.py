"""
Unary operation mixin defining elementwise Tensor unary APIs.

This module declares :class:`TensorMixinUnary`, a mixin exposing the
elementwise collaborators used by the derived reductions (``abs``, ``exp``,
``log``, ``sqrt``, ``pow``) as Tensor methods.

The numerical kernels live in ``ops.unary_cpu``; the mixin only forwards to
them so the Tensor class stays small.
"""

from typing import Union

from .....domain._tensor import ITensor, Number


class TensorMixinUnary:
    """
    Mixin providing elementwise unary tensor operations.

    Notes
    -----
    - Every method returns a new tensor with the same shape as ``self``.
    - Domain problems follow IEEE semantics (NaN/inf) instead of raising.
    """

    def abs(self: ITensor) -> "ITensor":
        """
        Compute the elementwise absolute value of the tensor.
        """
        from ....ops.unary_cpu import abs_cpu

        return abs_cpu(self)

    def exp(self: ITensor) -> "ITensor":
        """
        Compute the elementwise exponential of the tensor.

        Notes
        -----
        Large inputs overflow to ``inf``.
        """
        from ....ops.unary_cpu import exp_cpu

        return exp_cpu(self)

    def log(self: ITensor) -> "ITensor":
        """
        Compute the elementwise natural logarithm of the tensor.

        Notes
        -----
        ``log(0) == -inf`` and ``log(x < 0)`` is NaN.
        """
        from ....ops.unary_cpu import log_cpu

        return log_cpu(self)

    def sqrt(self: ITensor) -> "ITensor":
        """
        Compute the elementwise square root of the tensor.
        """
        from ....ops.unary_cpu import sqrt_cpu

        return sqrt_cpu(self)

    def pow(self: ITensor, exponent: Union["ITensor", Number]) -> "ITensor":
        """
        Raise the tensor elementwise to `exponent`.

        Parameters
        ----------
        exponent : ITensor or Number
            A scalar exponent, or a tensor with exactly the same shape.
        """
        from ....ops.unary_cpu import pow_cpu

        return pow_cpu(self, exponent)
