"""
Reduction mixin defining the public Tensor reduction API.

This module declares :class:`TensorMixinReduction`, a mixin that exposes the
axis-wise reductions of ``keyreduce.infrastructure.reduction`` as Tensor
methods (``x.reduce_sum(axes=(1,))`` instead of ``reduce_sum(x, axes=(1,))``).

All methods share the same option semantics:

- ``axes=None`` reduces over every axis, ``axes=()`` reduces over none.
- ``keep_dimensions=False`` squeezes every size-1 axis out of the result,
  including size-1 axes of the input that were not reduced.
"""

from typing import Optional, Sequence

from .....domain._tensor import ITensor


class TensorMixinReduction:
    """
    Mixin forwarding Tensor reduction methods to the reduction library.

    Notes
    -----
    - Reductions never modify ``self``; each call allocates a fresh output.
    - Invalid axes raise `ShapeError` before any output is produced.
    """

    def reduce_max(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """
        Compute the maximum along `axes`.

        Parameters
        ----------
        axes : Optional[Sequence[int]], optional
            Axes to reduce. Defaults to all axes.
        keep_dimensions : bool, optional
            Whether to retain reduced dimensions with size 1. Defaults to False.

        Returns
        -------
        ITensor
            Tensor containing the maximum values.
        """
        from ....reduction._functional import reduce_max

        return reduce_max(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_min(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """Compute the minimum along `axes`."""
        from ....reduction._functional import reduce_min

        return reduce_min(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_sum(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """
        Compute the sum along `axes`.

        Returns
        -------
        ITensor
            Tensor containing the summed values. The shape depends on the
            ``axes`` and ``keep_dimensions`` arguments.
        """
        from ....reduction._functional import reduce_sum

        return reduce_sum(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_product(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """Compute the product along `axes`."""
        from ....reduction._functional import reduce_product

        return reduce_product(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_mean(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """
        Compute the arithmetic mean along `axes`.

        Notes
        -----
        Equal to ``reduce_sum`` over the same axes divided by the product of
        the reduced extents. Integer inputs produce a float64 result.
        """
        from ....reduction._functional import reduce_mean

        return reduce_mean(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_sum_square(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """Compute the sum of squares along `axes`."""
        from ....reduction._functional import reduce_sum_square

        return reduce_sum_square(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_l1(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """Compute the L1 norm (sum of absolute values) along `axes`."""
        from ....reduction._functional import reduce_l1

        return reduce_l1(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_l2(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """Compute the L2 norm along `axes`."""
        from ....reduction._functional import reduce_l2

        return reduce_l2(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_log_sum(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """Compute the natural log of the sum along `axes`."""
        from ....reduction._functional import reduce_log_sum

        return reduce_log_sum(self, axes=axes, keep_dimensions=keep_dimensions)

    def reduce_log_sum_exp(
        self: ITensor,
        axes: Optional[Sequence[int]] = None,
        keep_dimensions: bool = False,
    ) -> "ITensor":
        """
        Compute ``log(sum(exp(x)))`` along `axes`.

        Notes
        -----
        Not numerically stabilized: inputs large enough to overflow ``exp``
        produce ``inf``.
        """
        from ....reduction._functional import reduce_log_sum_exp

        return reduce_log_sum_exp(self, axes=axes, keep_dimensions=keep_dimensions)
