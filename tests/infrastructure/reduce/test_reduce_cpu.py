import itertools
import operator
import unittest

import numpy as np

from keyreduce.domain._errors import ArityError, ShapeError
from keyreduce.domain._reduction import Reducer
from keyreduce.infrastructure.ops.reduce_cpu import (
    build_reduce_descriptor,
    reduce_cpu,
)
from keyreduce.infrastructure.tensor._tensor import Tensor

SUM = Reducer(name="sum", combine=operator.add, identity=0)


class _TensorFactoryMixin:
    def _tensor_from_numpy(self, arr) -> Tensor:
        arr = np.asarray(arr, dtype=np.float32)
        t = Tensor(arr.shape)
        t.copy_from_numpy(arr)
        return t


class TestReduceDescriptor(unittest.TestCase):
    def test_descriptor_fields(self):
        d = build_reduce_descriptor((2, 3, 4, 5), (3, 1))
        self.assertEqual(d.axes, (1, 3))
        self.assertEqual(d.reduce_dims, (3, 5))
        self.assertEqual(d.reduce_strides, (5, 1))
        self.assertEqual(d.output_shape, (2, 1, 4, 1))
        self.assertEqual(d.reduce_elements, 15)

    def test_strides_right_to_left_product(self):
        d = build_reduce_descriptor((2, 3, 4), (0, 1, 2))
        self.assertEqual(d.reduce_strides, (12, 4, 1))

    def test_empty_axis_set(self):
        d = build_reduce_descriptor((2, 3), ())
        self.assertEqual(d.reduce_dims, ())
        self.assertEqual(d.reduce_strides, ())
        self.assertEqual(d.reduce_elements, 1)
        self.assertEqual(d.output_shape, (2, 3))

    def test_reduce_offsets_decomposition(self):
        d = build_reduce_descriptor((2, 3, 4), (0, 2))
        self.assertEqual(d.reduce_offsets(0), (0, 0))
        self.assertEqual(d.reduce_offsets(5), (1, 1))
        self.assertEqual(d.reduce_offsets(7), (1, 3))

    def test_input_location_overwrites_reduced_axes_only(self):
        d = build_reduce_descriptor((2, 3, 4), (0, 2))
        out_loc = (0, 2, 0)
        self.assertEqual(d.input_location(out_loc, 6), (1, 2, 2))
        # the output location itself is never modified
        self.assertEqual(out_loc, (0, 2, 0))

    def test_descriptor_is_immutable(self):
        d = build_reduce_descriptor((2, 3), (1,))
        with self.assertRaises(Exception):
            d.axes = (0,)


class TestReduceCpuScenarios(unittest.TestCase, _TensorFactoryMixin):
    def setUp(self):
        self.x = self._tensor_from_numpy([[1, 2, 3], [4, 5, 6]])

    def test_sum_axis1_squeezed(self):
        y = reduce_cpu(self.x, SUM, axes=[1])
        self.assertEqual(y.shape, (2,))
        self.assertTrue(np.allclose(y.to_numpy(), [6, 15]))

    def test_max_axis0_keep_dimensions(self):
        y = reduce_cpu(self.x, max, axes=[0], keep_dimensions=True)
        self.assertEqual(y.shape, (1, 3))
        self.assertTrue(np.allclose(y.to_numpy(), [[4, 5, 6]]))

    def test_all_axes_collapse_to_scalar(self):
        y = reduce_cpu(self.x, SUM)
        self.assertEqual(y.shape, ())
        self.assertEqual(y.item(), 21.0)

    def test_all_axes_keep_dimensions_gives_all_ones(self):
        y = reduce_cpu(self.x, SUM, keep_dimensions=True)
        self.assertEqual(y.shape, (1, 1))
        self.assertEqual(y.item(), 21.0)

    def test_axis_order_does_not_matter(self):
        a = reduce_cpu(self.x, SUM, axes=(0, 1))
        b = reduce_cpu(self.x, SUM, axes=(1, 0))
        self.assertEqual(a.item(), b.item())

    def test_empty_axes_is_identity_pass_through(self):
        y = reduce_cpu(self.x, SUM, axes=(), keep_dimensions=True)
        self.assertEqual(y.shape, (2, 3))
        self.assertTrue(np.array_equal(y.to_numpy(), self.x.to_numpy()))

    def test_rank_zero_input(self):
        s = self._tensor_from_numpy(3.25)
        y = reduce_cpu(s, SUM)
        self.assertEqual(y.shape, ())
        self.assertEqual(y.item(), 3.25)
        y = reduce_cpu(s, SUM, axes=())
        self.assertEqual(y.item(), 3.25)

    def test_squeeze_removes_unreduced_size_one_axes(self):
        x = self._tensor_from_numpy(np.ones((1, 3, 4)))
        y = reduce_cpu(x, SUM, axes=(2,))
        self.assertEqual(y.shape, (3,))
        y_keep = reduce_cpu(x, SUM, axes=(2,), keep_dimensions=True)
        self.assertEqual(y_keep.shape, (1, 3, 1))


class TestReduceCpuContracts(unittest.TestCase, _TensorFactoryMixin):
    def test_fold_order_is_ascending_reduce_index(self):
        x = self._tensor_from_numpy(np.arange(24).reshape(2, 3, 4))
        seen = []

        def record(acc, value):
            if not seen:
                seen.append(float(acc))
            seen.append(float(value))
            return value

        reduce_cpu(x, record, axes=(0, 2), keep_dimensions=True)
        # first output location (0, 0, 0): reduce index r -> (r // 4, r % 4)
        expected = [float(i * 12 + j) for i in range(2) for j in range(4)]
        self.assertEqual(seen[:8], expected)

    def test_input_is_not_modified(self):
        arr = np.random.randn(3, 4).astype(np.float32)
        x = self._tensor_from_numpy(arr)
        _ = reduce_cpu(x, SUM, axes=(0,))
        self.assertTrue(np.array_equal(x.to_numpy(), arr))

    def test_output_does_not_alias_input(self):
        x = self._tensor_from_numpy([[1.0, 2.0]])
        y = reduce_cpu(x, SUM, axes=(), keep_dimensions=True)
        y.set_value_by_index(0, 100.0)
        self.assertEqual(x.get_value_by_index(0), 1.0)

    def test_output_keeps_input_dtype(self):
        x = Tensor.from_numpy([[1, 2], [3, 4]], dtype=np.int32)
        y = reduce_cpu(x, SUM, axes=(1,))
        self.assertEqual(y.dtype, np.int32)
        self.assertTrue(np.array_equal(y.to_numpy(), [3, 7]))

    def test_promoting_reducer_yields_float_for_int_input(self):
        mean = Reducer(
            name="mean",
            combine=operator.add,
            finalize=lambda acc, n: acc / n,
            promotes_to_float=True,
        )
        x = Tensor.from_numpy([1, 2], dtype=np.int64)
        y = reduce_cpu(x, mean)
        self.assertEqual(y.dtype, np.float64)
        self.assertEqual(y.item(), 1.5)

    def test_matches_numpy_for_every_axis_subset(self):
        rng = np.random.default_rng(0)
        arr = rng.standard_normal((2, 3, 1, 4)).astype(np.float32)
        x = self._tensor_from_numpy(arr)
        for k in range(0, arr.ndim + 1):
            for axes in itertools.combinations(range(arr.ndim), k):
                with self.subTest(axes=axes):
                    y = reduce_cpu(x, SUM, axes=axes, keep_dimensions=True)
                    ref = np.sum(arr, axis=axes, keepdims=True)
                    self.assertEqual(y.shape, ref.shape)
                    self.assertTrue(np.allclose(y.to_numpy(), ref, atol=1e-5))

                    y_sq = reduce_cpu(x, SUM, axes=axes)
                    self.assertEqual(
                        y_sq.shape, tuple(d for d in ref.shape if d != 1)
                    )

    def test_empty_reduced_axis_uses_identity(self):
        x = Tensor((2, 0))
        y = reduce_cpu(x, SUM, axes=(1,))
        self.assertEqual(y.shape, (2,))
        self.assertTrue(np.array_equal(y.to_numpy(), [0.0, 0.0]))


class TestReduceCpuErrors(unittest.TestCase, _TensorFactoryMixin):
    def setUp(self):
        self.x = self._tensor_from_numpy([[1, 2, 3], [4, 5, 6]])

    def test_invalid_axis(self):
        with self.assertRaises(ShapeError):
            reduce_cpu(self.x, SUM, axes=[2])

    def test_duplicate_axis(self):
        with self.assertRaises(ShapeError):
            reduce_cpu(self.x, SUM, axes=[0, 0])

    def test_empty_reduced_axis_without_identity(self):
        with self.assertRaises(ArityError):
            reduce_cpu(Tensor((3, 0)), max, axes=(1,))


class TestReduceCpuLogging(unittest.TestCase, _TensorFactoryMixin):
    def test_descriptor_logged_at_debug(self):
        x = self._tensor_from_numpy(np.ones((2, 3)))
        with self.assertLogs("keyreduce.infrastructure.ops.reduce_cpu", level="DEBUG") as cm:
            reduce_cpu(x, SUM, axes=(1,))
        self.assertTrue(any("reduce_dims=(3,)" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
