import unittest

import numpy as np

from rational import InvalidArgumentError, Rational, as_rational_array, zeros, zeros_like


class NumpyInteropTests(unittest.TestCase):
    @staticmethod
    def raw(values):
        return [(item.numerator, item.denominator) for item in values]

    def test_list_operands_broadcast_without_reducing(self):
        sums = Rational(1, 6) + [Rational(1, 2), 2]
        self.assertEqual(sums.dtype, object)
        self.assertEqual(self.raw(sums), [(8, 12), (13, 6)])

        diffs = [Rational(1, 2), 2] - Rational(1, 3)
        self.assertEqual(self.raw(diffs), [(1, 6), (5, 3)])

        quotients = (1, Rational(1, 2)) / Rational(1, 3)
        self.assertEqual(self.raw(quotients), [(3, 1), (3, 2)])

    def test_array_on_the_right(self):
        result = Rational(1, 4) + np.array([0.25, 0.5])
        self.assertEqual(result.dtype, object)
        self.assertEqual(self.raw(result), [(8, 16), (6, 8)])

        quotients = Rational(1, 1) / np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        self.assertEqual(list(quotients), [Rational(2, 1), Rational(3, 1)])

    def test_array_on_the_left_dispatches_through_ufuncs(self):
        diffs = np.array([1.0, 2.0]) - Rational(1, 3)
        self.assertEqual(self.raw(diffs), [(2, 3), (5, 3)])

        quotients = np.array([1, 2]) / Rational(1, 3)
        self.assertEqual(self.raw(quotients), [(3, 1), (6, 1)])

        shifted = np.add(np.array([Rational(1, 2), Rational(3, 4)], dtype=object), Rational(1, 4))
        np.testing.assert_allclose([float(item) for item in shifted], [0.75, 1.0])

    def test_scalar_ufuncs(self):
        negated = np.negative(Rational(2, 4))
        self.assertIsInstance(negated, Rational)
        self.assertEqual((negated.numerator, negated.denominator), (-2, 4))
        self.assertEqual(np.multiply(Rational(1, 2), Rational(2, 3)), Rational(1, 3))

    def test_ufunc_out_argument_rejected(self):
        values = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        with self.assertRaises(NotImplementedError):
            np.add(values, Rational(1, 6), out=np.empty(2, dtype=object))

    def test_numpy_integer_components(self):
        value = Rational(np.int64(6), np.int32(-4))
        self.assertIs(type(value.numerator), int)
        self.assertIs(type(value.denominator), int)
        self.assertEqual(str(value), "-3/2")
        with self.assertRaises(InvalidArgumentError):
            Rational(np.int64(1), np.int64(0))
        with self.assertRaises(TypeError):
            Rational(np.float64(1.5), 1)

    def test_numpy_integer_operands(self):
        total = Rational(1, 2) + np.int64(1)
        self.assertEqual((total.numerator, total.denominator), (3, 2))
        self.assertEqual(np.int64(1) + Rational(1, 2), Rational(3, 2))
        self.assertEqual(Rational(4, 2), np.int16(2))

class RationalArrayTests(unittest.TestCase):
    def test_zeros(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr))
        self.assertTrue(all(item == Rational(0, 1) for item in arr))
        with self.assertRaises(ValueError):
            zeros(-1)

    def test_as_rational_array(self):
        base = [Rational(1, 2), 0.25, 3]
        arr = as_rational_array(base)
        self.assertEqual(arr.shape, (3,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr))
        self.assertEqual(list(arr), [Rational(1, 2), Rational(1, 4), Rational(3, 1)])

        grid = as_rational_array(np.array([[1, 2], [3, 4]]))
        self.assertEqual(grid.shape, (2, 2))
        self.assertEqual(grid[1, 0], Rational(3, 1))

    def test_existing_rational_array_is_reused_without_copy(self):
        arr = np.array([Rational(1, 2)], dtype=object)
        self.assertIs(as_rational_array(arr, copy=False), arr)
        self.assertIsNot(as_rational_array(arr), arr)

    def test_zeros_like(self):
        arr_like = zeros_like(np.ones((2, 3)))
        self.assertEqual(arr_like.shape, (2, 3))
        self.assertTrue(all(float(item) == 0.0 for item in arr_like.flat))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
