import pathlib
import sys
import unittest

import numpy as np

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sigbase import ScalarConversionError, Signal, SignalConfig, SignalIndexError  # noqa: E402


class ConstructionTest(unittest.TestCase):
    def test_from_list(self):
        sig = Signal.from_list([1.0, 2.0, 3.0, 4.0, 5.0])
        self.assertEqual(len(sig), 5)
        self.assertEqual(sig.to_list(), [1.0, 2.0, 3.0, 4.0, 5.0])

    def test_from_elem(self):
        sig = Signal.from_elem(3.14, 3)
        self.assertEqual(sig.to_list(), [3.14, 3.14, 3.14])

    def test_from_len_fn(self):
        sig = Signal.from_len_fn(5, lambda i: i * 2.0)
        self.assertEqual(sig.to_list(), [0.0, 2.0, 4.0, 6.0, 8.0])

    def test_from_iter_accepts_ints_and_numpy_scalars(self):
        sig = Signal.from_iter(i * 2 for i in range(3))
        self.assertEqual(sig.to_list(), [0.0, 2.0, 4.0])
        sig = Signal.from_iter([np.int32(1), np.float32(0.5)])
        self.assertEqual(sig.to_list(), [1.0, 0.5])

    def test_from_iter_rejects_text(self):
        with self.assertRaises(ScalarConversionError):
            Signal.from_iter([1.0, "two"])

    def test_zeros_and_ones(self):
        self.assertEqual(Signal.zeros(3).to_list(), [0.0, 0.0, 0.0])
        self.assertEqual(Signal.ones(3).to_list(), [1.0, 1.0, 1.0])
        self.assertEqual(len(Signal.zeros(0)), 0)

    def test_negative_length_rejected(self):
        with self.assertRaises(ValueError):
            Signal.zeros(-1)

    def test_linspace(self):
        sig = Signal.linspace(0.0, 1.0, 5)
        np.testing.assert_allclose(sig.as_array(), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_arange(self):
        sig = Signal.arange(0.0, 1.0, 0.25)
        self.assertEqual(sig.to_list(), [0.0, 0.25, 0.5, 0.75])
        with self.assertRaises(ValueError):
            Signal.arange(0.0, 1.0, 0.0)

    def test_from_list_rejects_values_that_are_not_numbers(self):
        for values in ([1.0, None], ["1"], ["1", "2"], [1.0, [2.0]]):
            with self.subTest(values=values):
                with self.assertRaises(ScalarConversionError):
                    Signal.from_list(values)
        with self.assertRaises(ScalarConversionError):
            Signal([1.0, None])

    def test_from_list_accepts_mixed_numeric_types(self):
        sig = Signal.from_list([1, 2.5, np.int8(3), np.float32(0.5), True])
        self.assertEqual(sig.to_list(), [1.0, 2.5, 3.0, 0.5, 1.0])

    def test_constructor_copies_other_signal(self):
        original = Signal.from_list([1.0, 2.0])
        dup = Signal(original)
        dup[0] = 5.0
        self.assertEqual(original.to_list(), [1.0, 2.0])
        self.assertEqual(dup.to_list(), [5.0, 2.0])

    def test_multi_dimensional_input_rejected(self):
        with self.assertRaises(ValueError):
            Signal([[1.0, 2.0], [3.0, 4.0]])

    def test_constructor_copies_input(self):
        data = np.array([1.0, 2.0])
        sig = Signal(data)
        data[0] = 99.0
        self.assertEqual(sig[0], 1.0)


class IndexingTest(unittest.TestCase):
    def setUp(self):
        self.sig = Signal.from_list([10.0, 20.0, 30.0, 40.0])

    def test_negative_index_equivalence(self):
        n = len(self.sig)
        for i in range(n):
            self.assertEqual(self.sig[i], self.sig[i - n])

    def test_last_element(self):
        self.assertEqual(self.sig[-1], 40.0)
        self.assertEqual(self.sig[-4], 10.0)

    def test_out_of_range_raises(self):
        for bad in (4, 100, -5):
            with self.assertRaises(SignalIndexError):
                self.sig[bad]
        # Still an IndexError for callers using the builtin hierarchy
        with self.assertRaises(IndexError):
            self.sig[4]

    def test_empty_signal_has_no_valid_index(self):
        with self.assertRaises(SignalIndexError):
            Signal.zeros(0)[0]

    def test_non_integer_index_raises_type_error(self):
        with self.assertRaises(TypeError):
            self.sig[1.5]

    def test_numpy_integer_index(self):
        self.assertEqual(self.sig[np.int64(-2)], 30.0)

    def test_setitem_with_negative_index(self):
        self.sig[-1] = 5
        self.assertEqual(self.sig.to_list(), [10.0, 20.0, 30.0, 5.0])
        with self.assertRaises(SignalIndexError):
            self.sig[7] = 1.0


class AccessorTest(unittest.TestCase):
    def test_as_array_is_read_only(self):
        sig = Signal.from_list([1.0, 2.0])
        view = sig.as_array()
        with self.assertRaises(ValueError):
            view[0] = 5.0

    def test_as_mut_array_writes_through(self):
        sig = Signal.from_list([1.0, 2.0])
        sig.as_mut_array()[1] = 7.0
        self.assertEqual(sig[1], 7.0)

    def test_iteration_yields_floats(self):
        sig = Signal.from_list([1, 2, 3])
        self.assertEqual(list(sig), [1.0, 2.0, 3.0])
        self.assertTrue(all(isinstance(v, float) for v in sig))

    def test_map_returns_new_signal(self):
        sig = Signal.from_list([1.0, 2.0, 3.0])
        squared = sig.map(lambda v: v * v)
        self.assertEqual(squared.to_list(), [1.0, 4.0, 9.0])
        self.assertEqual(sig.to_list(), [1.0, 2.0, 3.0])

    def test_map_inplace(self):
        sig = Signal.from_list([1.0, 2.0, 3.0])
        sig.map_inplace(lambda v: v + 1)
        self.assertEqual(sig.to_list(), [2.0, 3.0, 4.0])

    def test_map_inplace_failure_leaves_signal_unchanged(self):
        sig = Signal.from_list([1.0, 2.0, 3.0])

        def scale_until_three(value):
            if value == 3.0:
                raise RuntimeError("cannot map 3.0")
            return value * 10.0

        with self.assertRaises(RuntimeError):
            sig.map_inplace(scale_until_three)
        self.assertEqual(sig.to_list(), [1.0, 2.0, 3.0])

        with self.assertRaises(ScalarConversionError):
            sig.map_inplace(lambda v: None if v > 1.0 else v)
        self.assertEqual(sig.to_list(), [1.0, 2.0, 3.0])

    def test_copy_is_independent(self):
        sig = Signal.from_list([1.0, 2.0])
        dup = sig.copy()
        dup[0] = 0.0
        self.assertEqual(sig[0], 1.0)


class ComparisonAndDisplayTest(unittest.TestCase):
    def test_equality(self):
        self.assertEqual(Signal.from_list([1, 2]), Signal.from_list([1.0, 2.0]))
        self.assertNotEqual(Signal.from_list([1, 2]), Signal.from_list([1, 2, 3]))
        self.assertNotEqual(Signal.from_list([1, 2]), [1.0, 2.0])

    def test_signals_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Signal.zeros(1))

    def test_allclose_uses_config_tolerances(self):
        a = Signal.from_list([1.0, 2.0])
        b = Signal.from_list([1.0, 2.0 + 1e-6])
        self.assertFalse(a.allclose(b))
        self.assertTrue(a.allclose(b, config=SignalConfig(atol=1e-5)))
        self.assertFalse(a.allclose(Signal.from_list([1.0])))

    def test_str(self):
        sig = Signal.from_list([1.0, 2.0, 3.0])
        self.assertEqual(str(sig), "Signal[len = 3, [1.0, 2.0, 3.0]]")
        self.assertEqual(repr(sig), "Signal([1.0, 2.0, 3.0])")

    def test_str_summarises_long_signals(self):
        sig = Signal.arange(0, 10)
        text = sig.format(SignalConfig(display_threshold=5, display_edge_items=2))
        self.assertEqual(text, "Signal[len = 10, [0.0, 1.0, ..., 8.0, 9.0]]")


if __name__ == "__main__":
    unittest.main()
