import unittest

import numpy

from tinymlp.data.sums import make_dataset


class TestSums(unittest.TestCase):

    def test_shapes_and_dtype(self):
        inputs, targets = make_dataset(
            50, random_state=numpy.random.RandomState(1234))

        self.assertEqual(inputs.shape, (50, 2))
        self.assertEqual(targets.shape, (50, 1))
        self.assertEqual(inputs.dtype, numpy.float32)
        self.assertEqual(targets.dtype, numpy.float32)

    def test_targets_are_sums(self):
        inputs, targets = make_dataset(
            100, scale=10.0, random_state=numpy.random.RandomState(1234))

        numpy.testing.assert_allclose(inputs.sum(axis=1), targets[:, 0],
                                      rtol=1e-5, atol=1e-6)
        self.assertTrue((numpy.abs(inputs) <= 1.0).all())

    def test_reproducible(self):
        inputs1, _ = make_dataset(10, random_state=numpy.random.RandomState(5))
        inputs2, _ = make_dataset(10, random_state=numpy.random.RandomState(5))

        numpy.testing.assert_array_equal(inputs1, inputs2)

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            make_dataset(-1)

        with self.assertRaises(ValueError):
            make_dataset(10, scale=0)

        with self.assertRaises(ValueError):
            make_dataset(10, low=1, high=1)


if __name__ == '__main__':
    unittest.main()
