import unittest

import numpy as np

from tinymlp import Network
from tinymlp.data.sums import make_dataset
from tinymlp.score_functions import mean_squared_error


class TestTrainSums(unittest.TestCase):

    def setUp(self):
        self.rs = np.random.RandomState(1234)
        self.inputs, self.targets = make_dataset(
            n_samples=1000, scale=10.0, random_state=self.rs)

    def test_linear_network_learns_sum(self):
        nnet = Network(2, 1, random_state=self.rs)

        nnet.train(self.inputs, self.targets, epochs=20, batch_size=100,
                   learning_rate=0.1, random_state=self.rs)

        neuron = nnet.layers[0].neurons[0]
        np.testing.assert_allclose(neuron.weights, [1., 1.], atol=0.05)
        self.assertLess(abs(neuron.bias), 0.05)

        result = nnet.feed_forward(np.array([3., 4.]) / 10.)[0] * 10.
        self.assertAlmostEqual(result, 7., places=1)

    def test_hidden_layer_network_error_decreases(self):
        nnet = Network(2, 1, [4], random_state=self.rs)

        before = mean_squared_error(nnet, self.inputs, self.targets)
        nnet.train(self.inputs, self.targets, epochs=10, batch_size=100,
                   learning_rate=0.01, random_state=self.rs)
        after = mean_squared_error(nnet, self.inputs, self.targets)

        self.assertLess(after, 0.5 * before)


if __name__ == '__main__':
    unittest.main()
