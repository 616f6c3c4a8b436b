import unittest

import matplotlib
matplotlib.use('Agg')  # noqa: E402
import matplotlib.pyplot as plt
import numpy

from tinymlp.core.network import Network
from tinymlp.data.sums import make_dataset
from tinymlp.visualize import plot_predictions


class TestVisualize(unittest.TestCase):

    def tearDown(self):
        plt.close('all')

    def test_plot_predictions_smoke_test(self):
        random_state = numpy.random.RandomState(1234)
        network = Network(2, 1, [3], random_state=random_state)
        inputs, targets = make_dataset(20, random_state=random_state)

        ax = plot_predictions(network, inputs, targets, scale=10.0)

        # The predictions and the ideal line
        self.assertEqual(len(ax.lines), 2)
        self.assertEqual(ax.get_xlabel(), 'target')


if __name__ == '__main__':
    unittest.main()
