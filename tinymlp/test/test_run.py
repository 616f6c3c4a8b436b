import logging
import os
import shutil
import tempfile
import unittest

import numpy

from tinymlp.config import load_config
from tinymlp.core.layer import Layer
from tinymlp.core.network import Network
from tinymlp.core.neuron import Neuron
from tinymlp.data.datasets import save_dataset
from tinymlp.data.sums import make_dataset
from tinymlp.run import SAMPLE_PAIRS, predict_sums, run


class TestRun(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

        inputs, targets = make_dataset(
            200, random_state=numpy.random.RandomState(1234))

        self.config = load_config(
            epochs=5,
            batch_size=20,
            hidden_layer_sizes=(),
            seed=1234,
            train_data=os.path.join(self.tmp_dir, 'train_data.json'),
            target_data=os.path.join(self.tmp_dir, 'target_data.json'),
            model_filename=os.path.join(self.tmp_dir, 'recent.json'),
        )

        save_dataset(inputs, self.config.train_data)
        save_dataset(targets, self.config.target_data)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_predict_sums_exact_network(self):
        network = Network.from_layers(
            [Layer([Neuron(bias=0., weights=[1., 1.])])])

        results = predict_sums(network, pairs=[(3.0, 4.0)], scale=10.0)

        self.assertEqual(len(results), 1)
        a, b, result = results[0]
        self.assertAlmostEqual(a, 3.0, places=5)
        self.assertAlmostEqual(b, 4.0, places=5)
        self.assertAlmostEqual(result, 7.0, places=5)

    def test_run(self):
        with self.assertLogs('tinymlp', level='INFO') as cm:
            network, results = run(self.config)

        self.assertTrue(os.path.exists(self.config.model_filename))

        loaded = Network.load(self.config.model_filename)
        numpy.testing.assert_array_equal(
            loaded.layers[0].neurons[0].weights,
            network.layers[0].neurons[0].weights)

        self.assertEqual(len(results), len(SAMPLE_PAIRS))
        a, b, result = results[1]
        self.assertAlmostEqual(a, 3.0, places=5)
        self.assertAlmostEqual(b, 4.0, places=5)
        self.assertAlmostEqual(result, 7.0, places=1)

        self.assertTrue(any("Epoch" in line for line in cm.output))
        self.assertTrue(any(" + " in line and " = " in line
                            for line in cm.output))

    def test_run_missing_data(self):
        os.remove(self.config.train_data)

        with self.assertRaises(IOError):
            run(self.config)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    unittest.main()
