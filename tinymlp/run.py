import logging

import numpy

from tinymlp.config import DEFAULT_CONFIG
from tinymlp.core.network import Network
from tinymlp.data.datasets import load_training_data
from tinymlp.score_functions import mean_squared_error


logger = logging.getLogger(__name__)

# Unscaled (a, b) pairs whose sums are printed after training
SAMPLE_PAIRS = (
    (1.0, -2.2),
    (3.0, 4.0),
    (11.0, 89.0),
    (11111.0, 100000.0),
)


def predict_sums(network, pairs=SAMPLE_PAIRS, scale=10.0):
    """ Feed each scaled pair through `network` and undo the scaling

    Returns
    -------
    results: list of (float, float, float)
        Tuples of :code:`(a, b, predicted a + b)`
    """
    results = []
    for a, b in pairs:
        inputs = numpy.array([a, b], dtype=numpy.float32) / \
            numpy.float32(scale)
        output = network.feed_forward(inputs)
        results.append((float(inputs[0] * scale),
                        float(inputs[1] * scale),
                        float(output[0] * scale)))
    return results


def run(config=DEFAULT_CONFIG):
    """ Train a network on the dataset files named in `config`, save it,
    and log its predictions for :data:`SAMPLE_PAIRS`

    Parameters
    ----------
    config: TrainingConfig
        See :class:`tinymlp.config.TrainingConfig`

    Returns
    -------
    network, results: Network, list
        The trained network and the output of :func:`predict_sums`
    """
    random_state = config.random_state()

    network = Network(
        input_size=config.input_size,
        output_size=config.output_size,
        hidden_layer_sizes=config.hidden_layer_sizes,
        random_state=random_state,
        backprop_rule=config.backprop_rule)

    logger.info("Created {!r}".format(network))

    inputs, targets = load_training_data(config.train_data,
                                         config.target_data)

    network.train(inputs, targets,
                  epochs=config.epochs,
                  batch_size=config.batch_size,
                  learning_rate=config.learning_rate,
                  random_state=random_state)

    if len(inputs) > 0:
        msg = "Training mean squared error: {:.6g}"
        logger.info(msg.format(mean_squared_error(network, inputs, targets)))

    network.save(config.model_filename)
    logger.info("Saved network to {}".format(config.model_filename))

    results = []
    if config.input_size == 2 and config.output_size >= 1:
        results = predict_sums(network, scale=config.scale)
        for a, b, result in results:
            logger.info("{!r} + {!r} = {!r}".format(a, b, result))

    return network, results
