""" Reading and writing networks as JSON

The format mirrors the in-memory structure::

    {
        "layers": [
            {"neurons": [{"bias": 0.1, "weights": [0.5, -0.2]}, ...]},
            ...
        ]
    }

There is no version field. Loading checks structure only (keys, lists,
numbers); widths of adjacent layers are not checked.
"""
import json
import logging
import numbers
import os

from tinymlp.core.exception import NetworkIOError, SerializationError
from tinymlp.core.layer import Layer
from tinymlp.core.neuron import Neuron


logger = logging.getLogger(__name__)

LAYERS_KEY = 'layers'
NEURONS_KEY = 'neurons'
BIAS_KEY = 'bias'
WEIGHTS_KEY = 'weights'


def layers_to_dict(layers):
    # float() of a float32 is exact, and so is the reverse cast on load
    return {
        LAYERS_KEY: [
            {NEURONS_KEY: [
                {BIAS_KEY: float(neuron.bias),
                 WEIGHTS_KEY: [float(w) for w in neuron.weights]}
                for neuron in layer.neurons
            ]}
            for layer in layers
        ]
    }


def _expect(value, kind, where):
    if kind is numbers.Real:
        ok = isinstance(value, numbers.Real) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        msg = "{} should be {} but was {}"
        raise SerializationError(
            msg.format(where, kind.__name__, type(value).__name__))
    return value


def _get(record, key, kind, where):
    _expect(record, dict, where)
    if key not in record:
        msg = "{} is missing the `{}` key"
        raise SerializationError(msg.format(where, key))
    return _expect(record[key], kind, "{}.{}".format(where, key))


def layers_from_dict(data):
    """ Build layers from the structure produced by :func:`layers_to_dict`

    Raises
    ------
    SerializationError
        If the structure is wrong (missing keys, non-list or non-numeric
        values, no layers at all)
    """
    layer_records = _get(data, LAYERS_KEY, list, 'network')
    if not layer_records:
        raise SerializationError("network contains no layers")

    layers = []
    for ilayer, layer_record in enumerate(layer_records):
        where = "layers[{}]".format(ilayer)
        neuron_records = _get(layer_record, NEURONS_KEY, list, where)

        neurons = []
        for ineuron, neuron_record in enumerate(neuron_records):
            where = "layers[{}].neurons[{}]".format(ilayer, ineuron)
            bias = _get(neuron_record, BIAS_KEY, numbers.Real, where)
            weights = _get(neuron_record, WEIGHTS_KEY, list, where)
            for iweight, weight in enumerate(weights):
                _expect(weight, numbers.Real,
                        "{}.weights[{}]".format(where, iweight))
            try:
                neurons.append(Neuron(bias=bias, weights=weights))
            except (OverflowError, ValueError) as err:
                msg = "{} holds a value that isn't a float32: {}"
                raise SerializationError(msg.format(where, err)) from err

        try:
            layers.append(Layer(neurons))
        except ValueError as err:
            msg = "layers[{}] is malformed: {}"
            raise SerializationError(msg.format(ilayer, err)) from err

    return layers


def write_layers(layers, path):
    """ Encode `layers` as JSON and write them to `path`
    """
    path = os.path.abspath(path)

    try:
        text = json.dumps(layers_to_dict(layers), allow_nan=False)
    except (TypeError, ValueError) as err:
        msg = "Failed to serialize network data for {}: {}"
        raise SerializationError(msg.format(path, err), path=path) from err

    try:
        with open(path, 'w') as f:
            f.write(text)
    except OSError as err:
        msg = "Failed to write network data to {}: {}"
        raise NetworkIOError(msg.format(path, err), path=path) from err

    logger.debug("Saved network to {}".format(path))


def read_layers(path):
    """ Read layers from a JSON file written by :func:`write_layers`
    """
    path = os.path.abspath(path)

    try:
        with open(path, 'r') as f:
            text = f.read()
    except OSError as err:
        msg = "Failed to read {}: {}"
        raise NetworkIOError(msg.format(path, err), path=path) from err

    try:
        data = json.loads(text)
    except ValueError as err:
        msg = "Failed to parse JSON in {}: {}"
        raise SerializationError(msg.format(path, err), path=path) from err

    try:
        layers = layers_from_dict(data)
    except SerializationError as err:
        msg = "Malformed network data in {}: {}"
        raise SerializationError(msg.format(path, err), path=path) from err

    logger.debug("Loaded network from {}".format(path))

    return layers
