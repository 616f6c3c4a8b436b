from collections import namedtuple
import json
import os

import numpy

from tinymlp.core.exception import NetworkIOError, SerializationError


_FIELDS = (
    ('input_size', 2),
    ('output_size', 1),
    ('hidden_layer_sizes', (4,)),
    ('epochs', 10),
    ('batch_size', 100),
    ('learning_rate', 0.1),
    ('scale', 10.0),
    ('seed', None),
    ('backprop_rule', 'chain'),
    ('train_data', 'train_data.json'),
    ('target_data', 'target_data.json'),
    ('model_filename', 'recent.json'),
)


class TrainingConfig(namedtuple('TrainingConfig',
                                [name for name, _ in _FIELDS])):
    """ Architecture, hyperparameters and filenames for a training run

    The defaults are the stock "sum of two scalars" run: a
    2 => 4 => 1 network trained for 10 epochs with batches of 100 and a
    learning rate of 0.1.
    """
    __slots__ = ()

    def random_state(self):
        """ A RandomState seeded with `seed` (unseeded when `seed` is None)
        """
        return numpy.random.RandomState(self.seed)


DEFAULT_CONFIG = TrainingConfig(**dict(_FIELDS))


def load_config(path=None, **overrides):
    """ Build a TrainingConfig from the defaults, then the JSON object in
    `path` (if given), then `overrides`

    Raises
    ------
    ValueError
        If a key isn't a TrainingConfig field

    NetworkIOError, SerializationError
        If `path` can't be read or isn't a JSON object
    """
    values = {}

    if path is not None:
        path = os.path.abspath(path)
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except OSError as err:
            msg = "Unable to read config file {}: {}"
            raise NetworkIOError(msg.format(path, err), path=path) from err
        except ValueError as err:
            msg = "Failed to parse JSON in {}: {}"
            raise SerializationError(msg.format(path, err), path=path) from err

        if not isinstance(data, dict):
            msg = "Config file {} should hold a JSON object"
            raise SerializationError(msg.format(path), path=path)

        values.update(data)

    values.update(overrides)

    unknown = sorted(set(values) - set(TrainingConfig._fields))
    if unknown:
        msg = "Unknown config keys: {}"
        raise ValueError(msg.format(", ".join(unknown)))

    if 'hidden_layer_sizes' in values:
        values['hidden_layer_sizes'] = tuple(values['hidden_layer_sizes'])

    return DEFAULT_CONFIG._replace(**values)
