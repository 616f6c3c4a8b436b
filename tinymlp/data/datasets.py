import json
import logging
import os

import numpy

from tinymlp.core.exception import (
    NetworkIOError, SerializationError, ShapeMismatchError)
from tinymlp.core.neuron import DTYPE


logger = logging.getLogger(__name__)


def load_dataset(path):
    """ Load a dataset file holding a JSON array of arrays of numbers

    Parameters
    ----------
    path: str
        The dataset filename

    Returns
    -------
    data: numpy.ndarray, shape=(n_examples, n_values), dtype=float32
        One example per row

    Raises
    ------
    NetworkIOError
        If the file doesn't exist or can't be read

    SerializationError
        If the contents aren't a JSON array of equal-length numeric arrays
    """
    path = os.path.abspath(path)

    try:
        with open(path, 'r') as f:
            rows = json.load(f)
    except OSError as err:
        msg = "Unable to read dataset file {}: {}"
        raise NetworkIOError(msg.format(path, err), path=path) from err
    except ValueError as err:
        msg = "Failed to parse JSON in {}: {}"
        raise SerializationError(msg.format(path, err), path=path) from err

    if not isinstance(rows, list) or \
            not all(isinstance(row, list) for row in rows):
        msg = "Dataset {} should be an array of arrays"
        raise SerializationError(msg.format(path), path=path)

    if len(set(len(row) for row in rows)) > 1:
        msg = "Dataset {} has rows of differing lengths"
        raise SerializationError(msg.format(path), path=path)

    try:
        data = numpy.array(rows, dtype=DTYPE)
    except (OverflowError, TypeError, ValueError) as err:
        msg = "Dataset {} contains non-numeric values: {}"
        raise SerializationError(msg.format(path, err), path=path) from err

    if not rows:
        data = numpy.zeros((0, 0), dtype=DTYPE)
    elif data.ndim != 2:
        msg = "Dataset {} should hold numbers nested exactly two deep"
        raise SerializationError(msg.format(path), path=path)

    msg = "Loaded {} examples of width {} from {}"
    logger.info(msg.format(data.shape[0], data.shape[1], path))

    return data


def save_dataset(rows, path):
    """ Write `rows` (an array-like of shape (n_examples, n_values)) as a
    JSON array of arrays
    """
    path = os.path.abspath(path)
    data = numpy.asarray(rows, dtype=DTYPE)

    if data.ndim != 2:
        msg = "`rows` should be 2d but had {} dimensions"
        raise ValueError(msg.format(data.ndim))

    try:
        with open(path, 'w') as f:
            json.dump([[float(v) for v in row] for row in data], f)
    except OSError as err:
        msg = "Unable to write dataset file {}: {}"
        raise NetworkIOError(msg.format(path, err), path=path) from err

    msg = "Wrote {} examples to {}"
    logger.info(msg.format(data.shape[0], path))


def load_training_data(train_path, target_path):
    """ Load positionally aligned input and target datasets

    Returns
    -------
    inputs, targets: numpy.ndarray, numpy.ndarray

    Raises
    ------
    ShapeMismatchError
        If the two files hold a different number of examples
    """
    inputs = load_dataset(train_path)
    targets = load_dataset(target_path)

    if len(inputs) != len(targets):
        msg = "{} holds {} examples but {} holds {}"
        raise ShapeMismatchError(msg.format(
            train_path, len(inputs), target_path, len(targets)))

    return inputs, targets
