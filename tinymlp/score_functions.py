import numpy

from tinymlp.core.exception import ShapeMismatchError


def _residuals(network, inputs, targets):
    if len(inputs) != len(targets):
        msg = "Got {} inputs but {} targets"
        raise ShapeMismatchError(msg.format(len(inputs), len(targets)))

    if len(inputs) == 0:
        raise ValueError("Can't score an empty dataset")

    outputs = numpy.array([network.feed_forward(x) for x in inputs])
    targets = numpy.asarray(targets, dtype=outputs.dtype)

    if outputs.shape != targets.shape:
        msg = "Network outputs have shape {} but targets have shape {}"
        raise ShapeMismatchError(msg.format(outputs.shape, targets.shape))

    return outputs - targets


def mean_squared_error(network, inputs, targets):
    """ Mean over examples and outputs of :code:`(output - target)**2`
    """
    diff = _residuals(network, inputs, targets)
    return float((diff ** 2).mean())


def mean_absolute_error(network, inputs, targets):
    """ Mean over examples and outputs of :code:`|output - target|`
    """
    diff = _residuals(network, inputs, targets)
    return float(numpy.abs(diff).mean())
