import logging

import numpy

from tinymlp.core.exception import ShapeMismatchError
from tinymlp.core.layer import Layer
from tinymlp.core.logger import progress
from tinymlp.core.neuron import DTYPE, as_vector, validate_size
from tinymlp.core.serialization import read_layers, write_layers


logger = logging.getLogger(__name__)

CHAIN_RULE = 'chain'
REFERENCE_RULE = 'reference'
BACKPROP_RULES = (CHAIN_RULE, REFERENCE_RULE)


class Network:
    """ A stack of fully connected linear layers trained by per-example
    stochastic gradient descent.

    For a single input vector `x`, the computation chain is::

        h_0 = x
        h_i = [bias_k + dot(weights_k, h_{i-1}) for each neuron k of layer i]
        output = h_n

    Two rules are available for distributing the output error over the
    layers during :meth:`back_prop`:

    'chain' (default)
        Each layer is fed the vector that went into it, and the error
        seen by layer i-1 is the transposed weights of layer i applied to
        the error of layer i (taken before layer i is updated).

    'reference'
        The legacy rule, kept to reproduce earlier models. The output
        error is reused unchanged by every layer. Each layer is fed the
        output of the layer before it, except the first layer, which is
        fed the same vector as the output layer. All pairings silently
        truncate to the shorter sequence.
    """
    def __init__(self, input_size, output_size, hidden_layer_sizes=(),
                 random_state=None, backprop_rule=CHAIN_RULE):
        """
        Parameters
        ----------
        input_size: int
            Number of inputs to the first layer.

        output_size: int
            Number of neurons in the last layer.

        hidden_layer_sizes: sequence of int, default=()
            Number of neurons in each hidden layer, in order.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        backprop_rule: str, default='chain'
            Either 'chain' or 'reference'; see the class docstring.
        """
        input_size = validate_size(input_size, 'input_size')
        output_size = validate_size(output_size, 'output_size')
        hidden_layer_sizes = [validate_size(size, 'hidden_layer_sizes')
                              for size in hidden_layer_sizes]

        rs = numpy.random.RandomState() if random_state is None \
            else random_state

        layers = []
        prev_size = input_size
        for size in hidden_layer_sizes:
            layers.append(Layer.random(size, prev_size, random_state=rs))
            prev_size = size
        layers.append(Layer.random(output_size, prev_size, random_state=rs))

        self._init(layers, backprop_rule, input_size=input_size)

    def _init(self, layers, backprop_rule, input_size=None):
        if backprop_rule not in BACKPROP_RULES:
            msg = "Unknown `backprop_rule` {!r}; should be one of {}"
            raise ValueError(msg.format(backprop_rule, BACKPROP_RULES))

        if not layers:
            raise ValueError("A network needs at least one layer")

        self.layers = list(layers)
        self.backprop_rule = backprop_rule

        # Loaded networks take the width from the first layer's weights
        if input_size is None:
            input_size = self.layers[0].input_width
        self._input_size = input_size

    @classmethod
    def from_layers(cls, layers, backprop_rule=CHAIN_RULE):
        """ Wrap existing layers (e.g., loaded from a file) in a network.
        The widths of adjacent layers are not checked here; a mismatch
        surfaces as a ShapeMismatchError when the network is evaluated.
        """
        network = cls.__new__(cls)
        network._init(layers, backprop_rule)
        return network

    @classmethod
    def load(cls, path, backprop_rule=CHAIN_RULE):
        """ Load a network saved with :meth:`save`

        Raises
        ------
        NetworkIOError
            If the file can't be read

        SerializationError
            If the file isn't a structurally valid network
        """
        return cls.from_layers(read_layers(path), backprop_rule=backprop_rule)

    def save(self, path):
        """ Write the layers, neurons, weights and biases to `path` as JSON

        Raises
        ------
        NetworkIOError
            If the file can't be written

        SerializationError
            If the parameters can't be encoded (e.g., they are NaN)
        """
        write_layers(self.layers, path)

    def __repr__(self):
        return "<Network layer_sizes=%s>" % (self.layer_sizes,)

    @property
    def input_size(self):
        return self._input_size

    @property
    def output_size(self):
        return self.layers[-1].output_width

    @property
    def layer_sizes(self):
        """ The input size followed by each layer's neuron count
        """
        return [self.input_size] + [len(layer) for layer in self.layers]

    def _check_inputs(self, inputs):
        inputs = as_vector(inputs)
        if len(inputs) != self.input_size:
            msg = "Got {} inputs but the network takes {}"
            raise ShapeMismatchError(msg.format(len(inputs), self.input_size))
        return inputs

    def feed_forward(self, inputs):
        """ Thread `inputs` through every layer in order

        Returns
        -------
        outputs: numpy.ndarray, shape=(output_size,)

        Raises
        ------
        ShapeMismatchError
            If the number of inputs isn't the network's input size
        """
        outputs = self._check_inputs(inputs)
        for layer in self.layers:
            outputs = layer.evaluate(outputs)
        return outputs

    def back_prop(self, inputs, targets, learning_rate):
        """ Take a single gradient step on one (inputs, targets) example

        The output error is :code:`targets - outputs` from a forward pass
        with the current parameters. Every neuron is then updated with
        :code:`weights += error * feeding * learning_rate` and
        :code:`bias += error * learning_rate`, where the error and feeding
        vector of each layer depend on `backprop_rule`.
        """
        inputs = self._check_inputs(inputs)
        targets = as_vector(targets, name='targets')
        learning_rate = DTYPE(learning_rate)

        if self.backprop_rule == REFERENCE_RULE:
            self._back_prop_reference(inputs, targets, learning_rate)
        else:
            self._back_prop_chain(inputs, targets, learning_rate)

    def _back_prop_chain(self, inputs, targets, learning_rate):
        # layer_inputs[i] is the vector fed into layers[i]
        layer_inputs = [inputs]
        for layer in self.layers:
            layer_inputs.append(layer.evaluate(layer_inputs[-1]))
        outputs = layer_inputs.pop()

        if len(targets) != len(outputs):
            msg = "Got {} targets but the network has {} outputs"
            raise ShapeMismatchError(msg.format(len(targets), len(outputs)))

        errors = targets - outputs

        for index in reversed(range(len(self.layers))):
            layer = self.layers[index]

            # Must be computed before the layer's weights change
            upstream_errors = None
            if index > 0:
                upstream_errors = layer.propagate_error(errors)

            layer.update(errors, layer_inputs[index], learning_rate)
            errors = upstream_errors

    def _back_prop_reference(self, inputs, targets, learning_rate):
        activations = []
        layer_inputs = inputs
        for layer in self.layers:
            layer_inputs = layer.evaluate(layer_inputs)
            activations.append(layer_inputs)

        outputs = activations[-1]
        m = min(len(outputs), len(targets))
        errors = targets[:m] - outputs[:m]

        n_layers = len(self.layers)
        for idx, layer in enumerate(reversed(self.layers)):
            if n_layers == 1:
                feeding = inputs
            elif idx == n_layers - 1:
                feeding = activations[n_layers - 2]
            else:
                feeding = activations[n_layers - idx - 2]

            layer.update(errors, feeding, learning_rate, strict=False)
            errors = errors[:len(layer)]

    def train(self, inputs, targets, epochs, batch_size, learning_rate,
              random_state=None):
        """ Run `epochs` passes of per-example gradient steps

        Each epoch the (input, target) pairs are shuffled and split into
        contiguous batches of `batch_size` (the last one may be shorter).
        :meth:`back_prop` is called once per example; there is no
        averaging over a batch.

        Parameters
        ----------
        inputs: sequence of sequences of float
            The training inputs, one example per row.

        targets: sequence of sequences of float
            The training targets, positionally matching `inputs`.

        epochs: int
            Number of passes over the data. Zero makes no updates.

        batch_size: int
            Number of examples per batch, at least 1.

        learning_rate: float
            Step size for every update.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible shuffling.
        """
        epochs = validate_size(epochs, 'epochs')
        batch_size = validate_size(batch_size, 'batch_size')
        if batch_size < 1:
            msg = "`batch_size` should be at least 1 but was {}"
            raise ValueError(msg.format(batch_size))

        if len(inputs) != len(targets):
            msg = "Got {} inputs but {} targets"
            raise ShapeMismatchError(msg.format(len(inputs), len(targets)))

        rs = numpy.random.RandomState() if random_state is None \
            else random_state

        n_examples = len(inputs)

        for epoch in range(epochs):
            logger.info(progress("Epoch", epoch + 1, epochs))

            order = rs.permutation(n_examples)

            for start in range(0, n_examples, batch_size):
                for i in order[start:start + batch_size]:
                    self.back_prop(inputs[i], targets[i], learning_rate)
