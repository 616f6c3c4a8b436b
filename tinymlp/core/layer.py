import numpy

from tinymlp.core.exception import ShapeMismatchError
from tinymlp.core.neuron import DTYPE, Neuron, as_vector, validate_size


class Layer:
    """ An ordered collection of neurons that all read the same inputs

    Attributes
    ----------
    neurons: list of Neuron
        The neurons of the layer. The neuron count is the layer's output
        width, and every neuron has the same number of weights (the
        layer's input width).
    """

    def __init__(self, neurons):
        self.neurons = list(neurons)

        widths = set(neuron.input_width for neuron in self.neurons)
        if len(widths) > 1:
            msg = "Neurons in a layer must share one input width, got {}"
            raise ShapeMismatchError(msg.format(sorted(widths)))

    @classmethod
    def random(cls, neuron_count, input_width, random_state=None):
        """ Create a layer of `neuron_count` randomly initialized neurons,
        each taking `input_width` inputs
        """
        neuron_count = validate_size(neuron_count, 'neuron_count')
        input_width = validate_size(input_width, 'input_width')
        rs = numpy.random.RandomState() if random_state is None \
            else random_state

        return cls([Neuron.random(input_width, random_state=rs)
                    for _ in range(neuron_count)])

    def __repr__(self):
        return "<Layer input_width=%d, output_width=%d>" % (
            self.input_width, self.output_width)

    def __len__(self):
        return len(self.neurons)

    @property
    def input_width(self):
        # An empty layer has no weights to infer a width from
        if not self.neurons:
            return 0
        return self.neurons[0].input_width

    @property
    def output_width(self):
        return len(self.neurons)

    def evaluate(self, inputs):
        """ Evaluate every neuron against the same inputs

        Returns
        -------
        outputs: numpy.ndarray, shape=(output_width,)
            The neuron outputs, in neuron order

        Raises
        ------
        ShapeMismatchError
            If the number of inputs differs from the layer's input width
        """
        inputs = as_vector(inputs)
        return numpy.array([neuron.evaluate(inputs)
                            for neuron in self.neurons], dtype=DTYPE)

    def update(self, errors, feeding, learning_rate, strict=True):
        """ Update each neuron with its positionally matching error

        Parameters
        ----------
        errors: sequence of float
            One error per neuron

        feeding: sequence of float
            The vector that was fed into the layer

        learning_rate: float
            The step size

        strict: bool, default=True
            If False, neurons and errors are paired up to the shorter of
            the two, and each neuron pairs its weights with `feeding` the
            same way. Otherwise any length mismatch raises
            ShapeMismatchError.
        """
        errors = as_vector(errors, name='errors')
        feeding = as_vector(feeding, name='feeding')

        if strict and len(errors) != len(self.neurons):
            msg = "Got {} errors for a layer of {} neurons"
            raise ShapeMismatchError(
                msg.format(len(errors), len(self.neurons)))

        for neuron, error in zip(self.neurons, errors):
            neuron.update(error, feeding, learning_rate, strict=strict)

    def propagate_error(self, errors):
        """ Distribute the layer's errors back onto its inputs

        Returns
        -------
        input_errors: numpy.ndarray, shape=(input_width,)
            :code:`sum(errors[k] * neurons[k].weights)`, i.e., the transposed
            weight matrix applied to `errors`. Since the units are linear
            there is no activation derivative.
        """
        errors = as_vector(errors, name='errors')
        if len(errors) != len(self.neurons):
            msg = "Got {} errors for a layer of {} neurons"
            raise ShapeMismatchError(
                msg.format(len(errors), len(self.neurons)))

        input_errors = numpy.zeros(self.input_width, dtype=DTYPE)
        for neuron, error in zip(self.neurons, errors):
            input_errors += error * neuron.weights
        return input_errors
