import numpy

from tinymlp.core.exception import ShapeMismatchError


DTYPE = numpy.float32


def as_vector(values, name='inputs'):
    """ Convert a sequence of numbers to a 1d float32 array

    Raises
    ------
    ValueError
        If `values` is not one dimensional
    """
    vector = numpy.asarray(values, dtype=DTYPE)
    if vector.ndim != 1:
        msg = "`{}` should be 1d but had {} dimensions"
        raise ValueError(msg.format(name, vector.ndim))
    return vector


def validate_size(size, name):
    """ Sizes must be non-negative ints; returns the int value
    """
    if isinstance(size, bool) or not isinstance(size, (int, numpy.integer)):
        msg = "`{}` should be an int but was {}"
        raise TypeError(msg.format(name, type(size).__name__))
    if size < 0:
        msg = "`{}` should be non-negative but was {}"
        raise ValueError(msg.format(name, size))
    return int(size)


class Neuron:
    """ A linear unit holding one bias and one weight per input

    The output is :code:`bias + dot(weights, inputs)`; no activation
    function is applied.
    """

    def __init__(self, bias, weights):
        """
        Parameters
        ----------
        bias: float
            The bias term (stored as float32)

        weights: sequence of float
            One weight per input (stored as a float32 array). The number
            of weights never changes after construction.
        """
        self.bias = DTYPE(bias)
        self.weights = as_vector(weights, name='weights').copy()

    @classmethod
    def random(cls, input_width, random_state=None):
        """ Create a neuron with weights and bias drawn independently and
        uniformly from [-1, 1)

        Parameters
        ----------
        input_width: int
            Number of weights

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        input_width = validate_size(input_width, 'input_width')
        rs = numpy.random.RandomState() if random_state is None \
            else random_state

        weights = rs.uniform(-1.0, 1.0, size=input_width)
        bias = rs.uniform(-1.0, 1.0)

        return cls(bias=bias, weights=weights)

    def __repr__(self):
        return "<Neuron input_width=%d>" % self.input_width

    @property
    def input_width(self):
        return len(self.weights)

    def _check_width(self, vector, name):
        if len(vector) != len(self.weights):
            msg = "`{}` has length {} but the neuron has {} weights"
            raise ShapeMismatchError(
                msg.format(name, len(vector), len(self.weights)))

    def evaluate(self, inputs):
        """ Compute :code:`bias + sum(weights * inputs)`

        Raises
        ------
        ShapeMismatchError
            If the number of inputs differs from the number of weights
        """
        inputs = as_vector(inputs)
        self._check_width(inputs, 'inputs')
        return DTYPE(self.bias + numpy.dot(self.weights, inputs))

    def update(self, error, feeding, learning_rate, strict=True):
        """ Apply one gradient step in place:
        :code:`weights += error * feeding * learning_rate` and
        :code:`bias += error * learning_rate`.

        Parameters
        ----------
        error: float
            The signed error signal for this neuron

        feeding: sequence of float
            The vector that was fed into this neuron

        learning_rate: float
            The step size

        strict: bool, default=True
            If True, a `feeding` length that differs from the number of
            weights raises ShapeMismatchError. Otherwise weights and
            feeding values are paired up to the shorter of the two and the
            rest are left alone.
        """
        feeding = as_vector(feeding, name='feeding')
        if strict:
            self._check_width(feeding, 'feeding')

        error = DTYPE(error)
        learning_rate = DTYPE(learning_rate)

        m = min(len(feeding), len(self.weights))
        self.weights[:m] += error * feeding[:m] * learning_rate
        self.bias = DTYPE(self.bias + error * learning_rate)
