class ShapeMismatchError(ValueError):
    """ Raised when a vector's length disagrees with the width expected
    by a neuron, layer, or network
    """


class NetworkIOError(IOError):
    """ Raised when a model or dataset file cannot be read or written
    """
    def __init__(self, msg, path=None):
        super().__init__(msg)
        self.path = path


class SerializationError(ValueError):
    """ Raised when a model or dataset file is malformed, or when the
    network state cannot be encoded
    """
    def __init__(self, msg, path=None):
        super().__init__(msg)
        self.path = path
