# flake8: noqa

from .exception import NetworkIOError, SerializationError, ShapeMismatchError
from .layer import Layer
from .network import Network
from .neuron import Neuron
