# flake8: noqa

from ._version import version as __version__
from .core import (
    Layer,
    Network,
    NetworkIOError,
    Neuron,
    SerializationError,
    ShapeMismatchError,
)
