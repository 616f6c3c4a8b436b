import numpy


def make_dataset(n_samples, scale=10.0, low=-10.0, high=10.0,
                 random_state=None):
    """
    Make a toy regression dataset where the target is the sum of two
    scalars.

    Parameters
    ----------
    n_samples: int
        Number of examples.

    scale: float, default=10.0
        Inputs and targets are divided by `scale` so that they stay in a
        range where a linear network trains stably.

    low, high: float, default=-10.0, 10.0
        The unscaled scalars are drawn uniformly from [low, high).

    random_state: numpy.random.RandomState, default=None
        RandomState object for reproducible results.

    Returns
    -------
    inputs, targets: ndarray, ndarray
        Shapes (n_samples, 2) and (n_samples, 1), dtype float32.
        Rows of :code:`[a/scale, b/scale]` and :code:`[(a+b)/scale]`.
    """
    if n_samples < 0:
        raise ValueError("`n_samples` should be non-negative.")
    if scale == 0:
        raise ValueError("`scale` should be non-zero.")
    if high <= low:
        raise ValueError("`high` should be greater than `low`.")

    rs = numpy.random.RandomState() if random_state is None else random_state

    pairs = rs.uniform(low, high, size=(n_samples, 2))

    inputs = pairs / scale
    targets = pairs.sum(axis=1, keepdims=True) / scale

    return inputs.astype(numpy.float32), targets.astype(numpy.float32)
