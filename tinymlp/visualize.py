import matplotlib.pyplot as plt
import numpy


def plot_predictions(network, inputs, targets, scale=1.0, ax=None):
    """ Scatter the network's predictions against the true targets

    Only the first output unit is plotted.

    Parameters
    ----------
    network: Network
        A (trained) network

    inputs, targets: array-like, shape=(n_examples, ...)
        The examples to plot

    scale: float, default=1.0
        Predictions and targets are multiplied by `scale` before plotting
        (e.g., to undo the scaling of the sums dataset)

    ax: matplotlib.axes.Axes, default=None
        The axes to draw into. A new figure is created if None.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(5, 5))

    predicted = numpy.array(
        [network.feed_forward(x)[0] for x in inputs]) * scale
    actual = numpy.asarray(targets)[:, 0] * scale

    ax.plot(actual, predicted, '.', alpha=0.5, label='predictions')

    if len(actual) > 0:
        lo, hi = actual.min(), actual.max()
        ax.plot([lo, hi], [lo, hi], '--k', lw=1, label='ideal')

    ax.set_xlabel('target')
    ax.set_ylabel('prediction')
    ax.legend(loc='upper left')

    return ax
