import matplotlib.pyplot as plt

from tinymlp.config import load_config
from tinymlp.core.logger import setup_logging
from tinymlp.data.datasets import load_training_data
from tinymlp.run import run
from tinymlp.visualize import plot_predictions


setup_logging(filename='log.txt')

# Run create_data.py first to write the dataset files
config = load_config(seed=1234)

network, results = run(config)

for a, b, result in results:
    print("{!r} + {!r} = {!r}".format(a, b, result))

inputs, targets = load_training_data(config.train_data, config.target_data)
plot_predictions(network, inputs[:500], targets[:500], scale=config.scale)
plt.show()
