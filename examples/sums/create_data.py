import numpy as np

from tinymlp.data.datasets import save_dataset
from tinymlp.data.sums import make_dataset


random_state = np.random.RandomState(1234)

# 10,000 pairs drawn from [-10, 10), divided by 10 along with their sums
inputs, targets = make_dataset(
    n_samples=10000, scale=10.0, random_state=random_state)

save_dataset(inputs, 'train_data.json')
save_dataset(targets, 'target_data.json')
