# flake8: noqa

from .datasets import load_dataset, load_training_data, save_dataset
