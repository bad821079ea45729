from .base import ConfigBase
from .io import load_train_config, load_yaml, to_plain_dict
from .train import FitnessParams, GAParams, TrainExperimentConfig, WatchParams

__all__ = [
    "ConfigBase",
    "FitnessParams",
    "GAParams",
    "TrainExperimentConfig",
    "WatchParams",
    "load_train_config",
    "load_yaml",
    "to_plain_dict",
]
