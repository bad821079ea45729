from .runner import GenerationLogCallback, TrainResult, play_demo, run_ga_experiment, train, train_from_configs

__all__ = ["GenerationLogCallback", "TrainResult", "play_demo", "run_ga_experiment", "train", "train_from_configs"]
