from .logging_threshold_observer import LoggingThresholdObserver

__all__ = ["LoggingThresholdObserver"]
