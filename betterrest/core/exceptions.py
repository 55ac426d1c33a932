# betterrest/core/exceptions.py


class EstimationError(Exception):
    """Raised when a bedtime cannot be estimated"""


class ModelLoadError(EstimationError):
    """Raised when the sleep calculator model cannot be loaded"""
