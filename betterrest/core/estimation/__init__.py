from betterrest.core.estimation.bedtime_estimator import BedtimeEstimator, estimate

__all__ = ['BedtimeEstimator', 'estimate']
