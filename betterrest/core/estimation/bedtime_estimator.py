import logging

import numpy as np

from betterrest.core.exceptions import EstimationError
from betterrest.core.models.data_models import BedtimeResult, WakeTime
from betterrest.utils.constants import default_values, supported_clocks
from betterrest.utils.time_utils import format_short_time, subtract_hours

logger = logging.getLogger(__name__)


class BedtimeEstimator:
    """
    Recommends a bedtime from wake time, desired sleep and coffee intake.

    The model predicts how many hours of sleep are actually achievable; the
    bedtime is the wake time minus that prediction, wrapped to the previous
    day when it crosses midnight. Failures never raise: they come back as a
    BedtimeResult carrying the fallback error message.
    """

    def __init__(self, model=None, clock=default_values['clock'], error_message=default_values['error_message']):
        if clock not in supported_clocks:
            raise ValueError(f"Unsupported clock format: {clock}. Must be one of: {', '.join(supported_clocks)}")
        self.model = model
        self.clock = clock
        self.error_message = error_message

    @classmethod
    def from_config(cls, config, model=None):
        """Build an estimator using the display section of a ConfigManager"""
        return cls(
            model=model,
            clock=config.get('display.clock', default_values['clock']),
            error_message=config.get('display.error_message', default_values['error_message']),
        )

    def estimate(self, wake_time, sleep_amount, coffee_amount) -> BedtimeResult:
        """
        Estimate the recommended bedtime.

        Args:
            wake_time: WakeTime, datetime.time, datetime or "HH:MM" string
            sleep_amount: Desired sleep in hours (not range checked)
            coffee_amount: Cups of coffee per day

        Returns:
            BedtimeResult with either ``bedtime`` or ``error`` set
        """
        try:
            wake = WakeTime.coerce(wake_time)
            predicted_sleep = self._predict_sleep(wake, sleep_amount, coffee_amount)
            bedtime = subtract_hours(wake.to_time(), predicted_sleep)
            return BedtimeResult(
                bedtime=format_short_time(bedtime, self.clock),
                predicted_sleep_hours=predicted_sleep,
            )
        except Exception as e:
            logger.warning(f"Error calculating bedtime for wake={wake_time!r} "
                           f"sleep={sleep_amount!r} coffee={coffee_amount!r}: {str(e)}")
            return BedtimeResult(error=self.error_message)

    def _predict_sleep(self, wake, sleep_amount, coffee_amount):
        if self.model is None:
            raise EstimationError("No sleep calculator model available")

        # Models may return a scalar or a one-element array
        output = np.ravel(self.model.predict(wake.to_seconds(), float(sleep_amount), float(coffee_amount)))
        if output.size != 1:
            raise EstimationError(f"Expected a single prediction, got {output.size}")
        prediction = float(output[0])
        if not np.isfinite(prediction):
            raise EstimationError(f"Model returned a non-finite prediction: {prediction}")
        return prediction


def estimate(wake_time, sleep_amount, coffee_amount, model, clock=default_values['clock']) -> BedtimeResult:
    """Functional shortcut for BedtimeEstimator(model, clock).estimate(...)"""
    return BedtimeEstimator(model, clock=clock).estimate(wake_time, sleep_amount, coffee_amount)
