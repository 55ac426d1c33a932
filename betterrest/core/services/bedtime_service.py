# betterrest/core/services/bedtime_service.py
import logging

import numpy as np

from betterrest.core.estimation.bedtime_estimator import BedtimeEstimator
from betterrest.core.exceptions import ModelLoadError
from betterrest.core.models.data_models import BedtimeRequest, BedtimeResult, FormOptions, WakeTime
from betterrest.core.models.sleep_calculator import SleepCalculatorModel
from betterrest.utils.constants import default_values, input_ranges
from betterrest.utils.time_utils import format_hours_label

logger = logging.getLogger(__name__)


class BedtimeService:
    def __init__(self, estimator, form_defaults=None):
        self.estimator = estimator
        self.form_defaults = form_defaults or {}

        # The default wake time must parse, otherwise the form can't be rendered
        WakeTime.from_string(self.form_defaults.get('default_wake_time', default_values['wake_time']))

    @classmethod
    def from_config(cls, config):
        """Load the sleep calculator once and build the service around it"""
        model_config = config.section('model')
        model_path = config.resolve_path('model.path', default_values['model_path'])

        try:
            model = SleepCalculatorModel(model_config).load(model_path)
        except ModelLoadError as e:
            logger.warning(f"Could not load sleep calculator model: {str(e)}")
            model = None

        estimator = BedtimeEstimator.from_config(config, model=model)
        return cls(estimator, config.section('form'))

    @property
    def model_loaded(self):
        return self.estimator.model is not None

    def estimate(self, request: BedtimeRequest) -> BedtimeResult:
        return self.estimator.estimate(request.wake_time, request.sleep_amount, request.coffee_amount)

    def get_form_options(self) -> FormOptions:
        step = input_ranges['sleep_amount_step']
        count = int(round((input_ranges['sleep_amount_max'] - input_ranges['sleep_amount_min']) / step)) + 1
        sleep_amounts = [float(v) for v in np.round(input_ranges['sleep_amount_min'] + np.arange(count) * step, 2)]

        wake_time = WakeTime.from_string(self.form_defaults.get('default_wake_time', default_values['wake_time']))

        return FormOptions(
            default_wake_time=str(wake_time),
            default_sleep_amount=self.form_defaults.get('default_sleep_amount', default_values['sleep_amount']),
            default_coffee_amount=self.form_defaults.get('default_coffee_amount', default_values['coffee_amount']),
            sleep_amounts=sleep_amounts,
            sleep_amount_labels=[format_hours_label(v) for v in sleep_amounts],
            coffee_amounts=list(range(input_ranges['coffee_amount_min'], input_ranges['coffee_amount_max'] + 1)),
        )
