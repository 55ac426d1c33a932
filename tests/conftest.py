"""Shared fixtures for the BetterRest tests."""

import itertools

import pandas as pd
import pytest
import yaml
from sklearn.linear_model import LinearRegression

from betterrest.core.models.sleep_calculator import SleepCalculatorModel

FEATURES = ['wake', 'estimatedSleep', 'coffee']


class ConstantSleepModel:
    """Predicts the same achievable sleep for every request and records calls."""

    def __init__(self, hours):
        self.hours = hours
        self.calls = []

    def predict(self, wake, estimated_sleep, coffee):
        self.calls.append((wake, estimated_sleep, coffee))
        return self.hours


class FailingSleepModel:
    def predict(self, wake, estimated_sleep, coffee):
        raise RuntimeError("inference failed")


def _actual_sleep(wake, estimated_sleep, coffee):
    return 0.5 + 0.9 * estimated_sleep - 0.05 * coffee + 0.00001 * wake


@pytest.fixture
def constant_model():
    """Factory: constant_model(7.2) predicts 7.2 hours for everything."""
    return ConstantSleepModel


@pytest.fixture
def failing_model():
    return FailingSleepModel()


@pytest.fixture(scope='session')
def training_frame():
    rows = []
    for wake, sleep, coffee in itertools.product(
        [18000, 21600, 25200, 28800, 32400],
        [4.0, 6.0, 8.0, 10.0, 12.0],
        [1, 4, 8, 20],
    ):
        rows.append({
            'wake': float(wake),
            'estimatedSleep': sleep,
            'coffee': float(coffee),
            'actualSleep': _actual_sleep(wake, sleep, coffee),
        })
    return pd.DataFrame(rows)


@pytest.fixture(scope='session')
def fitted_regressor(training_frame):
    return LinearRegression().fit(training_frame[FEATURES], training_frame['actualSleep'])


@pytest.fixture
def sleep_model(fitted_regressor):
    return SleepCalculatorModel(estimator=fitted_regressor)


@pytest.fixture
def saved_model_path(tmp_path, sleep_model):
    path = str(tmp_path / 'models' / 'sleep_calculator')
    sleep_model.save(path)
    return path


@pytest.fixture
def config_file(tmp_path, saved_model_path):
    config = {
        'form': {
            'default_wake_time': '06:30',
            'default_sleep_amount': 7.5,
            'default_coffee_amount': 2,
        },
        'model': {
            'path': saved_model_path,
            'feature_columns': FEATURES,
            'target_column': 'actualSleep',
        },
        'display': {
            'clock': '12h',
            'error_message': 'Error calculating bedtime',
        },
        'logging': {'level': 'DEBUG'},
    }
    path = tmp_path / 'app_config.yaml'
    path.write_text(yaml.safe_dump(config))
    return str(path)


@pytest.fixture
def expected_sleep():
    return _actual_sleep


@pytest.fixture
def bad_columns_config_file(tmp_path, config_file):
    """Config whose model feature columns don't match the trained contract."""
    with open(config_file) as f:
        config = yaml.safe_load(f)
    config['model']['feature_columns'] = ['wake', 'sleep', 'coffee']
    path = tmp_path / 'bad_columns.yaml'
    path.write_text(yaml.safe_dump(config))
    return str(path)
