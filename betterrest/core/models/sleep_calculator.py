import json
import logging
import os
import pickle
from datetime import datetime

import numpy as np
import pandas as pd

from betterrest.core.exceptions import EstimationError, ModelLoadError
from betterrest.core.models.base_model import BaseRegressionModel
from betterrest.utils.constants import model_features

logger = logging.getLogger(__name__)


class SleepCalculatorModel(BaseRegressionModel):
    """
    Wrapper around a pre-trained regressor predicting achievable sleep.

    The regressor is any fitted estimator with a scikit-learn style
    ``predict(frame)`` method. It was trained on three features:

    - ``wake``: wake time in seconds since midnight
    - ``estimatedSleep``: desired sleep in hours
    - ``coffee``: cups of coffee per day

    and returns ``actualSleep`` in hours. The units are part of the trained
    contract and must not be changed.

    On disk the model is ``<path>.pkl`` (the pickled estimator) plus an
    optional ``<path>_metadata.json`` describing the feature columns.
    """

    def __init__(self, config=None, estimator=None):
        super().__init__(config)
        self.feature_columns = self._validate_feature_columns(
            self.config.get('feature_columns', model_features['feature_columns']))
        self.target_column = self.config.get('target_column', model_features['target_column'])
        self.estimator = estimator

    @property
    def is_loaded(self):
        return self.estimator is not None

    def predict(self, wake, estimated_sleep, coffee):
        """Predict achievable sleep hours for a single request"""
        if self.estimator is None:
            raise EstimationError("Model not trained or loaded")

        values = {
            'wake': float(wake),
            'estimatedSleep': float(estimated_sleep),
            'coffee': float(coffee),
        }
        # Columns are selected by name so the stored order is always honoured
        features = pd.DataFrame([values])[self.feature_columns]

        prediction = np.ravel(self.estimator.predict(features))
        if prediction.size != 1:
            raise EstimationError(f"Expected a single prediction, got {prediction.size}")
        return float(prediction[0])

    def save(self, filepath):
        """Save the wrapped estimator and its metadata"""
        if self.estimator is None:
            raise ValueError("No trained model to save")

        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(f"{filepath}.pkl", 'wb') as f:
            pickle.dump(self.estimator, f)

        metadata = {
            'feature_columns': self.feature_columns,
            'target_column': self.target_column,
            'estimator_class': type(self.estimator).__name__,
            'saved_at': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }
        with open(f"{filepath}_metadata.json", 'w') as f:
            json.dump(metadata, f, indent=2)

        logger.info(f"Sleep calculator model saved to {filepath}")

    def load(self, filepath):
        """Load the estimator (and metadata, if present) from filepath"""
        model_path = f"{filepath}.pkl"
        if not os.path.exists(model_path):
            raise ModelLoadError(f"Sleep calculator model not found at {model_path}")

        try:
            with open(model_path, 'rb') as f:
                estimator = pickle.load(f)
        except Exception as e:
            raise ModelLoadError(f"Could not unpickle {model_path}: {str(e)}")

        if not callable(getattr(estimator, 'predict', None)):
            raise ModelLoadError(f"Object in {model_path} has no predict method")

        metadata_path = f"{filepath}_metadata.json"
        if os.path.exists(metadata_path):
            try:
                with open(metadata_path, 'r') as f:
                    metadata = json.load(f)
            except (OSError, ValueError) as e:
                raise ModelLoadError(f"Could not read {metadata_path}: {str(e)}")
            if not isinstance(metadata, dict):
                raise ModelLoadError(f"Metadata in {metadata_path} must be a JSON object")
            self.feature_columns = self._validate_feature_columns(
                metadata.get('feature_columns', self.feature_columns))
            self.target_column = metadata.get('target_column', self.target_column)

        self.estimator = estimator
        logger.info(f"Sleep calculator model loaded from {filepath}")
        return self

    @staticmethod
    def _validate_feature_columns(feature_columns):
        """Return the columns as a list, raising ModelLoadError unless they match the trained features"""
        expected = set(model_features['feature_columns'])
        if (not isinstance(feature_columns, (list, tuple))
                or not all(isinstance(column, str) for column in feature_columns)
                or len(feature_columns) != len(expected)
                or set(feature_columns) != expected):
            raise ModelLoadError(
                f"Feature columns must be {model_features['feature_columns']} in some order, got {feature_columns}"
            )
        return list(feature_columns)


def load_sleep_calculator(filepath, config=None):
    """Load a SleepCalculatorModel from filepath, raising ModelLoadError on failure"""
    return SleepCalculatorModel(config).load(filepath)
