class BaseRegressionModel:
    """Base class for the bedtime regression models with common functionality"""

    def __init__(self, config=None):
        self.config = config or {}

    @property
    def is_loaded(self):
        return False

    def predict(self, wake, estimated_sleep, coffee):
        """Predict achievable sleep hours from wake seconds, desired hours and coffee cups"""
        raise NotImplementedError

    def save(self, path):
        """Save model to path"""
        raise NotImplementedError

    def load(self, path):
        """Load model from path"""
        raise NotImplementedError
