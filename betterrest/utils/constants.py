"""
Constants used throughout the BetterRest app.
This includes input ranges, default values and the model feature contract.
"""

# Allowed ranges for the bedtime form inputs
input_ranges = {
    'sleep_amount_min': 4.0,   # Minimum desired sleep in hours
    'sleep_amount_max': 12.0,  # Maximum desired sleep in hours
    'sleep_amount_step': 0.25,  # Stepper increment in hours
    'coffee_amount_min': 1,    # Minimum cups of coffee per day
    'coffee_amount_max': 20,   # Maximum cups of coffee per day
}

# Default values used when the configuration does not provide one
default_values = {
    'wake_time': '07:00',
    'sleep_amount': 8.0,
    'coffee_amount': 1,
    'clock': '12h',
    'error_message': 'Error calculating bedtime',
    'model_path': 'artifacts/sleep_calculator',
}

# Feature contract of the trained sleep calculator.
# wake is seconds since midnight, estimatedSleep is hours, coffee is cups.
model_features = {
    'feature_columns': ['wake', 'estimatedSleep', 'coffee'],
    'target_column': 'actualSleep',
}

supported_clocks = ('12h', '24h')
