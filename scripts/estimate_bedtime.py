#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Script to estimate the ideal bedtime from the command line.

Usage:
    python scripts/estimate_bedtime.py --wake 07:00 --sleep 8 --coffee 2
    python scripts/estimate_bedtime.py --batch-file data/requests.csv

The batch file is a CSV with columns wake_time, sleep_amount, coffee_amount.
Exit code is 1 if any estimate failed.
"""

import os
import sys
import argparse
import logging

import pandas as pd

# Add the project root to the path so we can import our modules
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from betterrest.config.config_manager import ConfigManager
from betterrest.core.estimation.bedtime_estimator import BedtimeEstimator
from betterrest.core.exceptions import ModelLoadError
from betterrest.core.models.sleep_calculator import SleepCalculatorModel
from betterrest.utils.constants import default_values

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Estimate the ideal bedtime')

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to the application configuration file'
    )

    parser.add_argument(
        '--model',
        type=str,
        default=None,
        help='Sleep calculator model path (without extension); overrides the config'
    )

    parser.add_argument(
        '--wake',
        type=str,
        default=None,
        help='Desired wake time as HH:MM (defaults to the configured wake time)'
    )

    parser.add_argument(
        '--sleep',
        type=float,
        default=None,
        help='Desired amount of sleep in hours'
    )

    parser.add_argument(
        '--coffee',
        type=int,
        default=None,
        help='Cups of coffee per day'
    )

    parser.add_argument(
        '--batch-file',
        type=str,
        default=None,
        help='CSV file with wake_time, sleep_amount and coffee_amount columns'
    )

    return parser.parse_args(argv)


def load_model(config, model_path=None):
    """Load the sleep calculator, returning None if it is unavailable."""
    model_config = config.section('model')
    if model_path:
        model_path = os.path.abspath(model_path)
    else:
        model_path = config.resolve_path('model.path', default_values['model_path'])
    try:
        return SleepCalculatorModel(model_config).load(model_path)
    except ModelLoadError as e:
        logger.error(f"Could not load sleep calculator model: {str(e)}")
        return None


def load_batch_requests(file_path):
    """Load the batch CSV, with string wake times."""
    data = pd.read_csv(file_path, dtype={'wake_time': str})
    missing = {'wake_time', 'sleep_amount', 'coffee_amount'} - set(data.columns)
    if missing:
        raise ValueError(f"Batch file missing required columns: {sorted(missing)}")
    logger.info(f"Loaded {len(data)} requests from {file_path}")
    return data


def run_batch(estimator, requests):
    """Estimate every row and print one line per request. Returns the failure count."""
    failures = 0
    for row in requests.itertuples(index=False):
        result = estimator.estimate(row.wake_time, row.sleep_amount, row.coffee_amount)
        if not result.success:
            failures += 1
        print(f"{row.wake_time},{row.sleep_amount},{row.coffee_amount},{result.display_text}")
    return failures


def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager(args.config)

    logging.basicConfig(
        level=config.get('logging.level', 'INFO'),
        format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    model = load_model(config, args.model)
    estimator = BedtimeEstimator.from_config(config, model=model)

    if args.batch_file:
        try:
            requests = load_batch_requests(args.batch_file)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading batch file: {str(e)}")
            return 1
        return 1 if run_batch(estimator, requests) else 0

    wake = args.wake or config.get('form.default_wake_time', default_values['wake_time'])
    sleep = args.sleep if args.sleep is not None else config.get('form.default_sleep_amount', default_values['sleep_amount'])
    coffee = args.coffee if args.coffee is not None else config.get('form.default_coffee_amount', default_values['coffee_amount'])

    result = estimator.estimate(wake, sleep, coffee)
    print(result.display_text)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
