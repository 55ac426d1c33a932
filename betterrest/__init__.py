"""
Core modules for the BetterRest bedtime recommender.

This package contains the functionality for:
- Loading the pre-trained sleep calculator model
- Estimating a recommended bedtime from wake time, sleep amount and coffee intake
- Serving bedtime estimates over HTTP
"""

__version__ = "0.1.0"
