"""Utility functions and helpers"""

from portfolio_cms.utils.dates import utc_today, utcnow

__all__ = [
    "utc_today",
    "utcnow",
]
