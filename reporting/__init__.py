"""
Reporting — chart series, display tables and allocation checks for the dashboard.
"""

from .series import price_series, revenue_bars
from .tables import results_table, results_dataframe, projection_summary
from .checks import percentage_total, percentage_warning

__all__ = [
    "price_series",
    "revenue_bars",
    "results_table",
    "results_dataframe",
    "projection_summary",
    "percentage_total",
    "percentage_warning",
]
