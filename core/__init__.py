"""
Core package — column schema, calculator defaults, and shared utilities.
No business logic lives here.
"""

from .schema import PRICE_HISTORY_COLUMNS, WEEK_OF_COLUMN, PRICE_COLUMN, HORIZON_CHOICES
from .config import CalculatorConfig
from .utils import missing_columns, month_starts, format_currency

__all__ = [
    "PRICE_HISTORY_COLUMNS",
    "WEEK_OF_COLUMN",
    "PRICE_COLUMN",
    "HORIZON_CHOICES",
    "CalculatorConfig",
    "missing_columns",
    "month_starts",
    "format_currency",
]
