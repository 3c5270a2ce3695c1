"""Domain types for the valuation metrics library."""

from value_metrics.domain.types import DCFInputs
from value_metrics.domain.types import FinancialStatement
from value_metrics.domain.types import MetricsResult
from value_metrics.domain.types import STATEMENT_FIELDS

__all__ = [
    'DCFInputs',
    'FinancialStatement',
    'MetricsResult',
    'STATEMENT_FIELDS',
]
