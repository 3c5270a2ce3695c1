"""
Pure DCF math engine.

Constant-growth, constant-discount projection of owner's earnings. No I/O,
just numeric computations over prepared inputs.

Key functions:
  intrinsic_value: Sum of discounted owner's earnings for years 1..N
  intrinsic_value_per_share: intrinsic_value divided by shares outstanding
  dcf_schedule: Year-by-year breakdown of the same sum as a DataFrame

Terms are accumulated in ascending year order, so results are reproducible
bit for bit.
"""

from collections.abc import Iterator
import numbers
from typing import Optional, Tuple

import pandas as pd

from value_metrics.engine.guards import divide_or_none
from value_metrics.engine.guards import ieee_divide
from value_metrics.engine.guards import ieee_pow

SCHEDULE_COLUMNS = [
    'year',
    'future_earnings',
    'discount_factor',
    'present_value',
    'cumulative_pv',
]


def _check_years(years: int) -> None:
  if isinstance(years, bool) or not isinstance(years, numbers.Integral):
    raise ValueError(f'years must be a non-negative integer, got {years!r}')
  if years < 0:
    raise ValueError(f'years must be a non-negative integer, got {years}')


def _discounted_terms(
    initial_owners_earnings: float,
    growth_rate: float,
    discount_rate: float,
    years: int,
) -> Iterator[Tuple[int, float, float, float]]:
  """Yield (t, future_earnings, discount_factor, present_value) for t=1..N."""
  for t in range(1, int(years) + 1):
    future_earnings = initial_owners_earnings * ieee_pow(1.0 + growth_rate,
                                                         float(t))
    discount_factor = ieee_pow(1.0 + discount_rate, float(t))
    present_value = ieee_divide(future_earnings, discount_factor)
    yield t, future_earnings, discount_factor, present_value


def intrinsic_value(
    initial_owners_earnings: float,
    growth_rate: float,
    discount_rate: float,
    years: int,
) -> float:
  """
  Compute intrinsic value as the PV of growing owner's earnings.

  For each year t in 1..years:
    future_earnings = initial_owners_earnings * (1 + growth_rate)^t
    present_value   = future_earnings / (1 + discount_rate)^t

  Args:
    initial_owners_earnings: Owner's earnings in the base year
    growth_rate: Constant annual growth rate (0.05 = 5%)
    discount_rate: Required annual return (0.10 = 10%)
    years: Number of projected years (non-negative integer)

  Returns:
    Sum of the yearly present values; 0.0 when years == 0. Degenerate rates
    such as a discount rate of -1 give inf or NaN rather than an error.

  Raises:
    ValueError: years is negative or not an integer
  """
  _check_years(years)

  total_value = 0.0
  for _, _, _, present_value in _discounted_terms(initial_owners_earnings,
                                                  growth_rate, discount_rate,
                                                  years):
    total_value += present_value
  return total_value


def intrinsic_value_per_share(
    initial_owners_earnings: float,
    growth_rate: float,
    discount_rate: float,
    years: int,
    shares_outstanding: float,
) -> Optional[float]:
  """
  Compute intrinsic value per share.

  Args:
    initial_owners_earnings: Owner's earnings in the base year
    growth_rate: Constant annual growth rate
    discount_rate: Required annual return
    years: Number of projected years (non-negative integer)
    shares_outstanding: Current shares outstanding

  Returns:
    intrinsic_value(...) / shares_outstanding, or None for zero shares
  """
  total = intrinsic_value(initial_owners_earnings, growth_rate, discount_rate,
                          years)
  return divide_or_none(total, shares_outstanding)


def dcf_schedule(
    initial_owners_earnings: float,
    growth_rate: float,
    discount_rate: float,
    years: int,
) -> pd.DataFrame:
  """
  Year-by-year breakdown of the intrinsic value sum.

  The last cumulative_pv equals intrinsic_value() for the same inputs.

  Returns:
    DataFrame with SCHEDULE_COLUMNS, one row per projected year
  """
  _check_years(years)

  rows = []
  cumulative_pv = 0.0
  for t, future_earnings, discount_factor, present_value in _discounted_terms(
      initial_owners_earnings, growth_rate, discount_rate, years):
    cumulative_pv += present_value
    rows.append({
        'year': t,
        'future_earnings': future_earnings,
        'discount_factor': discount_factor,
        'present_value': present_value,
        'cumulative_pv': cumulative_pv,
    })

  return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
