"""
Numeric-safety policy shared by every formula.

A result is undefined (None) exactly when a divisor is exactly zero. There is
no epsilon tolerance: -0.0 counts as zero, 1e-300 does not, and NaN is never
zero. Everything else follows IEEE-754 float semantics, so the helpers below
turn the exceptions Python raises for zero division, negative bases and
overflow back into infinities and NaN.
"""

import math
from typing import Optional


def is_exact_zero(value: float) -> bool:
  """True only when value compares equal to 0.0."""
  return value == 0.0


def divide_or_none(
    numerator: float,
    denominator: float,
    scale: float = 1.0,
) -> Optional[float]:
  """
  Divide, signalling an undefined result for an exactly zero divisor.

  Args:
    numerator: Dividend
    denominator: Divisor
    scale: Factor applied after the division (100.0 for percentages)

  Returns:
    (numerator / denominator) * scale, or None when denominator == 0
  """
  if is_exact_zero(denominator):
    return None
  return (numerator / denominator) * scale


def ieee_divide(numerator: float, denominator: float) -> float:
  """
  Float division that never raises.

  A zero divisor gives a signed infinity, or NaN for 0/0 and NaN/0.
  """
  if is_exact_zero(denominator):
    if is_exact_zero(numerator) or math.isnan(numerator):
      return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
  return numerator / denominator


def _is_odd_integer(value: float) -> bool:
  value = float(value)
  return math.isfinite(value) and value.is_integer() and value % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
  """
  Raise base to exponent with C pow() outcomes instead of exceptions.

  Differences from math.pow:
    - negative finite base with a non-integer exponent gives NaN
    - zero base with a negative exponent gives infinity
    - overflow gives a signed infinity

  Args:
    base: Base value
    exponent: Exponent value

  Returns:
    base ** exponent as a real float (possibly inf or NaN)
  """
  try:
    return math.pow(base, exponent)
  except ValueError:
    if is_exact_zero(base):
      if _is_odd_integer(exponent):
        return math.copysign(math.inf, base)
      return math.inf
    return math.nan
  except OverflowError:
    if base < 0 and _is_odd_integer(exponent):
      return -math.inf
    return math.inf
