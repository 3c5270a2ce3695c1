"""
Compound annual growth rate of earnings per share.
"""

from typing import Optional

from value_metrics.engine.guards import ieee_pow
from value_metrics.engine.guards import is_exact_zero


def eps_cagr(
    initial_eps: float,
    final_eps: float,
    years: float,
) -> Optional[float]:
  """
  EPS compound annual growth rate in percent.

  The sign of final_eps / initial_eps is not checked. A negative ratio with a
  fractional exponent produces NaN, which is returned as a number rather
  than as None.

  Args:
    initial_eps: EPS at the start of the period
    final_eps: EPS at the end of the period
    years: Length of the period in years (may be fractional)

  Returns:
    ((final_eps / initial_eps) ** (1 / years) - 1) * 100, or None when
    initial_eps is zero or years <= 0
  """
  if is_exact_zero(initial_eps) or years <= 0.0:
    return None
  growth_factor = ieee_pow(final_eps / initial_eps, 1.0 / years)
  return (growth_factor - 1.0) * 100.0
