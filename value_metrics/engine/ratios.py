"""
Single-period accounting ratios.

Pure functions over raw statement figures. Ratios expressed as percentages
are multiplied by 100 after the division. Any ratio whose divisor is exactly
zero is undefined and returned as None.
"""

from typing import Optional

from value_metrics.engine.guards import divide_or_none


def owners_earnings(
    net_income: float,
    depreciation_amortization: float,
    maintenance_capex: float,
) -> float:
  """
  Owner's earnings as defined by Buffett.

  Net income plus non-cash depreciation and amortization, minus the capital
  expenditure needed to maintain (not grow) the business.

  Args:
    net_income: Net income for the period
    depreciation_amortization: Depreciation and amortization charges
    maintenance_capex: Maintenance capital expenditure

  Returns:
    net_income + depreciation_amortization - maintenance_capex
  """
  return net_income + depreciation_amortization - maintenance_capex


def return_on_equity(
    net_income: float,
    shareholders_equity: float,
) -> Optional[float]:
  """
  Return on equity (ROE) in percent.

  Returns:
    (net_income / shareholders_equity) * 100, or None for zero equity
  """
  return divide_or_none(net_income, shareholders_equity, scale=100.0)


def net_tangible_assets(
    total_assets: float,
    total_liabilities: float,
    intangible_assets: float,
) -> float:
  """Total assets less total liabilities less intangible assets."""
  return total_assets - total_liabilities - intangible_assets


def return_on_net_tangible_assets(
    net_income: float,
    total_assets: float,
    total_liabilities: float,
    intangible_assets: float,
) -> Optional[float]:
  """
  Return on net tangible assets (RONTA) in percent.

  Only the net tangible assets figure is checked against zero. A divisor
  left tiny but non-zero by cancellation in the subtraction is used as is.

  Args:
    net_income: Net income for the period
    total_assets: Total assets
    total_liabilities: Total liabilities
    intangible_assets: Intangible assets (goodwill included)

  Returns:
    (net_income / net_tangible_assets) * 100, or None when net tangible
    assets are exactly zero
  """
  nta = net_tangible_assets(total_assets, total_liabilities, intangible_assets)
  return divide_or_none(net_income, nta, scale=100.0)


def debt_to_equity(
    total_liabilities: float,
    shareholders_equity: float,
) -> Optional[float]:
  """Total liabilities over shareholders' equity; None for zero equity."""
  return divide_or_none(total_liabilities, shareholders_equity)


def earnings_per_share(
    net_income: float,
    shares_outstanding: float,
) -> Optional[float]:
  """Net income per share outstanding; None when no shares are outstanding."""
  return divide_or_none(net_income, shares_outstanding)
