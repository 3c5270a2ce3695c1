import pandas as pd
import pytest

from value_metrics.domain.types import FinancialStatement


def _make_panel(
    periods: list[int],
    net_income: list[float],
    shares: list[float],
) -> pd.DataFrame:
  """Helper to create a statement panel with fixed balance sheet figures."""
  n = len(periods)
  return pd.DataFrame({
      'period': periods,
      'net_income': net_income,
      'depreciation_amortization': [200.0] * n,
      'maintenance_capex': [150.0] * n,
      'shareholders_equity': [2000.0] * n,
      'total_assets': [3000.0] * n,
      'total_liabilities': [1000.0] * n,
      'intangible_assets': [500.0] * n,
      'shares_outstanding': shares,
  })


@pytest.fixture
def sample_statement() -> FinancialStatement:
  """Statement whose owner's earnings come to 1050."""
  return FinancialStatement(
      net_income=1000.0,
      depreciation_amortization=200.0,
      maintenance_capex=150.0,
      shareholders_equity=2000.0,
      total_assets=3000.0,
      total_liabilities=1000.0,
      intangible_assets=500.0,
      shares_outstanding=100.0,
      period=2023,
  )


@pytest.fixture
def degenerate_statement() -> FinancialStatement:
  """Statement where every divisor is exactly zero."""
  return FinancialStatement(
      net_income=500.0,
      depreciation_amortization=0.0,
      maintenance_capex=0.0,
      shareholders_equity=0.0,
      total_assets=1500.0,
      total_liabilities=1000.0,
      intangible_assets=500.0,
      shares_outstanding=0.0,
  )


@pytest.fixture
def growth_panel() -> pd.DataFrame:
  """Four years of 10% EPS growth, given out of order."""
  return _make_panel(
      periods=[2022, 2020, 2023, 2021],
      net_income=[1210.0, 1000.0, 1331.0, 1100.0],
      shares=[100.0, 100.0, 100.0, 100.0],
  )
