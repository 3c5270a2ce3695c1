'''
Domain types for the valuation metrics library.

These dataclasses provide typed interfaces between the orchestration layer
and the pure engine functions, so formulas never depend on raw DataFrame
columns.
'''

from dataclasses import dataclass, field
import math
from typing import Any, Dict, Optional

import pandas as pd

STATEMENT_FIELDS = [
    'net_income',
    'depreciation_amortization',
    'maintenance_capex',
    'shareholders_equity',
    'total_assets',
    'total_liabilities',
    'intangible_assets',
    'shares_outstanding',
]


@dataclass
class FinancialStatement:
  '''
  Statement figures for a single company-period.

  Attributes:
    net_income: Net income for the period
    depreciation_amortization: Depreciation and amortization charges
    maintenance_capex: Capital expenditure needed to maintain operations
    shareholders_equity: Shareholders' equity at period end
    total_assets: Total assets at period end
    total_liabilities: Total liabilities at period end
    intangible_assets: Intangible assets (goodwill included) at period end
    shares_outstanding: Shares outstanding at period end
    period: Optional period label (e.g. fiscal year)
  '''
  net_income: float
  depreciation_amortization: float
  maintenance_capex: float
  shareholders_equity: float
  total_assets: float
  total_liabilities: float
  intangible_assets: float
  shares_outstanding: float
  period: Optional[Any] = None

  @classmethod
  def from_row(cls, row: pd.Series) -> 'FinancialStatement':
    '''
    Construct a FinancialStatement from one panel row.

    Args:
      row: Series indexed by STATEMENT_FIELDS, optionally with 'period'

    Returns:
      FinancialStatement with float-converted figures

    Raises:
      ValueError: A required field is absent or NaN
    '''
    missing = [f for f in STATEMENT_FIELDS if f not in row.index]
    if missing:
      raise ValueError(f'Missing statement fields: {missing}')

    values = {f: float(row[f]) for f in STATEMENT_FIELDS}
    nan_fields = [f for f, v in values.items() if math.isnan(v)]
    if nan_fields:
      raise ValueError(f'Missing required data: {nan_fields}')

    period = row['period'] if 'period' in row.index else None
    return cls(period=period, **values)


@dataclass
class DCFInputs:
  '''
  Prepared inputs for the DCF engine.

  Attributes:
    initial_owners_earnings: Owner's earnings in the base year
    growth_rate: Constant annual growth rate
    discount_rate: Required annual return
    years: Number of projected years
    shares_outstanding: Shares used for the per-share value
  '''
  initial_owners_earnings: float
  growth_rate: float
  discount_rate: float
  years: int
  shares_outstanding: float


@dataclass
class MetricsResult:
  '''
  All metrics derived from one statement, with diagnostics.

  Fields typed Optional are None when the metric is undefined for the
  inputs (a zero divisor).

  Attributes:
    owners_earnings: Net income + D&A - maintenance capex
    return_on_equity: ROE in percent
    return_on_net_tangible_assets: RONTA in percent
    debt_to_equity: Total liabilities / equity
    earnings_per_share: Net income / shares outstanding
    intrinsic_value: Total DCF value of owner's earnings
    iv_per_share: Intrinsic value per share
    eps_cagr: EPS growth rate in percent (if a prior EPS was provided)
    market_price: Market price per share (if provided)
    price_to_iv: Market price / IV per share (if market price provided)
    margin_of_safety: (IV - price) / IV (if market price provided)
    inputs: The DCFInputs used for the intrinsic value
    diag: Diagnostic information
  '''
  owners_earnings: float
  return_on_equity: Optional[float]
  return_on_net_tangible_assets: Optional[float]
  debt_to_equity: Optional[float]
  earnings_per_share: Optional[float]
  intrinsic_value: float
  iv_per_share: Optional[float]
  eps_cagr: Optional[float] = None
  market_price: Optional[float] = None
  price_to_iv: Optional[float] = None
  margin_of_safety: Optional[float] = None
  inputs: Optional[DCFInputs] = None
  diag: Dict[str, Any] = field(default_factory=dict)

  @property
  def undefined_metrics(self) -> list:
    '''Names of the core metrics that came out undefined.'''
    names = [
        'return_on_equity',
        'return_on_net_tangible_assets',
        'debt_to_equity',
        'earnings_per_share',
        'iv_per_share',
    ]
    return [name for name in names if getattr(self, name) is None]

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary for DataFrame creation.'''
    result = {
        'owners_earnings': self.owners_earnings,
        'return_on_equity': self.return_on_equity,
        'return_on_net_tangible_assets': self.return_on_net_tangible_assets,
        'debt_to_equity': self.debt_to_equity,
        'earnings_per_share': self.earnings_per_share,
        'intrinsic_value': self.intrinsic_value,
        'iv_per_share': self.iv_per_share,
        'eps_cagr': self.eps_cagr,
        'market_price': self.market_price,
        'price_to_iv': self.price_to_iv,
        'margin_of_safety': self.margin_of_safety,
    }
    if self.inputs:
      result.update({
          'growth_rate': self.inputs.growth_rate,
          'discount_rate': self.inputs.discount_rate,
          'n_years': self.inputs.years,
          'shares_outstanding': self.inputs.shares_outstanding,
      })
    result.update(self.diag)
    return result
