'''
Buffett-style valuation metrics from accounting inputs.

This package provides pure, stateless formulas (owner's earnings, return
ratios, leverage, EPS and its growth rate, and a DCF intrinsic value) plus a
thin orchestration layer that applies them to statement figures under a
configurable scenario. Undefined results (a zero divisor) come back as None.

Usage:
  from value_metrics import intrinsic_value_per_share, return_on_equity

  roe = return_on_equity(500.0, 2000.0)           # 25.0
  iv = intrinsic_value_per_share(1000.0, 0.05, 0.10, 10, 100.0)

  from value_metrics.run import compute_metrics
  from value_metrics.scenarios.config import ScenarioConfig

  result = compute_metrics(statement, config=ScenarioConfig.conservative())
'''

from value_metrics.engine.dcf import intrinsic_value
from value_metrics.engine.dcf import intrinsic_value_per_share
from value_metrics.engine.growth import eps_cagr
from value_metrics.engine.ratios import debt_to_equity
from value_metrics.engine.ratios import earnings_per_share
from value_metrics.engine.ratios import owners_earnings
from value_metrics.engine.ratios import return_on_equity
from value_metrics.engine.ratios import return_on_net_tangible_assets

__all__ = [
    'debt_to_equity',
    'earnings_per_share',
    'eps_cagr',
    'intrinsic_value',
    'intrinsic_value_per_share',
    'owners_earnings',
    'return_on_equity',
    'return_on_net_tangible_assets',
]
