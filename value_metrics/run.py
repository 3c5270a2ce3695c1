'''
Metrics entrypoint.

This module ties the pure engine functions together. It:
1. Takes statement figures (a FinancialStatement or a panel of them)
2. Applies every ratio formula and the DCF estimator under a scenario
3. Returns MetricsResult (or a DataFrame of them) with diagnostics

Usage:
  from value_metrics.domain.types import FinancialStatement
  from value_metrics.run import compute_metrics
  from value_metrics.scenarios.config import ScenarioConfig

  result = compute_metrics(statement, config=ScenarioConfig.default())
  print(f"IV: ${result.iv_per_share:.2f}")
'''

import logging
import math
from typing import Any, Dict, Optional

import pandas as pd

from value_metrics.domain.types import (
    DCFInputs,
    FinancialStatement,
    MetricsResult,
)
from value_metrics.engine.dcf import intrinsic_value
from value_metrics.engine.dcf import intrinsic_value_per_share
from value_metrics.engine.growth import eps_cagr
from value_metrics.engine.ratios import (
    debt_to_equity,
    earnings_per_share,
    net_tangible_assets,
    owners_earnings,
    return_on_equity,
    return_on_net_tangible_assets,
)
from value_metrics.scenarios.config import ScenarioConfig

logger = logging.getLogger(__name__)


def compute_metrics(
    statement: FinancialStatement,
    config: Optional[ScenarioConfig] = None,
    market_price: Optional[float] = None,
    prior_eps: Optional[float] = None,
    eps_years: Optional[float] = None,
) -> MetricsResult:
  '''
  Compute every valuation metric for one statement.

  The DCF projection starts from the statement's own owner's earnings.

  Args:
    statement: Statement figures for one company-period
    config: ScenarioConfig (default: ScenarioConfig.default())
    market_price: Optional market price per share for comparison
    prior_eps: Optional earlier EPS for the growth rate
    eps_years: Years between prior_eps and this statement

  Returns:
    MetricsResult; undefined metrics are None and listed in
    diag['undefined']
  '''
  if config is None:
    config = ScenarioConfig.default()
  config.validate()

  period_label = statement.period if statement.period is not None else '-'

  oe = owners_earnings(
      statement.net_income,
      statement.depreciation_amortization,
      statement.maintenance_capex,
  )
  eps = earnings_per_share(statement.net_income, statement.shares_outstanding)

  inputs = DCFInputs(
      initial_owners_earnings=oe,
      growth_rate=config.growth_rate,
      discount_rate=config.discount_rate,
      years=config.n_years,
      shares_outstanding=statement.shares_outstanding,
  )
  iv = intrinsic_value(
      inputs.initial_owners_earnings,
      inputs.growth_rate,
      inputs.discount_rate,
      inputs.years,
  )
  iv_ps = intrinsic_value_per_share(
      inputs.initial_owners_earnings,
      inputs.growth_rate,
      inputs.discount_rate,
      inputs.years,
      inputs.shares_outstanding,
  )

  diag: Dict[str, Any] = {
      'scenario': config.name,
      'net_tangible_assets': net_tangible_assets(
          statement.total_assets,
          statement.total_liabilities,
          statement.intangible_assets,
      ),
  }
  if statement.period is not None:
    diag['period'] = statement.period

  growth = None
  if prior_eps is not None and eps_years is not None and eps is not None:
    growth = eps_cagr(prior_eps, eps, eps_years)
    if growth is not None and math.isnan(growth):
      logger.debug('%s: EPS changed sign, CAGR is NaN', period_label)
      diag['eps_cagr_nan'] = True

  price_to_iv = None
  margin_of_safety = None
  if market_price is not None and iv_ps is not None and iv_ps > 0:
    price_to_iv = market_price / iv_ps
    margin_of_safety = (iv_ps - market_price) / iv_ps

  result = MetricsResult(
      owners_earnings=oe,
      return_on_equity=return_on_equity(statement.net_income,
                                        statement.shareholders_equity),
      return_on_net_tangible_assets=return_on_net_tangible_assets(
          statement.net_income,
          statement.total_assets,
          statement.total_liabilities,
          statement.intangible_assets,
      ),
      debt_to_equity=debt_to_equity(statement.total_liabilities,
                                    statement.shareholders_equity),
      earnings_per_share=eps,
      intrinsic_value=iv,
      iv_per_share=iv_ps,
      eps_cagr=growth,
      market_price=market_price,
      price_to_iv=price_to_iv,
      margin_of_safety=margin_of_safety,
      inputs=inputs,
      diag=diag,
  )

  undefined = result.undefined_metrics
  if undefined:
    logger.debug('%s: undefined metrics: %s', period_label,
                 ', '.join(undefined))
  diag['undefined'] = ','.join(undefined)

  return result


def compute_metrics_history(
    panel: pd.DataFrame,
    config: Optional[ScenarioConfig] = None,
) -> pd.DataFrame:
  '''
  Compute metrics for every period of a single company.

  EPS growth is measured from the first period to each later one. With
  numeric period labels (fiscal years) the elapsed time is the difference of
  the labels, so gaps in the panel are respected; otherwise it is the number
  of rows elapsed.

  Args:
    panel: One row per period with the STATEMENT_FIELDS columns and an
      optional 'period' column used for ordering
    config: ScenarioConfig (default: ScenarioConfig.default())

  Returns:
    DataFrame with one row per period (MetricsResult.to_dict columns)

  Raises:
    ValueError: Empty panel or a row with missing statement data
  '''
  if panel.empty:
    raise ValueError('Statement panel is empty')

  if config is None:
    config = ScenarioConfig.default()

  numeric_periods = False
  if 'period' in panel.columns:
    panel = panel.sort_values('period')
    numeric_periods = pd.api.types.is_numeric_dtype(panel['period'])

  rows = []
  base_eps: Optional[float] = None
  base_period: Any = None
  for i, (_, row) in enumerate(panel.iterrows()):
    statement = FinancialStatement.from_row(row)

    if i == 0:
      result = compute_metrics(statement, config)
      base_eps = result.earnings_per_share
      base_period = statement.period
    else:
      if numeric_periods:
        elapsed = float(statement.period - base_period)
      else:
        elapsed = float(i)
      result = compute_metrics(
          statement,
          config,
          prior_eps=base_eps,
          eps_years=elapsed if base_eps is not None else None,
      )

    rows.append({'period': statement.period, **result.to_dict()})

  history = pd.DataFrame(rows)
  logger.info('Computed metrics for %d periods (scenario: %s)', len(history),
              config.name)
  return history
