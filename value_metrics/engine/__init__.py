'''Valuation metrics engine with pure math functions.'''

from value_metrics.engine.dcf import (
    dcf_schedule,
    intrinsic_value,
    intrinsic_value_per_share,
)
from value_metrics.engine.growth import eps_cagr
from value_metrics.engine.ratios import (
    debt_to_equity,
    earnings_per_share,
    net_tangible_assets,
    owners_earnings,
    return_on_equity,
    return_on_net_tangible_assets,
)

__all__ = [
    'dcf_schedule',
    'debt_to_equity',
    'earnings_per_share',
    'eps_cagr',
    'intrinsic_value',
    'intrinsic_value_per_share',
    'net_tangible_assets',
    'owners_earnings',
    'return_on_equity',
    'return_on_net_tangible_assets',
]
