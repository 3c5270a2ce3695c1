"""Scenario configuration and presets."""

from value_metrics.scenarios.config import get_scenario
from value_metrics.scenarios.config import SCENARIO_PRESETS
from value_metrics.scenarios.config import ScenarioConfig

__all__ = [
  'ScenarioConfig',
  'SCENARIO_PRESETS',
  'get_scenario',
]
