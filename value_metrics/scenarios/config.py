"""
Scenario configuration for intrinsic value estimates.

ScenarioConfig is a serializable (JSON-friendly) set of DCF assumptions, so
a valuation can be reproduced from the config that produced it.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
import json
import numbers
from typing import Any


@dataclass
class ScenarioConfig:
  """
  Assumptions for projecting owner's earnings.

  Rates are fractions (0.05 = 5%).

  Attributes:
    name: Human-readable scenario name
    growth_rate: Constant annual growth of owner's earnings
    discount_rate: Required annual return
    n_years: Number of projected years
  """
  name: str = 'default'
  growth_rate: float = 0.05
  discount_rate: float = 0.10
  n_years: int = 10

  @classmethod
  def default(cls) -> 'ScenarioConfig':
    """
    Create default scenario configuration.

    Uses:
      - 5% owner's earnings growth
      - Fixed 10% discount rate
      - 10-year projection
    """
    return cls(
        name='default',
        growth_rate=0.05,
        discount_rate=0.10,
        n_years=10,
    )

  @classmethod
  def conservative(cls) -> 'ScenarioConfig':
    """Scenario with 3% growth and a 12% required return."""
    return cls(
        name='conservative',
        growth_rate=0.03,
        discount_rate=0.12,
        n_years=10,
    )

  @classmethod
  def discount_6pct(cls) -> 'ScenarioConfig':
    """Scenario with 6% discount rate."""
    return cls(
        name='discount_6pct',
        growth_rate=0.05,
        discount_rate=0.06,
        n_years=10,
    )

  def validate(self) -> 'ScenarioConfig':
    """
    Check the projection length.

    Rates are not range-checked: negative growth and extreme discount rates
    are legitimate inputs to the engine.

    Raises:
      ValueError: n_years is negative or not an integer
    """
    if (isinstance(self.n_years, bool) or
        not isinstance(self.n_years, numbers.Integral) or self.n_years < 0):
      raise ValueError(
          f'n_years must be a non-negative integer, got {self.n_years!r}')
    return self

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ScenarioConfig':
    """Create from dictionary, rejecting unknown keys."""
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
      raise ValueError(f'Unknown scenario fields: {unknown}')
    return cls(**data).validate()

  @classmethod
  def from_json(cls, json_str: str) -> 'ScenarioConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


SCENARIO_PRESETS = {
    'default': ScenarioConfig.default,
    'conservative': ScenarioConfig.conservative,
    'discount_6pct': ScenarioConfig.discount_6pct,
}


def get_scenario(name: str) -> ScenarioConfig:
  """
  Look up a preset scenario by name.

  Raises:
    KeyError: If the name is not a registered preset
  """
  try:
    factory = SCENARIO_PRESETS[name]
  except KeyError as e:
    raise KeyError(f"Unknown scenario: '{name}'. "
                   f'Available: {list(SCENARIO_PRESETS.keys())}') from e
  return factory()
