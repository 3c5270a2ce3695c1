import math

from value_metrics.engine.guards import divide_or_none
from value_metrics.engine.guards import ieee_divide
from value_metrics.engine.guards import ieee_pow
from value_metrics.engine.guards import is_exact_zero


class TestIsExactZero:
  """Tests for is_exact_zero."""

  def test_zero_and_negative_zero(self):
    """Both signed zeros count as zero."""
    assert is_exact_zero(0.0)
    assert is_exact_zero(-0.0)
    assert is_exact_zero(0)

  def test_tiny_values_are_not_zero(self):
    """No epsilon tolerance is applied."""
    assert not is_exact_zero(1e-300)
    assert not is_exact_zero(-5e-324)

  def test_nan_is_not_zero(self):
    """NaN never compares equal to zero."""
    assert not is_exact_zero(float('nan'))


class TestDivideOrNone:
  """Tests for divide_or_none."""

  def test_plain_division(self):
    """Non-zero divisor divides normally."""
    assert divide_or_none(1000.0, 2000.0) == 0.5

  def test_scaled_division(self):
    """Scale is applied after the division."""
    assert divide_or_none(500.0, 2000.0, scale=100.0) == 25.0
    assert divide_or_none(500.0, 1500.0, scale=100.0) == (500.0 / 1500.0) * 100

  def test_zero_divisor_is_undefined(self):
    """Exact zero and negative zero divisors both give None."""
    assert divide_or_none(1.0, 0.0) is None
    assert divide_or_none(1.0, -0.0) is None
    assert divide_or_none(0.0, 0.0, scale=100.0) is None

  def test_tiny_divisor_is_defined(self):
    """A near-zero divisor is still divided through."""
    result = divide_or_none(1.0, 1e-300)
    assert result is not None
    assert result == 1.0 / 1e-300

  def test_nan_propagates(self):
    """NaN inputs give a NaN number, not None."""
    result = divide_or_none(float('nan'), 2.0)
    assert result is not None
    assert math.isnan(result)


class TestIeeeDivide:
  """Tests for ieee_divide."""

  def test_regular_division(self):
    """Non-zero divisor matches the / operator."""
    assert ieee_divide(7.0, 2.0) == 3.5

  def test_signed_infinities(self):
    """Zero divisor gives an infinity signed like the quotient."""
    assert ieee_divide(1.0, 0.0) == math.inf
    assert ieee_divide(-1.0, 0.0) == -math.inf
    assert ieee_divide(1.0, -0.0) == -math.inf
    assert ieee_divide(-1.0, -0.0) == math.inf

  def test_zero_over_zero_is_nan(self):
    """0/0 and NaN/0 are NaN."""
    assert math.isnan(ieee_divide(0.0, 0.0))
    assert math.isnan(ieee_divide(float('nan'), 0.0))


class TestIeeePow:
  """Tests for ieee_pow."""

  def test_matches_math_pow(self):
    """Ordinary inputs match math.pow exactly."""
    assert ieee_pow(1.05, 10.0) == math.pow(1.05, 10.0)
    assert ieee_pow(1.4641, 0.2) == math.pow(1.4641, 0.2)

  def test_negative_base_integer_exponent(self):
    """Integer exponents are real even for negative bases."""
    assert ieee_pow(-2.0, 3.0) == -8.0
    assert ieee_pow(-2.0, 2.0) == 4.0

  def test_negative_base_fractional_exponent_is_nan(self):
    """Fractional power of a negative number is NaN, not complex."""
    assert math.isnan(ieee_pow(-1.4641, 0.2))

  def test_zero_base_negative_exponent(self):
    """Pole at zero gives an infinity."""
    assert ieee_pow(0.0, -1.0) == math.inf
    assert ieee_pow(-0.0, -1.0) == -math.inf
    assert ieee_pow(0.0, -0.5) == math.inf

  def test_overflow(self):
    """Overflow gives a signed infinity."""
    assert ieee_pow(10.0, 400.0) == math.inf
    assert ieee_pow(-10.0, 401.0) == -math.inf
    assert ieee_pow(-10.0, 400.0) == math.inf
