"""
BMI Gauge

Maps a calculation result onto the circular gauge shown with the result.
The gauge spans a fixed BMI scale (10-40 by default, see core.bmi_config);
values outside the scale pin the needle to the nearest end.
"""
from dataclasses import dataclass
from typing import Optional

from core.bmi_config import bmi_config
from services.bmi_calculator import BMIResult, category_color


@dataclass(frozen=True)
class GaugeReading:
    """What the gauge renders for one result."""
    value: float
    lower: float
    upper: float
    fraction: float  # 0.0 at lower, 1.0 at upper
    label: str       # center text, one decimal place
    color: str       # tint, same as the category color


def gauge_fraction(value: float, lower: float, upper: float) -> float:
    """Position of value on [lower, upper], clamped to [0, 1]."""
    if upper <= lower:
        raise ValueError(f"gauge upper bound {upper} must exceed lower bound {lower}")
    fraction = (value - lower) / (upper - lower)
    return min(1.0, max(0.0, fraction))


def gauge_reading(
    result: BMIResult,
    lower: Optional[float] = None,
    upper: Optional[float] = None,
) -> Optional[GaugeReading]:
    """
    Build the gauge reading for a result.

    Returns None for an INVALID result; the caller hides the gauge then.
    """
    if not result.is_valid:
        return None

    lower = bmi_config.gauge_min if lower is None else lower
    upper = bmi_config.gauge_max if upper is None else upper

    return GaugeReading(
        value=result.bmi,
        lower=lower,
        upper=upper,
        fraction=gauge_fraction(result.bmi, lower, upper),
        label=f"{result.bmi:.1f}",
        color=category_color(result.category),
    )
