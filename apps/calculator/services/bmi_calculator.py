"""
BMI Calculation Service

Turns raw weight/height text plus unit selectors into a BMI value and category.
BMI = weight_kg / (height_m)²

Rules:
- Both texts must parse as finite decimal numbers
- Height must be strictly positive after conversion to meters
- Anything else yields the sentinel result: BMI 0.0, category INVALID

The engine is pure. No state, no logging, no exceptions. The Invalid
category is the only error signal.
"""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# CONSTANTS
# =============================================================================

POUNDS_TO_KG = 0.453592
INCHES_TO_M = 0.0254
CM_PER_M = 100.0

# Lower bounds (inclusive) of each category above Underweight
NORMAL_WEIGHT_MIN = 18.5
OVERWEIGHT_MIN = 25.0
OBESE_MIN = 30.0

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


# =============================================================================
# TYPES
# =============================================================================

class WeightUnit(str, Enum):
    """Weight units offered by the unit picker."""
    KG = "kg"
    LBS = "lbs"


class HeightUnit(str, Enum):
    """Height units offered by the unit picker."""
    METERS = "m"
    CENTIMETERS = "cm"
    INCHES = "in"


class BMICategory(str, Enum):
    """Classification bucket for a BMI value."""
    UNDERWEIGHT = "underweight"
    NORMAL_WEIGHT = "normal_weight"
    OVERWEIGHT = "overweight"
    OBESE = "obese"
    INVALID = "invalid"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    BMICategory.UNDERWEIGHT: "Underweight",
    BMICategory.NORMAL_WEIGHT: "Normal weight",
    BMICategory.OVERWEIGHT: "Overweight",
    BMICategory.OBESE: "Obese",
    BMICategory.INVALID: "Invalid",
}

_CATEGORY_COLORS = {
    BMICategory.UNDERWEIGHT: "blue",
    BMICategory.NORMAL_WEIGHT: "green",
    BMICategory.OVERWEIGHT: "orange",
    BMICategory.OBESE: "red",
    BMICategory.INVALID: "gray",
}


@dataclass(frozen=True)
class BMIInput:
    """Raw user input for one calculation."""
    weight_text: str
    height_text: str
    weight_unit: WeightUnit = WeightUnit.KG
    height_unit: HeightUnit = HeightUnit.METERS


@dataclass(frozen=True)
class BMIResult:
    """Outcome of one calculation."""
    bmi: float
    category: BMICategory

    @property
    def is_valid(self) -> bool:
        return self.category is not BMICategory.INVALID


INVALID_RESULT = BMIResult(bmi=0.0, category=BMICategory.INVALID)


# =============================================================================
# CONVERSION & CLASSIFICATION
# =============================================================================

def parse_number(text: str) -> Optional[float]:
    """
    Parse a decimal literal, returning None if it is not a finite number.

    Stricter than float(): no surrounding whitespace, no digit separators,
    no nan/inf spellings.
    """
    if not isinstance(text, str) or not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        # Exponent overflow, e.g. "1e999"
        return None
    return value


def convert_weight_to_kg(weight: float, unit: WeightUnit) -> float:
    if unit == WeightUnit.LBS:
        return weight * POUNDS_TO_KG
    return weight


def convert_height_to_m(height: float, unit: HeightUnit) -> float:
    if unit == HeightUnit.INCHES:
        return height * INCHES_TO_M
    if unit == HeightUnit.CENTIMETERS:
        return height / CM_PER_M
    return height


def classify_bmi(bmi: float) -> BMICategory:
    """
    Classify a BMI value.

    Half-open intervals, checked in ascending order:
        bmi < 18.5          UNDERWEIGHT
        18.5 <= bmi < 25    NORMAL_WEIGHT
        25 <= bmi < 30      OVERWEIGHT
        bmi >= 30           OBESE
    """
    if bmi < NORMAL_WEIGHT_MIN:
        return BMICategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_MIN:
        return BMICategory.NORMAL_WEIGHT
    if bmi < OBESE_MIN:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


# =============================================================================
# PUBLIC API
# =============================================================================

def calculate(
    weight_text: str,
    height_text: str,
    weight_unit: WeightUnit = WeightUnit.KG,
    height_unit: HeightUnit = HeightUnit.METERS,
) -> BMIResult:
    """
    Calculate BMI from raw weight and height text.

    Args:
        weight_text: Weight as typed by the user
        height_text: Height as typed by the user
        weight_unit: Unit of weight_text
        height_unit: Unit of height_text

    Returns:
        BMIResult with the unrounded BMI and its category, or
        INVALID_RESULT if either text does not parse or the converted
        height is not strictly positive.

    Examples:
        >>> calculate("100", "2")
        BMIResult(bmi=25.0, category=<BMICategory.OVERWEIGHT: 'overweight'>)
        >>> calculate("70", "abc")
        BMIResult(bmi=0.0, category=<BMICategory.INVALID: 'invalid'>)
    """
    weight = parse_number(weight_text)
    height = parse_number(height_text)
    if weight is None or height is None:
        return INVALID_RESULT

    weight_kg = convert_weight_to_kg(weight, weight_unit)
    height_m = convert_height_to_m(height, height_unit)
    if height_m <= 0:
        return INVALID_RESULT

    area = height_m * height_m
    if area == 0:
        # Underflow for vanishingly small heights
        return INVALID_RESULT

    bmi = weight_kg / area
    if not math.isfinite(bmi):
        return INVALID_RESULT
    if bmi == 0:
        # Signed zero from a "-0" weight
        bmi = 0.0

    return BMIResult(bmi=bmi, category=classify_bmi(bmi))


def calculate_input(bmi_input: BMIInput) -> BMIResult:
    """Calculate BMI from a BMIInput."""
    return calculate(
        bmi_input.weight_text,
        bmi_input.height_text,
        bmi_input.weight_unit,
        bmi_input.height_unit,
    )


def category_color(category: BMICategory) -> str:
    """Display color for a category (gray for INVALID)."""
    return _CATEGORY_COLORS[category]


def format_report(
    weight_text: str,
    weight_unit: WeightUnit,
    height_text: str,
    height_unit: HeightUnit,
    result: BMIResult,
) -> str:
    """
    Render the shareable plain-text report.

    Echoes the raw inputs as typed. No validation: run calculate() first.
    """
    return (
        "BMI Report\n"
        f"Weight: {weight_text} {weight_unit.value}\n"
        f"Height: {height_text} {height_unit.value}\n"
        f"BMI: {result.bmi:.2f}\n"
        f"Category: {result.category.label}"
    )
