from pydantic import BaseModel, ConfigDict
from typing import Optional

from services.bmi_calculator import (
    BMICategory,
    BMIInput,
    BMIResult,
    HeightUnit,
    WeightUnit,
    category_color,
)
from services.bmi_gauge import GaugeReading, gauge_reading


class BMICalculationRequest(BaseModel):
    """Raw input as the screen collects it"""
    weight_text: str
    height_text: str
    weight_unit: WeightUnit = WeightUnit.KG
    height_unit: HeightUnit = HeightUnit.METERS

    def to_input(self) -> BMIInput:
        return BMIInput(
            weight_text=self.weight_text,
            height_text=self.height_text,
            weight_unit=self.weight_unit,
            height_unit=self.height_unit,
        )


class GaugeResponse(BaseModel):
    value: float
    lower: float
    upper: float
    fraction: float
    label: str
    color: str

    model_config = ConfigDict(from_attributes=True)


class BMIResultResponse(BaseModel):
    bmi: float
    category: BMICategory
    category_label: str
    color: str
    gauge: Optional[GaugeResponse] = None  # None when the input was invalid

    @classmethod
    def from_result(cls, result: BMIResult, gauge: Optional[GaugeReading] = None) -> "BMIResultResponse":
        if gauge is None:
            gauge = gauge_reading(result)
        return cls(
            bmi=result.bmi,
            category=result.category,
            category_label=result.category.label,
            color=category_color(result.category),
            gauge=GaugeResponse.model_validate(gauge) if gauge is not None else None,
        )


class BMIScreenState(BaseModel):
    """Everything the calculator screen displays"""
    weight_text: str
    height_text: str
    weight_unit: WeightUnit
    height_unit: HeightUnit
    show_result: bool = False
    result: Optional[BMIResultResponse] = None
    export_text: Optional[str] = None
