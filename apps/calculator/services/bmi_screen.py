"""
BMI Screen Model

Holds the calculator screen's state: the two text fields, the unit pickers,
the last result and the last exported report. The engine stays pure; this
object owns everything the screen displays and updates it from each result.

Side effects (feedback tap, sharing) go through injected collaborators so any
host can drive the screen.
"""
import logging
from typing import Callable, Optional

from core.exceptions import ExportError
from schemas import BMICalculationRequest, BMIResultResponse, BMIScreenState
from services.bmi_calculator import (
    BMIResult,
    HeightUnit,
    WeightUnit,
    calculate,
    category_color,
    format_report,
)
from services.bmi_export import Exporter
from services.bmi_gauge import GaugeReading, gauge_reading

logger = logging.getLogger(__name__)


class BMIScreen:
    """
    State holder for the single calculator screen.

    Args:
        exporter: Receives the report on export()
        feedback: Called after every calculation (light haptic tap on device)
    """

    def __init__(
        self,
        exporter: Exporter,
        feedback: Optional[Callable[[], None]] = None,
        weight_unit: WeightUnit = WeightUnit.KG,
        height_unit: HeightUnit = HeightUnit.METERS,
    ):
        self.exporter = exporter
        self.feedback = feedback
        self.weight_text = ""
        self.height_text = ""
        self.weight_unit = weight_unit
        self.height_unit = height_unit
        self.result: Optional[BMIResult] = None
        self.show_result = False
        self.export_text: Optional[str] = None

    def apply(self, request: BMICalculationRequest) -> None:
        """Load the fields and unit pickers from a request."""
        self.weight_text = request.weight_text
        self.height_text = request.height_text
        self.weight_unit = request.weight_unit
        self.height_unit = request.height_unit

    def calculate(self) -> BMIResult:
        """Run the engine on the current fields and show the result."""
        result = calculate(self.weight_text, self.height_text, self.weight_unit, self.height_unit)
        self.result = result
        self.show_result = True

        if result.is_valid:
            logger.info(
                f"BMI calculated: {result.bmi:.2f} ({result.category.label})",
                extra={"extra_fields": {
                    "bmi": result.bmi,
                    "category": result.category.value,
                    "weight_unit": self.weight_unit.value,
                    "height_unit": self.height_unit.value,
                }},
            )
        else:
            logger.info(
                "BMI input invalid",
                extra={"extra_fields": {
                    "weight_text": self.weight_text,
                    "height_text": self.height_text,
                }},
            )

        if self.feedback is not None:
            self.feedback()

        return result

    def export(self) -> str:
        """
        Build the report for the current result and share it.

        Raises:
            ExportError: nothing has been calculated yet, or the exporter failed
        """
        if self.result is None:
            raise ExportError("Calculate BMI before exporting a report")

        text = format_report(
            self.weight_text,
            self.weight_unit,
            self.height_text,
            self.height_unit,
            self.result,
        )
        self.export_text = text
        self.exporter.share(text)
        logger.debug(f"BMI report shared via {type(self.exporter).__name__}")
        return text

    @property
    def gauge(self) -> Optional[GaugeReading]:
        if self.result is None:
            return None
        return gauge_reading(self.result)

    @property
    def category_color(self) -> Optional[str]:
        if self.result is None:
            return None
        return category_color(self.result.category)

    def snapshot(self) -> BMIScreenState:
        result = None
        if self.result is not None:
            result = BMIResultResponse.from_result(self.result, self.gauge)
        return BMIScreenState(
            weight_text=self.weight_text,
            height_text=self.height_text,
            weight_unit=self.weight_unit,
            height_unit=self.height_unit,
            show_result=self.show_result,
            result=result,
            export_text=self.export_text,
        )
