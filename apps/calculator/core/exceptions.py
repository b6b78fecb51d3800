"""
Custom exception classes.

The BMI engine never raises: invalid input is reported through the
Invalid category. These exceptions cover the layers around it.
"""
from typing import Optional


class CalculatorException(Exception):
    """Base exception with a stable error code."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class ExportError(CalculatorException):
    """A report could not be handed to the exporter."""

    def __init__(self, detail: str, target: Optional[str] = None):
        error_code = f"EXPORT_ERROR_{target.upper()}" if target else "EXPORT_ERROR"
        super().__init__(detail=detail, error_code=error_code)
        self.target = target
