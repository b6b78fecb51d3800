from __future__ import annotations

import argparse
import logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Calculate BMI and print the shareable report.")
    parser.add_argument("weight", help="Weight as typed, e.g. 70 or 154.5")
    parser.add_argument("height", help="Height as typed, e.g. 1.75, 175 or 70")
    parser.add_argument("--weight-unit", choices=["kg", "lbs"], default="kg", help="Weight unit (default: kg)")
    parser.add_argument("--height-unit", choices=["m", "cm", "in"], default="m", help="Height unit (default: m)")
    parser.add_argument("--json", action="store_true", help="Print the screen state as JSON instead of the report")
    parser.add_argument("--log", action="store_true", help="Share the report as a log record instead of stdout")
    parser.add_argument("--output", help="Also write the report to this file")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args()

    # NOTE: Run with the calculator app modules (`core`, `services`, `schemas`)
    # importable, e.g. after `pip install -e .`.
    from pydantic import ValidationError

    try:
        from core.exceptions import CalculatorException
        from core.logging import setup_logging
        from schemas import BMICalculationRequest
        from services.bmi_export import FileExporter, LoggingExporter, RecordingExporter, StreamExporter
        from services.bmi_screen import BMIScreen
    except ValidationError as e:
        raise SystemExit(f"Invalid settings: {e}")

    setup_logging(level=args.log_level)
    logger = logging.getLogger("bmi_report")

    if args.json:
        exporter = RecordingExporter()
    elif args.log:
        exporter = LoggingExporter(logger)
    else:
        exporter = StreamExporter()

    screen = BMIScreen(exporter=exporter)
    screen.apply(BMICalculationRequest(
        weight_text=args.weight,
        height_text=args.height,
        weight_unit=args.weight_unit,
        height_unit=args.height_unit,
    ))

    result = screen.calculate()
    try:
        screen.export()
        if args.output:
            FileExporter(args.output).share(screen.export_text)
    except CalculatorException as e:
        logger.error(f"Export failed [{e.error_code}]: {e.detail}")
        return 2

    if args.json:
        print(screen.snapshot().model_dump_json(indent=2))

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
