"""
BMI Configuration

Display settings for the BMI gauge.
Classification thresholds and unit factors are constants in
services.bmi_calculator.
"""
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BMIConfig(BaseSettings):
    """
    Configurable BMI display settings.

    Adjustable via environment variables without code changes.
    """
    model_config = SettingsConfigDict(
        env_prefix="BMI_",
        case_sensitive=False
    )

    # Lower end of the gauge scale
    gauge_min: float = 10.0

    # Upper end of the gauge scale
    gauge_max: float = 40.0

    @model_validator(mode="after")
    def check_gauge_range(self) -> "BMIConfig":
        if self.gauge_max <= self.gauge_min:
            raise ValueError(
                f"gauge_max ({self.gauge_max}) must be greater than gauge_min ({self.gauge_min})"
            )
        return self


# Global config instance
bmi_config = BMIConfig()
