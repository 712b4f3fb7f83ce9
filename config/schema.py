"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from pydantic import BaseModel, Field, field_validator


class ViewConfig(BaseModel):
    """Visible window of the chart."""

    visible_bars: int = Field(default=100, ge=0, description="Bars shown from the start of the data")
    step: int = Field(default=5, ge=1, le=50, description="Bars added/removed per resize")


class IndicatorsConfig(BaseModel):
    """Per-indicator toggles and parameters."""

    show_typical_price: bool = Field(default=False)
    show_sma: bool = Field(default=False)
    show_bollinger: bool = Field(default=False)

    sma_windows: list[int] = Field(default_factory=lambda: [20, 50, 200])
    custom_sma_window: int | None = Field(default=None, ge=10, description="User-dragged SMA size")

    # None = follow the custom SMA window, else the first SMA window
    bollinger_window: int | None = Field(default=None, ge=1)
    bollinger_std_devs: float = Field(default=2.0, gt=0.0, le=10.0)

    @field_validator("sma_windows")
    @classmethod
    def validate_windows(cls, v: list[int]) -> list[int]:
        """Windows must be positive; duplicates are dropped."""
        validated = []
        for window in v:
            if window < 1:
                raise ValueError(f"SMA window must be >= 1, got {window}")
            if window not in validated:
                validated.append(window)
        return validated


class DataConfig(BaseModel):
    """Input data settings."""

    csv_path: str | None = Field(default=None, description="CSV file with OHLC bars")
    validate_bars: bool = Field(default=False, description="Reject bars with out-of-order prices")


class CandlechartConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    view: ViewConfig = Field(default_factory=ViewConfig)
    indicators: IndicatorsConfig = Field(default_factory=IndicatorsConfig)
    data: DataConfig = Field(default_factory=DataConfig)
