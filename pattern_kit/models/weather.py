"""Weather Snapshot — the state a weather subject pushes to its observers."""

from pydantic import BaseModel, ConfigDict, Field


class WeatherSnapshot(BaseModel):
    """A complete set of measurements. Replaced wholesale, never edited."""

    model_config = ConfigDict(frozen=True)

    temperature: float                      # Degrees Fahrenheit
    humidity: float = Field(ge=0, le=100)   # Relative humidity, percent
    pressure: float = Field(gt=0)           # Inches of mercury
