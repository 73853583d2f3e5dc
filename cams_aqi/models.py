#file: cams_aqi/models.py

import math
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

from cams_aqi.layers import PollutantType

QualitativeName = Literal["very_low", "low", "medium", "high", "very_high"]


class PollutantReading(BaseModel):
    type: PollutantType = Field(..., description="Pollutant the CAMS layer was queried for")
    value: Optional[Union[int, float]] = Field(None, description="Probed concentration, None when the layer could not be parsed")
    unit: Optional[str] = Field(None, description="Unit reported by CAMS, e.g. µg/m3")


class AirQualityIndex(BaseModel):
    value: float = Field(..., description="Mean of NO2, PM10, O3 and PM2.5; NaN when any of them is missing")
    qualitative_name: Optional[QualitativeName] = Field(None, description="Band of the mean, unset for NaN")

    @property
    def is_defined(self) -> bool:
        return not math.isnan(self.value)
