# file: cams_aqi/aqi.py

import logging
from typing import Iterable, Optional

from cams_aqi.layers import INDEX_POLLUTANTS
from cams_aqi.models import AirQualityIndex, PollutantReading, QualitativeName


def classify(value: float) -> Optional[QualitativeName]:
    """Map an index value to its band; NaN has no band."""
    if value >= 100:
        return "very_high"
    if value >= 75:
        return "high"
    if value >= 50:
        return "medium"
    if value >= 25:
        return "low"
    if value < 25:
        return "very_low"
    return None


def compute_index(readings: Iterable[PollutantReading]) -> AirQualityIndex:
    """Average NO2, PM10, O3 and PM2.5 into the composite index."""
    by_type = {reading.type: reading.value for reading in readings}
    values = [by_type.get(pollutant) for pollutant in INDEX_POLLUTANTS]

    if any(v is None for v in values):
        missing = [p.value for p, v in zip(INDEX_POLLUTANTS, values) if v is None]
        logging.warning(f"Index undefined, missing values for {missing}")
        mean = float("nan")
    else:
        mean = sum(values) / len(INDEX_POLLUTANTS)

    return AirQualityIndex(value=mean, qualitative_name=classify(mean))
