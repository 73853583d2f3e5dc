# file: cams_aqi/response.py

import json
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from cams_aqi.models import AirQualityIndex, PollutantReading
from cams_aqi.utils import http_date, next_hour_expiry


def build_payload(readings: Iterable[PollutantReading], index: AirQualityIndex) -> Dict[str, Any]:
    """Pollutant entries in fetch order followed by the aqi summary."""
    payload: Dict[str, Any] = {
        reading.type.value: {"unit": reading.unit, "value": reading.value}
        for reading in readings
    }

    # JSON has no NaN; an undefined index is null and carries no band
    aqi: Dict[str, Any] = {}
    if index.qualitative_name is not None:
        aqi["qualitativeName"] = index.qualitative_name
    aqi["value"] = index.value if index.is_defined else None
    payload["aqi"] = aqi
    return payload


def render_body(payload: Dict[str, Any], pretty: bool) -> str:
    if pretty:
        return json.dumps(payload, indent=4, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def success_headers(now: Optional[datetime] = None) -> Dict[str, str]:
    return {
        "Expires": http_date(next_hour_expiry(now)),
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Request-Method": "GET",
    }
