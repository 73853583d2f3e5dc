# file: cams_aqi/main.py

import logging
import math
import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.responses import PlainTextResponse, Response
from typing import Optional

from cams_aqi.aqi import compute_index
from cams_aqi.cams_api import fetch_all
from cams_aqi.config import HOST, LOG_LEVEL, PORT
from cams_aqi.errors import AirQualityError, InputValidationError
from cams_aqi.response import build_payload, render_body, success_headers

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

MISSING_LAT = 'You did not provide a latitude value in the "lat" search parameter.'
MISSING_LNG = 'You did not provide a longitude value in the "lng" search parameter.'

app = FastAPI(
    title = "Air Quality at a Point - CAMS",
    description = "Samples the CAMS European air-quality forecast layers around a coordinate and summarises them.",
    version = "0.1",
)


def parse_coordinate(raw: Optional[str], message: str) -> float:
    """Parse a lat/lng search parameter, rejecting missing, non-numeric and non-finite values."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InputValidationError(message) from None
    if not math.isfinite(value):
        raise InputValidationError(message)
    return value


@app.exception_handler(AirQualityError)
async def air_quality_error(request: Request, exc: AirQualityError) :
    logging.error(f"Request {request.url.path}?{request.url.query} rejected: {exc}")
    return PlainTextResponse(str(exc), status_code = exc.status_code)


@app.get("/")
async def air_quality(
    request: Request,
    lat: Optional[str] = Query(None, description="Latitude in decimal degrees"),
    lng: Optional[str] = Query(None, description="Longitude in decimal degrees"),
):
    """Sample every CAMS pollutant layer around (lat, lng) and return the values with a composite index."""
    latitude = parse_coordinate(lat, MISSING_LAT)
    longitude = parse_coordinate(lng, MISSING_LNG)
    logging.info(f"Fetching air quality for lat={latitude} lng={longitude}")

    readings = await fetch_all((longitude, latitude))
    index = compute_index(readings)
    payload = build_payload(readings, index)

    # Direct calls (no Origin) get a readable body
    pretty = request.headers.get("origin") is None
    return Response(
        content = render_body(payload, pretty),
        status_code = 200,
        media_type = "application/json",
        headers = success_headers(),
    )


if __name__ == "__main__" :
    uvicorn.run(app, host = HOST, port = PORT, log_level = LOG_LEVEL.lower())
