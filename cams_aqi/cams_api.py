# file: cams_aqi/cams_api.py

import aiohttp
import asyncio
import logging
import ssl
from typing import Any, List, Optional
from urllib.parse import urlencode

import certifi

from cams_aqi.config import CAMS_TIMEOUT, CAMS_TOKEN, CAMS_WMS_URL
from cams_aqi.errors import LayerConfigurationError, UpstreamFetchError
from cams_aqi.geo import Coordinate, bounding_box
from cams_aqi.layers import LAYER_CATALOG, PollutantType
from cams_aqi.models import PollutantReading

IMAGE_WIDTH = 200
IMAGE_HEIGHT = 200
# Probe pixel, centre of the virtual image
PROBE_X = 100
PROBE_Y = 100


def build_layer_query(coord: Coordinate, pollutant: PollutantType) -> str:
    """Build the GetFeatureInfo URL sampling one CAMS layer at the centre of the box around coord."""
    try:
        layer = LAYER_CATALOG[pollutant]
    except KeyError:
        raise LayerConfigurationError(f"No CAMS layer configured for {pollutant!r}") from None

    bbox = bounding_box(coord)
    params = {
        "service": "wms",
        "version": "1.3.0",
        "request": "GetFeatureInfo",
        "token": CAMS_TOKEN,
        "layers": layer,
        "query_layers": layer,
        "info_format": "application/json",
        "elevation": 0,
        "crs": "EPSG:4326",
        "bbox": ",".join(repr(float(v)) for v in bbox),
        "width": IMAGE_WIDTH,
        "height": IMAGE_HEIGHT,
        "x": PROBE_X,
        "y": PROBE_Y,
    }
    # TIME / DIM_REFERENCE_TIME make the CAMS WMS fail, so forecasts are always the latest run
    return f"{CAMS_WMS_URL}?{urlencode(params)}"


def parse_probe(pollutant: PollutantType, payload: Any) -> PollutantReading:
    """Extract Probes[0].Value.Data / Unit from a GetFeatureInfo JSON document."""
    probe = payload["Probes"][0]["Value"]
    value = probe["Data"]
    if isinstance(value, bool) or not (value is None or isinstance(value, (int, float))):
        raise TypeError(f"non-numeric Data {value!r}")
    return PollutantReading(type=pollutant, value=value, unit=probe["Unit"])


async def fetch_layer(session: aiohttp.ClientSession, coord: Coordinate,
                      pollutant: PollutantType) -> PollutantReading:
    url = build_layer_query(coord, pollutant)
    try:
        async with session.get(url) as response:
            if not 200 <= response.status < 300:
                logging.warning(f"CAMS layer {pollutant.value}: HTTP {response.status}")
                raise UpstreamFetchError()
            try:
                payload = await response.json(content_type=None)
                return parse_probe(pollutant, payload)
            except (ValueError, KeyError, IndexError, TypeError) as e:
                logging.warning(f"Unreadable CAMS response for {pollutant.value}: {e!r}")
                return PollutantReading(type=pollutant, value=None, unit=None)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logging.error(f"Error fetching CAMS layer {pollutant.value}: {e}")
        raise UpstreamFetchError() from e


async def fetch_all(coord: Coordinate, timeout: Optional[float] = CAMS_TIMEOUT) -> List[PollutantReading]:
    """Fetch every pollutant layer concurrently; the first failed request fails the whole batch."""
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    session_kwargs = {"connector": aiohttp.TCPConnector(ssl=ssl_context)}
    if timeout:
        session_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

    async with aiohttp.ClientSession(**session_kwargs) as session:
        tasks = [fetch_layer(session, coord, pollutant) for pollutant in PollutantType]
        readings = await asyncio.gather(*tasks)

    missing = [r.type.value for r in readings if r.value is None]
    logging.info(f"Fetched {len(readings)} CAMS layers for {coord}, missing values: {missing or 'none'}")
    return list(readings)
