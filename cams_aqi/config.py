# file: cams_aqi/config.py

import os
from dotenv import load_dotenv

load_dotenv()

CAMS_WMS_URL = os.getenv("CAMS_WMS_URL", "https://apps.ecmwf.int/wms/")
CAMS_TOKEN = os.getenv("CAMS_TOKEN", "public")

# Seconds; unset keeps aiohttp's default session timeout
_timeout = os.getenv("CAMS_TIMEOUT")
CAMS_TIMEOUT = float(_timeout) if _timeout else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
