# file: query_point.py

import requests
import sys

# URL of a running instance
url = "http://localhost:8000/"

# Stockholm unless given on the command line
lat, lng = (float(sys.argv[1]), float(sys.argv[2])) if len(sys.argv) == 3 else (59.3293, 18.0686)

try :
    response = requests.get(url, params = {"lat" : lat, "lng" : lng}, timeout = 60)
    if response.status_code == 200 :
        data = response.json()
        aqi = data.pop("aqi")
        for pollutant, reading in data.items() :
            print(f"{pollutant:>13}: {reading['value']} {reading['unit'] or ''}")
        print(f"AQI: {aqi['value']} ({aqi.get('qualitativeName', 'n/a')})")
        print(f"Expires: {response.headers.get('Expires')}")
    else :
        print(f"Error: {response.status_code} - {response.text}")
except requests.exceptions.RequestException as e :
    print(f"Request failed: {e}")
