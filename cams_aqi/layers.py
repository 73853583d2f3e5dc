# file: cams_aqi/layers.py

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class PollutantType(str, Enum):
    POLLEN_BIRCH = "Pollen-Birch"
    CO = "CO"
    POLLEN_GRASS = "Pollen-Grass"
    NH3 = "NH3"
    NMVOC = "NMVOC"
    NO = "NO"
    NO2 = "NO2"
    O3 = "O3"
    PANS = "PANs"
    PM10 = "PM10"
    PM25 = "PM2.5"
    SO2 = "SO2"


LAYER_CATALOG: Mapping[PollutantType, str] = MappingProxyType({
    PollutantType.POLLEN_BIRCH: "composition_europe_pol_birch_forecast_surface",
    PollutantType.CO: "composition_europe_co_forecast_surface",
    PollutantType.POLLEN_GRASS: "composition_europe_pol_grass_forecast_surface",
    PollutantType.NH3: "composition_europe_nh3_forecast_surface",
    PollutantType.NMVOC: "composition_europe_nmvoc_forecast_surface",
    PollutantType.NO: "composition_europe_no_forecast_surface",
    PollutantType.NO2: "composition_europe_no2_forecast_surface",
    PollutantType.O3: "composition_europe_o3_forecast_surface",
    PollutantType.PANS: "composition_europe_pans_forecast_surface",
    PollutantType.PM10: "composition_europe_pm10_forecast_surface",
    PollutantType.PM25: "composition_europe_pm2p5_forecast_surface",
    PollutantType.SO2: "composition_europe_so2_forecast_surface",
})

# Naturvårdsverket assessment thresholds (lower / upper), µg/m³.
# Reference data, not part of the response yet.
MODERATE_LIMIT: Mapping[PollutantType, Optional[float]] = MappingProxyType({
    PollutantType.POLLEN_BIRCH: None,
    PollutantType.CO: 5000,
    PollutantType.POLLEN_GRASS: None,
    PollutantType.NH3: None,
    PollutantType.NMVOC: None,
    PollutantType.NO: None,
    PollutantType.NO2: 54,
    PollutantType.O3: None,
    PollutantType.PANS: None,
    PollutantType.PM10: 25,
    PollutantType.PM25: 10,
    PollutantType.SO2: 100,
})

BAD_LIMIT: Mapping[PollutantType, Optional[float]] = MappingProxyType({
    PollutantType.POLLEN_BIRCH: None,
    PollutantType.CO: 7000,
    PollutantType.POLLEN_GRASS: None,
    PollutantType.NH3: None,
    PollutantType.NMVOC: None,
    PollutantType.NO: None,
    PollutantType.NO2: 72,
    PollutantType.O3: None,
    PollutantType.PANS: None,
    PollutantType.PM10: 35,
    PollutantType.PM25: 25,
    PollutantType.SO2: 150,
})

# Pollutants averaged into the composite index
INDEX_POLLUTANTS = (PollutantType.NO2, PollutantType.PM10, PollutantType.O3, PollutantType.PM25)
