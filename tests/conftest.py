import pytest
from aioresponses import aioresponses
from fastapi.testclient import TestClient

from cams_aqi.layers import PollutantType
from cams_aqi.main import app


@pytest.fixture
def cams():
    with aioresponses() as mocked:
        yield mocked


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def index_values():
    return {
        PollutantType.NO2: 40,
        PollutantType.PM10: 20,
        PollutantType.O3: 60,
        PollutantType.PM25: 10,
    }
