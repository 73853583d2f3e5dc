from cams_aqi.layers import BAD_LIMIT, INDEX_POLLUTANTS, LAYER_CATALOG, MODERATE_LIMIT, PollutantType


def test_catalogs_cover_every_pollutant():
    assert set(LAYER_CATALOG) == set(PollutantType)
    assert set(MODERATE_LIMIT) == set(PollutantType)
    assert set(BAD_LIMIT) == set(PollutantType)


def test_pollutant_order_is_stable():
    assert [p.value for p in PollutantType] == [
        "Pollen-Birch", "CO", "Pollen-Grass", "NH3", "NMVOC", "NO",
        "NO2", "O3", "PANs", "PM10", "PM2.5", "SO2",
    ]


def test_layer_names():
    assert LAYER_CATALOG[PollutantType.PM25] == "composition_europe_pm2p5_forecast_surface"
    assert LAYER_CATALOG[PollutantType.POLLEN_BIRCH] == "composition_europe_pol_birch_forecast_surface"
    assert all(name.startswith("composition_europe_") for name in LAYER_CATALOG.values())


def test_bad_limit_is_above_moderate_limit():
    for pollutant in PollutantType:
        moderate, bad = MODERATE_LIMIT[pollutant], BAD_LIMIT[pollutant]
        assert (moderate is None) == (bad is None)
        if moderate is not None:
            assert bad > moderate


def test_index_pollutants():
    assert INDEX_POLLUTANTS == (PollutantType.NO2, PollutantType.PM10, PollutantType.O3, PollutantType.PM25)
