"""
Unit tests for parameter extraction.
"""

import pytest
from unittest.mock import Mock

from src.fieldclimate_et0.processing import ParameterExtractor
from src.fieldclimate_et0.models import MeteorologicalReading, AggregatedParameters


class TestParameterExtractor:
    """Test ParameterExtractor class."""

    @pytest.fixture
    def extractor(self):
        """Create extractor instance."""
        return ParameterExtractor(logger=Mock())

    def test_extract_fieldclimate_payload(self, extractor, sample_data):
        """Aggregates cover every reading in the payload."""
        params = extractor.extract(sample_data)

        assert params.temperatura_media == pytest.approx(24.8)
        assert params.temperatura_maxima == 33.0
        assert params.temperatura_minima == 18.0
        assert params.umidade_relativa_med == pytest.approx(340 / 6)
        assert params.radiacao_solar == pytest.approx(15.0)
        assert params.velocidade_vento_2m == pytest.approx(2.0)

    def test_humidity_extremes_absent_without_explicit_keys(self, extractor, sample_data):
        params = extractor.extract(sample_data)

        assert params.umidade_relativa_max is None
        assert params.umidade_relativa_min is None

    def test_humidity_extremes_from_explicit_keys(self, extractor):
        data = [
            {"air_temperature": 20.0, "relative_humidity_max": 95, "relative_humidity_min": 50},
            {"air_temperature": 30.0, "relative_humidity_max": 88, "relative_humidity_min": 35},
        ]

        params = extractor.extract(data)

        assert params.umidade_relativa_max == 95.0
        assert params.umidade_relativa_min == 35.0

    def test_extract_from_reading_objects(self, extractor):
        readings = [
            MeteorologicalReading(air_temperature=10.0, wind_speed=1.0),
            MeteorologicalReading(air_temperature=20.0, wind_speed=3.0),
        ]

        params = extractor.extract(readings)

        assert params.temperatura_media == 15.0
        assert params.velocidade_vento_2m == 2.0
        assert params.radiacao_solar is None

    def test_zero_is_a_valid_reading(self, extractor):
        params = extractor.extract([{"air_temperature": 0.0, "solar_radiation": 0}])

        assert params.temperatura_media == 0.0
        assert params.radiacao_solar == 0.0

    def test_non_numeric_values_are_ignored(self, extractor):
        data = [
            {"air_temperature": "25", "relative_humidity": True},
            {"air_temperature": float("nan"), "wind_speed": None},
            {"air_temperature": 22.0},
        ]

        params = extractor.extract(data)

        assert params.temperatura_media == 22.0
        assert params.umidade_relativa_med is None
        assert params.velocidade_vento_2m is None

    def test_day_without_temperature_is_not_a_warning(self):
        logger = Mock()
        params = ParameterExtractor(logger=logger).extract([{"relative_humidity": 55.0}])

        assert params.temperatura_media is None
        logger.warning.assert_not_called()

    def test_infinite_values_are_ignored(self, extractor):
        data = [
            {"air_temperature": float("inf"), "solar_radiation": float("-inf")},
            {"air_temperature": 24.0, "solar_radiation": 18.0},
        ]

        params = extractor.extract(data)

        assert params.temperatura_maxima == 24.0
        assert params.radiacao_solar == 18.0

    @pytest.mark.parametrize("data", [None, "garbage", 42, {"data": "x"}, {"data": None}, {}])
    def test_malformed_input_gives_empty_parameters(self, extractor, data):
        assert extractor.extract(data) == AggregatedParameters()

    def test_empty_list(self, extractor):
        params = extractor.extract({"data": []})
        assert params.available() == []

    def test_group_by_day(self, extractor, sample_data):
        days = extractor.group_by_day(sample_data)

        assert list(days.keys()) == ["2024-09-01", "2024-09-02", "2024-09-03"]
        assert len(days["2024-09-01"]) == 3
        assert len(days["2024-09-02"]) == 2
        assert len(days["2024-09-03"]) == 1

    def test_group_by_day_sorts_and_skips_undated(self, extractor):
        data = [
            {"date": "2024-09-02 10:00:00", "air_temperature": 25.0},
            {"air_temperature": 20.0},
            {"date": "2024-09-01T10:00:00", "air_temperature": 22.0},
        ]

        days = extractor.group_by_day(data)

        assert list(days.keys()) == ["2024-09-01", "2024-09-02"]

    def test_group_by_day_malformed(self, extractor):
        assert len(extractor.group_by_day("garbage")) == 0


class TestAggregatedParameters:
    """Test AggregatedParameters helpers."""

    def test_available_and_has(self):
        params = AggregatedParameters(temperatura_maxima=30.0, radiacao_solar=0.0)

        assert params.available() == ["temperatura_maxima", "radiacao_solar"]
        assert params.has("temperatura_maxima", "radiacao_solar")
        assert not params.has("temperatura_maxima", "temperatura_minima")

    def test_to_dict(self):
        params = AggregatedParameters(temperatura_media=21.5)
        data = params.to_dict()

        assert data["temperatura_media"] == 21.5
        assert data["velocidade_vento_2m"] is None
