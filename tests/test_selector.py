"""
Tests for ET0 method selection.

Covers the fallback order across the estimators, the quality grading, and
the rule that a 'muito_baixa' result never stops the chain.
"""

from unittest.mock import Mock

import pytest  # type: ignore
from src.fieldclimate_et0.algorithms import ET0MethodSelector, assess_data_quality
from src.fieldclimate_et0.algorithms.selector import round_et0
from src.fieldclimate_et0.models import AggregatedParameters, StationInfo, ET0Result


DAY = 245  # 1 September 2024


class TestMethodSelection:
    """Test cases for the default stage chain."""

    @pytest.fixture
    def selector(self):
        return ET0MethodSelector(logger=Mock())

    def test_full_data_uses_penman_monteith(self, selector, full_params, station):
        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.method == "penman_monteith_fao56"
        assert result.quality == "alta"
        assert 3.5 < result.value < 6.5
        assert result.parameters == {
            "temperatura_maxima": "32.0",
            "temperatura_minima": "20.0",
            "umidade_relativa": "60",
            "radiacao_solar": "20.00",
            "velocidade_vento": "2.0",
        }
        assert result.source == "calculated"

    def test_defaults_are_marked(self, selector, station):
        params = AggregatedParameters(
            temperatura_maxima=32.0,
            temperatura_minima=20.0,
            radiacao_solar=20.0,
        )

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "penman_monteith_fao56"
        assert result.parameters["umidade_relativa"] == "70 (padrão)"
        assert result.parameters["velocidade_vento"] == "2.0 (padrão)"

    def test_humidity_extremes_reported_when_used(self, selector, station):
        params = AggregatedParameters(
            temperatura_maxima=32.0,
            temperatura_minima=20.0,
            umidade_relativa_med=65.0,
            umidade_relativa_max=90.0,
            umidade_relativa_min=40.0,
            radiacao_solar=20.0,
        )

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.parameters["umidade_relativa_max"] == "90"
        assert result.parameters["umidade_relativa_min"] == "40"
        assert "umidade_relativa" not in result.parameters

    def test_watts_are_converted_before_use(self, selector, station):
        params = AggregatedParameters(
            temperatura_maxima=32.0,
            temperatura_minima=20.0,
            radiacao_solar=1500.0,
        )

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.parameters["radiacao_solar"] == "129.60"

    def test_temperatures_only_use_hargreaves_samani(self, selector, station):
        params = AggregatedParameters(temperatura_maxima=33.0, temperatura_minima=19.0)

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "hargreaves_samani"
        assert result.quality == "media"
        assert result.value > 0
        assert result.parameters == {
            "temperatura_maxima": "33.0",
            "temperatura_minima": "19.0",
            "latitude": "-12.15",
        }

    def test_unknown_latitude_falls_to_priestley_taylor(self, selector, full_params):
        station = StationInfo(station_id="X", latitude=None)

        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.method == "priestley_taylor"
        assert result.quality == "media"
        assert result.parameters == {
            "temperatura_media": "26.0",
            "radiacao_solar": "20.00",
        }

    def test_mean_temperature_only(self, selector, station):
        params = AggregatedParameters(temperatura_media=25.0)

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "estimativa_temperatura"
        assert result.quality == "baixa"
        assert result.value == 7.5
        assert result.parameters == {"temperatura_estimada": "25.0"}
        assert "oeste_bahia" in result.note

    def test_no_data_gives_default_constant(self, selector, station):
        result = selector.select_best_method(AggregatedParameters(), station, day_of_year=DAY)

        assert result.method == "estimativa_padrao"
        assert result.quality == "muito_baixa"
        assert result.value == 3.5
        assert result.parameters == {}

    def test_inverted_range_without_radiation(self, selector, station):
        """Hargreaves-Samani fails on Tmax < Tmin and the temperature estimate takes over."""
        params = AggregatedParameters(temperatura_maxima=15.0, temperatura_minima=25.0)

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "estimativa_temperatura"
        assert result.value == 6.0
        assert result.quality == "baixa"

    def test_result_is_rounded_and_non_negative(self, selector, full_params, station):
        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.value >= 0
        assert result.value == round(result.value, 2)

    def test_frost_day_is_clamped_at_zero(self, selector, station):
        params = AggregatedParameters(temperatura_media=-5.0)
        result = selector.select_best_method(params, station, day_of_year=DAY)
        assert result.value == 0.0

    def test_repeated_calls_are_identical(self, selector, full_params, station):
        first = selector.select_best_method(full_params, station, day_of_year=DAY)
        second = selector.select_best_method(full_params, station, day_of_year=DAY)
        assert first == second

    def test_station_day_of_year_override(self, selector, full_params):
        pinned = StationInfo(station_id="031133E8", day_of_year=DAY)

        implicit = selector.select_best_method(full_params, pinned)
        explicit = selector.select_best_method(full_params, pinned, day_of_year=DAY)

        assert implicit == explicit

    def test_complete_day_at_barra(self, selector):
        """Mid-year day at Barra (BA) with every reading present."""
        station = StationInfo(station_id="031133E8", latitude=-12.15, altitude=400.0)
        params = AggregatedParameters(
            temperatura_maxima=30.0,
            temperatura_minima=18.0,
            umidade_relativa_med=65.0,
            radiacao_solar=22.5,
            velocidade_vento_2m=2.3,
        )

        result = selector.select_best_method(params, station, day_of_year=180)

        assert result.method == "penman_monteith_fao56"
        assert result.quality == "alta"
        assert result.value == pytest.approx(4.67, abs=0.01)

    def test_low_watt_reading_is_used_unconverted(self, selector, station):
        params = AggregatedParameters(
            temperatura_maxima=32.0,
            temperatura_minima=20.0,
            radiacao_solar=250.0,
        )

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "penman_monteith_fao56"
        assert result.parameters["radiacao_solar"] == "250.00"
        assert result.value > 0

    def test_inverted_range_with_radiation(self, selector, station):
        params = AggregatedParameters(
            temperatura_maxima=15.0,
            temperatura_minima=25.0,
            radiacao_solar=20.0,
        )

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "penman_monteith_fao56"
        assert result.value >= 0

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_temperature_lowers_quality(self, selector, station, bad):
        params = AggregatedParameters(temperatura_maxima=bad, temperatura_minima=20.0)

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.method == "estimativa_padrao"
        assert result.quality == "muito_baixa"
        assert result.value == 3.5

    def test_non_finite_temperature_with_radiation(self, selector, station):
        params = AggregatedParameters(
            temperatura_maxima=float("inf"),
            temperatura_minima=20.0,
            radiacao_solar=20.0,
        )

        result = selector.select_best_method(params, station, day_of_year=DAY)

        assert result.quality == "muito_baixa"
        assert result.value == 3.5


class TestStageChain:
    """Test cases for the chain mechanics with injected stages."""

    @staticmethod
    def _result(value, method, quality):
        return ET0Result(value=value, method=method, quality=quality)

    def test_very_low_quality_does_not_stop_the_chain(self, full_params, station):
        weak = Mock(return_value=self._result(1.0, "weak", "muito_baixa"))
        strong = Mock(return_value=self._result(2.0, "strong", "media"))
        selector = ET0MethodSelector(logger=Mock(), stages=[("weak", weak), ("strong", strong)])

        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.method == "strong"
        strong.assert_called_once_with(full_params, station, DAY)

    def test_acceptable_result_stops_the_chain(self, full_params, station):
        first = Mock(return_value=self._result(4.0, "first", "baixa"))
        second = Mock(return_value=self._result(5.0, "second", "alta"))
        selector = ET0MethodSelector(logger=Mock(), stages=[("first", first), ("second", second)])

        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.method == "first"
        second.assert_not_called()

    def test_failing_stage_is_skipped(self, full_params, station):
        broken = Mock(side_effect=ZeroDivisionError("boom"))
        fallback = Mock(return_value=self._result(3.0, "fallback", "media"))
        selector = ET0MethodSelector(logger=Mock(), stages=[("broken", broken), ("fallback", fallback)])

        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.method == "fallback"

    def test_very_low_result_kept_when_nothing_better(self, full_params, station):
        weak = Mock(return_value=self._result(1.0, "weak", "muito_baixa"))
        missing = Mock(return_value=None)
        selector = ET0MethodSelector(logger=Mock(), stages=[("weak", weak), ("missing", missing)])

        result = selector.select_best_method(full_params, station, day_of_year=DAY)

        assert result.method == "weak"
        missing.assert_called_once()

    def test_no_result_at_all_is_an_error(self, full_params, station):
        selector = ET0MethodSelector(logger=Mock(), stages=[("missing", Mock(return_value=None))])

        with pytest.raises(RuntimeError):
            selector.select_best_method(full_params, station, day_of_year=DAY)


class TestQualityGrading:
    """Test cases for assess_data_quality and rounding."""

    @pytest.mark.parametrize("count,expected", [
        (5, "alta"),
        (4, "alta"),
        (3, "media"),
        (2, "media"),
        (1, "baixa"),
        (0, "muito_baixa"),
    ])
    def test_grade_by_parameter_count(self, count, expected):
        parameters = {f"p{i}": "1.0" for i in range(count)}
        assert assess_data_quality(parameters) == expected

    def test_null_parameters_are_not_counted(self):
        assert assess_data_quality({"a": None, "b": "1.0"}) == "baixa"

    def test_round_et0(self):
        assert round_et0(3.14159) == 3.14
        assert round_et0(-0.4) == 0.0
