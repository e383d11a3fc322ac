# SPDX-License-Identifier: LicenseRef-Rateslib-Dual
#
# Copyright (c) 2026 Siffrorna Technology Limited
#
# Dual-licensed: Free Educational Licence or Paid Commercial Licence (commercial/professional use)
# Source-available, not open source.
#
# See LICENSE and https://rateslib.com/py/en/latest/i_licence.html for details,
# and/or contact info (at) rateslib (dot) com
####################################################################################################

from datetime import datetime as dt

import pytest
from onrates import (
    USD_FED_FUND,
    ApproxForwardOvernightAveragedRateFn,
    ForwardOvernightAveragedRateFn,
    MissingMarketDataError,
    OvernightRateSensitivity,
    StaticOvernightRates,
    default_context,
    get_rate_observation_fn,
)
from pandas import Series


@pytest.fixture
def rates():
    return StaticOvernightRates(
        index="USD-FED-FUND",
        valuation_date=dt(2015, 1, 9),
        fixings={dt(2015, 1, 8): 0.0023, dt(2015, 1, 7): 0.0012},
        rates={dt(2015, 1, 13): 0.0156},
        period_rates={(dt(2015, 1, 9), dt(2015, 1, 14)): 0.0134},
    )


class TestStaticOvernightRates:
    def test_queries(self, rates) -> None:
        assert rates.index is USD_FED_FUND
        assert rates.valuation_date == dt(2015, 1, 9)
        assert rates.published_rate(dt(2015, 1, 8)) == 0.0023
        assert rates.published_rate(dt(2015, 1, 9)) is None
        assert rates.rate(dt(2015, 1, 13)) == 0.0156
        assert rates.period_rate(dt(2015, 1, 9), dt(2015, 1, 14)) == 0.0134
        assert list(rates.fixings.index) == [dt(2015, 1, 7), dt(2015, 1, 8)]

    def test_missing_rate_raises(self, rates) -> None:
        with pytest.raises(MissingMarketDataError, match="no projected rate configured"):
            rates.rate(dt(2015, 1, 12))

    def test_missing_period_rate_raises(self, rates) -> None:
        with pytest.raises(MissingMarketDataError, match="no projected period rate") as exc:
            rates.period_rate(dt(2015, 1, 9), dt(2015, 1, 15))
        assert exc.value.end == dt(2015, 1, 15)

    def test_point_sensitivities(self, rates) -> None:
        assert list(rates.rate_point_sensitivity(dt(2015, 1, 13))) == [
            OvernightRateSensitivity(USD_FED_FUND, dt(2015, 1, 13), dt(2015, 1, 14), "USD", 1.0)
        ]
        assert list(rates.period_rate_point_sensitivity(dt(2015, 1, 9), dt(2015, 1, 14))) == [
            OvernightRateSensitivity(USD_FED_FUND, dt(2015, 1, 9), dt(2015, 1, 14), "USD", 1.0)
        ]

    def test_bumped(self, rates) -> None:
        bumped = rates.bumped_rate(dt(2015, 1, 13), 0.001)
        assert bumped.rate(dt(2015, 1, 13)) == pytest.approx(0.0166, abs=1e-15)
        assert rates.rate(dt(2015, 1, 13)) == 0.0156
        bumped = rates.bumped_period_rate(dt(2015, 1, 9), dt(2015, 1, 14), -0.001)
        result = bumped.period_rate(dt(2015, 1, 9), dt(2015, 1, 14))
        assert result == pytest.approx(0.0124, abs=1e-15)
        assert bumped.rate(dt(2015, 1, 13)) == 0.0156

    def test_duplicated_fixing_dates_raise(self) -> None:
        fixings = Series(
            [0.0012, 0.0023, 0.0024],
            index=[dt(2015, 1, 7), dt(2015, 1, 8), dt(2015, 1, 8)],
        )
        with pytest.raises(ValueError, match="unique date index, got duplicated dates"):
            StaticOvernightRates(USD_FED_FUND, dt(2015, 1, 9), fixings=fixings)

    def test_with_valuation_date(self, rates) -> None:
        other = rates.with_valuation_date(dt(2015, 1, 12))
        assert other.valuation_date == dt(2015, 1, 12)
        assert other.published_rate(dt(2015, 1, 8)) == 0.0023


class TestGetRateObservationFn:
    def test_default(self) -> None:
        assert get_rate_observation_fn() is ApproxForwardOvernightAveragedRateFn.DEFAULT

    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("approx", ApproxForwardOvernightAveragedRateFn),
            ("forward", ForwardOvernightAveragedRateFn),
            ("EXACT", ForwardOvernightAveragedRateFn),
        ],
    )
    def test_method(self, method, expected) -> None:
        assert isinstance(get_rate_observation_fn(method), expected)

    def test_from_defaults(self) -> None:
        with default_context("averaging_method", "forward"):
            result = get_rate_observation_fn()
        assert result is ForwardOvernightAveragedRateFn.DEFAULT

    def test_raises(self) -> None:
        with pytest.raises(ValueError, match="is not a valid option"):
            get_rate_observation_fn("geometric")
