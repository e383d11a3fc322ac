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
    GBP_SONIA,
    USD_FED_FUND,
    InvalidObservationPeriodError,
    MissingMarketDataError,
    OvernightAveragedRateObservation,
    Segment,
    StaticOvernightRates,
    segment_fixings,
)
from pandas import NA, Series


@pytest.fixture
def fixings():
    return {
        dt(2015, 1, 7): 0.0012,
        dt(2015, 1, 8): 0.0023,
        dt(2015, 1, 9): 0.0034,
        dt(2015, 1, 12): 0.0045,
        dt(2015, 1, 13): 0.0056,
        dt(2015, 1, 14): 0.0067,
    }


@pytest.fixture
def observation():
    return OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 15), 2)


class TestObservation:
    def test_fixing_dates(self, observation) -> None:
        assert observation.fixing_dates == (
            dt(2015, 1, 8),
            dt(2015, 1, 9),
            dt(2015, 1, 12),
            dt(2015, 1, 13),
            dt(2015, 1, 14),
        )
        assert observation.n_not_cutoff == 4

    @pytest.mark.parametrize(("cutoff", "expected"), [(0, 5), (1, 5), (2, 4), (3, 3), (4, 2)])
    def test_n_not_cutoff(self, cutoff, expected) -> None:
        obs = OvernightAveragedRateObservation(
            "USD-FED-FUND", dt(2015, 1, 8), dt(2015, 1, 15), cutoff
        )
        assert obs.n_not_cutoff == expected

    def test_cutoff_too_large_raises(self) -> None:
        with pytest.raises(InvalidObservationPeriodError, match="must be less than the number"):
            OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 15), 5)

    def test_single_date_no_cutoff(self) -> None:
        obs = OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 9))
        assert obs.fixing_dates == (dt(2015, 1, 8),)
        with pytest.raises(InvalidObservationPeriodError):
            OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 9), 1)

    def test_no_business_days_raises(self) -> None:
        with pytest.raises(InvalidObservationPeriodError) as exc:
            OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 17), dt(2015, 1, 20))
        assert exc.value.n_dates == 0

    @pytest.mark.parametrize(
        ("start", "end", "cutoff", "match"),
        [
            (dt(2015, 1, 15), dt(2015, 1, 8), 0, "must be before `end`"),
            (dt(2015, 1, 8), dt(2015, 1, 8), 0, "must be before `end`"),
            (dt(2015, 1, 8), dt(2015, 1, 15), -1, "must be non-negative"),
        ],
    )
    def test_invalid_raises(self, start, end, cutoff, match) -> None:
        with pytest.raises(InvalidObservationPeriodError, match=match):
            OvernightAveragedRateObservation(USD_FED_FUND, start, end, cutoff)

    def test_invalid_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 15), 7)

    def test_equality(self, observation) -> None:
        other = OvernightAveragedRateObservation("usd-fed-fund", dt(2015, 1, 8), dt(2015, 1, 15), 2)
        assert other == observation
        assert hash(other) == hash(observation)
        assert other != OvernightAveragedRateObservation(
            USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 15), 0
        )


class TestSegmentFixings:
    @pytest.mark.parametrize(
        ("valuation", "n_fixings", "expected"),
        [
            (dt(2015, 1, 1), 0, 0),
            (dt(2015, 1, 8), 0, 0),
            (dt(2015, 1, 9), 2, 1),  # Jan 8 published on Jan 9
            (dt(2015, 1, 12), 2, 1),  # Jan 9 published on valuation date but not available
            (dt(2015, 1, 12), 3, 2),  # Jan 9 published on valuation date and available
            (dt(2015, 1, 15), 6, 4),
        ],
    )
    def test_realized_count(self, observation, fixings, valuation, n_fixings, expected) -> None:
        rates = StaticOvernightRates(
            USD_FED_FUND, valuation, fixings=dict(list(fixings.items())[:n_fixings])
        )
        result = segment_fixings(observation, rates)
        assert result.n_realized == expected
        assert result.n_not_cutoff == 4
        assert len(result.dates_of(Segment.Realized)) == expected
        assert len(result.dates_of(Segment.Approximated)) == 4 - expected
        assert result.dates_of(Segment.CutOff) == (dt(2015, 1, 14),)
        assert result.cutoff_fixing_date == dt(2015, 1, 13)
        assert result.cutoff_realized is (expected == 4)

    def test_segments(self, observation, fixings) -> None:
        rates = StaticOvernightRates(
            USD_FED_FUND, dt(2015, 1, 12), fixings=dict(list(fixings.items())[:3])
        )
        result = segment_fixings(observation, rates)
        assert result.segments == [
            Segment.Realized,
            Segment.Realized,
            Segment.Approximated,
            Segment.Approximated,
            Segment.CutOff,
        ]
        assert result.realized_rates == (0.0023, 0.0034)
        assert result.accrual_of(Segment.Realized) == 1 / 360 + 3 / 360
        assert result.accrual_of(Segment.CutOff) == 1 / 360

    def test_no_cutoff_has_no_cutoff_date(self) -> None:
        obs = OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 15))
        rates = StaticOvernightRates(USD_FED_FUND, dt(2015, 1, 1))
        result = segment_fixings(obs, rates)
        assert result.cutoff_fixing_date is None
        assert result.dates_of(Segment.CutOff) == ()
        assert result.accrual_of(Segment.Approximated) == pytest.approx(7 / 360, abs=1e-15)

    def test_realized_walk_stops_at_first_unpublished(self) -> None:
        # a later fixing available out of order is not used
        rates = StaticOvernightRates(
            GBP_SONIA,
            dt(2015, 1, 9),
            fixings={dt(2015, 1, 8): 0.0023, dt(2015, 1, 12): 0.0045},
        )
        obs = OvernightAveragedRateObservation(GBP_SONIA, dt(2015, 1, 8), dt(2015, 1, 15))
        result = segment_fixings(obs, rates)
        assert result.n_realized == 1

    def test_missing_fixing_raises(self, observation, fixings) -> None:
        rates = StaticOvernightRates(
            USD_FED_FUND, dt(2015, 1, 13), fixings=dict(list(fixings.items())[:2])
        )
        with pytest.raises(MissingMarketDataError, match="was published before the valuation"):
            segment_fixings(observation, rates)

    def test_nan_fixing_treated_as_missing(self, observation) -> None:
        fixings = Series(
            [0.0012, 0.0023, NA],
            index=[dt(2015, 1, 7), dt(2015, 1, 8), dt(2015, 1, 9)],
            dtype="Float64",
        )
        rates = StaticOvernightRates(USD_FED_FUND, dt(2015, 1, 13), fixings=fixings)
        with pytest.raises(MissingMarketDataError) as exc:
            segment_fixings(observation, rates)
        assert exc.value.date == dt(2015, 1, 9)
        assert exc.value.valuation == dt(2015, 1, 13)

    def test_missing_fixing_after_cutoff_date_is_ignored(self, fixings) -> None:
        # Jan 14 is a cut-off date so its fixing is never required
        obs = OvernightAveragedRateObservation(USD_FED_FUND, dt(2015, 1, 8), dt(2015, 1, 15), 2)
        rates = StaticOvernightRates(
            USD_FED_FUND, dt(2015, 1, 20), fixings=dict(list(fixings.items())[:5])
        )
        result = segment_fixings(obs, rates)
        assert result.n_realized == 4
        assert result.cutoff_realized
