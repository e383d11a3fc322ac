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

import numpy as np
import pytest
from onrates import (
    CalibrationMetadataMissingError,
    CurveParameterSensitivities,
    CurveParameterSensitivity,
    DimensionMismatchError,
    MarketQuoteSensitivityCalculator,
    RatesProvider,
    ZeroRateCurve,
    calibration_info,
    market_quote_sensitivity,
)

FF = "USD-Fed-Fund"
DISC = "USD-Disc"


@pytest.fixture
def group():
    # the Fed Fund parameters depend on the quotes of both curves, the second curve only on its own
    order = [(FF, 3), (DISC, 2)]
    jac_ff = [
        [1.0, 0.0, 0.0, 0.5, 0.0],
        [0.0, 1.0, 0.0, 0.0, 0.5],
        [0.0, 0.0, 1.0, 0.0, 0.0],
    ]
    jac_disc = [
        [0.0, 0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 0.0, 2.0],
    ]
    ff = ZeroRateCurve(
        FF,
        dt(2015, 1, 8),
        [0.5, 1.0, 2.0],
        [0.01, 0.011, 0.012],
        calibration_info=calibration_info(order, jac_ff),
    )
    disc = ZeroRateCurve(
        DISC,
        dt(2015, 1, 8),
        [1.0, 5.0],
        [0.02, 0.025],
        calibration_info=calibration_info(order, jac_disc),
    )
    return ff, disc


@pytest.fixture
def provider(group):
    ff, disc = group
    return RatesProvider(dt(2015, 1, 8), {"USD-FED-FUND": ff, "USD-SOFR": disc})


class _Curves:
    """A literal set of curves looked up by name."""

    def __init__(self, *curves):
        self.curves = {c.name: c for c in curves}

    def find_curve(self, name):
        return self.curves.get(name, None)


def _sens(name, values, currency="USD"):
    return CurveParameterSensitivity(name, currency, np.array(values, dtype=float))


class TestMarketQuoteSensitivity:
    def test_distributes_over_group(self, provider) -> None:
        parameter = CurveParameterSensitivities([_sens(FF, [1.0, 2.0, 3.0])])
        result = MarketQuoteSensitivityCalculator.DEFAULT.sensitivity(parameter, provider)
        assert len(result) == 2
        np.testing.assert_allclose(result.get(FF, "USD").sensitivity, [1.0, 2.0, 3.0])
        np.testing.assert_allclose(result.get(DISC, "USD").sensitivity, [0.5, 1.0])
        assert result.get(FF, "USD").labels is None

    def test_accumulates_across_curves(self, provider) -> None:
        parameter = CurveParameterSensitivities(
            [_sens(FF, [1.0, 2.0, 3.0]), _sens(DISC, [10.0, 20.0])]
        )
        result = market_quote_sensitivity(parameter, provider)
        np.testing.assert_allclose(result.get(FF, "USD").sensitivity, [1.0, 2.0, 3.0])
        np.testing.assert_allclose(result.get(DISC, "USD").sensitivity, [10.5, 41.0])

    def test_currencies_kept_apart(self, provider) -> None:
        parameter = CurveParameterSensitivities(
            [_sens(FF, [1.0, 0.0, 0.0]), _sens(FF, [0.0, 1.0, 0.0], "EUR")]
        )
        result = market_quote_sensitivity(parameter, provider)
        assert len(result) == 4
        np.testing.assert_allclose(result.get(DISC, "USD").sensitivity, [0.5, 0.0])
        np.testing.assert_allclose(result.get(DISC, "EUR").sensitivity, [0.0, 0.5])

    def test_empty(self, provider) -> None:
        result = market_quote_sensitivity(CurveParameterSensitivities(), provider)
        assert len(result) == 0

    def test_linear(self, provider) -> None:
        a = CurveParameterSensitivities([_sens(FF, [1.0, -2.0, 0.5]), _sens(DISC, [3.0, 1.0])])
        b = CurveParameterSensitivities([_sens(FF, [0.2, 0.3, -4.0])])
        lhs = market_quote_sensitivity(a.combined_with(b).multiplied_by(2.5), provider)
        rhs = market_quote_sensitivity(a, provider).combined_with(
            market_quote_sensitivity(b, provider)
        )
        assert lhs.equal_with_tolerance(rhs.multiplied_by(2.5), 1e-12)

    def test_any_curve_lookup(self, group) -> None:
        parameter = CurveParameterSensitivities([_sens(DISC, [1.0, 1.0])])
        result = market_quote_sensitivity(parameter, _Curves(*group))
        np.testing.assert_allclose(result.get(DISC, "USD").sensitivity, [1.0, 2.0])
        np.testing.assert_allclose(result.get(FF, "USD").sensitivity, [0.0, 0.0, 0.0])

    def test_curve_not_found_raises(self, provider) -> None:
        parameter = CurveParameterSensitivities([_sens("USD-Libor", [1.0])])
        with pytest.raises(CalibrationMetadataMissingError, match="could not be found") as exc:
            market_quote_sensitivity(parameter, provider)
        assert exc.value.curve_name == "USD-Libor"

    def test_no_calibration_raises(self) -> None:
        curve = ZeroRateCurve(FF, dt(2015, 1, 8), [0.5, 1.0, 2.0], [0.01, 0.011, 0.012])
        parameter = CurveParameterSensitivities([_sens(FF, [1.0, 2.0, 3.0])])
        with pytest.raises(CalibrationMetadataMissingError, match="does not carry calibration"):
            market_quote_sensitivity(parameter, _Curves(curve))

    def test_dimension_mismatch_raises(self, provider) -> None:
        parameter = CurveParameterSensitivities([_sens(FF, [1.0, 2.0])])
        with pytest.raises(DimensionMismatchError, match="has length 2") as exc:
            market_quote_sensitivity(parameter, provider)
        assert exc.value.expected == 3


class TestCalibrationInfo:
    def test_split_values(self) -> None:
        info = calibration_info([("A", 2), ("B", 1)], np.zeros((4, 3)))
        assert info.total_parameter_count == 3
        assert info.curve_names == ["A", "B"]
        result = info.split_values(np.array([1.0, 2.0, 3.0]))
        assert list(result) == ["A", "B"]
        np.testing.assert_allclose(result["A"], [1.0, 2.0])
        np.testing.assert_allclose(result["B"], [3.0])

    def test_split_values_raises(self) -> None:
        info = calibration_info([("A", 2), ("B", 1)], np.zeros((4, 3)))
        with pytest.raises(ValueError, match="cannot be split"):
            info.split_values(np.array([1.0, 2.0]))

    def test_jacobian_columns_validated(self) -> None:
        with pytest.raises(ValueError, match="cannot be split"):
            calibration_info([("A", 2), ("B", 1)], np.zeros((4, 4)))

    def test_jacobian_dimension_validated(self) -> None:
        with pytest.raises(ValueError, match="2-dimensional"):
            calibration_info([("A", 2)], [1.0, 2.0])

    def test_value_equality(self) -> None:
        a = calibration_info([("A", 2)], np.eye(2))
        b = calibration_info([("A", 2)], np.eye(2))
        assert a == b
        assert hash(a) == hash(b)
        assert a != calibration_info([("A", 2)], 2.0 * np.eye(2))
        assert a != calibration_info([("B", 2)], np.eye(2))
        assert a != calibration_info([("A", 2)], np.ones((1, 2)))
