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
    GBP_SONIA,
    NO_SENSITIVITY,
    USD_FED_FUND,
    CurveParameterSensitivities,
    CurveParameterSensitivity,
    DimensionMismatchError,
    OvernightRateSensitivity,
    PointSensitivities,
)
from onrates.sensitivity.points import _SensitivityAccumulator


@pytest.fixture
def s1():
    return OvernightRateSensitivity(USD_FED_FUND, dt(2015, 1, 9), dt(2015, 1, 14), "USD", 0.5)


@pytest.fixture
def s2():
    return OvernightRateSensitivity(USD_FED_FUND, dt(2015, 1, 13), dt(2015, 1, 14), "USD", 0.2)


class TestPointSensitivities:
    def test_record(self, s1) -> None:
        assert s1.key == ("USD-FED-FUND", "USD", dt(2015, 1, 9), dt(2015, 1, 14))
        assert s1.multiplied_by(2.0).sensitivity == 1.0
        assert s1.with_sensitivity(3.0).sensitivity == 3.0
        assert s1.sensitivity == 0.5

    def test_none(self) -> None:
        result = PointSensitivities.none()
        assert result is NO_SENSITIVITY
        assert result.is_empty
        assert len(result) == 0
        assert result == PointSensitivities([])

    def test_normalized_sums_and_sorts(self, s1, s2) -> None:
        result = PointSensitivities([s2, s1, s2]).normalized()
        assert len(result) == 2
        assert list(result)[0] == s1
        assert list(result)[1].sensitivity == pytest.approx(0.4, abs=1e-15)

    def test_combined_with(self, s1, s2) -> None:
        result = PointSensitivities([s1]).combined_with(PointSensitivities([s2]))
        assert result.sensitivities == (s1, s2)

    def test_multiplied_by(self, s1, s2) -> None:
        result = PointSensitivities([s1, s2]).multiplied_by(-2.0)
        assert [_.sensitivity for _ in result] == [-1.0, -0.4]

    def test_equal_with_tolerance(self, s1, s2) -> None:
        lhs = PointSensitivities([s1, s2])
        rhs = PointSensitivities([s2, s1.with_sensitivity(0.5 + 1e-8)])
        assert lhs.equal_with_tolerance(rhs, 1e-6)
        assert not lhs.equal_with_tolerance(rhs, 1e-10)
        assert not lhs.equal_with_tolerance(PointSensitivities([s1]), 1e-6)

    def test_equal_with_tolerance_zero_records(self, s1) -> None:
        assert PointSensitivities([s1.with_sensitivity(0.0)]).equal_with_tolerance(NO_SENSITIVITY)

    def test_different_index_not_merged(self, s1) -> None:
        other = OvernightRateSensitivity(GBP_SONIA, s1.start, s1.end, "GBP", 0.5)
        assert len(PointSensitivities([s1, other]).normalized()) == 2

    def test_to_frame(self, s1, s2) -> None:
        df = PointSensitivities([s1, s2]).to_frame()
        assert list(df.columns) == ["Index", "Ccy", "Start", "End", "Sensitivity"]
        assert list(df["Sensitivity"]) == [0.5, 0.2]

    def test_hashable(self, s1) -> None:
        assert hash(PointSensitivities([s1])) == hash(PointSensitivities([s1]))


class TestAccumulator:
    def test_empty_build_is_none(self) -> None:
        assert _SensitivityAccumulator().build() is NO_SENSITIVITY

    def test_build_is_normalized(self, s1, s2) -> None:
        acc = _SensitivityAccumulator()
        acc.add(PointSensitivities([s2]), 2.0)
        acc.add(PointSensitivities([s1, s2]))
        result = acc.build()
        assert [_.sensitivity for _ in result] == [0.5, pytest.approx(0.6, abs=1e-15)]
        assert result == result.normalized()


class TestCurveParameterSensitivities:
    def test_single(self) -> None:
        s = CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0]), ("1y", "2y"))
        assert s.key == ("A", "USD")
        assert len(s) == 2
        assert s.total() == 3.0
        np.testing.assert_allclose(s.multiplied_by(2.0).sensitivity, [2.0, 4.0])
        assert s.multiplied_by(2.0).labels == ("1y", "2y")

    def test_plus_raises(self) -> None:
        s = CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0]))
        with pytest.raises(DimensionMismatchError, match="has length 3"):
            s.plus(CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0, 3.0])))

    def test_merged_by_key(self) -> None:
        result = CurveParameterSensitivities(
            [
                CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0])),
                CurveParameterSensitivity("B", "USD", np.array([5.0])),
                CurveParameterSensitivity("A", "USD", np.array([0.5, 0.5])),
                CurveParameterSensitivity("A", "GBP", np.array([1.0, 1.0])),
            ]
        )
        assert len(result) == 3
        np.testing.assert_allclose(result.get("A", "USD").sensitivity, [1.5, 2.5])
        assert result.get("C", "USD") is None

    def test_combined_with(self) -> None:
        a = CurveParameterSensitivities([CurveParameterSensitivity("A", "USD", np.array([1.0]))])
        b = CurveParameterSensitivity("A", "USD", np.array([2.0]))
        result = a.combined_with(b).combined_with(a)
        np.testing.assert_allclose(result.get("A", "USD").sensitivity, [4.0])
        np.testing.assert_allclose(a.get("A", "USD").sensitivity, [1.0])

    def test_equal_with_tolerance(self) -> None:
        a = CurveParameterSensitivities([CurveParameterSensitivity("A", "USD", np.array([1.0]))])
        b = CurveParameterSensitivities(
            [
                CurveParameterSensitivity("A", "USD", np.array([1.0 + 1e-9])),
                CurveParameterSensitivity("B", "USD", np.array([0.0, 0.0])),
            ]
        )
        assert a.equal_with_tolerance(b, 1e-8)
        assert not a.equal_with_tolerance(b, 1e-10)
        assert not a.equal_with_tolerance(a.multiplied_by(2.0), 1e-8)

    def test_to_frame(self) -> None:
        s = CurveParameterSensitivities(
            [CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0]), ("1y", "2y"))]
        )
        df = s.to_frame()
        assert list(df.columns) == ["Curve", "Ccy", "Label", "Sensitivity"]
        assert list(df["Label"]) == ["1y", "2y"]
        unlabelled = CurveParameterSensitivities(
            [CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0]))]
        )
        assert list(unlabelled.to_frame()["Label"]) == ["0", "1"]

    def test_value_equality(self) -> None:
        a = CurveParameterSensitivity("A", "USD", np.ones(2), ("1y", "2y"))
        b = CurveParameterSensitivity("A", "USD", np.ones(2), ("1y", "2y"))
        assert a == b
        assert hash(a) == hash(b)
        assert a != CurveParameterSensitivity("A", "USD", np.array([1.0, 2.0]), ("1y", "2y"))
        assert a != CurveParameterSensitivity("A", "GBP", np.ones(2), ("1y", "2y"))
        assert a != CurveParameterSensitivity("A", "USD", np.ones(3), ("1y", "2y", "3y"))
        assert len({a, b}) == 1
