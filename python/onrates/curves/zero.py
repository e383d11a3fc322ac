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

from __future__ import annotations

from math import exp
from typing import TYPE_CHECKING

import numpy as np

from onrates.enums.generics import NoInput, _drb
from onrates.errors import VE_CURVE_NODES, VE_CURVE_TIMES_INCREASING
from onrates.scheduling.dcfs import dcf

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        Arr1dF64,
        JacobianCalibrationInfo,
        Sequence,
        datetime,
    )


class ZeroRateCurve:
    """
    A nodal curve of continuously compounded zero rates, indexed by year fraction from the
    valuation date.

    .. role:: red

    .. role:: green

    Parameters
    ----------
    name: str, :red:`required`
        The identifier of the curve, referenced by parameter sensitivities.
    valuation_date: datetime, :red:`required`
        The date at which the year fraction, and time, is zero.
    times: Sequence[float], :red:`required`
        Strictly increasing node times.
    rates: Sequence[float], :red:`required`
        Zero rates at each node time. These are the parameters of the curve.
    convention: str, :green:`optional (set by 'defaults')`
        The day count convention converting dates to times.
    calibration_info: JacobianCalibrationInfo, :green:`optional`
        The calibration Jacobian of the curve, required for market quote sensitivities.
    labels: Sequence[str], :green:`optional`
        Labels for each parameter. Defaults to the node times.

    Notes
    -----
    Zero rates are interpolated linearly in time between nodes and extrapolated flat beyond
    the first and last nodes. The discount factor at time :math:`t` is
    :math:`\\exp(-z(t)t)`.
    """

    _name: str
    _valuation_date: datetime
    _times: Arr1dF64
    _rates: Arr1dF64
    _convention: str
    _calibration_info: JacobianCalibrationInfo | None
    _labels: tuple[str, ...]

    def __init__(
        self,
        name: str,
        valuation_date: datetime,
        times: Sequence[float] | Arr1dF64,
        rates: Sequence[float] | Arr1dF64,
        convention: str | NoInput = NoInput(0),
        calibration_info: JacobianCalibrationInfo | None = None,
        labels: Sequence[str] | NoInput = NoInput(0),
    ) -> None:
        from onrates import defaults

        self._name = name
        self._valuation_date = valuation_date
        self._times = np.asarray(times, dtype=float)
        self._rates = np.asarray(rates, dtype=float)
        if (
            self._times.ndim != 1
            or len(self._times) == 0
            or self._times.shape != self._rates.shape
        ):
            raise ValueError(VE_CURVE_NODES)
        if np.any(np.diff(self._times) <= 0):
            raise ValueError(VE_CURVE_TIMES_INCREASING)
        self._convention = _drb(defaults.curve_convention, convention)
        self._calibration_info = calibration_info
        self._labels = tuple(_drb([f"{t:g}" for t in self._times], labels))

    def __repr__(self) -> str:
        return f"<onrates.ZeroRateCurve:{self._name} at {hex(id(self))}>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def valuation_date(self) -> datetime:
        return self._valuation_date

    @property
    def times(self) -> Arr1dF64:
        return self._times

    @property
    def parameters(self) -> Arr1dF64:
        """The zero rates at each node."""
        return self._rates

    @property
    def parameter_count(self) -> int:
        return len(self._rates)

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def convention(self) -> str:
        return self._convention

    @property
    def calibration_info(self) -> JacobianCalibrationInfo | None:
        return self._calibration_info

    def year_fraction(self, date: datetime) -> float:
        return dcf(self._valuation_date, date, self._convention)

    def interpolation_weights(self, t: float) -> Arr1dF64:
        """
        Return the weight of each node rate in the interpolated zero rate at time ``t``.
        """
        weights = np.zeros(len(self._times))
        if t <= self._times[0]:
            weights[0] = 1.0
        elif t >= self._times[-1]:
            weights[-1] = 1.0
        else:
            i = int(np.searchsorted(self._times, t, side="right")) - 1
            x = (t - self._times[i]) / (self._times[i + 1] - self._times[i])
            weights[i] = 1.0 - x
            weights[i + 1] = x
        return weights

    def zero_rate(self, t: float) -> float:
        return float(self.interpolation_weights(t) @ self._rates)

    def discount_factor(self, date: datetime) -> float:
        t = self.year_fraction(date)
        return exp(-self.zero_rate(t) * t)

    def discount_factor_parameter_sensitivity(self, date: datetime) -> Arr1dF64:
        """
        Return the derivative of the discount factor at ``date`` with respect to each node rate.
        """
        t = self.year_fraction(date)
        weights = self.interpolation_weights(t)
        return -t * exp(-float(weights @ self._rates) * t) * weights

    def with_parameters(self, rates: Sequence[float] | Arr1dF64) -> ZeroRateCurve:
        """Return a copy of the curve with new node rates and the same calibration info."""
        return ZeroRateCurve(
            self._name,
            self._valuation_date,
            self._times,
            rates,
            self._convention,
            self._calibration_info,
            self._labels,
        )

    def with_parameter(self, i: int, value: float) -> ZeroRateCurve:
        """Return a copy of the curve with the rate of node ``i`` replaced by ``value``."""
        rates = self._rates.copy()
        rates[i] = value
        return self.with_parameters(rates)
