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

import logging
from typing import TYPE_CHECKING, ClassVar, Protocol

import numpy as np

from onrates.errors import CalibrationMetadataMissingError, DimensionMismatchError
from onrates.sensitivity.parameters import (
    CurveParameterSensitivities,
    CurveParameterSensitivity,
)

if TYPE_CHECKING:
    from onrates.typing import ZeroRateCurve  # pragma: no cover

logger = logging.getLogger(__name__)


class _WithCalibratedCurves(Protocol):
    # Any provider able to look up curves by name
    def find_curve(self, name: str) -> ZeroRateCurve | None: ...


class MarketQuoteSensitivityCalculator:
    """
    Convert sensitivities to curve parameters into sensitivities to the market quotes the
    curves were calibrated to.

    Notes
    -----
    For each curve parameter sensitivity :math:`s` of a curve with calibration Jacobian
    :math:`J`, whose rows align with the curve parameters and columns with all market quotes
    of its calibration group, the market quote sensitivity is the row vector :math:`s J`.
    This vector is split into one vector per curve of the group and each is summed into
    the result under its curve name and the currency of :math:`s`. Parameter labels are
    not carried into the result.

    The transform is linear in its input. The instance is stateless and
    ``MarketQuoteSensitivityCalculator.DEFAULT`` may be used.
    """

    DEFAULT: ClassVar[MarketQuoteSensitivityCalculator]

    def __repr__(self) -> str:
        return f"<onrates.MarketQuoteSensitivityCalculator at {hex(id(self))}>"

    def sensitivity(
        self,
        parameter_sensitivities: CurveParameterSensitivities,
        provider: _WithCalibratedCurves,
    ) -> CurveParameterSensitivities:
        """
        Calculate market quote sensitivities from curve parameter sensitivities.

        Parameters
        ----------
        parameter_sensitivities: CurveParameterSensitivities
            Sensitivities to the parameters of calibrated curves.
        provider: RatesProvider
            Any object with a ``find_curve(name)`` method returning curves which carry
            ``calibration_info``.

        Returns
        -------
        CurveParameterSensitivities

        Raises
        ------
        CalibrationMetadataMissingError
            If a curve cannot be found or carries no calibration information.
        DimensionMismatchError
            If a sensitivity's length differs from the number of Jacobian rows of its curve.
        """
        result: list[CurveParameterSensitivity] = []
        for s in parameter_sensitivities:
            curve = provider.find_curve(s.curve_name)
            if curve is None:
                raise CalibrationMetadataMissingError(s.curve_name, curve_found=False)
            info = curve.calibration_info
            if info is None:
                raise CalibrationMetadataMissingError(s.curve_name)
            if len(s) != info.jacobian.shape[0]:
                raise DimensionMismatchError(s.curve_name, len(s), info.jacobian.shape[0])

            combined = np.asarray(s.sensitivity, dtype=float) @ info.jacobian
            for name, values in info.split_values(combined).items():
                result.append(CurveParameterSensitivity(name, s.currency, values))
            logger.debug(
                "Market quote sensitivity of '%s' distributed over %s.",
                s.curve_name,
                info.curve_names,
            )
        return CurveParameterSensitivities(result)


MarketQuoteSensitivityCalculator.DEFAULT = MarketQuoteSensitivityCalculator()


def market_quote_sensitivity(
    parameter_sensitivities: CurveParameterSensitivities,
    provider: _WithCalibratedCurves,
) -> CurveParameterSensitivities:
    """
    Calculate market quote sensitivities with the default
    :class:`MarketQuoteSensitivityCalculator`.
    """
    return MarketQuoteSensitivityCalculator.DEFAULT.sensitivity(parameter_sensitivities, provider)
