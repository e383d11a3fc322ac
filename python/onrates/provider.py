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
from typing import TYPE_CHECKING

from onrates.enums.generics import NoInput, _drb
from onrates.rates.discount import DiscountOvernightIndexRates
from onrates.scheduling.index import get_overnight_index
from onrates.sensitivity.parameters import (
    CurveParameterSensitivities,
    CurveParameterSensitivity,
)

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        OvernightIndex,
        PointSensitivities,
        Series,
        ZeroRateCurve,
        datetime,
    )

logger = logging.getLogger(__name__)


class RatesProvider:
    """
    A snapshot of the forecasting curves and published fixings of overnight indexes at a
    valuation date.

    .. role:: red

    .. role:: green

    Parameters
    ----------
    valuation_date: datetime, :red:`required`
        The valuation date. Every curve must share this valuation date.
    index_curves: dict[OvernightIndex | str, ZeroRateCurve], :red:`required`
        The forecasting curve of each overnight index.
    fixings: dict[OvernightIndex | str, Series], :green:`optional`
        The published fixings of each overnight index.

    Examples
    --------
    .. ipython:: python

       curve = ZeroRateCurve("USD-Fed-Fund", dt(2015, 1, 8), [0.0, 1.0], [0.01, 0.0115])
       provider = RatesProvider(dt(2015, 1, 8), {"USD-FED-FUND": curve})
       provider.overnight_index_rates("USD-FED-FUND").rate(dt(2015, 1, 9))
    """

    _valuation_date: datetime
    _indexes: dict[str, OvernightIndex]
    _index_curves: dict[str, ZeroRateCurve]
    _fixings: dict[str, Series[float]]  # type: ignore[type-var]

    def __init__(
        self,
        valuation_date: datetime,
        index_curves: dict[OvernightIndex | str, ZeroRateCurve],
        fixings: dict[OvernightIndex | str, Series[float]] | NoInput = NoInput(0),  # type: ignore[type-var]
    ) -> None:
        self._valuation_date = valuation_date
        self._indexes = {}
        self._index_curves = {}
        for index, curve in index_curves.items():
            index_ = get_overnight_index(index)
            if curve.valuation_date != valuation_date:
                raise ValueError(
                    f"Curve '{curve.name}' has valuation date '{curve.valuation_date}' which "
                    f"differs from the provider valuation date '{valuation_date}'."
                )
            self._indexes[index_.name] = index_
            self._index_curves[index_.name] = curve
        self._fixings = {}
        for index, series in _drb({}, fixings).items():
            index_ = get_overnight_index(index)
            self._indexes.setdefault(index_.name, index_)
            self._fixings[index_.name] = series

    def __repr__(self) -> str:
        return f"<onrates.RatesProvider:{self._valuation_date:%Y-%m-%d} at {hex(id(self))}>"

    @property
    def valuation_date(self) -> datetime:
        return self._valuation_date

    @property
    def curves(self) -> dict[str, ZeroRateCurve]:
        """The distinct curves of the provider keyed by curve name."""
        return {curve.name: curve for curve in self._index_curves.values()}

    def overnight_index_rates(self, index: OvernightIndex | str) -> DiscountOvernightIndexRates:
        """
        Return the rate source of an overnight index.

        Parameters
        ----------
        index: OvernightIndex, str
            The index, which must have a forecasting curve.

        Returns
        -------
        DiscountOvernightIndexRates
        """
        index_ = get_overnight_index(index)
        try:
            curve = self._index_curves[index_.name]
        except KeyError:
            raise ValueError(f"RatesProvider has no forecasting curve for index '{index_.name}'.")
        return DiscountOvernightIndexRates(
            index_, curve, self._fixings.get(index_.name, NoInput(0))
        )

    def find_curve(self, name: str) -> ZeroRateCurve | None:
        return self.curves.get(name, None)

    def curve_parameter_sensitivity(
        self, point_sensitivities: PointSensitivities
    ) -> CurveParameterSensitivities:
        """
        Convert point sensitivities into sensitivities to the node rates of each curve.

        Parameters
        ----------
        point_sensitivities: PointSensitivities
            Records referencing indexes of this provider.

        Returns
        -------
        CurveParameterSensitivities
        """
        result: list[CurveParameterSensitivity] = []
        for record in point_sensitivities:
            rates = self.overnight_index_rates(record.index)
            result.append(
                CurveParameterSensitivity(
                    rates.curve.name,
                    record.currency,
                    rates.parameter_sensitivity(record),
                    rates.curve.labels,
                )
            )
        return CurveParameterSensitivities(result)

    def bumped(self, curve_name: str, i: int, shift: float) -> RatesProvider:
        """
        Return a copy of the provider with node ``i`` of a named curve shifted by ``shift``.
        """
        curve = self.find_curve(curve_name)
        if curve is None:
            raise ValueError(f"RatesProvider has no curve named '{curve_name}'.")
        bumped = curve.with_parameter(i, curve.parameters[i] + shift)
        logger.debug("Bumped curve '%s' node %d by %g.", curve_name, i, shift)
        return RatesProvider(
            self._valuation_date,
            {
                self._indexes[k]: bumped if v.name == curve_name else v
                for k, v in self._index_curves.items()
            },
            {self._indexes[k]: v for k, v in self._fixings.items()},
        )
