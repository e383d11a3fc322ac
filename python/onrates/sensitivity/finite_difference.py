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

from typing import TYPE_CHECKING

import numpy as np

from onrates.enums.generics import NoInput, _drb
from onrates.sensitivity.parameters import (
    CurveParameterSensitivities,
    CurveParameterSensitivity,
)

if TYPE_CHECKING:
    from onrates.typing import Callable, RatesProvider  # pragma: no cover


class FiniteDifferenceSensitivityCalculator:
    """
    Calculate curve parameter sensitivities of a valuation function by bumping each curve
    node in turn.

    .. role:: green

    Parameters
    ----------
    shift: float, :green:`optional (set by 'defaults')`
        The size of the forward difference shift applied to each node rate.

    Notes
    -----
    The sensitivity to node :math:`i` is :math:`(f(z + h e_i) - f(z)) / h`. This is intended
    to validate analytic sensitivities rather than to replace them.
    """

    _shift: float

    def __init__(self, shift: float | NoInput = NoInput(0)) -> None:
        from onrates import defaults

        self._shift = _drb(defaults.fd_shift, shift)

    def __repr__(self) -> str:
        return f"<onrates.FiniteDifferenceSensitivityCalculator:{self._shift:g} at {hex(id(self))}>"

    @property
    def shift(self) -> float:
        return self._shift

    def sensitivity(
        self,
        provider: RatesProvider,
        fn: Callable[[RatesProvider], float],
        currency: str,
    ) -> CurveParameterSensitivities:
        """
        Return the sensitivity of ``fn`` to every node of every curve of ``provider``.

        Parameters
        ----------
        provider: RatesProvider
            The base market data.
        fn: Callable
            A function of a provider returning a value.
        currency: str
            The currency of the value returned by ``fn``.

        Returns
        -------
        CurveParameterSensitivities
        """
        base = fn(provider)
        result: list[CurveParameterSensitivity] = []
        for name, curve in provider.curves.items():
            values = np.array(
                [
                    (fn(provider.bumped(name, i, self._shift)) - base) / self._shift
                    for i in range(curve.parameter_count)
                ]
            )
            result.append(CurveParameterSensitivity(name, currency, values, curve.labels))
        return CurveParameterSensitivities(result)
