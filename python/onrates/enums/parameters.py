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

from enum import Enum


class Segment(Enum):
    """
    Enumerable type labelling the treatment of each fixing date of an averaged
    overnight observation.

    - ``Realized``: the published fixing is used.
    - ``Approximated``: covered by a single compounded period rate query.
    - ``CutOff``: uses the rate fixed at the cut-off determining date.
    """

    Realized = 0
    Approximated = 1
    CutOff = 2

    def __str__(self) -> str:
        return self.name


class AveragingMethod(Enum):
    """
    Enumerable type selecting the rate calculation for an averaged overnight observation.
    """

    Approximated = 0
    Forward = 1

    def __str__(self) -> str:
        return self.name


_AVERAGING_METHOD_MAP = {
    "approx": AveragingMethod.Approximated,
    "approximated": AveragingMethod.Approximated,
    "forward": AveragingMethod.Forward,
    "exact": AveragingMethod.Forward,
}


def _get_averaging_method(method: str | AveragingMethod) -> AveragingMethod:
    if isinstance(method, AveragingMethod):
        return method
    else:
        try:
            return _AVERAGING_METHOD_MAP[method.lower()]
        except KeyError:
            raise ValueError(
                f"`averaging_method` as string: '{method}' is not a valid option. "
                f"Please consult docs."
            )
