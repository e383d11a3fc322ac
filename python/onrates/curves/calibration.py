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

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

import numpy as np

from onrates.errors import VE_SPLIT_MISMATCH

if TYPE_CHECKING:
    from onrates.typing import Arr1dF64, Arr2dF64  # pragma: no cover


@dataclass(frozen=True, eq=False)
class JacobianCalibrationInfo:
    """
    An immutable container of the calibration Jacobian of a curve, as produced when the
    curve is solved jointly with other curves from a group of market quotes.

    Parameters
    ----------
    _order: tuple of (str, int)
        The curves of the calibration group, in order, each with its parameter count.
    _jacobian: ndarray
        The derivatives of this curve's parameters with respect to every market quote of the
        group. Rows align with the curve parameters and columns with the market quotes of
        the curves in ``_order``.
    """

    _order: tuple[tuple[str, int], ...]
    _jacobian: Arr2dF64

    def __post_init__(self) -> None:
        if self._jacobian.ndim != 2:
            raise ValueError("`jacobian` must be a 2-dimensional array.")
        if self._jacobian.shape[1] != self.total_parameter_count:
            raise ValueError(
                VE_SPLIT_MISMATCH.format(self._jacobian.shape[1], self.total_parameter_count)
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JacobianCalibrationInfo):
            return NotImplemented
        return self._order == other._order and bool(np.array_equal(self._jacobian, other._jacobian))

    def __hash__(self) -> int:
        return hash((self._order, self._jacobian.shape, tuple(self._jacobian.ravel())))

    @property
    def order(self) -> tuple[tuple[str, int], ...]:
        """The ordered curve names and parameter counts of the calibration group."""
        return self._order

    @property
    def jacobian(self) -> Arr2dF64:
        return self._jacobian

    @cached_property
    def total_parameter_count(self) -> int:
        """Number of market quotes across all curves of the calibration group."""
        return sum(n for _, n in self._order)

    @property
    def curve_names(self) -> list[str]:
        return [name for name, _ in self._order]

    def split_values(self, values: Arr1dF64) -> dict[str, Arr1dF64]:
        """
        Split a vector aligned with the market quotes of the group into one vector per curve.

        Parameters
        ----------
        values: ndarray
            A vector of length equal to the total parameter count of the group.

        Returns
        -------
        dict[str, ndarray]
        """
        if len(values) != self.total_parameter_count:
            raise ValueError(VE_SPLIT_MISMATCH.format(len(values), self.total_parameter_count))
        split: dict[str, Arr1dF64] = {}
        i = 0
        for name, n in self._order:
            split[name] = np.asarray(values[i : i + n], dtype=float)
            i += n
        return split


def calibration_info(
    order: list[tuple[str, int]], jacobian: Arr2dF64 | list[list[float]]
) -> JacobianCalibrationInfo:
    """
    Construct a :class:`JacobianCalibrationInfo` from plain Python containers.
    """
    return JacobianCalibrationInfo(
        tuple((name, int(n)) for name, n in order), np.asarray(jacobian, dtype=float)
    )
