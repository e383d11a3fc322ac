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

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np
from pandas import DataFrame

from onrates.enums.generics import NoInput, _drb
from onrates.errors import DimensionMismatchError

if TYPE_CHECKING:
    from onrates.typing import Arr1dF64, CurveKey, Iterable, Iterator  # pragma: no cover


@dataclass(frozen=True, eq=False)
class CurveParameterSensitivity:
    """
    The sensitivity of a value to each parameter of a named curve, in a currency.

    Parameters
    ----------
    _curve_name: str
        The name of the curve.
    _currency: str
        The currency of the sensitivity.
    _sensitivity: ndarray
        One value per curve parameter, or per market quote.
    _labels: tuple of str, optional
        Labels of the parameters. Market quote sensitivities carry no labels.
    """

    _curve_name: str
    _currency: str
    _sensitivity: Arr1dF64
    _labels: tuple[str, ...] | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveParameterSensitivity):
            return NotImplemented
        return (
            self.key == other.key
            and self._labels == other._labels
            and bool(np.array_equal(self._sensitivity, other._sensitivity))
        )

    def __hash__(self) -> int:
        return hash((self.key, self._labels, tuple(self._sensitivity)))

    @property
    def curve_name(self) -> str:
        return self._curve_name

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def sensitivity(self) -> Arr1dF64:
        return self._sensitivity

    @property
    def labels(self) -> tuple[str, ...] | None:
        return self._labels

    @property
    def key(self) -> CurveKey:
        return (self._curve_name, self._currency)

    def __len__(self) -> int:
        return len(self._sensitivity)

    def multiplied_by(self, factor: float) -> CurveParameterSensitivity:
        return replace(self, _sensitivity=self._sensitivity * factor)

    def plus(self, other: CurveParameterSensitivity) -> CurveParameterSensitivity:
        """Sum entrywise with a sensitivity of the same curve, currency and length."""
        if len(other) != len(self):
            raise DimensionMismatchError(self._curve_name, len(other), len(self))
        return replace(self, _sensitivity=self._sensitivity + other._sensitivity)

    def total(self) -> float:
        return float(np.sum(self._sensitivity))


class CurveParameterSensitivities:
    """
    An immutable collection of :class:`CurveParameterSensitivity`, at most one per curve name
    and currency.

    Parameters
    ----------
    sensitivities: Iterable of CurveParameterSensitivity
        Members are summed entrywise when they share a curve name and currency.
    """

    _sensitivities: dict[CurveKey, CurveParameterSensitivity]

    def __init__(self, sensitivities: Iterable[CurveParameterSensitivity] = ()) -> None:
        merged: dict[CurveKey, CurveParameterSensitivity] = {}
        for s in sensitivities:
            merged[s.key] = merged[s.key].plus(s) if s.key in merged else s
        self._sensitivities = merged

    def __repr__(self) -> str:
        keys = list(self._sensitivities)
        return f"<onrates.CurveParameterSensitivities: {keys} at {hex(id(self))}>"

    def __len__(self) -> int:
        return len(self._sensitivities)

    def __iter__(self) -> Iterator[CurveParameterSensitivity]:
        return iter(self._sensitivities.values())

    @property
    def sensitivities(self) -> list[CurveParameterSensitivity]:
        return list(self._sensitivities.values())

    def get(self, curve_name: str, currency: str) -> CurveParameterSensitivity | None:
        return self._sensitivities.get((curve_name, currency), None)

    def combined_with(
        self, other: CurveParameterSensitivities | CurveParameterSensitivity
    ) -> CurveParameterSensitivities:
        """Return a collection summing the members of both, keyed by curve name and currency."""
        others = [other] if isinstance(other, CurveParameterSensitivity) else list(other)
        return CurveParameterSensitivities(list(self._sensitivities.values()) + others)

    def multiplied_by(self, factor: float) -> CurveParameterSensitivities:
        return CurveParameterSensitivities(_.multiplied_by(factor) for _ in self)

    def equal_with_tolerance(
        self, other: CurveParameterSensitivities, tolerance: float | NoInput = NoInput(0)
    ) -> bool:
        """
        Test whether two collections agree entrywise within an absolute tolerance.

        A member present in only one collection is compared against zeros.
        """
        from onrates import defaults

        tolerance_ = _drb(defaults.sensitivity_tolerance, tolerance)
        for key in set(self._sensitivities) | set(other._sensitivities):
            lhs, rhs = self._sensitivities.get(key, None), other._sensitivities.get(key, None)
            if lhs is None or rhs is None:
                existing = lhs if rhs is None else rhs
                if np.any(np.abs(existing.sensitivity) > tolerance_):  # type: ignore[union-attr]
                    return False
            elif len(lhs) != len(rhs) or np.any(
                np.abs(lhs.sensitivity - rhs.sensitivity) > tolerance_
            ):
                return False
        return True

    def to_frame(self) -> DataFrame:
        """
        Return the sensitivities as a :class:`~pandas.DataFrame`, one row per parameter.
        """
        from onrates import defaults

        headers = defaults.headers
        rows = []
        for s in self:
            labels = s.labels if s.labels is not None else [str(i) for i in range(len(s))]
            for label, value in zip(labels, s.sensitivity, strict=True):
                rows.append([s.curve_name, s.currency, label, float(value)])
        return DataFrame(
            rows,
            columns=[
                headers["curve"],
                headers["currency"],
                headers["label"],
                headers["sensitivity"],
            ],
        )
