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

from pandas import DataFrame

from onrates.enums.generics import NoInput, _drb

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        Iterable,
        Iterator,
        OvernightIndex,
        datetime,
    )

SensitivityKey = tuple[str, str, "datetime", "datetime"]


@dataclass(frozen=True)
class OvernightRateSensitivity:
    """
    The sensitivity of a value to the overnight rate of an index over a deposit period.

    Parameters
    ----------
    _index: OvernightIndex
        The index whose rate is referenced. Its name is the curve reference.
    _start: datetime
        The fixing date, or first fixing date of a compounded period.
    _end: datetime
        The maturity of the deposit, or of the final deposit of a compounded period.
    _currency: str
        The currency of the sensitivity.
    _sensitivity: float
        The value of the sensitivity.
    """

    _index: OvernightIndex
    _start: datetime
    _end: datetime
    _currency: str
    _sensitivity: float

    @property
    def index(self) -> OvernightIndex:
        return self._index

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def sensitivity(self) -> float:
        return self._sensitivity

    @property
    def key(self) -> SensitivityKey:
        """Records with equal keys are summable."""
        return (self._index.name, self._currency, self._start, self._end)

    def with_sensitivity(self, sensitivity: float) -> OvernightRateSensitivity:
        return replace(self, _sensitivity=sensitivity)

    def multiplied_by(self, factor: float) -> OvernightRateSensitivity:
        return replace(self, _sensitivity=self._sensitivity * factor)


class PointSensitivities:
    """
    An immutable collection of :class:`OvernightRateSensitivity` records.

    Parameters
    ----------
    sensitivities: Iterable of OvernightRateSensitivity
        The records held by the collection, in the given order.

    Notes
    -----
    Collections are combined by concatenation and reduced by :meth:`normalized`, which sums
    records sharing the same index, currency and dates and orders the result.
    """

    _sensitivities: tuple[OvernightRateSensitivity, ...]

    def __init__(self, sensitivities: Iterable[OvernightRateSensitivity] = ()) -> None:
        self._sensitivities = tuple(sensitivities)

    @classmethod
    def none(cls) -> PointSensitivities:
        """The empty collection, returned when a value has no rate sensitivity."""
        return NO_SENSITIVITY

    def __repr__(self) -> str:
        return f"<onrates.PointSensitivities: {len(self)} records at {hex(id(self))}>"

    def __len__(self) -> int:
        return len(self._sensitivities)

    def __iter__(self) -> Iterator[OvernightRateSensitivity]:
        return iter(self._sensitivities)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointSensitivities):
            return NotImplemented
        return self._sensitivities == other._sensitivities

    def __hash__(self) -> int:
        return hash(self._sensitivities)

    @property
    def sensitivities(self) -> tuple[OvernightRateSensitivity, ...]:
        return self._sensitivities

    @property
    def is_empty(self) -> bool:
        return len(self._sensitivities) == 0

    def combined_with(self, other: PointSensitivities) -> PointSensitivities:
        return PointSensitivities(self._sensitivities + other._sensitivities)

    def multiplied_by(self, factor: float) -> PointSensitivities:
        return PointSensitivities(_.multiplied_by(factor) for _ in self._sensitivities)

    def normalized(self) -> PointSensitivities:
        """
        Return a collection with one record per key, summing duplicates, ordered by key.
        """
        totals: dict[SensitivityKey, OvernightRateSensitivity] = {}
        for record in self._sensitivities:
            existing = totals.get(record.key, None)
            if existing is None:
                totals[record.key] = record
            else:
                totals[record.key] = existing.with_sensitivity(
                    existing.sensitivity + record.sensitivity
                )
        return PointSensitivities(totals[k] for k in sorted(totals))

    def equal_with_tolerance(
        self, other: PointSensitivities, tolerance: float | NoInput = NoInput(0)
    ) -> bool:
        """
        Test whether two collections agree, key by key, within an absolute tolerance.

        Keys present in only one collection are compared against zero.
        """
        from onrates import defaults

        tolerance_ = _drb(defaults.sensitivity_tolerance, tolerance)
        lhs = {_.key: _.sensitivity for _ in self.normalized()}
        rhs = {_.key: _.sensitivity for _ in other.normalized()}
        return all(
            abs(lhs.get(k, 0.0) - rhs.get(k, 0.0)) <= tolerance_ for k in set(lhs) | set(rhs)
        )

    def to_frame(self) -> DataFrame:
        """
        Return the records as a :class:`~pandas.DataFrame`, one row per record.
        """
        from onrates import defaults

        headers = defaults.headers
        columns = [
            headers["index"],
            headers["currency"],
            headers["start"],
            headers["end"],
            headers["sensitivity"],
        ]
        return DataFrame(
            [
                [_.index.name, _.currency, _.start, _.end, _.sensitivity]
                for _ in self._sensitivities
            ],
            columns=columns,
        )


NO_SENSITIVITY = PointSensitivities(())


class _SensitivityAccumulator:
    """
    A mutable collector of sensitivity records local to a single calculation.

    Records are added with a scaling factor and the result is frozen with :meth:`build`.
    """

    def __init__(self) -> None:
        self._records: list[OvernightRateSensitivity] = []

    def add(self, sensitivities: PointSensitivities, factor: float = 1.0) -> None:
        self._records.extend(_.multiplied_by(factor) for _ in sensitivities)

    def build(self) -> PointSensitivities:
        if len(self._records) == 0:
            return NO_SENSITIVITY
        return PointSensitivities(self._records).normalized()
