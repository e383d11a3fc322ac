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

from pandas import DataFrame

if TYPE_CHECKING:
    from onrates.typing import Any, FixingSegments, Iterator  # pragma: no cover

COMBINED_RATE = "combined_rate"
OBSERVATIONS = "observations"


class ExplainMap:
    """
    A mutable sink collecting diagnostic values of a rate calculation.

    Entries are keyed by string, e.g. ``"combined_rate"`` and ``"observations"``. The
    contents are informational only.

    Examples
    --------
    .. ipython:: python

       explain = ExplainMap()
       explain.put("combined_rate", 0.0125)
       explain["combined_rate"]
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"<onrates.ExplainMap: {list(self._values)} at {hex(id(self))}>"

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def put(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


def _observations_frame(segments: FixingSegments, rates: list[float]) -> DataFrame:
    """Tabulate each fixing date of an observation with the rate applied to it."""
    from onrates import defaults

    headers = defaults.headers
    index = segments.observation.index
    return DataFrame(
        {
            headers["fixing_date"]: list(segments.dates),
            headers["publication"]: [index.publication_from_fixing(d) for d in segments.dates],
            headers["segment"]: [str(_) for _ in segments.segments],
            headers["dcf"]: list(segments.accrual_factors),
            headers["rate"]: rates,
        }
    )
