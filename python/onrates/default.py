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

from copy import deepcopy
from typing import TYPE_CHECKING

from onrates.enums.generics import NoInput
from onrates.scheduling.calendars import CALENDARS

if TYPE_CHECKING:
    from onrates.typing import CustomBusinessDay  # pragma: no cover

DEFAULTS = dict(
    calendars=CALENDARS,
    # Overnight observations
    convention="Act360",
    averaging_method="approx",
    # Curves
    curve_convention="ActActISDA",
    # Sensitivities
    fd_shift=1e-7,
    sensitivity_tolerance=1e-10,
    headers={
        "curve": "Curve",
        "currency": "Ccy",
        "index": "Index",
        "start": "Start",
        "end": "End",
        "fixing_date": "Fixing Date",
        "publication": "Publication",
        "segment": "Segment",
        "dcf": "DCF",
        "rate": "Rate",
        "label": "Label",
        "sensitivity": "Sensitivity",
    },
)


class Defaults:
    """
    The *defaults* object used by initialising objects. Values are printed below:

    .. ipython:: python

       from onrates import defaults
       print(defaults.print())

    """

    _instance = None

    calendars: dict[str, CustomBusinessDay]
    convention: str
    averaging_method: str
    curve_convention: str
    fd_shift: float
    sensitivity_tolerance: float
    headers: dict[str, str]

    def __new__(cls) -> Defaults:
        if cls._instance is None:
            cls._instance = super(Defaults, cls).__new__(cls)  # noqa: UP008

            for k, v in DEFAULTS.items():
                setattr(cls._instance, k, deepcopy(v))

        return cls._instance

    def reset_defaults(self) -> None:
        """
        Revert defaults back to their initialisation status.

        Examples
        --------
        .. ipython:: python

           from onrates import defaults
           defaults.reset_defaults()
        """
        attrs = [
            v
            for v in dir(self)
            if "__" not in v and not callable(getattr(self, v)) and v != "_instance"
        ]
        for attr in attrs:
            delattr(self, attr)

        for k, v in DEFAULTS.items():
            setattr(self, k, deepcopy(v))

    def print(self) -> str:
        """
        Return a string representation of the current values in the defaults object.
        """

        def _t_n(v: str) -> str:  # teb-newline
            return f"\t{v}\n"

        _: str = f"""\
Scheduling:\n
{"".join([_t_n(f"{attribute}: {getattr(self, attribute)}") for attribute in ["calendars"]])}
Observations:\n
{
            "".join(
                [
                    _t_n(f"{attribute}: {getattr(self, attribute)}")
                    for attribute in [
                        "convention",
                        "averaging_method",
                    ]
                ]
            )
        }
Curves:\n
{"".join([_t_n(f"{attribute}: {getattr(self, attribute)}") for attribute in ["curve_convention"]])}
Sensitivities:\n
{
            "".join(
                [
                    _t_n(f"{attribute}: {getattr(self, attribute)}")
                    for attribute in [
                        "fd_shift",
                        "sensitivity_tolerance",
                    ]
                ]
            )
        }
Miscellaneous:\n
{"".join([_t_n(f"{attribute}: {getattr(self, attribute)}") for attribute in ["headers"]])}
"""  # noqa: W291
        return _


__all__ = ["Defaults", "NoInput"]
